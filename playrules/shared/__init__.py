"""Shared building blocks: schemas, enums, logging and date helpers."""
