#!/usr/bin/env python3
"""Print the level tables of the Play Rules Engine.

Usage:
    python run.py [--game GAME] [--format FORMAT]

Examples:
    python run.py                      # All games, plain table
    python run.py --game animals       # Animal memory levels only
    python run.py --format json        # Machine-readable output
"""

import argparse
import dataclasses
import json
import sys

from playrules import APP_TITLE, APP_VERSION
from playrules.config import get_settings
from playrules.progression import (
    MAX_GAME_LEVEL,
    is_milestone_level,
    level_config,
    milestone_sticker,
    required_stars,
)
from playrules.shared.schemas.base import GameKey
from playrules.shared.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_rows(game: GameKey) -> list[dict]:
    """One row per level: its content config plus unlock threshold."""
    rows = []
    for level in range(1, MAX_GAME_LEVEL + 1):
        row = dataclasses.asdict(level_config(game, level))
        row["band"] = row["band"].value
        if "operations" in row:
            row["operations"] = [op.value for op in row["operations"]]
        row["required_stars"] = required_stars(level)
        row["milestone"] = milestone_sticker(level) if is_milestone_level(level) else ""
        rows.append(row)
    return rows


def format_table(game: GameKey, rows: list[dict]) -> str:
    columns = list(rows[0].keys())
    cells = [[str(row[c]) if not isinstance(row[c], list) else "+".join(row[c]) for c in columns] for row in rows]
    widths = [max(len(c), *(len(r[i]) for r in cells)) for i, c in enumerate(columns)]
    lines = [
        f"== {game.value} ==",
        "  ".join(c.ljust(w) for c, w in zip(columns, widths)),
        "  ".join("-" * w for w in widths),
    ]
    lines.extend("  ".join(v.ljust(w) for v, w in zip(r, widths)) for r in cells)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Print the level tables of the {APP_TITLE} v{APP_VERSION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py                      All games, plain table
  python run.py --game math          Math levels only
  python run.py --format json        Machine-readable output
        """,
    )

    parser.add_argument(
        "--game",
        choices=[g.value for g in GameKey],
        default=None,
        help="Game to print (default: all)",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )

    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)

    games = [GameKey(args.game)] if args.game else list(GameKey)
    tables = {game.value: build_rows(game) for game in games}
    logger.debug("level_tables_built", games=list(tables))

    if args.format == "json":
        print(json.dumps(tables, indent=2, ensure_ascii=False))
    else:
        print("\n\n".join(format_table(GameKey(name), rows) for name, rows in tables.items()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
