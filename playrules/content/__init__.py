"""Round content: math questions, alphabet letter pools, memory decks."""

from playrules.content.alphabet import ALPHABET, letter_color, letter_pool, letters_for_level
from playrules.content.math_questions import (
    MathQuestion,
    generate_math_question,
    questions_for_level,
)
from playrules.content.memory_deck import (
    ANIMALS,
    Animal,
    AnimalCard,
    animal_by_id,
    build_deck,
    pick_animals,
)

__all__ = [
    "ALPHABET",
    "ANIMALS",
    "Animal",
    "AnimalCard",
    "MathQuestion",
    "animal_by_id",
    "build_deck",
    "generate_math_question",
    "letter_color",
    "letter_pool",
    "letters_for_level",
    "pick_animals",
    "questions_for_level",
]
