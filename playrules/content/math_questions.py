"""Multiple-choice arithmetic questions.

Questions are drawn from the operand range and operations a level allows.
Pass a seeded ``random.Random`` for reproducible rounds; the module-level
generator is used otherwise.
"""

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from playrules.progression.levels import math_level_config
from playrules.shared.schemas.base import MathOperation
from playrules.shared.utils.math_utils import round_half_up

MIN_CHOICES: Final[int] = 4
DEFAULT_CHOICES: Final[int] = 6
# Multiplication factors and modulo divisors stay within times-table range
MAX_FACTOR: Final[int] = 12
MAX_DISTRACTOR_ATTEMPTS: Final[int] = 300

OPERATION_SYMBOLS: Final[dict[MathOperation, str]] = {
    MathOperation.ADD: "+",
    MathOperation.SUBTRACT: "-",
    MathOperation.MULTIPLY: "×",
    MathOperation.MODULO: "%",
}

_default_rng = random.Random()


@dataclass(frozen=True)
class MathQuestion:
    """A question, its answer and the shuffled answer buttons."""

    question: str
    answer: int
    choices: tuple[int, ...]
    operation: MathOperation


def _operands(
    operation: MathOperation,
    min_operand: int,
    max_operand: int,
    rng: random.Random,
) -> tuple[int, int, int]:
    """Pick operands for an operation and return ``(left, right, answer)``."""
    if operation is MathOperation.SUBTRACT:
        left = rng.randint(min_operand, max_operand)
        right = rng.randint(min_operand, max_operand)
        if right > left:
            left, right = right, left
        return left, right, left - right

    if operation is MathOperation.MULTIPLY:
        factor_max = max(2, min(max_operand, MAX_FACTOR))
        left = rng.randint(min(min_operand, factor_max), factor_max)
        right = rng.randint(1, factor_max)
        return left, right, left * right

    if operation is MathOperation.MODULO:
        divisor_max = max(2, min(max_operand, MAX_FACTOR))
        right = rng.randint(2, divisor_max)
        left = rng.randint(max(right, min_operand), max(right + 1, max_operand))
        return left, right, left % right

    left = rng.randint(min_operand, max_operand)
    right = rng.randint(min_operand, max_operand)
    return left, right, left + right


def _choices(answer: int, count: int, rng: random.Random) -> list[int]:
    """The answer plus ``count - 1`` distinct, non-negative distractors near it."""
    choices = [answer]
    spread = max(4, math.ceil(abs(answer) * 0.35))
    attempts = 0
    while len(choices) < count and attempts < MAX_DISTRACTOR_ATTEMPTS:
        attempts += 1
        if attempts % 60 == 0:
            spread += 2
        distractor = max(0, answer + rng.randint(-spread, spread))
        if distractor not in choices:
            choices.append(distractor)

    # Small answers may not have enough neighbours; fill upwards
    fallback = max(1, answer + spread)
    while len(choices) < count:
        if fallback not in choices:
            choices.append(fallback)
        fallback += 1

    rng.shuffle(choices)
    return choices


def generate_math_question(
    min_operand: float = 1,
    max_operand: float = 10,
    operations: Sequence[MathOperation | str] | None = None,
    choices_count: float = DEFAULT_CHOICES,
    rng: random.Random | None = None,
) -> MathQuestion:
    """Build one multiple-choice question.

    Args:
        min_operand: Smallest operand (at least 1)
        max_operand: Largest operand (at least ``min_operand``)
        operations: Operations to pick from; addition when empty
        choices_count: Number of answer buttons (at least 4)
        rng: Random source; the module generator when omitted

    Returns:
        MathQuestion with the answer among ``choices``
    """
    rng = rng or _default_rng
    low = max(1, round_half_up(min_operand))
    high = max(low, round_half_up(max_operand))
    pool = [MathOperation(op) for op in operations] if operations else [MathOperation.ADD]
    count = max(MIN_CHOICES, round_half_up(choices_count))

    operation = rng.choice(pool)
    left, right, answer = _operands(operation, low, high, rng)

    return MathQuestion(
        question=f"{left} {OPERATION_SYMBOLS[operation]} {right} =",
        answer=answer,
        choices=tuple(_choices(answer, count, rng)),
        operation=operation,
    )


def questions_for_level(level: float, rng: random.Random | None = None) -> list[MathQuestion]:
    """A full round of questions for a math level."""
    config = math_level_config(level)
    return [
        generate_math_question(
            min_operand=config.min_operand,
            max_operand=config.max_operand,
            operations=config.operations,
            rng=rng,
        )
        for _ in range(config.question_count)
    ]
