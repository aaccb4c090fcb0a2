"""Unit tests for the score calculator."""

import pytest

from playrules.exceptions import PlayRulesError, UnknownDifficultyError
from playrules.scoring.calculator import (
    DIFFICULTY_MULTIPLIER,
    ComboBonusConfig,
    RoundScoreInput,
    SpeedBonusConfig,
    combo_bonus,
    difficulty_multiplier,
    final_score,
    speed_bonus,
    to_accuracy,
)
from playrules.shared.schemas.base import DifficultyLevel

SPEED = SpeedBonusConfig(fast_ms=1000, medium_ms=2500, fast_bonus=5, medium_bonus=2, slow_bonus=0)
COMBO = ComboBonusConfig(start_at=3, max_bonus=4)


class TestDifficultyMultiplier:
    def test_table_is_stable(self):
        assert DIFFICULTY_MULTIPLIER[DifficultyLevel.EASY] == 1
        assert DIFFICULTY_MULTIPLIER[DifficultyLevel.MEDIUM] == 1.25
        assert DIFFICULTY_MULTIPLIER[DifficultyLevel.HARD] == 1.5

    def test_accepts_enum_and_string(self):
        assert difficulty_multiplier(DifficultyLevel.MEDIUM) == 1.25
        assert difficulty_multiplier("easy") == 1
        assert difficulty_multiplier("hard") == 1.5

    def test_unknown_difficulty_is_contract_violation(self):
        with pytest.raises(UnknownDifficultyError) as exc_info:
            difficulty_multiplier("nightmare")
        assert exc_info.value.difficulty == "nightmare"
        assert exc_info.value.error_type == "unknown_difficulty"
        assert isinstance(exc_info.value, PlayRulesError)


class TestSpeedBonus:
    def test_tiers(self):
        assert speed_bonus(600, SPEED) == 5
        assert speed_bonus(1800, SPEED) == 2
        assert speed_bonus(3000, SPEED) == 0

    def test_fast_boundary_counts_as_fast(self):
        assert speed_bonus(1000, SPEED) == 5

    def test_medium_boundary_counts_as_medium(self):
        assert speed_bonus(1001, SPEED) == 2
        assert speed_bonus(2500, SPEED) == 2

    def test_just_past_medium_is_slow(self):
        assert speed_bonus(2501, SPEED) == 0

    def test_slow_bonus_is_configurable(self):
        generous = SpeedBonusConfig(fast_ms=1000, medium_ms=2000, fast_bonus=3, medium_bonus=2, slow_bonus=1)
        assert speed_bonus(10_000, generous) == 1


class TestComboBonus:
    def test_below_start_is_zero(self):
        assert combo_bonus(0, COMBO) == 0
        assert combo_bonus(1, COMBO) == 0
        assert combo_bonus(2, COMBO) == 0

    def test_starts_at_one(self):
        assert combo_bonus(3, COMBO) == 1

    def test_grows_by_one_per_step(self):
        assert combo_bonus(4, COMBO) == 2
        assert combo_bonus(5, COMBO) == 3

    def test_capped_at_max_bonus(self):
        assert combo_bonus(10, COMBO) == 4
        for streak in range(0, 100):
            assert combo_bonus(streak, COMBO) <= COMBO.max_bonus


class TestFinalScore:
    def test_combines_bonuses_and_difficulty(self):
        score = final_score(
            RoundScoreInput(base_points=10, speed_bonus=2, combo_bonus=3, difficulty="medium")
        )
        assert score == 19  # round(15 * 1.25) = round(18.75)

    def test_bonuses_default_to_zero(self):
        assert final_score(RoundScoreInput(base_points=10, difficulty=DifficultyLevel.HARD)) == 15

    def test_halves_round_up(self):
        # 11 * 1.5 = 16.5 and 2 * 1.25 = 2.5; round() would give 16 and 2
        assert final_score(RoundScoreInput(base_points=11, difficulty="hard")) == 17
        assert final_score(RoundScoreInput(base_points=2, difficulty="medium")) == 3

    def test_correct_answer_scores_at_least_one(self):
        assert final_score(RoundScoreInput(base_points=0, difficulty="easy")) == 1

    def test_unknown_difficulty_propagates(self):
        with pytest.raises(UnknownDifficultyError):
            final_score(RoundScoreInput(base_points=10, difficulty="legendary"))

    def test_keyword_form_matches_input_object(self):
        score = final_score(base_points=10, speed_bonus=2, combo_bonus=3, difficulty="medium")
        assert score == 19
        assert final_score(base_points=2, difficulty="medium") == 3

    def test_keyword_form_requires_fields(self):
        with pytest.raises(TypeError):
            final_score(speed_bonus=2)

    def test_input_object_and_keywords_are_exclusive(self):
        with pytest.raises(TypeError):
            final_score(RoundScoreInput(base_points=10, difficulty="easy"), base_points=5)


class TestAccuracy:
    def test_zero_attempts_is_zero(self):
        assert to_accuracy(0, 0) == 0

    def test_ratio(self):
        assert to_accuracy(8, 2) == 0.8
        assert to_accuracy(3, 0) == 1.0
        assert to_accuracy(0, 5) == 0.0

    def test_returns_float(self):
        assert isinstance(to_accuracy(0, 0), float)
