"""Unit tests for daily streak and daily goal date arithmetic."""

from datetime import date, datetime, timedelta, timezone

import pytest

from playrules.progression.schemas import DailyGoal, DailyStreak
from playrules.progression.streaks import (
    add_daily_stars,
    advance_streak,
    date_key,
    days_between,
    is_consecutive_day,
)


class TestDateKey:
    def test_formats_naive_datetime_as_local_day(self, monday):
        assert date_key(monday) == "2025-03-03"

    def test_date_passes_through(self):
        assert date_key(date(2024, 12, 31)) == "2024-12-31"

    def test_zero_padded(self):
        assert date_key(datetime(2025, 1, 5, 8, 0)) == "2025-01-05"

    def test_aware_datetime_converted_to_local(self):
        moment = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
        assert date_key(moment) == moment.astimezone().date().isoformat()

    def test_epoch_seconds(self):
        stamp = datetime(2025, 3, 3, 12, 0).timestamp()
        assert date_key(stamp) == "2025-03-03"

    def test_iso_string(self):
        assert date_key("2025-03-03T23:59:00") == "2025-03-03"
        assert date_key("2025-03-03") == "2025-03-03"

    def test_iso_string_with_utc_suffix(self):
        expected = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc).astimezone().date().isoformat()
        assert date_key("2025-06-01T12:00:00Z") == expected
        assert date_key("2025-06-01T12:00:00+00:00") == expected

    def test_numbers_are_seconds_not_milliseconds(self):
        seconds = datetime(2025, 3, 3, 12, 0).timestamp()
        millis = int(seconds * 1000)
        assert date_key(millis / 1000) == "2025-03-03"
        assert date_key(int(seconds)) == "2025-03-03"

    def test_defaults_to_today(self):
        assert date_key() == datetime.now().astimezone().date().isoformat()


class TestConsecutiveDay:
    def test_next_day(self):
        assert is_consecutive_day("2025-03-03", "2025-03-04") is True

    def test_month_and_year_boundaries(self):
        assert is_consecutive_day("2025-02-28", "2025-03-01") is True
        assert is_consecutive_day("2024-02-28", "2024-02-29") is True
        assert is_consecutive_day("2024-12-31", "2025-01-01") is True

    def test_same_day_is_not_consecutive(self):
        assert is_consecutive_day("2025-03-03", "2025-03-03") is False

    def test_gap_is_not_consecutive(self):
        assert is_consecutive_day("2025-03-03", "2025-03-05") is False

    def test_backwards_is_not_consecutive(self):
        assert is_consecutive_day("2025-03-04", "2025-03-03") is False

    def test_late_night_then_early_morning_is_consecutive(self):
        late = date_key(datetime(2025, 3, 3, 23, 59))
        early = date_key(datetime(2025, 3, 4, 0, 1))
        assert is_consecutive_day(late, early) is True

    def test_across_dst_change(self):
        # Calendar days, so a 23h or 25h day still counts as one
        assert is_consecutive_day("2025-03-09", "2025-03-10") is True
        assert is_consecutive_day("2025-11-02", "2025-11-03") is True

    @pytest.mark.parametrize("bad", ["", "yesterday", "2025-13-01", "2025/03/03"])
    def test_malformed_keys_are_not_consecutive(self, bad):
        assert is_consecutive_day(bad, "2025-03-04") is False
        assert days_between(bad, "2025-03-04") is None


class TestAdvanceStreak:
    def test_first_play_starts_at_one(self):
        streak = advance_streak(DailyStreak(), "2025-03-03")
        assert streak.current == 1
        assert streak.best == 1
        assert streak.last_played_key == "2025-03-03"

    def test_same_day_is_unchanged(self):
        streak = DailyStreak(current=3, best=5, last_played_key="2025-03-03")
        assert advance_streak(streak, "2025-03-03") is streak

    def test_next_day_extends(self):
        streak = DailyStreak(current=3, best=3, last_played_key="2025-03-03")
        advanced = advance_streak(streak, "2025-03-04")
        assert advanced.current == 4
        assert advanced.best == 4

    def test_one_missed_day_uses_shield(self):
        streak = DailyStreak(current=3, best=3, last_played_key="2025-03-03", shield_available=True)
        advanced = advance_streak(streak, "2025-03-05")
        assert advanced.current == 4
        assert advanced.shield_available is False

    def test_missed_day_without_shield_restarts(self):
        streak = DailyStreak(current=3, best=3, last_played_key="2025-03-03", shield_available=False)
        advanced = advance_streak(streak, "2025-03-05")
        assert advanced.current == 1
        assert advanced.best == 3

    def test_shield_disabled_by_caller(self):
        streak = DailyStreak(current=3, best=3, last_played_key="2025-03-03", shield_available=True)
        advanced = advance_streak(streak, "2025-03-05", shield_enabled=False)
        assert advanced.current == 1
        assert advanced.shield_available is True

    def test_long_gap_restarts(self):
        streak = DailyStreak(current=6, best=6, last_played_key="2025-03-01")
        advanced = advance_streak(streak, "2025-03-10")
        assert advanced.current == 1
        assert advanced.best == 6

    def test_clock_moving_backwards_is_ignored(self):
        streak = DailyStreak(current=2, best=2, last_played_key="2025-03-05")
        assert advance_streak(streak, "2025-03-04") is streak

    def test_shield_recharges_every_seven_days(self):
        streak = DailyStreak(current=6, best=6, last_played_key="2025-03-03", shield_available=False)
        advanced = advance_streak(streak, "2025-03-04")
        assert advanced.current == 7
        assert advanced.shield_available is True

    def test_week_of_play(self):
        streak = DailyStreak()
        start = date(2025, 3, 1)
        for offset in range(10):
            streak = advance_streak(streak, (start + timedelta(days=offset)).isoformat())
        assert streak.current == 10
        assert streak.best == 10


class TestDailyGoal:
    def test_accumulates_within_a_day(self):
        goal = add_daily_stars(DailyGoal(), "2025-03-03", 2)
        goal = add_daily_stars(goal, "2025-03-03", 3)
        assert goal.earned_stars == 5
        assert goal.completed is False

    def test_completed_at_target(self):
        goal = DailyGoal(date_key="2025-03-03", earned_stars=5)
        goal = add_daily_stars(goal, "2025-03-03", 1)
        assert goal.earned_stars == 6
        assert goal.target_stars == 6
        assert goal.completed is True

    def test_new_day_resets(self):
        goal = DailyGoal(date_key="2025-03-03", earned_stars=6)
        goal = add_daily_stars(goal, "2025-03-04", 1)
        assert goal.earned_stars == 1
        assert goal.date_key == "2025-03-04"

    def test_target_override(self):
        goal = add_daily_stars(DailyGoal(), "2025-03-03", 3, target_stars=3)
        assert goal.completed is True

    def test_input_is_not_mutated(self):
        goal = DailyGoal(date_key="2025-03-03", earned_stars=1)
        add_daily_stars(goal, "2025-03-03", 2)
        assert goal.earned_stars == 1
