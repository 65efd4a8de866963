"""Unit tests for autopost cadence calculation."""

from datetime import datetime, timedelta

import pytest

from landing_factory.domain.cadence import CadenceSpec, compute_next_run_at
from landing_factory.domain.exceptions import ValidationError

WEDNESDAY_NOON = datetime(2026, 1, 7, 12, 0, 0)


@pytest.mark.unit
class TestEveryNDays:
    """``every_n_days`` cadence."""

    def test_adds_n_days(self) -> None:
        """n=7 lands exactly a week later."""
        assert compute_next_run_at(WEDNESDAY_NOON, "every_n_days", {"n": 7}) == datetime(2026, 1, 14, 12, 0, 0)

    def test_n_is_floored_at_one(self) -> None:
        """Zero or negative intervals still move forward by a day."""
        assert compute_next_run_at(WEDNESDAY_NOON, "every_n_days", {"n": 0}) == WEDNESDAY_NOON + timedelta(days=1)
        assert compute_next_run_at(WEDNESDAY_NOON, "every_n_days", {"n": -3}) == WEDNESDAY_NOON + timedelta(days=1)

    def test_numeric_strings_are_accepted(self) -> None:
        """Lenient coercion of JSON values."""
        assert compute_next_run_at(WEDNESDAY_NOON, "every_n_days", {"n": "3"}) == WEDNESDAY_NOON + timedelta(days=3)

    def test_missing_n_defaults_to_seven(self) -> None:
        """Defaults apply for missing parameters."""
        assert compute_next_run_at(WEDNESDAY_NOON, "every_n_days", {}) == WEDNESDAY_NOON + timedelta(days=7)


@pytest.mark.unit
class TestWeekly:
    """``weekly`` cadence (Monday = 1)."""

    def test_next_monday_from_wednesday(self) -> None:
        """Wednesday noon, Monday 10:00 target -> the coming Monday at 10:00."""
        result = compute_next_run_at(WEDNESDAY_NOON, "weekly", {"dow": 1, "hour": 10, "minute": 0})

        assert result == datetime(2026, 1, 12, 10, 0, 0)
        assert result.weekday() == 0

    def test_same_weekday_rolls_to_next_week(self) -> None:
        """A run on the target weekday schedules the following week."""
        monday_morning = datetime(2026, 1, 12, 8, 0, 0)

        result = compute_next_run_at(monday_morning, "weekly", {"dow": 1, "hour": 10, "minute": 30})

        assert result == datetime(2026, 1, 19, 10, 30, 0)

    def test_sunday_is_seven(self) -> None:
        """dow=7 targets Sunday."""
        result = compute_next_run_at(WEDNESDAY_NOON, "weekly", {"dow": 7, "hour": 9})

        assert result == datetime(2026, 1, 11, 9, 0, 0)

    def test_seconds_are_cleared(self) -> None:
        """The result is aligned to the minute."""
        now = datetime(2026, 1, 7, 12, 0, 42, 123456)

        result = compute_next_run_at(now, "weekly", {"dow": 5, "hour": 18, "minute": 15})

        assert (result.second, result.microsecond) == (0, 0)
        assert result == datetime(2026, 1, 9, 18, 15, 0)


@pytest.mark.unit
class TestCronInterval:
    """``cron`` cadence (interval only)."""

    def test_minutes_floored_at_five(self) -> None:
        """minutes=2 -> +5 minutes."""
        assert compute_next_run_at(WEDNESDAY_NOON, "cron", {"minutes": 2}) == WEDNESDAY_NOON + timedelta(minutes=5)

    def test_default_interval_is_an_hour(self) -> None:
        """Missing minutes -> 60."""
        assert compute_next_run_at(WEDNESDAY_NOON, "cron", None) == WEDNESDAY_NOON + timedelta(minutes=60)


@pytest.mark.unit
class TestCadenceSpec:
    """Parsing of cadence documents."""

    def test_unknown_type_rejected(self) -> None:
        """Only the closed set of cadence kinds is accepted."""
        with pytest.raises(ValidationError):
            CadenceSpec.from_json("hourly", {})

    def test_garbage_values_fall_back(self) -> None:
        """Non-numeric values use defaults."""
        spec = CadenceSpec.from_json("weekly", {"dow": "monday", "hour": True, "minute": None})

        assert (spec.dow, spec.hour, spec.minute) == (1, 10, 0)

    def test_non_finite_values_fall_back(self) -> None:
        """Infinity and NaN are treated like any other unusable number."""
        spec = CadenceSpec.from_json("every_n_days", {"n": float("inf")})

        assert spec.n == 7
        assert compute_next_run_at(WEDNESDAY_NOON, "cron", {"minutes": float("nan")}) == WEDNESDAY_NOON + timedelta(minutes=60)


@pytest.mark.unit
class TestOutOfRange:
    """Intervals too large for a datetime are rejected, not crashed on."""

    @pytest.mark.parametrize("n", [10**9, 10**8])
    def test_huge_day_interval(self, n) -> None:
        """Both the relativedelta bound and the calendar bound surface as ValidationError."""
        with pytest.raises(ValidationError):
            compute_next_run_at(WEDNESDAY_NOON, "every_n_days", {"n": n})

    def test_huge_cron_interval(self) -> None:
        """A minutes value past the year 9999 is rejected."""
        with pytest.raises(ValidationError):
            compute_next_run_at(WEDNESDAY_NOON, "cron", {"minutes": 10**13})
