"""
Cadence calculation for autopost schedules.

Three closed-form kinds are supported:

- ``every_n_days``: ``{"n": 7}``
- ``weekly``: ``{"dow": 1..7 (Mon=1), "hour": 0-23, "minute": 0-59}``
- ``cron``: interval only, ``{"minutes": 60}`` (floored at 5)
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil.relativedelta import relativedelta, weekday

from landing_factory.domain.exceptions import ValidationError

CADENCE_TYPES = ("every_n_days", "weekly", "cron")

MIN_DAYS = 1
MIN_CRON_MINUTES = 5


def _number(raw: Any, default: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        return int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return default


@dataclass(frozen=True)
class CadenceSpec:
    cadence_type: str
    n: int = 7
    dow: int = 1
    hour: int = 10
    minute: int = 0
    minutes: int = 60

    @classmethod
    def from_json(cls, cadence_type: str, cadence_json: Optional[Dict[str, Any]]) -> "CadenceSpec":
        if cadence_type not in CADENCE_TYPES:
            raise ValidationError(f"Unknown cadence type: {cadence_type}")

        params = cadence_json if isinstance(cadence_json, dict) else {}
        return cls(
            cadence_type=cadence_type,
            n=_number(params.get("n"), 7),
            dow=_number(params.get("dow"), 1),
            hour=_number(params.get("hour"), 10),
            minute=_number(params.get("minute"), 0),
            minutes=_number(params.get("minutes"), 60),
        )

    def next_after(self, now: datetime) -> datetime:
        if self.cadence_type == "every_n_days":
            return now + relativedelta(days=max(MIN_DAYS, self.n))

        if self.cadence_type == "weekly":
            # days=+1 first, so a target of "today" rolls over to next week
            target = weekday((self.dow - 1) % 7)
            return (now + relativedelta(days=+1, weekday=target)).replace(
                hour=self.hour % 24,
                minute=self.minute % 60,
                second=0,
                microsecond=0,
            )

        return now + relativedelta(minutes=max(MIN_CRON_MINUTES, self.minutes))


def compute_next_run_at(now: datetime, cadence_type: str, cadence_json: Optional[Dict[str, Any]]) -> datetime:
    """Next run timestamp for a schedule. Pure; raises ValidationError for unknown kinds or out-of-range values."""
    cadence = CadenceSpec.from_json(cadence_type, cadence_json)
    try:
        return cadence.next_after(now)
    except (OverflowError, ValueError) as exc:
        raise ValidationError(f"Cadence out of range: {exc}") from exc
