"""
Daily schedule records: one row of the Kurdistan prayer times table.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional

# Canonical slot order: dawn, sunrise, midday, afternoon, sunset, night
SLOT_KEYS = ("bayani", "xorhalatn", "niwaro", "asr", "eywara", "esha")
DAWN_SLOT = "bayani"


class MalformedTimeError(ValueError):
    """Raised when a time-of-day string is not HH:MM with integer parts."""


def parse_clock_time(time_str: str) -> tuple[int, int]:
    """Split 'HH:MM' into (hour, minute)."""
    parts = str(time_str).strip().split(":")
    if len(parts) != 2:
        raise MalformedTimeError(f"Expected HH:MM, got {time_str!r}")
    try:
        hour, minute = int(parts[0]), int(parts[1])
    except ValueError:
        raise MalformedTimeError(f"Expected HH:MM, got {time_str!r}") from None
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise MalformedTimeError(f"Time out of range: {time_str!r}")
    return hour, minute


def month_day_key(moment: datetime) -> str:
    return moment.strftime("%m-%d")


@dataclass(frozen=True)
class DailySchedule:
    date: str
    bayani: Optional[str] = None
    xorhalatn: Optional[str] = None
    niwaro: Optional[str] = None
    asr: Optional[str] = None
    eywara: Optional[str] = None
    esha: Optional[str] = None

    def slot_time(self, key: str) -> Optional[str]:
        return getattr(self, key) or None

    def slots(self):
        """Yield (slot_key, 'HH:MM') for populated slots in canonical order."""
        for key in SLOT_KEYS:
            value = self.slot_time(key)
            if value:
                yield key, value

    @classmethod
    def from_row(cls, row: dict) -> "DailySchedule":
        """Build from a DB/JSON row, validating every populated time."""
        values = {}
        for key in SLOT_KEYS:
            value = row.get(key)
            value = str(value).strip() if value is not None else ""
            if value:
                parse_clock_time(value)
            values[key] = value or None
        return cls(date=str(row["date"]), **values)

    def to_dict(self) -> dict:
        return asdict(self)
