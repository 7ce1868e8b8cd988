"""
Month-day window filters for the month and Ramadan views.

Keys are zero-padded "MM-DD" strings, so plain string comparison follows the
calendar within a single year.
"""

from typing import Sequence, Union

from core.schedule import DailySchedule


def filter_by_range(
    schedules: Sequence[DailySchedule],
    start_key: str,
    end_key: str,
    wrap_year: bool = False,
) -> list[DailySchedule]:
    """Entries with start_key <= date <= end_key.

    A range with start_key > end_key crosses the new year and is empty unless
    wrap_year is set, in which case it is read as start..12-31 followed by
    01-01..end.
    """
    if start_key <= end_key:
        return [s for s in schedules if start_key <= s.date <= end_key]

    if not wrap_year:
        return []

    return (
        [s for s in schedules if s.date >= start_key]
        + [s for s in schedules if s.date <= end_key]
    )


def filter_by_month(schedules: Sequence[DailySchedule], month_key: Union[str, int]) -> list[DailySchedule]:
    """Entries whose date falls in month_key ("03" or 3)."""
    if isinstance(month_key, int):
        month_key = f"{month_key:02d}"
    prefix = f"{month_key}-"
    return [s for s in schedules if s.date.startswith(prefix)]
