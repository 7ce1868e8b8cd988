"""Initialize the core package and expose key functionality."""

from .schedule import (
    SLOT_KEYS,
    DailySchedule,
    MalformedTimeError,
    parse_clock_time,
)
from .resolver import (
    Remaining,
    ResolvedNextPrayer,
    compute_remaining,
    find_today,
    resolve_next,
)
from .formatting import (
    format_clock_time,
    format_date_key,
    format_duration,
    to_localized_digits,
)
from .calendar_filter import filter_by_month, filter_by_range

__all__ = [
    "SLOT_KEYS",
    "DailySchedule",
    "MalformedTimeError",
    "parse_clock_time",
    "Remaining",
    "ResolvedNextPrayer",
    "compute_remaining",
    "find_today",
    "resolve_next",
    "format_clock_time",
    "format_date_key",
    "format_duration",
    "to_localized_digits",
    "filter_by_month",
    "filter_by_range",
]
