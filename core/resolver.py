"""
Next-prayer resolution and countdown derivation.

All functions are pure: same schedule data and same `now` give the same result.
`now` is a naive wall-clock datetime in the city's local time.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Sequence

from core.schedule import DAWN_SLOT, DailySchedule, month_day_key, parse_clock_time


@dataclass(frozen=True)
class Remaining:
    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class ResolvedNextPrayer:
    slot_key: str
    target: datetime
    remaining: Remaining


def find_today(schedules: Sequence[DailySchedule], now: datetime) -> Optional[DailySchedule]:
    key = month_day_key(now)
    for schedule in schedules:
        if schedule.date == key:
            return schedule
    return None


def _at(day: datetime, time_str: str) -> datetime:
    hour, minute = parse_clock_time(time_str)
    return day.replace(hour=hour, minute=minute, second=0, microsecond=0)


def compute_remaining(target: datetime, now: datetime) -> Remaining:
    """Whole-second countdown from now to target, clamped at zero."""
    total = max(0, math.floor((target - now).total_seconds()))
    return Remaining(
        hours=total // 3600,
        minutes=(total // 60) % 60,
        seconds=total % 60,
    )


def resolve_next(
    today_schedule: DailySchedule,
    all_schedules: Sequence[DailySchedule],
    now: datetime,
) -> Optional[ResolvedNextPrayer]:
    """Return the next prayer after `now`, or None if it cannot be determined.

    The first populated slot today that is strictly later than `now` wins.
    Otherwise the dawn slot of the entry following today's (cyclically) is
    used, dated to tomorrow.
    """
    for key, time_str in today_schedule.slots():
        target = _at(now, time_str)
        if target > now:
            return ResolvedNextPrayer(key, target, compute_remaining(target, now))

    if not all_schedules:
        return None

    dates = [s.date for s in all_schedules]
    if today_schedule.date not in dates:
        return None

    following = all_schedules[(dates.index(today_schedule.date) + 1) % len(all_schedules)]
    dawn = following.slot_time(DAWN_SLOT)
    if not dawn:
        return None

    target = _at(now + timedelta(days=1), dawn)
    return ResolvedNextPrayer(DAWN_SLOT, target, compute_remaining(target, now))
