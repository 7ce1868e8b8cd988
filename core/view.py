"""
Display payloads shared by the HTTP views and the terminal display.
"""

from datetime import datetime
from typing import Optional, Sequence

from core.formatting import format_clock_time, format_date_key, format_duration, normalize_lang
from core.resolver import ResolvedNextPrayer, find_today, resolve_next
from core.schedule import SLOT_KEYS, DailySchedule
from core.translations import get_translations, text_direction


def build_countdown(resolved: Optional[ResolvedNextPrayer], lang: str) -> dict:
    t = get_translations(lang)
    if resolved is None:
        return {
            "slot": None,
            "name": t["no_next_prayer"],
            "target": None,
            "remaining": t["placeholder"],
        }

    r = resolved.remaining
    return {
        "slot": resolved.slot_key,
        "name": t["prayers"][resolved.slot_key],
        "target": resolved.target.isoformat(),
        "remaining": format_duration(r.hours, r.minutes, r.seconds, lang),
    }


def build_today_card(
    today: Optional[DailySchedule],
    resolved: Optional[ResolvedNextPrayer],
    lang: str,
) -> dict:
    """Today payload from an already-resolved next prayer."""
    lang = normalize_lang(lang)
    t = get_translations(lang)

    view = {
        "lang": lang,
        "dir": text_direction(lang),
        "title": t["title"],
        "today": None,
        "countdown": None,
    }
    if today is None:
        return view

    view["today"] = {
        "label": t["today"],
        "date": format_date_key(today.date, lang),
        "prayers": [
            {
                "slot": key,
                "name": t["prayers"][key],
                "time": format_clock_time(time_str, lang),
            }
            for key, time_str in today.slots()
        ],
    }
    view["countdown"] = {
        "label": t["next_prayer"],
        **build_countdown(resolved, lang),
    }
    return view


def build_today_view(schedules: Sequence[DailySchedule], now: datetime, lang: str) -> dict:
    today = find_today(schedules, now)
    resolved = resolve_next(today, schedules, now) if today else None
    return build_today_card(today, resolved, lang)


def build_table_view(
    schedules: Sequence[DailySchedule],
    lang: str,
    today_key: Optional[str] = None,
    title: Optional[str] = None,
) -> dict:
    lang = normalize_lang(lang)
    t = get_translations(lang)
    return {
        "lang": lang,
        "dir": text_direction(lang),
        "title": title or t["title"],
        "headers": [t["date"]] + [t["prayers"][key] for key in SLOT_KEYS],
        "rows": [
            {
                "date": format_date_key(s.date, lang),
                "is_today": s.date == today_key,
                "times": [format_clock_time(s.slot_time(key) or "", lang) for key in SLOT_KEYS],
            }
            for s in schedules
        ],
    }
