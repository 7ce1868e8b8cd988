"""
Terminal rendering of the today card, countdown and schedule tables.
"""

from datetime import datetime
from typing import Optional, Sequence

from tabulate import tabulate

from core.calendar_filter import filter_by_month, filter_by_range
from core.formatting import normalize_lang
from core.resolver import ResolvedNextPrayer
from core.schedule import DailySchedule, month_day_key
from core.translations import get_translations
from core.view import build_countdown, build_table_view, build_today_card

VIEWS = ("today", "month", "ramadan", "all")


def render_today(
    today: Optional[DailySchedule],
    resolved: Optional[ResolvedNextPrayer],
    lang: str,
) -> str:
    view = build_today_card(today, resolved, lang)
    t = get_translations(lang)
    lines = [f"🕌 {view['title']}", ""]

    if view["today"] is None:
        lines.append(t["placeholder"])
        return "\n".join(lines)

    card = view["today"]
    lines.append(f"📅 {card['label']} - {card['date']}")
    table = [[p["name"], p["time"]] for p in card["prayers"]]
    lines.append(tabulate(table, tablefmt="fancy_grid"))

    countdown = view["countdown"]
    lines.append("")
    lines.append(f"⏰ {countdown['label']}: {countdown['name']}")
    lines.append(f"   {t['remaining']}: {countdown['remaining']}")
    return "\n".join(lines)


def select_schedules(
    schedules: Sequence[DailySchedule],
    view: str,
    now: datetime,
    ramadan: Optional[dict] = None,
) -> list[DailySchedule]:
    if view == "month":
        return filter_by_month(schedules, now.month)
    if view == "ramadan":
        ramadan = ramadan or {}
        return filter_by_range(schedules, ramadan.get("start", "01-01"), ramadan.get("end", "12-31"))
    return list(schedules)


def render_table(
    schedules: Sequence[DailySchedule],
    view: str,
    now: datetime,
    lang: str,
    ramadan: Optional[dict] = None,
) -> str:
    t = get_translations(lang)
    title = t["see_all"] if view == "all" else t[view]
    table_view = build_table_view(
        select_schedules(schedules, view, now, ramadan),
        lang,
        today_key=month_day_key(now),
        title=title,
    )
    rows = [
        [("▶ " if row["is_today"] else "") + row["date"]] + row["times"]
        for row in table_view["rows"]
    ]
    return f"🕌 {table_view['title']}\n" + tabulate(rows, headers=table_view["headers"], tablefmt="fancy_grid")


def render_screen(snapshot: dict, now: datetime, ramadan: Optional[dict] = None) -> str:
    """Render a RuntimeState snapshot: today card or a table, plus the countdown line."""
    lang = normalize_lang(snapshot["lang"])
    view = snapshot["view"]
    schedules = snapshot["schedules"]

    if view == "today":
        return render_today(snapshot["today"], snapshot["next_prayer"], lang)

    screen = render_table(schedules, view, now, lang, ramadan)
    if snapshot["today"] is not None:
        t = get_translations(lang)
        countdown = build_countdown(snapshot["next_prayer"], lang)
        screen += f"\n\n⏰ {t['next_prayer']}: {countdown['name']} | {countdown['remaining']}"
    return screen
