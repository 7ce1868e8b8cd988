"""
Read prayer times rows for one city and date window.
"""
import logging

from sqlalchemy import select

from core.db import session_scope
from core.models import PrayerTimeRow
from core.schedule import SLOT_KEYS, DailySchedule, MalformedTimeError


def fetch_rows(city: str, iso: str, start: str, end: str) -> list[dict]:
    """Raw rows as stored (24-hour strings), ordered by date."""
    columns = [getattr(PrayerTimeRow, key) for key in SLOT_KEYS] + [PrayerTimeRow.date]
    stmt = (
        select(*columns)
        .where(
            PrayerTimeRow.cities == city,
            PrayerTimeRow.iso == iso,
            PrayerTimeRow.date.between(start, end),
        )
        .order_by(PrayerTimeRow.date.asc())
    )
    with session_scope() as session:
        rows = [dict(row._mapping) for row in session.execute(stmt)]

    logging.info(f"[DB] {len(rows)} rows for {city}/{iso} {start}..{end}")
    return rows


def load_schedules(city: str, iso: str, start: str, end: str) -> list[DailySchedule]:
    """Rows as DailySchedule objects; rows with unparsable times are skipped."""
    schedules = []
    for row in fetch_rows(city, iso, start, end):
        try:
            schedules.append(DailySchedule.from_row(row))
        except MalformedTimeError as e:
            logging.warning(f"[DB] Skipping {row.get('date')}: {e}")
    return schedules
