import logging

import requests

from core.schedule import DailySchedule, MalformedTimeError


def get_prayer_times(base_url: str, timeout: float = 10) -> list[DailySchedule]:
    """Fetch the full schedule from the prayer times API (one call per session)."""
    api_url = f"{base_url.rstrip('/')}/api/prayertimes"

    logging.info(f"[FETCH] Fetching prayer times from {api_url}")

    try:
        response = requests.get(api_url, timeout=timeout)
        response.raise_for_status()
        rows = response.json()
    except (requests.RequestException, ValueError) as e:
        logging.error(f"[FETCH] Failed to fetch prayer times: {e}")
        return []

    if not isinstance(rows, list):
        logging.error(f"[FETCH] Unexpected payload: {rows}")
        return []

    schedules = []
    for row in rows:
        try:
            schedules.append(DailySchedule.from_row(row))
        except (MalformedTimeError, KeyError, TypeError) as e:
            logging.warning(f"[FETCH] Skipping row {row!r}: {e}")

    logging.info(f"[FETCH] Received {len(schedules)} days")
    return schedules
