from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo


def local_now(timezone: Optional[str] = None) -> datetime:
    """Naive wall-clock time in the given zone (system local time if None)."""
    if not timezone:
        return datetime.now()
    return datetime.now(ZoneInfo(timezone)).replace(tzinfo=None)
