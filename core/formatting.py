"""
Clock, countdown and date formatting for English and Kurdish display.
"""

from core.schedule import parse_clock_time

LANG_EN = "en"
LANG_KU = "ku"
LANGUAGES = (LANG_EN, LANG_KU)

_KURDISH_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def normalize_lang(lang: str) -> str:
    return lang if lang in LANGUAGES else LANG_EN


def to_localized_digits(text: str) -> str:
    """Swap ASCII digits for Eastern Arabic-Indic ones; everything else is kept."""
    return text.translate(_KURDISH_DIGITS)


def format_clock_time(time_str: str, lang: str = LANG_EN, hour_cycle: int = 12) -> str:
    """Render 'HH:MM' for display.

    English gets 12-hour time with AM/PM. Kurdish gets 12-hour time with
    Kurdish numerals and no meridiem marker. hour_cycle=24 keeps the stored
    time. Any other hour_cycle raises ValueError.
    """
    if hour_cycle not in (12, 24):
        raise ValueError(f"hour_cycle must be 12 or 24, got {hour_cycle!r}")

    if not time_str:
        return ""

    if hour_cycle == 24:
        return to_localized_digits(time_str) if lang == LANG_KU else time_str

    hour, _ = parse_clock_time(time_str)
    minute = time_str.strip().split(":")[1]
    hour12 = hour % 12 or 12

    if lang == LANG_KU:
        return to_localized_digits(f"{hour12}:{minute}")

    period = "PM" if hour >= 12 else "AM"
    return f"{hour12}:{minute} {period}"


def format_duration(hours: int, minutes: int, seconds: int, lang: str = LANG_EN) -> str:
    if lang == LANG_KU:
        return to_localized_digits(f"{hours} : {minutes} : {seconds}")
    return f"{hours}h {minutes}m {seconds}s"


def format_date_key(date_key: str, lang: str = LANG_EN) -> str:
    return to_localized_digits(date_key) if lang == LANG_KU else date_key
