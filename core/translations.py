from core.formatting import LANG_EN, LANG_KU, normalize_lang

TRANSLATIONS = {
    LANG_EN: {
        "title": "Hawler Prayer Times",
        "today": "Today",
        "date": "Date",
        "next_prayer": "Next Prayer",
        "remaining": "Remaining",
        "see_all": "See All Days",
        "show_today": "Show Today Only",
        "month": "Month",
        "ramadan": "Ramadan",
        "no_next_prayer": "Tomorrow",
        "placeholder": "---",
        "prayers": {
            "bayani": "Fajr",
            "xorhalatn": "Sunrise",
            "niwaro": "Dhuhr",
            "asr": "Asr",
            "eywara": "Maghrib",
            "esha": "Isha",
        },
    },
    LANG_KU: {
        "title": "کاتی بانگەواز - ھەولێر",
        "today": "ئەمڕۆ",
        "date": "بەروار",
        "next_prayer": "بانگەوازی داهاتوو",
        "remaining": "کاتی ماوە",
        "see_all": "بینینی هەموو ڕۆژەکان",
        "show_today": "تەنها ئەمڕۆ",
        "month": "مانگ",
        "ramadan": "ڕەمەزان",
        "no_next_prayer": "سەرەتاوە",
        "placeholder": "---",
        "prayers": {
            "bayani": "بەیانی",
            "xorhalatn": "خۆرھەڵاتن",
            "niwaro": "نیوەڕۆ",
            "asr": "عەسر",
            "eywara": "ئێوارە",
            "esha": "عیشا",
        },
    },
}


def get_translations(lang: str) -> dict:
    return TRANSLATIONS[normalize_lang(lang)]


def text_direction(lang: str) -> str:
    return "rtl" if lang == LANG_KU else "ltr"
