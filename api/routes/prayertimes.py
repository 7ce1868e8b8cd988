import logging
from typing import Optional

from fastapi import APIRouter, Path, Query, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from core.calendar_filter import filter_by_month, filter_by_range
from core.clock import local_now
from core.formatting import format_date_key
from core.prayer_store import fetch_rows, load_schedules
from core.schedule import month_day_key
from core.translations import get_translations
from core.view import build_table_view, build_today_view

router = APIRouter(prefix="/api/prayertimes")

DB_ERROR = {"error": "Database error"}


def _query(config: dict) -> dict:
    settings = config["settings"]
    window = config["data_window"]
    return {
        "city": settings["city"],
        "iso": settings["iso"],
        "start": window["start"],
        "end": window["end"],
    }


def _now(config: dict):
    return local_now(config["settings"].get("timezone"))


def _lang(config: dict, lang: Optional[str]) -> str:
    return lang or config["settings"]["language"]


@router.get("")
def prayer_times(request: Request):
    """All rows for the configured city and window, raw 24-hour times."""
    try:
        return fetch_rows(**_query(request.app.state.config))
    except SQLAlchemyError as e:
        logging.error(f"[API] SQL ERROR: {e}")
        return JSONResponse(DB_ERROR, status_code=500)


@router.get("/today")
def today(request: Request, lang: Optional[str] = Query(None)):
    config = request.app.state.config
    lang = _lang(config, lang)
    try:
        schedules = load_schedules(**_query(config))
    except SQLAlchemyError as e:
        logging.error(f"[API] SQL ERROR: {e}")
        return JSONResponse(DB_ERROR, status_code=500)
    return build_today_view(schedules, _now(config), lang)


@router.get("/month/{month}")
def month(request: Request, month: int = Path(ge=1, le=12), lang: Optional[str] = Query(None)):
    config = request.app.state.config
    lang = _lang(config, lang)
    try:
        schedules = load_schedules(**_query(config))
    except SQLAlchemyError as e:
        logging.error(f"[API] SQL ERROR: {e}")
        return JSONResponse(DB_ERROR, status_code=500)

    t = get_translations(lang)
    return build_table_view(
        filter_by_month(schedules, month),
        lang,
        today_key=month_day_key(_now(config)),
        title=f"{t['month']} {format_date_key(f'{month:02d}', lang)}",
    )


@router.get("/ramadan")
def ramadan(request: Request, lang: Optional[str] = Query(None)):
    config = request.app.state.config
    lang = _lang(config, lang)
    try:
        schedules = load_schedules(**_query(config))
    except SQLAlchemyError as e:
        logging.error(f"[API] SQL ERROR: {e}")
        return JSONResponse(DB_ERROR, status_code=500)

    window = config["ramadan"]
    return build_table_view(
        filter_by_range(schedules, window["start"], window["end"]),
        lang,
        today_key=month_day_key(_now(config)),
        title=get_translations(lang)["ramadan"],
    )
