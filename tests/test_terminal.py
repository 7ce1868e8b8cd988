from datetime import datetime

from core import resolver, view
from core.countdown import tick
from core.resolver import find_today, resolve_next
from core.runtime_state import RuntimeState
from core.terminal import render_screen, render_today, select_schedules

RAMADAN = {"start": "02-18", "end": "03-19"}


def _ticked_state(schedules, now, lang="en", view_mode="today"):
    state = RuntimeState(lang=lang, view=view_mode)
    state.schedules = schedules
    tick(state, now)
    return state


def test_render_today_shows_cards_and_countdown(schedules):
    now = datetime(2026, 2, 18, 13, 0)
    today = find_today(schedules, now)
    screen = render_today(today, resolve_next(today, schedules, now), "en")
    assert "Hawler Prayer Times" in screen
    assert "Today - 02-18" in screen
    assert "5:11 AM" in screen
    assert "Next Prayer: Asr" in screen
    assert "2h 19m 0s" in screen


def test_render_today_without_entry():
    screen = render_today(None, None, "en")
    assert "---" in screen
    assert "Next Prayer" not in screen


def test_today_screen_uses_ticker_result(schedules, monkeypatch):
    now = datetime(2026, 2, 18, 13, 0)
    state = _ticked_state(schedules, now)
    calls = []

    def counting_resolve(*args):
        calls.append(args)
        return resolver.resolve_next(*args)

    monkeypatch.setattr(view, "resolve_next", counting_resolve)
    screen = render_screen(state.snapshot(), now, RAMADAN)

    assert calls == []
    assert "Next Prayer: Asr" in screen
    assert "2h 19m 0s" in screen


def test_select_schedules_by_view(schedules):
    now = datetime(2026, 3, 19, 9, 0)
    assert [s.date for s in select_schedules(schedules, "month", now)] == ["03-19", "03-20"]
    assert [s.date for s in select_schedules(schedules, "ramadan", now, RAMADAN)] == ["02-18", "03-19"]
    assert len(select_schedules(schedules, "all", now)) == 4


def test_render_screen_table_with_countdown(schedules):
    now = datetime(2026, 2, 18, 20, 0)
    state = _ticked_state(schedules, now, lang="ku", view_mode="ramadan")

    screen = render_screen(state.snapshot(), now, RAMADAN)
    assert "ڕەمەزان" in screen
    assert "▶ ٠٢-١٨" in screen
    assert "بەیانی" in screen
