import time
from datetime import datetime

from core.countdown import CountdownTicker, tick
from core.runtime_state import RuntimeState


def test_tick_resolves_next_prayer(schedules):
    state = RuntimeState(lang="en")
    state.schedules = schedules
    now = datetime(2026, 2, 18, 12, 0)

    tick(state, now)

    snap = state.snapshot()
    assert snap["today"].date == "02-18"
    assert snap["next_prayer"].slot_key == "niwaro"
    assert snap["last_tick"] == now


def test_tick_without_today_clears_result(schedules):
    state = RuntimeState()
    state.schedules = schedules
    tick(state, datetime(2026, 8, 1, 12, 0))

    snap = state.snapshot()
    assert snap["today"] is None
    assert snap["next_prayer"] is None


def test_ticker_runs_and_stops(schedules):
    state = RuntimeState()
    state.schedules = schedules
    ticks = []

    def now_fn():
        ticks.append(1)
        return datetime(2026, 2, 18, 20, 0)

    ticker = CountdownTicker(state, now_fn=now_fn, interval=0.01)
    ticker.start()
    time.sleep(0.1)
    ticker.stop()

    assert not ticker.is_running()
    assert len(ticks) > 1
    assert state.snapshot()["next_prayer"].slot_key == "bayani"
