import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from core.clock import local_now
from core.resolver import find_today, resolve_next
from core.runtime_state import RuntimeState

TICK_SECONDS = 1.0


def tick(state: RuntimeState, now: datetime) -> None:
    """Re-resolve the next prayer for `now` and store it on the state."""
    with state.lock:
        schedules = list(state.schedules)

    today = find_today(schedules, now)
    resolved = resolve_next(today, schedules, now) if today else None

    with state.lock:
        state.today = today
        state.next_prayer = resolved
        state.last_tick = now


class CountdownTicker:
    """Background thread that re-resolves the countdown once per interval."""

    def __init__(
        self,
        state: RuntimeState,
        now_fn: Optional[Callable[[], datetime]] = None,
        interval: float = TICK_SECONDS,
    ):
        self.state = state
        self.now_fn = now_fn or local_now
        self.interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _run(self):
        logging.info("[TICK] Countdown ticker running")
        while not self._stop.is_set():
            try:
                tick(self.state, self.now_fn())
            except Exception as e:
                logging.error(f"[ERROR] Tick failure: {e}", exc_info=True)
            self._stop.wait(self.interval)
        logging.info("[TICK] Countdown ticker stopped")

    def start(self):
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        tick(self.state, self.now_fn())
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self, timeout: float = 2.0):
        self._stop.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None

    def is_running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())
