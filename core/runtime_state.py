from threading import Lock


class RuntimeState:
    """Display state shared by the countdown ticker and the renderer."""

    def __init__(self, lang="ku", view="today"):
        self.lock = Lock()
        self.lang = lang
        self.view = view
        self.schedules = []
        self.today = None
        self.next_prayer = None
        self.last_tick = None

    def snapshot(self) -> dict:
        with self.lock:
            return {
                "lang": self.lang,
                "view": self.view,
                "schedules": list(self.schedules),
                "today": self.today,
                "next_prayer": self.next_prayer,
                "last_tick": self.last_tick,
            }
