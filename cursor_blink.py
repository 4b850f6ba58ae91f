import time


class CursorBlink:
    def __init__(self, interval_ms: float = 150, clock=time.monotonic):
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self.visible = False
        self.last_toggle = clock()

    def tick(self, now=None) -> bool:
        """Flip visibility once the interval has elapsed. Returns True on a flip."""
        now = self._clock() if now is None else now
        if now - self.last_toggle >= self.interval:
            self.visible = not self.visible
            self.last_toggle = now
            return True
        return False

    def touch(self):
        self.visible = True
        self.last_toggle = self._clock()

    def reset(self):
        self.visible = False
        self.last_toggle = self._clock()
