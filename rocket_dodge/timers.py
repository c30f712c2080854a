"""Cooperative fixed-interval timers.

Timers only fire from ``Scheduler.advance``, which the run controller calls
between ticks, so a callback never runs in the middle of a tick.
"""

# Tolerance for summed frame times (60 * 1/60 is not exactly 1.0)
EPSILON = 1e-9


class Timer:
    def __init__(self, interval, callback, due):
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        self.interval = interval
        self.callback = callback
        self.due = due
        self.active = True

    def cancel(self):
        self.active = False


class Scheduler:
    def __init__(self):
        self.now = 0.0
        self._timers = []

    def every(self, interval, callback):
        """Call ``callback`` every ``interval`` seconds, first after one interval."""
        timer = Timer(interval, callback, self.now + interval)
        self._timers.append(timer)
        return timer

    def advance(self, elapsed):
        self.now += elapsed
        while True:
            self._timers = [t for t in self._timers if t.active]
            due = [t for t in self._timers if t.due <= self.now + EPSILON]
            if not due:
                return
            # Earliest first, so long frames keep the firing order
            timer = min(due, key=lambda t: t.due)
            timer.due += timer.interval
            timer.callback()

    @property
    def pending(self):
        return sum(1 for t in self._timers if t.active)
