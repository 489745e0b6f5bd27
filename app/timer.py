from dataclasses import dataclass


@dataclass
class SessionTimer:
    running: bool = False
    start: float | None = None
    elapsed: float | None = None

    def begin(self, now: float):
        self.running = True
        self.start = now

    def finish(self, now: float):
        # elapsed is only ever written once, and only after a start
        if self.start is None or self.elapsed is not None:
            return
        self.running = False
        self.elapsed = max(0.0, now - self.start)
