class TickTimer:
    """
    Fixed-period tick source fed with elapsed wall-clock milliseconds.

    ``advance`` reports how many whole ticks became due and carries the
    remainder over, so a frontend running at any frame rate still drives the
    simulation at the configured period. Stopping is idempotent and drops any
    partial period.
    """

    def __init__(self, period_ms: int):
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self.period_ms = period_ms
        self.active = False
        self._pending = 0

    def start(self):
        if not self.active:
            self.active = True
            self._pending = 0

    def stop(self):
        self.active = False
        self._pending = 0

    def advance(self, elapsed_ms) -> int:
        if not self.active:
            return 0
        self._pending += elapsed_ms
        due, self._pending = divmod(self._pending, self.period_ms)
        return int(due)
