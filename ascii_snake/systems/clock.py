"""
Tick clock - turns real elapsed time into discrete advance events.
"""

import logging

logger = logging.getLogger(__name__)


class TickClock:
    """
    Repeating interval with an elapsed accumulator.

    tick() fires at most once per call and drops any excess time. The
    interval only shrinks (on accelerate) until reset() restores it.
    """

    def __init__(self, interval: float, min_interval: float, acceleration: float):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        if not 0 < min_interval <= interval:
            raise ValueError(
                f"Minimum interval must be in (0, {interval}], got {min_interval}."
            )
        if acceleration < 0:
            raise ValueError(f"Acceleration must not be negative, got {acceleration}.")
        self.initial_interval = interval
        self.min_interval = min_interval
        self.acceleration = acceleration
        self.interval = interval
        self.elapsed = 0.0

    def tick(self, dt: float) -> bool:
        """Add *dt* seconds; return True when an advance is due."""
        if dt < 0:
            raise ValueError(f"Elapsed time must not be negative, got {dt}.")
        self.elapsed += dt
        if self.elapsed < self.interval:
            return False
        self.elapsed = 0.0
        return True

    def accelerate(self) -> float:
        self.interval = max(self.min_interval, self.interval - self.acceleration)
        logger.debug(f"Tick interval now {self.interval:.4f}s")
        return self.interval

    def reset(self):
        self.interval = self.initial_interval
        self.elapsed = 0.0

    @property
    def speed(self) -> float:
        """Advances per second at the current interval."""
        return 1.0 / self.interval

    def __repr__(self):
        return f"<TickClock interval={self.interval:.4f}, elapsed={self.elapsed:.4f}>"
