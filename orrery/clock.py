"""Pausable simulation clock."""

import logging
import math

logger = logging.getLogger(__name__)


class SimulationClock:
    """
    Elapsed simulated seconds, advanced once per frame by the render loop.

    While paused the clock stops: tick() returns the value frozen at the
    pause instant until the clock is resumed.
    """

    def __init__(self):
        self.elapsed_seconds = 0.0
        self.paused = False

    def tick(self, real_delta_seconds: float) -> float:
        """Advance by the real frame delta unless paused; return elapsed."""
        if not math.isfinite(real_delta_seconds) or real_delta_seconds < 0:
            raise ValueError(f"Frame delta must be finite and >= 0, got {real_delta_seconds}")
        if not self.paused:
            self.elapsed_seconds += real_delta_seconds
        return self.elapsed_seconds

    def toggle_pause(self) -> bool:
        """Flip the paused flag and return the new state."""
        self.paused = not self.paused
        logger.info("%s at t=%.2fs", "Paused" if self.paused else "Resumed",
                    self.elapsed_seconds)
        return self.paused
