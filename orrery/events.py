"""UI events queued between frames and applied before each tick."""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Union

from .clock import SimulationClock
from .errors import OrreryError
from .speed import SpeedState, clamp_speed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpeedChange:
    body_id: str
    value: float


@dataclass(frozen=True)
class SpeedStep:
    """Relative change, resolved against the speed current at drain time."""
    body_id: str
    delta: float


@dataclass(frozen=True)
class SpeedReset:
    body_id: str


@dataclass(frozen=True)
class PauseToggle:
    pass


Event = Union[SpeedChange, SpeedStep, SpeedReset, PauseToggle]


class EventQueue:
    """
    FIFO of pending UI events.

    This is the UI boundary for speed values: out-of-range values are
    clamped here (and logged) so the speed table never sees them. An event
    that cannot be applied is logged and dropped; the rest still apply.
    """

    def __init__(self, low: float, high: float):
        self.low = low
        self.high = high
        self._pending: Deque[Event] = deque()

    def __len__(self):
        return len(self._pending)

    def _clamped(self, body_id: str, value: float) -> float:
        clamped = clamp_speed(value, self.low, self.high)
        if clamped != value:
            logger.warning("Speed %.2f for %s clamped to %.2f", value, body_id, clamped)
        return clamped

    def post(self, event: Event):
        if isinstance(event, SpeedChange):
            clamped = self._clamped(event.body_id, event.value)
            if clamped != event.value:
                event = SpeedChange(event.body_id, clamped)
        self._pending.append(event)

    def post_speed(self, body_id: str, value: float):
        self.post(SpeedChange(body_id, value))

    def post_step(self, body_id: str, delta: float):
        self.post(SpeedStep(body_id, delta))

    def post_reset(self, body_id: str):
        self.post(SpeedReset(body_id))

    def post_pause_toggle(self):
        self.post(PauseToggle())

    def _apply(self, event: Event, speeds: SpeedState, clock: SimulationClock):
        if isinstance(event, SpeedChange):
            speeds.set_speed(event.body_id, event.value)
        elif isinstance(event, SpeedStep):
            current = speeds.get_speed(event.body_id)
            speeds.set_speed(event.body_id, self._clamped(event.body_id, current + event.delta))
        elif isinstance(event, SpeedReset):
            speeds.reset(event.body_id)
        elif isinstance(event, PauseToggle):
            clock.toggle_pause()
        else:
            raise TypeError(f"Unknown event {event!r}")

    def drain(self, speeds: SpeedState, clock: SimulationClock) -> int:
        """Apply every pending event in arrival order. Returns the count applied."""
        applied = 0
        while self._pending:
            event = self._pending.popleft()
            try:
                self._apply(event, speeds, clock)
            except OrreryError as e:
                logger.error("Dropped %r: %s", event, e)
                continue
            applied += 1
        return applied
