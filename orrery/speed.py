"""Per-body angular speed table driven by the UI."""

import logging
from typing import Dict, Iterable, Iterator

from .bodies import BodySpec
from .errors import BodyNotFound, ConfigurationError, InputOutOfRange

logger = logging.getLogger(__name__)

SPEED_CONSTANT_K = 1000.0
SPEED_MIN = 1.0
SPEED_MAX = 100.0


def default_speed(orbital_radius: float, k: float = SPEED_CONSTANT_K) -> float:
    """Default speed, inversely proportional to orbital radius."""
    return k / orbital_radius


def clamp_speed(value: float, low: float = SPEED_MIN, high: float = SPEED_MAX) -> float:
    """Clamp a raw UI value into the allowed speed range."""
    return max(low, min(high, float(value)))


class SpeedState:
    """
    Mapping body id -> speed units for every orbiting body.

    Values are always within [low, high]. Entries are created once from the
    body table and never removed.
    """

    def __init__(self, specs: Iterable[BodySpec], k: float = SPEED_CONSTANT_K,
                 low: float = SPEED_MIN, high: float = SPEED_MAX):
        self.k = k
        self.low = low
        self.high = high
        self._defaults: Dict[str, float] = {}

        for spec in specs:
            if not spec.orbits:
                continue
            value = default_speed(spec.orbital_radius, k)
            if not low <= value <= high:
                raise ConfigurationError(
                    f"'{spec.id}': default speed {value:.2f} (K={k:g} / r={spec.orbital_radius:g}) "
                    f"outside [{low:g}, {high:g}]"
                )
            self._defaults[spec.id] = value

        self._speeds: Dict[str, float] = dict(self._defaults)

    def __contains__(self, body_id: str) -> bool:
        return body_id in self._speeds

    def __len__(self):
        return len(self._speeds)

    def __iter__(self) -> Iterator[str]:
        return iter(self._speeds)

    def get_speed(self, body_id: str) -> float:
        try:
            return self._speeds[body_id]
        except KeyError:
            raise BodyNotFound(body_id) from None

    def set_speed(self, body_id: str, value: float):
        """
        Store a new speed.

        Raises:
            BodyNotFound: body_id is not an orbiting body
            InputOutOfRange: value outside [low, high]; never clamped here
        """
        if body_id not in self._speeds:
            raise BodyNotFound(body_id)
        value = float(value)
        if not self.low <= value <= self.high:
            raise InputOutOfRange(body_id, value, self.low, self.high)
        self._speeds[body_id] = value
        logger.debug("Speed of %s set to %.2f", body_id, value)

    def default(self, body_id: str) -> float:
        try:
            return self._defaults[body_id]
        except KeyError:
            raise BodyNotFound(body_id) from None

    def defaults(self) -> Dict[str, float]:
        return dict(self._defaults)

    def reset(self, body_id: str):
        """Restore the default speed for one body."""
        self.set_speed(body_id, self.default(body_id))
