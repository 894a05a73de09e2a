"""Celestial body records and validation of the static body table."""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .errors import ConfigurationError


REQUIRED_KEYS = ("id", "orbital_radius", "rotation_rate_x", "rotation_rate_y")


@dataclass(frozen=True)
class BodySpec:
    """
    Static, validated parameters of one body as read from configuration.

    Attributes:
        id: Unique body identifier ("earth")
        orbital_radius: Circular orbit radius around the Sun (0 for the Sun)
        rotation_rate_x: Self-rotation rate about X in rad/s
        rotation_rate_y: Self-rotation rate about Y in rad/s
        radius: Sphere radius used for the mesh
        segments: Sphere tessellation
        color: RGB fallback colour (0-1 range)
        texture: Optional texture file name
        orbits: False for the central body
    """
    id: str
    orbital_radius: float
    rotation_rate_x: float
    rotation_rate_y: float
    radius: float = 1.0
    segments: int = 32
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    texture: Optional[str] = None
    orbits: bool = True


@dataclass(frozen=True)
class CelestialBody:
    """A body living in the scene: static parameters plus its mesh and node."""
    spec: BodySpec
    mesh: Any
    node: int

    @property
    def id(self) -> str:
        return self.spec.id

    @property
    def orbital_radius(self) -> float:
        return self.spec.orbital_radius

    @property
    def rotation_rate_x(self) -> float:
        return self.spec.rotation_rate_x

    @property
    def rotation_rate_y(self) -> float:
        return self.spec.rotation_rate_y

    @property
    def orbits(self) -> bool:
        return self.spec.orbits


def _number(entry: Dict, key: str, body_id: str) -> float:
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"'{body_id}': {key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"'{body_id}': {key} must be finite, got {value!r}")
    return float(value)


def parse_body(entry: Dict) -> BodySpec:
    """Validate one configuration dict and turn it into a BodySpec."""
    missing = [key for key in REQUIRED_KEYS if key not in entry]
    if missing:
        label = entry.get("id", "<unnamed>")
        raise ConfigurationError(f"'{label}': missing {', '.join(missing)}")

    body_id = entry["id"]
    if not isinstance(body_id, str) or not body_id:
        raise ConfigurationError(f"Body id must be a non-empty string, got {body_id!r}")

    orbits = bool(entry.get("orbits", True))
    orbital_radius = _number(entry, "orbital_radius", body_id)
    if orbits and orbital_radius <= 0:
        raise ConfigurationError(
            f"'{body_id}': orbital_radius must be > 0, got {orbital_radius:g}"
        )
    if not orbits and orbital_radius != 0:
        raise ConfigurationError(f"'{body_id}': central body must have orbital_radius 0")

    radius = _number(entry, "radius", body_id) if "radius" in entry else 1.0
    if radius <= 0:
        raise ConfigurationError(f"'{body_id}': radius must be > 0, got {radius:g}")

    return BodySpec(
        id=body_id,
        orbital_radius=orbital_radius,
        rotation_rate_x=_number(entry, "rotation_rate_x", body_id),
        rotation_rate_y=_number(entry, "rotation_rate_y", body_id),
        radius=radius,
        segments=int(entry.get("segments", 32)),
        color=tuple(entry.get("color", (1.0, 1.0, 1.0))),
        texture=entry.get("texture"),
        orbits=orbits,
    )


def parse_bodies(entries: Sequence[Dict]) -> List[BodySpec]:
    """
    Validate the whole body table before anything is built.

    Raises:
        ConfigurationError: on the first invalid entry, duplicate id, or
            a table that has no central body or more than one.
    """
    if not entries:
        raise ConfigurationError("Body table is empty")

    specs = [parse_body(entry) for entry in entries]

    seen = set()
    for spec in specs:
        if spec.id in seen:
            raise ConfigurationError(f"Duplicate body id '{spec.id}'")
        seen.add(spec.id)

    central = [spec.id for spec in specs if not spec.orbits]
    if len(central) != 1:
        raise ConfigurationError(
            f"Expected exactly one central body, found {len(central)}"
        )
    return specs
