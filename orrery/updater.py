"""Per-tick orbit and self-rotation update."""

import logging
import math
import numpy as np
from typing import Dict, Iterable

from .bodies import CelestialBody
from .errors import BodyNotFound, StateDesyncError
from .scene_graph import SceneGraph
from .speed import SpeedState, clamp_speed
from .transforms import Transform

logger = logging.getLogger(__name__)

# radians per second per speed unit
ANGULAR_SPEED_FACTOR = 0.01


def orbital_transform(body: CelestialBody, elapsed_seconds: float,
                      speed: float = 0.0,
                      angular_speed_factor: float = ANGULAR_SPEED_FACTOR) -> Transform:
    """
    Transform of a body at an absolute elapsed time.

    Pure function of its inputs. The orbit angle is elapsed * angular
    velocity and is left unwrapped. The central body only self-rotates and
    stays at the origin.
    """
    rotation = np.array([
        elapsed_seconds * body.rotation_rate_x,
        elapsed_seconds * body.rotation_rate_y,
        0.0,
    ])
    if not body.orbits:
        return Transform(np.zeros(3), rotation)

    angle = elapsed_seconds * speed * angular_speed_factor
    position = np.array([
        body.orbital_radius * math.cos(angle),
        0.0,
        body.orbital_radius * math.sin(angle),
    ])
    return Transform(position, rotation)


def _speed_for(body: CelestialBody, speeds: SpeedState) -> float:
    try:
        speed = speeds.get_speed(body.id)
    except BodyNotFound:
        raise StateDesyncError(f"No speed entry for orbiting body '{body.id}'") from None

    if not speeds.low <= speed <= speeds.high:
        clamped = clamp_speed(speed, speeds.low, speeds.high)
        logger.warning("Stored speed %.2f for %s out of range, using %.2f",
                       speed, body.id, clamped)
        return clamped
    return speed


def compute_transforms(bodies: Iterable[CelestialBody], speeds: SpeedState,
                       elapsed_seconds: float,
                       angular_speed_factor: float = ANGULAR_SPEED_FACTOR) -> Dict[str, Transform]:
    """
    Transforms for every body from one (elapsed, speeds) snapshot.

    Raises:
        StateDesyncError: an orbiting body has no speed entry
    """
    transforms = {}
    for body in bodies:
        speed = _speed_for(body, speeds) if body.orbits else 0.0
        transforms[body.id] = orbital_transform(body, elapsed_seconds, speed,
                                                angular_speed_factor)
    return transforms


def apply_transforms(bodies: Iterable[CelestialBody], transforms: Dict[str, Transform],
                     graph: SceneGraph, renderer) -> int:
    """
    Write transforms into the scene graph and the renderer.

    A body whose update fails is logged and skipped so the rest of the
    scene keeps moving. Returns the number of bodies updated.
    """
    updated = 0
    for body in bodies:
        transform = transforms[body.id]
        try:
            renderer.set_transform(body.mesh, transform.position, transform.rotation)
        except Exception:
            logger.exception("Skipping %s this frame: renderer rejected transform", body.id)
            continue
        graph.set_local(body.node, transform.position, transform.rotation)
        updated += 1
    return updated
