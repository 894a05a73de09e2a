"""Procedural static starfield backdrop."""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

STAR_COUNT = 5000
STAR_EXTENT = 1000.0


@dataclass(frozen=True)
class Starfield:
    """Read-only point cloud plus the material used to draw it."""
    positions: np.ndarray
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    point_size: float = 1.0

    @property
    def count(self) -> int:
        return len(self.positions)


def generate_starfield(count: int = STAR_COUNT, extent: float = STAR_EXTENT,
                       seed: Optional[int] = None,
                       color: Tuple[float, float, float] = (1.0, 1.0, 1.0),
                       point_size: float = 1.0) -> Starfield:
    """
    Scatter stars uniformly in the cube [-extent, extent]^3.

    Args:
        count: Number of stars
        extent: Half side length of the cube
        seed: Optional RNG seed for a reproducible sky

    Returns:
        Starfield whose positions array is float32 and not writeable
    """
    if count < 0:
        raise ValueError(f"Star count must be >= 0, got {count}")
    rng = np.random.default_rng(seed)
    positions = rng.uniform(-extent, extent, size=(count, 3)).astype(np.float32)
    positions.flags.writeable = False
    return Starfield(positions, tuple(color), float(point_size))
