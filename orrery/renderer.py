"""
Renderer interface consumed by the simulation core.

The core only ever talks to a renderer through these four calls; the
pygame/OpenGL renderer in ``rendering.scene`` and the headless
RecordingRenderer below both implement them.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol, Tuple

from .transforms import Transform

FrameCallback = Callable[[float], None]


@dataclass(frozen=True)
class SphereGeometry:
    radius: float
    segments: int = 32


@dataclass(frozen=True)
class RingGeometry:
    inner_radius: float
    outer_radius: float
    segments: int = 64


@dataclass(frozen=True)
class PointsGeometry:
    positions: np.ndarray = field(compare=False)


@dataclass(frozen=True)
class Material:
    """
    Surface description handed to the renderer.

    Attributes:
        color: RGB colour, also the placeholder when a texture is missing
        texture: Optional image file name
        opacity: 1.0 for opaque
        double_sided: Render back faces too (rings)
        unlit: Ignore scene lighting (the Sun)
        point_size: Size for point geometry
    """
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    texture: Optional[str] = None
    opacity: float = 1.0
    double_sided: bool = False
    unlit: bool = False
    point_size: float = 1.0


class Renderer(Protocol):
    def create_mesh(self, geometry: Any, material: Material) -> Any: ...
    def attach_child(self, parent: Any, child: Any, local: Transform) -> None: ...
    def set_transform(self, handle: Any, position, rotation) -> None: ...
    def register_frame_callback(self, fn: FrameCallback) -> None: ...


@dataclass
class MeshRecord:
    """What the recording renderer knows about one mesh."""
    geometry: Any
    material: Material
    parent: Optional[int] = None
    local: Transform = field(default_factory=Transform)
    updates: int = 0


class RecordingRenderer:
    """
    Headless renderer that stores meshes and transforms in memory.

    Handles are plain integers. Frames are driven by calling run_frames()
    instead of a display refresh.
    """

    def __init__(self):
        self.meshes: List[MeshRecord] = []
        self.callbacks: List[FrameCallback] = []
        self.frames = 0

    def create_mesh(self, geometry, material: Material) -> int:
        self.meshes.append(MeshRecord(geometry, material))
        return len(self.meshes) - 1

    def attach_child(self, parent: int, child: int, local: Transform):
        record = self.meshes[child]
        record.parent = parent
        record.local = local.copy()

    def set_transform(self, handle: int, position, rotation):
        record = self.meshes[handle]
        record.local = Transform(position, rotation)
        record.updates += 1

    def register_frame_callback(self, fn: FrameCallback):
        self.callbacks.append(fn)

    def run_frames(self, count: int, dt: float):
        """Invoke every registered callback `count` times with delta `dt`."""
        for _ in range(count):
            for fn in self.callbacks:
                fn(dt)
            self.frames += 1

    def transform_of(self, handle: int) -> Transform:
        return self.meshes[handle].local
