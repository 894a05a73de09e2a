"""Transform value type and 4x4 matrix helpers for the scene graph."""

import math
import numpy as np
from dataclasses import dataclass, field


def _vec3(values=None) -> np.ndarray:
    if values is None:
        return np.zeros(3, dtype=np.float64)
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {arr.shape}")
    return arr.copy()


@dataclass
class Transform:
    """
    Local transform of a scene node.

    Attributes:
        position: Translation (x, y, z)
        rotation: Euler angles in radians, applied in X, Y, Z order
    """
    position: np.ndarray = field(default_factory=_vec3)
    rotation: np.ndarray = field(default_factory=_vec3)

    def __post_init__(self):
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)

    def copy(self) -> "Transform":
        return Transform(self.position, self.rotation)

    def matrix(self) -> np.ndarray:
        """Homogeneous 4x4 matrix: translate * Rx * Ry * Rz."""
        m = np.eye(4, dtype=np.float64)
        m[:3, :3] = rotation_matrix(*self.rotation)
        m[:3, 3] = self.position
        return m

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return (np.array_equal(self.position, other.position)
                and np.array_equal(self.rotation, other.rotation))


def rotation_matrix(rx: float, ry: float, rz: float) -> np.ndarray:
    """Rotation matrix for intrinsic XYZ Euler angles."""
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)

    mx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    my = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    mz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return mx @ my @ mz


def compose(parent_world: np.ndarray, local: Transform) -> np.ndarray:
    """World matrix of a child: parent.world ∘ local."""
    return parent_world @ local.matrix()


def translation_of(matrix: np.ndarray) -> np.ndarray:
    """Translation column of a homogeneous matrix."""
    return matrix[:3, 3].copy()
