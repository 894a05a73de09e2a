"""Ownership tree of scene nodes stored as an arena with parent indices."""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .transforms import Transform, compose, translation_of


@dataclass
class SceneNode:
    """
    One node of the scene.

    Attributes:
        name: Body id or attachment name ("saturn_ring")
        mesh: Opaque renderer handle
        parent: Index of the parent node, None for roots
        local: Transform relative to the parent
    """
    name: str
    mesh: Any
    parent: Optional[int] = None
    local: Transform = field(default_factory=Transform)


class SceneGraph:
    """Arena of nodes; children reference parents by index."""

    def __init__(self):
        self.nodes: List[SceneNode] = []

    def __len__(self):
        return len(self.nodes)

    def add(self, name: str, mesh: Any, parent: Optional[int] = None,
            local: Optional[Transform] = None) -> int:
        """Append a node and return its index. Parents must already exist."""
        if parent is not None and not 0 <= parent < len(self.nodes):
            raise IndexError(f"Parent index {parent} not in graph")
        node = SceneNode(name, mesh, parent, local.copy() if local else Transform())
        self.nodes.append(node)
        return len(self.nodes) - 1

    def index_of(self, name: str) -> int:
        for i, node in enumerate(self.nodes):
            if node.name == name:
                return i
        raise KeyError(name)

    def children_of(self, index: int) -> List[int]:
        return [i for i, node in enumerate(self.nodes) if node.parent == index]

    def set_local(self, index: int, position, rotation):
        node = self.nodes[index]
        node.local = Transform(position, rotation)

    def world_matrix(self, index: int) -> np.ndarray:
        """Compose local transforms from the root down to this node."""
        chain = []
        current: Optional[int] = index
        while current is not None:
            chain.append(current)
            current = self.nodes[current].parent

        world = np.eye(4, dtype=np.float64)
        for i in reversed(chain):
            world = compose(world, self.nodes[i].local)
        return world

    def world_position(self, index: int) -> np.ndarray:
        return translation_of(self.world_matrix(index))
