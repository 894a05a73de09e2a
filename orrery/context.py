"""Simulation context owning bodies, scene graph, speeds, clock and events."""

import numpy as np
from typing import Dict, List, Optional

from .bodies import CelestialBody
from .clock import SimulationClock
from .errors import BodyNotFound
from .events import EventQueue
from .scene_graph import SceneGraph
from .speed import SpeedState
from .starfield import Starfield
from .transforms import Transform
from .updater import ANGULAR_SPEED_FACTOR, apply_transforms, compute_transforms


class SimulationContext:
    """
    Everything one running orrery needs, passed by reference.

    Built only by SceneAssembler.assemble(); a context always holds a
    fully assembled scene.
    """

    def __init__(self, bodies: List[CelestialBody], graph: SceneGraph,
                 speeds: SpeedState, starfield: Starfield, renderer,
                 attachments: Optional[Dict[str, int]] = None,
                 starfield_mesh=None,
                 angular_speed_factor: float = ANGULAR_SPEED_FACTOR):
        self.bodies: Dict[str, CelestialBody] = {body.id: body for body in bodies}
        self.graph = graph
        self.speeds = speeds
        self.clock = SimulationClock()
        self.events = EventQueue(speeds.low, speeds.high)
        self.starfield = starfield
        self.starfield_mesh = starfield_mesh
        self.renderer = renderer
        self.attachments = dict(attachments or {})
        self.angular_speed_factor = angular_speed_factor
        self.frame_count = 0

    @property
    def paused(self) -> bool:
        return self.clock.paused

    @property
    def elapsed_seconds(self) -> float:
        return self.clock.elapsed_seconds

    @property
    def orbiting_ids(self) -> List[str]:
        return [body_id for body_id, body in self.bodies.items() if body.orbits]

    def body(self, body_id: str) -> CelestialBody:
        try:
            return self.bodies[body_id]
        except KeyError:
            raise BodyNotFound(body_id) from None

    def compute_transforms(self, elapsed_seconds: Optional[float] = None) -> Dict[str, Transform]:
        """Transforms for the given (or current) elapsed time without applying them."""
        if elapsed_seconds is None:
            elapsed_seconds = self.clock.elapsed_seconds
        return compute_transforms(self.bodies.values(), self.speeds, elapsed_seconds,
                                  self.angular_speed_factor)

    def frame(self, real_delta_seconds: float) -> float:
        """
        One frame: apply queued UI events, advance the clock, move bodies.

        Nothing moves while paused. Returns the elapsed simulated time.
        """
        self.events.drain(self.speeds, self.clock)
        elapsed = self.clock.tick(real_delta_seconds)
        if not self.clock.paused:
            transforms = self.compute_transforms(elapsed)
            apply_transforms(self.bodies.values(), transforms, self.graph, self.renderer)
        self.frame_count += 1
        return elapsed

    def bind(self):
        """Register frame() with the renderer's refresh loop."""
        self.renderer.register_frame_callback(self.frame)

    def node_of(self, name: str) -> int:
        if name in self.bodies:
            return self.bodies[name].node
        if name in self.attachments:
            return self.attachments[name]
        raise BodyNotFound(name)

    def world_position(self, name: str) -> np.ndarray:
        """World position of a body or attachment (e.g. Saturn's ring)."""
        return self.graph.world_position(self.node_of(name))
