"""One-time construction of the solar system scene."""

import logging
import math
from typing import Dict, Optional, Sequence

from .bodies import BodySpec, CelestialBody, parse_bodies
from .context import SimulationContext
from .errors import ConfigurationError
from .renderer import Material, PointsGeometry, RingGeometry, SphereGeometry
from .scene_graph import SceneGraph
from .speed import SPEED_CONSTANT_K, SPEED_MAX, SPEED_MIN, SpeedState
from .starfield import STAR_COUNT, STAR_EXTENT, generate_starfield
from .transforms import Transform
from .updater import ANGULAR_SPEED_FACTOR

logger = logging.getLogger(__name__)

DEFAULT_RING = {
    "name": "saturn_ring",
    "parent": "saturn",
    "inner_radius": 4.0,
    "outer_radius": 7.0,
    "segments": 64,
    "color": (0.533, 0.533, 0.533),
    "opacity": 0.5,
    "offset": (0.0, 0.0, 0.0),
    "rotation": (math.pi / 2, 0.0, 0.0),
}

DEFAULT_STARFIELD = {
    "count": STAR_COUNT,
    "extent": STAR_EXTENT,
    "color": (1.0, 1.0, 1.0),
    "point_size": 1.0,
}

DEFAULT_SIMULATION = {
    "angular_speed_factor": ANGULAR_SPEED_FACTOR,
    "speed_constant_k": SPEED_CONSTANT_K,
    "speed_min": SPEED_MIN,
    "speed_max": SPEED_MAX,
}


class SceneAssembler:
    """
    Builds the body hierarchy, speed table and starfield exactly once.

    Everything is validated before the first mesh is requested from the
    renderer, so a configuration error never leaves a half-built scene.
    """

    def __init__(self, renderer, bodies: Sequence[Dict],
                 ring: Optional[Dict] = None,
                 starfield: Optional[Dict] = None,
                 simulation: Optional[Dict] = None):
        self.renderer = renderer
        self.body_table = bodies
        self.ring = {**DEFAULT_RING, **(ring or {})}
        self.starfield = {**DEFAULT_STARFIELD, **(starfield or {})}
        self.simulation = {**DEFAULT_SIMULATION, **(simulation or {})}
        self._assembled = False

    def _validate_ring(self, specs: Sequence[BodySpec]):
        ring = self.ring
        if ring["parent"] not in {spec.id for spec in specs}:
            raise ConfigurationError(f"Ring parent '{ring['parent']}' is not a body")
        if not 0 < ring["inner_radius"] < ring["outer_radius"]:
            raise ConfigurationError(
                f"Ring radii must satisfy 0 < inner < outer, got "
                f"{ring['inner_radius']}, {ring['outer_radius']}"
            )

    def assemble(self, seed: Optional[int] = None) -> SimulationContext:
        """
        Build the scene and return its context.

        Raises:
            ConfigurationError: invalid body table, ring or speed defaults
            RuntimeError: called a second time
        """
        if self._assembled:
            raise RuntimeError("Scene already assembled")

        specs = parse_bodies(self.body_table)
        self._validate_ring(specs)
        speeds = SpeedState(
            specs,
            k=self.simulation["speed_constant_k"],
            low=self.simulation["speed_min"],
            high=self.simulation["speed_max"],
        )

        graph = SceneGraph()
        bodies = []
        for spec in specs:
            mesh = self.renderer.create_mesh(
                SphereGeometry(spec.radius, spec.segments),
                Material(color=spec.color, texture=spec.texture, unlit=not spec.orbits),
            )
            initial = Transform((spec.orbital_radius, 0.0, 0.0))
            self.renderer.set_transform(mesh, initial.position, initial.rotation)
            node = graph.add(spec.id, mesh, local=initial)
            bodies.append(CelestialBody(spec, mesh, node))

        attachments = {self.ring["name"]: self._attach_ring(graph, bodies)}

        stars = generate_starfield(
            self.starfield["count"], self.starfield["extent"], seed,
            self.starfield["color"], self.starfield["point_size"],
        )
        star_mesh = self.renderer.create_mesh(
            PointsGeometry(stars.positions),
            Material(color=stars.color, unlit=True, point_size=stars.point_size),
        )

        context = SimulationContext(
            bodies, graph, speeds, stars, self.renderer,
            attachments=attachments,
            starfield_mesh=star_mesh,
            angular_speed_factor=self.simulation["angular_speed_factor"],
        )
        self._assembled = True
        logger.info("Scene assembled: %d bodies, %d attachments, %d stars",
                    len(bodies), len(attachments), stars.count)
        return context

    def _attach_ring(self, graph: SceneGraph, bodies) -> int:
        ring = self.ring
        parent = next(body for body in bodies if body.id == ring["parent"])
        mesh = self.renderer.create_mesh(
            RingGeometry(ring["inner_radius"], ring["outer_radius"], ring["segments"]),
            Material(color=ring["color"], opacity=ring["opacity"], double_sided=True),
        )
        local = Transform(ring["offset"], ring["rotation"])
        self.renderer.attach_child(parent.mesh, mesh, local)
        return graph.add(ring["name"], mesh, parent=parent.node, local=local)
