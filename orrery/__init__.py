"""Solar system orrery simulation core (no rendering dependencies)."""

from .assembler import SceneAssembler
from .bodies import BodySpec, CelestialBody, parse_bodies
from .clock import SimulationClock
from .context import SimulationContext
from .errors import (
    BodyNotFound,
    ConfigurationError,
    InputOutOfRange,
    OrreryError,
    StateDesyncError,
)
from .events import EventQueue, PauseToggle, SpeedChange, SpeedReset, SpeedStep
from .renderer import Material, RecordingRenderer, Renderer
from .scene_graph import SceneGraph
from .speed import SpeedState, clamp_speed, default_speed
from .starfield import Starfield, generate_starfield
from .transforms import Transform
from .updater import ANGULAR_SPEED_FACTOR, compute_transforms, orbital_transform

__all__ = [
    "SceneAssembler", "BodySpec", "CelestialBody", "parse_bodies",
    "SimulationClock", "SimulationContext",
    "BodyNotFound", "ConfigurationError", "InputOutOfRange", "OrreryError",
    "StateDesyncError",
    "EventQueue", "PauseToggle", "SpeedChange", "SpeedReset", "SpeedStep",
    "Material", "RecordingRenderer", "Renderer",
    "SceneGraph", "SpeedState", "clamp_speed", "default_speed",
    "Starfield", "generate_starfield", "Transform",
    "ANGULAR_SPEED_FACTOR", "compute_transforms", "orbital_transform",
]
