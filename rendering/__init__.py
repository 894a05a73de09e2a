"""Rendering components for the solar system orrery."""

from .scene import GLSceneRenderer
from .text import TextRenderer
from .textures import TextureLoader

__all__ = ["GLSceneRenderer", "TextRenderer", "TextureLoader"]
