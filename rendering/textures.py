"""Texture loading for planet surfaces."""

import logging
import os
import pygame
from OpenGL.GL import *

logger = logging.getLogger(__name__)


class TextureLoader:
    """
    Loads images into OpenGL textures, caching by file name.

    A missing or unreadable image yields None; callers then draw the
    material's flat colour as a placeholder.
    """

    def __init__(self, directory: str):
        self.directory = directory
        self._cache = {}

    def load(self, name):
        if not name:
            return None
        if name in self._cache:
            return self._cache[name]

        path = os.path.join(self.directory, name)
        texture_id = None
        if os.path.exists(path):
            try:
                texture_id = self._upload(pygame.image.load(path))
            except pygame.error as e:
                logger.warning("Could not load texture %s: %s", path, e)
        else:
            logger.info("Texture %s not found, using placeholder colour", path)

        self._cache[name] = texture_id
        return texture_id

    def _upload(self, surface: pygame.Surface) -> int:
        data = pygame.image.tostring(surface, "RGBA", True)
        w, h = surface.get_size()

        texture_id = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, texture_id)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_REPEAT)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glBindTexture(GL_TEXTURE_2D, 0)
        return texture_id
