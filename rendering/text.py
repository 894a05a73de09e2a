"""HUD overlay: status line, speed panel and key help."""

from typing import Sequence

import pygame
from OpenGL.GL import *

from config import solar as config


class TextRenderer:
    """Renders text overlays using pygame fonts and OpenGL."""

    def __init__(self, font_name: str = "monospace", font_size: int = 16):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.line_height = self.font.get_linesize() + 4
        self.color = tuple(int(c * 255) for c in config.COLORS["text"])

    def draw_text(self, text: str, x: int, y: int, screen_size: tuple, color=None):
        """
        Draw text at the given screen position.

        Args:
            text: The string to render
            x: X position from left edge
            y: Y position from top edge
            screen_size: (width, height) of the screen
        """
        text_surface = self.font.render(text, True, color or self.color)
        text_data = pygame.image.tostring(text_surface, "RGBA", True)
        w, h = text_surface.get_size()

        # Switch to orthographic projection for 2D rendering
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glPushAttrib(GL_ENABLE_BIT)
        glDisable(GL_LIGHTING)
        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glRasterPos2f(x, screen_size[1] - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, text_data)
        glPopAttrib()

        # Restore projection
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)

    def draw_lines(self, lines: Sequence[str], x: int, y: int, screen_size: tuple) -> int:
        """Draw lines top-down; returns the y below the last one."""
        for line in lines:
            self.draw_text(line, x, y, screen_size)
            y += self.line_height
        return y

    def draw_speed_panel(self, speeds, planets: Sequence[str], selected: str,
                         x: int, y: int, screen_size: tuple) -> int:
        """One row per planet: key, name, current speed; selected row marked."""
        for i, planet in enumerate(planets):
            marker = ">" if planet == selected else " "
            value = speeds.get_speed(planet)
            bar = "#" * int(value // 5)
            self.draw_text(
                f"{marker}{i + 1} {planet.capitalize():<8} {value:6.2f} {bar}",
                x, y, screen_size,
                color=(255, 220, 120) if planet == selected else None
            )
            y += self.line_height
        return y
