"""Input handling: camera navigation plus speed and pause controls."""

import logging
import pygame
from pygame.locals import *
from config import solar as config

from orrery import SimulationContext
from .camera import Camera

logger = logging.getLogger(__name__)

PLANET_KEYS = (K_1, K_2, K_3, K_4, K_5, K_6, K_7, K_8)


class InputHandler:
    """
    Turns pygame events into camera moves and simulation events.

    Speed and pause changes are never applied directly: they are posted to
    the context's event queue and take effect at the next frame boundary.
    """

    def __init__(self, camera: Camera, context: SimulationContext):
        self.camera = camera
        self.context = context
        self.planets = context.orbiting_ids
        self.selected = 0
        self.show_help = True
        self.mouse_dragging = False
        self.last_mouse_pos = (0, 0)

    @property
    def selected_planet(self) -> str:
        return self.planets[self.selected]

    def _nudge_speed(self, direction: int):
        planet = self.selected_planet
        # Resolved at drain time so repeated presses in one frame add up
        self.context.events.post_step(planet, direction * config.SIMULATION["speed_step"])

    def _handle_key(self, key) -> bool:
        if key == K_ESCAPE:
            return False
        if key == K_SPACE:
            self.context.events.post_pause_toggle()
        elif key in PLANET_KEYS[:len(self.planets)]:
            self.selected = PLANET_KEYS.index(key)
            logger.debug("Selected %s", self.selected_planet)
        elif key in (K_UP, K_EQUALS, K_PLUS, K_KP_PLUS):
            self._nudge_speed(+1)
        elif key in (K_DOWN, K_MINUS, K_KP_MINUS):
            self._nudge_speed(-1)
        elif key == K_r:
            self.context.events.post_reset(self.selected_planet)
        elif key == K_h:
            self.show_help = not self.show_help
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            return self._handle_key(event.key)
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 1:
                self.mouse_dragging = True
                self.last_mouse_pos = pygame.mouse.get_pos()
        elif event.type == MOUSEBUTTONUP:
            if event.button == 1:
                self.mouse_dragging = False
        elif event.type == MOUSEWHEEL:
            self.camera.zoom_smooth(-event.y * config.CAMERA["keyboard_zoom_speed"] * 0.5)
        elif event.type == VIDEORESIZE:
            self.camera.resize(event.w, event.h)

        return True

    def handle_continuous_input(self, dt: float):
        """Handle continuous keyboard input (called each frame)."""
        keys = pygame.key.get_pressed()
        rot_speed = config.CAMERA["keyboard_rotate_speed"] * dt
        zoom_speed = config.CAMERA["keyboard_zoom_speed"] * dt

        # Keyboard rotation
        if keys[K_a]:
            self.camera.rotate(-rot_speed, 0)
        if keys[K_d]:
            self.camera.rotate(rot_speed, 0)
        if keys[K_w]:
            self.camera.rotate(0, rot_speed)
        if keys[K_s]:
            self.camera.rotate(0, -rot_speed)

        # Keyboard zoom
        if keys[K_q]:
            self.camera.zoom(-zoom_speed)
        if keys[K_e]:
            self.camera.zoom(zoom_speed)

        # Mouse drag rotation
        if self.mouse_dragging:
            current_pos = pygame.mouse.get_pos()
            dx = current_pos[0] - self.last_mouse_pos[0]
            dy = current_pos[1] - self.last_mouse_pos[1]
            self.camera.rotate(
                dx * config.CAMERA["mouse_sensitivity"],
                -dy * config.CAMERA["mouse_sensitivity"]
            )
            self.last_mouse_pos = current_pos
