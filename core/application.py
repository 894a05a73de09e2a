"""Main application class that ties everything together."""

import logging
import os

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import solar as config
from orrery import SceneAssembler
from .camera import Camera
from .input_handler import InputHandler
from rendering import GLSceneRenderer, TextRenderer, TextureLoader

logger = logging.getLogger(__name__)

HELP_LINES = [
    "1-8: Select planet | UP/DOWN: Speed | R: Reset speed",
    "SPACE: Pause | WASD/drag: Rotate | QE/wheel: Zoom | H: Help | ESC: Quit",
]


class Application:
    """Main application managing the window, frame loop and HUD."""

    def __init__(self, seed=None):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL | RESIZABLE
        )
        pygame.display.set_caption(config.WINDOW["title"])
        self.screen_size = (config.WINDOW["width"], config.WINDOW["height"])

        # Renderer must exist (GL context live) before the scene is assembled
        texture_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)),
                                   config.ASSETS["texture_dir"])
        self.renderer = GLSceneRenderer(TextureLoader(texture_dir))

        # Simulation
        logger.info("Assembling scene...")
        self.context = SceneAssembler(
            self.renderer,
            config.BODIES,
            ring=config.RING,
            starfield=config.STARFIELD,
            simulation=config.SIMULATION,
        ).assemble(seed=seed)
        self.context.bind()

        # Core components
        self.camera = Camera()
        self.input_handler = InputHandler(self.camera, self.context)
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

        self._setup_gl()
        logger.info("Ready!")

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        glDepthFunc(GL_LEQUAL)
        glEnable(GL_CULL_FACE)
        glShadeModel(GL_SMOOTH)
        self.renderer.setup_lighting()
        self.camera.apply_projection()

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == VIDEORESIZE:
                self.screen_size = (event.w, event.h)
                glViewport(0, 0, event.w, event.h)
            if not self.input_handler.handle_event(event):
                self.running = False

    def _update(self, dt: float):
        """Update camera and drive one simulation frame."""
        self.input_handler.handle_continuous_input(min(dt, 0.05))
        self.camera.update(dt)
        self.renderer.dispatch_frame(dt)

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply()
        self.renderer.draw()

        # Draw HUD
        status = "PAUSED" if self.context.paused else "RUNNING"
        y = self.text_renderer.draw_lines(
            [f"t = {self.context.elapsed_seconds:8.1f}s  |  FPS: {self.fps:.0f}  |  {status}"],
            10, 10, self.screen_size
        )
        y = self.text_renderer.draw_speed_panel(
            self.context.speeds,
            self.input_handler.planets,
            self.input_handler.selected_planet,
            10, y + 4, self.screen_size
        )
        if self.input_handler.show_help:
            self.text_renderer.draw_lines(HELP_LINES, 10, y + 4, self.screen_size)

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        logger.info("Starting main loop...")

        try:
            while self.running:
                dt = self.clock.tick(120) / 1000.0
                self.fps = self.clock.get_fps()

                self._handle_events()
                self._update(dt)
                self._render()
        finally:
            pygame.quit()
            logger.info("Shutdown complete after %d frames", self.context.frame_count)
