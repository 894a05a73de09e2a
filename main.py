"""
Solar System Orrery
===================

Interactive 3D solar system with adjustable orbital speeds.

Controls:
    - 1-8: Select planet (Mercury..Neptune)
    - UP/DOWN or +/-: Change selected planet's speed
    - R: Reset selected planet's speed to default
    - SPACE: Pause/Resume
    - W/S, A/D or mouse drag: Rotate camera
    - Q/E or mouse wheel: Zoom
    - H: Toggle help text
    - ESC: Quit

Usage:
    python main.py                           # Open the window
    python main.py --headless --frames 600   # Run without a display
"""

import argparse
import logging

from config import solar as config
from orrery import ConfigurationError, RecordingRenderer, SceneAssembler
from orrery.logging_config import setup_logging

logger = logging.getLogger("orrery.main")


def run_headless(frames: int, dt: float, seed=None):
    """Drive the simulation against the in-memory renderer and log the result."""
    renderer = RecordingRenderer()
    context = SceneAssembler(
        renderer,
        config.BODIES,
        ring=config.RING,
        starfield=config.STARFIELD,
        simulation=config.SIMULATION,
    ).assemble(seed=seed)
    context.bind()

    renderer.run_frames(frames, dt)

    logger.info("Ran %d frames, t = %.2fs", renderer.frames, context.elapsed_seconds)
    for body_id in context.bodies:
        x, y, z = context.world_position(body_id)
        logger.info("  %-8s (%8.3f, %8.3f, %8.3f)", body_id, x, y, z)
    return context


def main():
    parser = argparse.ArgumentParser(description="Interactive solar system orrery")
    parser.add_argument("--headless", action="store_true", help="Run without opening a window")
    parser.add_argument("--frames", "-f", type=int, default=600, help="Frames to run in headless mode")
    parser.add_argument("--dt", type=float, default=1 / 60, help="Frame delta in headless mode (seconds)")
    parser.add_argument("--seed", type=int, help="Starfield RNG seed")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-file", help="Also write logs to this file")
    args = parser.parse_args()

    setup_logging(level=getattr(logging, args.log_level.upper(), logging.INFO),
                  log_file=args.log_file)

    try:
        if args.headless:
            run_headless(args.frames, args.dt, seed=args.seed)
        else:
            # Import here so headless runs do not need a display
            from core import Application
            Application(seed=args.seed).run()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
