"""
Application entry point: CLI parsing, dependency checks, pygame launch.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import WINDOW_HEIGHT, WINDOW_WIDTH, GameSettings


def _check_deps() -> list:
    missing = []
    try:
        import numpy  # noqa: F401
    except ImportError:
        missing.append("numpy")
    try:
        import pygame  # noqa: F401
    except ImportError:
        missing.append("pygame")
    return missing


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rising-drops",
        description="Rising Drops: click, merge and split floating drops before time runs out.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  %(prog)s                       # classic two-minute game\n"
            "  %(prog)s --duration 60 --speed 1.5\n"
            "  %(prog)s --seed 7              # reproducible spawns\n"
            "  %(prog)s -v                    # verbose logging\n"
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--duration", type=int, default=120, help="Game length in seconds (default 120)")
    p.add_argument("--speed", type=float, default=1.0, help="Initial speed multiplier (0.5-3.0, default 1.0)")
    p.add_argument("--max-radius", type=float, default=75.0, help="Largest radius a drop can grow to")
    p.add_argument("--seed", type=int, default=None, help="Random seed for drop spawning")
    p.add_argument("--width", type=int, default=WINDOW_WIDTH, help="Initial window width")
    p.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="Initial window height")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def parse_settings(argv: Optional[Sequence[str]] = None) -> tuple[argparse.Namespace, GameSettings]:
    """Parse the command line into raw arguments and validated settings."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.width < 100 or args.height < 100:
        parser.error("--width and --height must be at least 100")
    try:
        settings = GameSettings(
            duration=args.duration,
            max_radius=args.max_radius,
            speed=args.speed,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return args, settings


def main(argv: Optional[Sequence[str]] = None) -> None:
    args, settings = parse_settings(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger = logging.getLogger("rising_drops")

    missing = _check_deps()
    if missing:
        print(f"ERROR: Missing packages: {', '.join(missing)}\n"
              f"Install: pip install {' '.join(missing)}", file=sys.stderr)
        sys.exit(1)

    logger.info("Starting Rising Drops v%s", __version__)
    logger.info("Duration: %ds, Speed: %.1fx, Seed: %s", settings.duration, settings.speed, settings.seed)

    from .game import Game

    Game(settings, size=(args.width, args.height)).run()


if __name__ == "__main__":
    main()
