#!/usr/bin/env python3
"""Sliding Tiles.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich -s 3       # Rich terminal, 3×3
    python main.py -f pygame          # Pygame GUI (has its own menu)
    python main.py --seed 7 -f vanilla --log-level DEBUG --log-file tiles.log
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

MIN_SIZE = 2
MAX_SIZE = 8
DEFAULT_SIZE = 4
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}

_GUI = {Frontend.pygame}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str, log_file: Optional[Path]) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        filename=str(log_file) if log_file else None,
    )


def _launch(frontend: Frontend, size: int, rng: random.Random | None) -> None:
    logger.info("Launching %s frontend (%d×%d)", frontend.value, size, size)
    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend in _GUI:
        mod.run(size=size, rng=rng)
    else:
        mod.run(size=size, rng=rng, min_size=MIN_SIZE, max_size=MAX_SIZE)


def _ask_size(default: int) -> int:
    raw = input(f"  Board size ({MIN_SIZE}-{MAX_SIZE}, default {default}): ").strip()
    try:
        size = int(raw or default)
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError
    except ValueError:
        print(f"  Invalid size — using {default}.")
        size = default
    return size


def _menu_loop(size: int, rng: random.Random | None) -> None:
    while True:
        print()
        print("  ====================================")
        print("         S L I D I N G   T I L E S    ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            frontend = Frontend.vanilla if choice == "1" else Frontend.rich
            _launch(frontend, _ask_size(size), rng)
        elif choice == "3":
            _launch(Frontend.pygame, size, rng)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="SLIDING_TILES_SIZE",
        help=f"Board size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="SLIDING_TILES_SEED",
        help="Seed for the shuffle, for reproducible boards.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar="SLIDING_TILES_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        dir_okay=False,
        help="Write logs to this file instead of stderr.",
    ),
) -> None:
    """Sliding Tiles."""
    _configure_logging(log_level, log_file)
    rng = random.Random(seed) if seed is not None else None

    if frontend is None:
        _menu_loop(size, rng)
        return

    _launch(frontend, size, rng)


if __name__ == "__main__":
    app()
