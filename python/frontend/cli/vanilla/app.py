"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
A cursor stands in for the mouse pointer: the tiles a click would slide
are highlighted, and Enter/Space clicks the cell under the cursor.
"""

from __future__ import annotations

import random
import sys

from backend.engine.gameplay import PuzzleEngine, create_engine
from backend.engine.gamestate import GameClock
from backend.models.grid import EMPTY
from frontend.cli.input_handler import get_key, get_key_timeout

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_INV = "\033[7m"     # inverse (cursor)
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected size)

_CURSOR_STEP = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _move_cursor(cursor: tuple[int, int], key: str, size: int) -> tuple[int, int]:
    dx, dy = _CURSOR_STEP[key]
    x, y = cursor
    return (min(size - 1, max(0, x + dx)), min(size - 1, max(0, y + dy)))


# -- board rendering ----------------------------------------------------------


def _render_board(engine: PuzzleEngine, cursor: tuple[int, int] | None) -> str:
    """Return an ANSI-coloured text representation of the board."""
    grid = engine.grid
    width = len(str(grid.size * grid.size - 1))
    cell_w = width + 2
    sep = "+" + (("-" * cell_w + "+") * grid.size)
    chain = set(engine.movable_cells(*cursor)) if cursor else set()

    lines: list[str] = [sep]
    for y in range(grid.size):
        cells: list[str] = []
        for x in range(grid.size):
            val = grid.at(x, y)
            text = f" {'·' if val == EMPTY else val:>{width}} "
            if (x, y) == cursor:
                style = _INV
            elif (x, y) in chain:
                style = _Y
            elif val == EMPTY:
                style = _DIM
            elif grid.is_tile_correct(x, y):
                style = _G
            else:
                style = ""
            cells.append(f"{style}{text}{_R}" if style else text)
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_menu(sel_size: int, min_size: int, max_size: int) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}       S L I D I N G   T I L E S      {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()

    sizes_str = ""
    for s in range(min_size, max_size + 1):
        if s == sel_size:
            sizes_str += f"  {_BG_SEL} {s}×{s} {_R}"
        else:
            sizes_str += f"  {_DIM}{s}×{s}{_R}"
    print(f"    Size:{sizes_str}")
    print(f"    {_DIM}← → to change{_R}")
    print()
    print(f"    {_C}Enter{_R}  Play")
    print(f"    {_DIM}Q{_R}      Quit")
    print()


def _stats_line(engine: PuzzleEngine, clock: GameClock) -> str:
    return f"  Moves: {_Y}{engine.moves}{_R}  |  {_Y}{clock.formatted()}{_R}"


def _show_game(
    engine: PuzzleEngine,
    clock: GameClock,
    cursor: tuple[int, int],
    status: str = "",
) -> None:
    """Draw the full game screen.

    The stats line is printed last, with no trailing newline, so
    ``_update_time`` can overwrite it in place using ``\\r\\033[K``.
    """
    _clear()
    size = engine.size
    print(f"  {_C}=== Sliding Tiles ({size}×{size}) ==={_R}")
    print()
    print(_render_board(engine, cursor))
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: cursor  |  "
        f"{_C}Enter{_R}/{_C}Space{_R}: slide  |  "
        f"{_C}X{_R}: shuffle  |  "
        f"{_C}R{_R}: reset  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"  {status}")
    sys.stdout.write(f"\n{_stats_line(engine, clock)}")
    sys.stdout.flush()


def _update_time(engine: PuzzleEngine, clock: GameClock) -> None:
    sys.stdout.write(f"\r\033[K{_stats_line(engine, clock)}")
    sys.stdout.flush()


def _show_win(engine: PuzzleEngine, clock: GameClock) -> None:
    _clear()
    size = engine.size
    print(f"  {_G}=== Sliding Tiles ({size}×{size}) ==={_R}")
    print()
    print(_render_board(engine, None))
    print()
    print(f"  {_G}★ Congratulations! You've solved the puzzle! ★{_R}")
    print()
    print(f"  Moves: {_Y}{engine.moves}{_R}  |  {_Y}{clock.formatted()}{_R}")
    print(f"\n  Press {_C}X{_R} to shuffle and play again, {_C}Q{_R} to go back.")


# -- game loop ----------------------------------------------------------------


def _play_game(size: int, rng: random.Random | None) -> None:
    engine = create_engine(size, rng)
    clock = GameClock()
    engine.on_solved(clock.stop)
    cursor = (size - 1, size - 1)
    status = f"{_DIM}Press X to shuffle.{_R}"

    while True:
        if engine.is_won:
            _show_win(engine, clock)
            key = get_key()
        else:
            _show_game(engine, clock, cursor, status)
            status = ""
            while True:
                key = get_key_timeout(0.5)
                if key is not None:
                    break
                if clock.running:
                    _update_time(engine, clock)

        if key in _CURSOR_STEP and not engine.is_won:
            cursor = _move_cursor(cursor, key, size)
        elif key == "click" and not engine.is_won:
            if not engine.click_cell(*cursor):
                status = f"{_DIM}That tile can't slide.{_R}"
        elif key == "shuffle":
            engine.shuffle()
            clock.start()
            status = f"{_Y}Shuffled!{_R}"
        elif key == "reset":
            engine.reset()
            clock.reset()
            status = f"{_DIM}Board reset. Press X to shuffle.{_R}"
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(size: int, rng: random.Random | None, min_size: int, max_size: int) -> None:
    sel_size = size

    while True:
        _show_menu(sel_size, min_size, max_size)
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key == "left":
            sel_size = max(min_size, sel_size - 1)
        elif key == "right":
            sel_size = min(max_size, sel_size + 1)
        elif key == "click":
            _play_game(sel_size, rng)


# -- public entry point -------------------------------------------------------


def run(
    size: int = 4,
    rng: random.Random | None = None,
    min_size: int = 2,
    max_size: int = 8,
) -> None:
    """Launch the vanilla CLI with its size-selection menu."""
    _menu_loop(size, rng, min_size, max_size)
