"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and engine as the vanilla CLI.
"""

from __future__ import annotations

import random
import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import PuzzleEngine, create_engine
from backend.engine.gamestate import GameClock
from backend.models.grid import EMPTY
from backend.models.shift import Shift
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_CURSOR_STEP = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


# -- board rendering ----------------------------------------------------------


def _render_board(engine: PuzzleEngine, cursor: tuple[int, int] | None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    grid = engine.grid
    width = len(str(grid.size * grid.size - 1))
    chain = set(engine.movable_cells(*cursor)) if cursor else set()
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for y in range(grid.size):
        cells: list[str] = []
        for x in range(grid.size):
            val = grid.at(x, y)
            label = "·" if val == EMPTY else f"{val:>{width}}"
            if (x, y) == cursor:
                style = "reverse bold"
            elif (x, y) in chain:
                style = "bold yellow"
            elif val == EMPTY:
                style = "dim"
            elif grid.is_tile_correct(x, y):
                style = "bold green"
            else:
                style = "bold white"
            cells.append(f"[{style}]{label}[/{style}]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int, min_size: int, max_size: int) -> None:
    console.clear()

    sizes = Text()
    for s in range(min_size, max_size + 1):
        if s > min_size:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]S L I D I N G   T I L E S[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _stats(engine: PuzzleEngine, clock: GameClock) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(engine.moves), style="bold yellow")
    stats.append("    ")
    stats.append(clock.formatted(), style="bold yellow")
    return stats


def _draw_game(
    engine: PuzzleEngine,
    clock: GameClock,
    cursor: tuple[int, int],
    status: str = "",
) -> None:
    console.clear()
    size = engine.size

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("X", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_board(engine, cursor)),
        title=f"[bold cyan]Sliding Tiles  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    # Save the cursor position so _update_time() can repaint only the stats.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(engine, clock)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(engine: PuzzleEngine, clock: GameClock) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    sys.stdout.write("\033[u\033[K")
    sys.stdout.flush()
    console.print(Align.center(_stats(engine, clock)), end="")
    sys.stdout.flush()


def _draw_win(engine: PuzzleEngine, clock: GameClock) -> None:
    console.clear()
    size = engine.size

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("Congratulations!", style="bold green")
    congrats.append("  You've solved the puzzle!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(_render_board(engine, None)),
        Align.center(congrats),
        Align.center(_stats(engine, clock)),
    )
    panel = Panel(
        group,
        title=f"[bold green]Sliding Tiles  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(
            Text("\n  Press X to shuffle and play again, Q to go back.\n", style="dim")
        )
    )


# -- game loop ----------------------------------------------------------------


def _play_game(size: int, rng: random.Random | None) -> None:
    engine = create_engine(size, rng)
    clock = GameClock()
    engine.on_solved(clock.stop)

    slid: list[Shift] = []

    def _record(shift: Shift) -> None:
        if not engine.is_shuffling:
            slid.append(shift)

    engine.on_shift(_record)

    cursor = (size - 1, size - 1)
    status = "[dim]Press X to shuffle.[/dim]"

    while True:
        if engine.is_won:
            _draw_win(engine, clock)
            key = get_key()
        else:
            _draw_game(engine, clock, cursor, status)
            status = ""
            while True:
                key = get_key_timeout(0.5)
                if key is not None:
                    break
                if clock.running:
                    _update_time(engine, clock)

        if key in _CURSOR_STEP and not engine.is_won:
            dx, dy = _CURSOR_STEP[key]
            cursor = (
                min(size - 1, max(0, cursor[0] + dx)),
                min(size - 1, max(0, cursor[1] + dy)),
            )
        elif key == "click" and not engine.is_won:
            slid.clear()
            if engine.click_cell(*cursor):
                noun = "tile" if len(slid) == 1 else "tiles"
                status = f"[cyan]Slid {len(slid)} {noun}[/cyan]"
            else:
                status = "[dim]That tile can't slide.[/dim]"
        elif key == "shuffle":
            engine.shuffle()
            clock.start()
            status = "[yellow]Shuffled![/yellow]"
        elif key == "reset":
            engine.reset()
            clock.reset()
            status = "[dim]Board reset. Press X to shuffle.[/dim]"
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(size: int, rng: random.Random | None, min_size: int, max_size: int) -> None:
    sel_size = size

    while True:
        _draw_menu(sel_size, min_size, max_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
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
    """Launch the Rich CLI with its size-selection menu."""
    _menu_loop(size, rng, min_size, max_size)
