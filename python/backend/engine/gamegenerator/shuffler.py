"""Scrambles a grid by replaying random legal moves from its current state."""

from __future__ import annotations

import logging
import random
from typing import Callable

from backend.engine.moveresolver import MoveResolver
from backend.models.grid import Grid

logger = logging.getLogger(__name__)

SHUFFLE_MOVES = 1000


class Shuffler:
    """Random walk of the empty cell over its orthogonal neighbours.

    Every step is an ordinary legal move, so the scrambled grid is always
    reachable from (and therefore solvable back to) the solved layout.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def scramble(
        self,
        current_grid: Callable[[], Grid],
        apply: Callable[[int, int], None],
        moves: int = SHUFFLE_MOVES,
    ) -> None:
        """Pick and *apply* ``moves`` random neighbours of the empty cell.

        *current_grid* returns the grid that *apply* mutates; it is read
        again before every step.  *apply* receives the chosen cell and must
        route it through the same mutation path a user click takes.
        """
        for _ in range(moves):
            x, y = self.rng.choice(self.neighbors(current_grid()))
            apply(x, y)
        size = current_grid().size
        logger.debug("Scrambled %d×%d grid with %d moves", size, size, moves)

    @staticmethod
    def neighbors(grid: Grid) -> list[tuple[int, int]]:
        """Return the 2–4 cells directly adjacent to the empty cell."""
        ex, ey = grid.empty_coords()
        neighbors: list[tuple[int, int]] = []
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            nx, ny = ex + dx, ey + dy
            if grid.contains(nx, ny) and MoveResolver.can_move(nx, ny, ex, ey):
                neighbors.append((nx, ny))
        return neighbors
