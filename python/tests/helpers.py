"""Test helpers shared across the engine test modules."""

from __future__ import annotations

import random

from backend.models.grid import EMPTY, Grid


class FirstChoice(random.Random):
    """A ``random.Random`` whose ``choice`` always returns the first option."""

    def choice(self, seq):  # type: ignore[override]
        return seq[0]


def is_reachable_from_solved(grid: Grid) -> bool:
    """Parity test for sliding puzzles.

    Every move swaps the empty cell with one tile, flipping both the
    permutation parity and the parity of the empty cell's distance from
    the bottom-right corner, so the two always agree on reachable grids.
    """
    n = grid.size
    flat = [n * n if v == EMPTY else v for v in grid.snapshot()]
    inversions = sum(
        1
        for i in range(len(flat))
        for j in range(i + 1, len(flat))
        if flat[i] > flat[j]
    )
    ex, ey = grid.empty_coords()
    distance = (n - 1 - ex) + (n - 1 - ey)
    return inversions % 2 == distance % 2


def assert_valid_grid(grid: Grid) -> None:
    n = grid.size
    assert sorted(grid.snapshot()) == list(range(n * n))
    ex, ey = grid.empty_coords()
    assert grid.at(ex, ey) == EMPTY
