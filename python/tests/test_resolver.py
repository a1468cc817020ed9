"""MoveResolver tests — legality and slide chains."""

from __future__ import annotations

import pytest

from backend.engine.moveresolver import MoveResolver
from backend.models.grid import EMPTY, Grid
from backend.models.shift import Shift


def _apply(grid: Grid, chain: list[Shift]) -> None:
    for s in chain:
        grid.apply_shift(s.from_x, s.from_y, s.to_x, s.to_y)


# -- can_move -----------------------------------------------------------------


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (3, 0, True),   # same column
        (3, 2, True),
        (0, 3, True),   # same row
        (2, 3, True),
        (3, 3, False),  # the empty cell itself
        (1, 1, False),  # neither row nor column
        (2, 2, False),  # diagonal neighbour
    ],
)
def test_can_move(x: int, y: int, expected: bool) -> None:
    assert MoveResolver.can_move(x, y, 3, 3) is expected


# -- resolve_chain ------------------------------------------------------------


def test_column_chain_three_away() -> None:
    grid = Grid.solved(4)
    chain = MoveResolver.resolve_chain(3, 0, 3, 3)

    assert chain == [
        Shift(3, 2, 3, 3),
        Shift(3, 1, 3, 2),
        Shift(3, 0, 3, 1),
    ]
    assert all((s.dx, s.dy) == (0, 1) for s in chain)

    _apply(grid, chain)
    assert grid.empty_coords() == (3, 0)
    assert [grid.at(3, y) for y in range(4)] == [EMPTY, 4, 8, 12]


def test_row_chain_toward_right() -> None:
    grid = Grid.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 7, 8])
    chain = MoveResolver.resolve_chain(2, 0, 0, 0)

    assert chain == [Shift(1, 0, 0, 0), Shift(2, 0, 1, 0)]
    assert all((s.dx, s.dy) == (-1, 0) for s in chain)

    _apply(grid, chain)
    assert grid.rows()[0] == (1, 2, EMPTY)


def test_single_step_chain() -> None:
    assert MoveResolver.resolve_chain(1, 1, 1, 0) == [Shift(1, 1, 1, 0)]


@pytest.mark.parametrize(
    "x, y, ex, ey",
    [(0, 0, 3, 3), (3, 3, 3, 3), (2, 1, 0, 1), (1, 4, 1, 0)],
)
def test_chain_length_is_distance(x: int, y: int, ex: int, ey: int) -> None:
    if not MoveResolver.can_move(x, y, ex, ey):
        with pytest.raises(ValueError):
            MoveResolver.resolve_chain(x, y, ex, ey)
        return
    chain = MoveResolver.resolve_chain(x, y, ex, ey)
    assert len(chain) == abs(x - ex) + abs(y - ey)
    assert chain[0].target == (ex, ey)
    assert chain[-1].source == (x, y)


def test_illegal_chain_rejected() -> None:
    with pytest.raises(ValueError, match="not in line"):
        MoveResolver.resolve_chain(1, 1, 3, 3)


# -- chain_cells --------------------------------------------------------------


def test_chain_cells_lists_sliding_tiles() -> None:
    assert MoveResolver.chain_cells(0, 2, 3, 2) == [(2, 2), (1, 2), (0, 2)]


def test_chain_cells_empty_when_illegal() -> None:
    assert MoveResolver.chain_cells(3, 3, 3, 3) == []
    assert MoveResolver.chain_cells(0, 0, 3, 3) == []
