"""Grid model tests."""

from __future__ import annotations

import pytest

from backend.models.grid import EMPTY, Grid


# -- construction -------------------------------------------------------------


def test_solved_layout_4x4() -> None:
    grid = Grid.solved(4)
    assert grid.rows() == [
        (1, 2, 3, 4),
        (5, 6, 7, 8),
        (9, 10, 11, 12),
        (13, 14, 15, EMPTY),
    ]
    assert grid.empty_coords() == (3, 3)
    assert grid.is_solved()


@pytest.mark.parametrize("size", [2, 3, 5, 8])
def test_canonical_positions(size: int) -> None:
    grid = Grid.solved(size)
    for k in range(1, size * size):
        assert grid.at((k - 1) % size, (k - 1) // size) == k


@pytest.mark.parametrize("size", [1, 0, -3])
def test_too_small_rejected(size: int) -> None:
    with pytest.raises(ValueError, match="at least 2"):
        Grid.solved(size)


def test_from_flat_finds_empty_cell() -> None:
    grid = Grid.from_flat(3, [1, 2, 3, 4, 0, 5, 7, 8, 6])
    assert grid.empty_coords() == (1, 1)
    assert grid.empty_x == 1 and grid.empty_y == 1
    assert grid.at(2, 1) == 5
    assert not grid.is_solved()


def test_from_flat_wrong_length() -> None:
    with pytest.raises(ValueError, match="Expected 4 tiles"):
        Grid.from_flat(2, [1, 2, 0])


@pytest.mark.parametrize(
    "flat",
    [
        [1, 1, 2, 0],  # duplicate
        [1, 2, 3, 4],  # no empty cell
        [0, 0, 1, 2],  # two empty cells
    ],
)
def test_from_flat_rejects_non_permutation(flat: list[int]) -> None:
    with pytest.raises(ValueError, match="permutation"):
        Grid.from_flat(2, flat)


# -- queries ------------------------------------------------------------------


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_at_out_of_bounds(x: int, y: int) -> None:
    with pytest.raises(IndexError):
        Grid.solved(4).at(x, y)


def test_is_tile_correct() -> None:
    grid = Grid.from_flat(2, [1, 2, 0, 3])
    assert grid.is_tile_correct(0, 0)
    assert grid.is_tile_correct(1, 0)
    assert not grid.is_tile_correct(0, 1)  # empty cell off its corner
    assert not grid.is_tile_correct(1, 1)  # tile 3 belongs at (0, 1)


def test_copy_is_independent() -> None:
    grid = Grid.solved(3)
    clone = grid.copy()
    clone.apply_shift(2, 1, 2, 2)
    assert grid.is_solved()
    assert grid.empty_coords() == (2, 2)
    assert clone.empty_coords() == (2, 1)


# -- apply_shift --------------------------------------------------------------


def test_apply_shift_moves_tile_and_empty() -> None:
    grid = Grid.solved(2)
    grid.apply_shift(0, 1, 1, 1)
    assert grid.at(1, 1) == 3
    assert grid.at(0, 1) == EMPTY
    assert grid.empty_coords() == (0, 1)


def test_apply_shift_target_must_be_empty() -> None:
    grid = Grid.solved(3)
    with pytest.raises(ValueError, match="not the empty cell"):
        grid.apply_shift(0, 0, 1, 0)
    assert grid.is_solved()


@pytest.mark.parametrize("from_x, from_y", [(2, 0), (1, 1), (0, 2)])
def test_apply_shift_must_be_single_step(from_x: int, from_y: int) -> None:
    grid = Grid.solved(3)
    with pytest.raises(ValueError, match="single step"):
        grid.apply_shift(from_x, from_y, 2, 2)
    assert grid.is_solved()


def test_apply_shift_out_of_bounds() -> None:
    grid = Grid.solved(3)
    with pytest.raises(IndexError):
        grid.apply_shift(3, 2, 2, 2)
