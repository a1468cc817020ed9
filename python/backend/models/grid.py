"""Grid model for the sliding tile puzzle."""

from __future__ import annotations

from dataclasses import dataclass

EMPTY = 0


@dataclass
class Grid:
    """The N×N tile arrangement plus the cached empty-cell coordinate.

    Tiles are stored row-major as ``tiles[y][x]``; ``EMPTY`` marks the
    single free cell.  Coordinates passed in and out are ``(x, y)``,
    i.e. (column, row), 0-indexed.
    """

    size: int
    tiles: list[list[int]]
    empty_pos: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Grid:
        """Return the canonical solved layout (empty cell bottom-right)."""
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        tiles: list[list[int]] = []
        num = 1
        for y in range(size):
            row: list[int] = []
            for x in range(size):
                if x == size - 1 and y == size - 1:
                    row.append(EMPTY)
                else:
                    row.append(num)
                    num += 1
            tiles.append(row)
        return cls(size=size, tiles=tiles, empty_pos=(size - 1, size - 1))

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Grid:
        """Create a grid from a flat row-major tile list.

        Example::

            Grid.from_flat(2, [1, 2, 0, 3])
        """
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 1..{size * size - 1} "
                f"plus one empty cell ({EMPTY})."
            )
        tiles: list[list[int]] = []
        empty_pos: tuple[int, int] = (0, 0)
        for y in range(size):
            row = list(flat[y * size : (y + 1) * size])
            for x, v in enumerate(row):
                if v == EMPTY:
                    empty_pos = (x, y)
            tiles.append(row)
        return cls(size=size, tiles=tiles, empty_pos=empty_pos)

    # -- queries --------------------------------------------------------------

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def at(self, x: int, y: int) -> int:
        """Return the tile id at ``(x, y)``, or ``EMPTY``."""
        self._check_bounds(x, y)
        return self.tiles[y][x]

    def empty_coords(self) -> tuple[int, int]:
        return self.empty_pos

    @property
    def empty_x(self) -> int:
        return self.empty_pos[0]

    @property
    def empty_y(self) -> int:
        return self.empty_pos[1]

    def is_solved(self) -> bool:
        """Check if every tile sits at its canonical position."""
        expected = 1
        for y in range(self.size):
            for x in range(self.size):
                if x == self.size - 1 and y == self.size - 1:
                    return self.tiles[y][x] == EMPTY
                if self.tiles[y][x] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, x: int, y: int) -> bool:
        """Check if the tile at ``(x, y)`` is in its goal position."""
        val = self.at(x, y)
        if val == EMPTY:
            return x == self.size - 1 and y == self.size - 1
        return x == (val - 1) % self.size and y == (val - 1) // self.size

    def rows(self) -> list[tuple[int, ...]]:
        return [tuple(row) for row in self.tiles]

    def snapshot(self) -> tuple[int, ...]:
        """Immutable row-major copy of the tiles, for equality checks."""
        return tuple(v for row in self.tiles for v in row)

    def copy(self) -> Grid:
        return Grid(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            empty_pos=self.empty_pos,
        )

    # -- mutation -------------------------------------------------------------

    def apply_shift(self, from_x: int, from_y: int, to_x: int, to_y: int) -> None:
        """Move the tile at ``(from_x, from_y)`` into the adjacent empty cell.

        The target must be the current empty cell and exactly one step
        away; anything else is a caller bug and raises ``ValueError``.
        """
        self._check_bounds(from_x, from_y)
        self._check_bounds(to_x, to_y)
        if (to_x, to_y) != self.empty_pos:
            raise ValueError(
                f"Shift target ({to_x}, {to_y}) is not the empty cell "
                f"{self.empty_pos}."
            )
        if abs(from_x - to_x) + abs(from_y - to_y) != 1:
            raise ValueError(
                f"Shift from ({from_x}, {from_y}) to ({to_x}, {to_y}) "
                f"is not a single step."
            )
        self.tiles[to_y][to_x] = self.tiles[from_y][from_x]
        self.tiles[from_y][from_x] = EMPTY
        self.empty_pos = (from_x, from_y)

    # -- helpers --------------------------------------------------------------

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the {self.size}×{self.size} grid."
            )
