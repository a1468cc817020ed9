"""Move legality and slide-chain computation."""

from __future__ import annotations

from backend.models.shift import Shift


class MoveResolver:
    """Stateless resolver — all methods are static."""

    @staticmethod
    def can_move(x: int, y: int, empty_x: int, empty_y: int) -> bool:
        """Return True if ``(x, y)`` shares a row or column with the empty cell.

        The empty cell itself and diagonal cells are not movable.
        """
        return (y == empty_y and x != empty_x) or (x == empty_x and y != empty_y)

    @staticmethod
    def resolve_chain(x: int, y: int, empty_x: int, empty_y: int) -> list[Shift]:
        """Return the shifts that slide every tile between the click and the blank.

        Shifts are ordered closest-to-empty first, so applying them in order
        walks the empty cell toward ``(x, y)`` one step at a time.
        """
        if not MoveResolver.can_move(x, y, empty_x, empty_y):
            raise ValueError(
                f"Cell ({x}, {y}) is not in line with the empty cell "
                f"({empty_x}, {empty_y})."
            )

        chain: list[Shift] = []
        if y == empty_y:
            step = 1 if x > empty_x else -1
            for i in range(1, abs(x - empty_x) + 1):
                chain.append(
                    Shift(
                        from_x=empty_x + step * i,
                        from_y=y,
                        to_x=empty_x + step * (i - 1),
                        to_y=y,
                    )
                )
        else:
            step = 1 if y > empty_y else -1
            for i in range(1, abs(y - empty_y) + 1):
                chain.append(
                    Shift(
                        from_x=x,
                        from_y=empty_y + step * i,
                        to_x=x,
                        to_y=empty_y + step * (i - 1),
                    )
                )
        return chain

    @staticmethod
    def chain_cells(
        x: int, y: int, empty_x: int, empty_y: int
    ) -> list[tuple[int, int]]:
        """Return the cells a click on ``(x, y)`` would move, or ``[]``."""
        if not MoveResolver.can_move(x, y, empty_x, empty_y):
            return []
        return [s.source for s in MoveResolver.resolve_chain(x, y, empty_x, empty_y)]
