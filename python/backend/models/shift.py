"""A single one-step tile movement."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Shift:
    """The tile at ``(from_x, from_y)`` slides into the empty ``(to_x, to_y)``."""

    from_x: int
    from_y: int
    to_x: int
    to_y: int

    @property
    def dx(self) -> int:
        return self.to_x - self.from_x

    @property
    def dy(self) -> int:
        return self.to_y - self.from_y

    @property
    def source(self) -> tuple[int, int]:
        return (self.from_x, self.from_y)

    @property
    def target(self) -> tuple[int, int]:
        return (self.to_x, self.to_y)
