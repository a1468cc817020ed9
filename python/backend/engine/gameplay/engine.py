"""Core gameplay logic — processes clicks, shuffles, and detects completion."""

from __future__ import annotations

import logging
import random
from enum import StrEnum
from typing import Callable

from backend.engine.gamegenerator import SHUFFLE_MOVES, Shuffler
from backend.engine.moveresolver import MoveResolver
from backend.models.grid import Grid
from backend.models.shift import Shift

logger = logging.getLogger(__name__)

ShiftListener = Callable[[Shift], None]
SolvedListener = Callable[[], None]


class EngineState(StrEnum):
    IDLE = "idle"
    SHUFFLING = "shuffling"
    SOLVED = "solved"


class PuzzleEngine:
    """Owns one grid and the Idle / Shuffling / Solved state machine.

    The presentation layer forwards clicks as logical ``(x, y)`` cells and
    observes the engine through :meth:`on_shift` and :meth:`on_solved`.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        self.size = size
        self._shuffler = Shuffler(rng)
        self._shift_listeners: list[ShiftListener] = []
        self._solved_listeners: list[SolvedListener] = []
        self._applying = False
        self.state = EngineState.IDLE
        self.reset()

    # -- lifecycle ------------------------------------------------------------

    def reset(self) -> None:
        """Rebuild a fresh solved grid and return to ``IDLE``.

        Ignored while a move or shuffle is being applied, so a listener
        cannot swap the grid out from under the running chain.
        """
        if self.state == EngineState.SHUFFLING or self._applying:
            logger.debug("Ignoring re-entrant reset request")
            return
        self.grid = Grid.solved(self.size)
        self.state = EngineState.IDLE
        self.moves = 0
        logger.info("Engine reset to solved %d×%d grid", self.size, self.size)

    # -- subscriptions --------------------------------------------------------

    def on_shift(self, listener: ShiftListener) -> Callable[[], None]:
        """Call *listener* with every applied :class:`Shift`.

        Returns a function that removes the subscription.
        """
        self._shift_listeners.append(listener)
        return _unsubscriber(self._shift_listeners, listener)

    def on_solved(self, listener: SolvedListener) -> Callable[[], None]:
        """Call *listener* once each time a user move completes the puzzle."""
        self._solved_listeners.append(listener)
        return _unsubscriber(self._solved_listeners, listener)

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        return self.grid.is_solved()

    @property
    def is_shuffling(self) -> bool:
        return self.state == EngineState.SHUFFLING

    @property
    def is_won(self) -> bool:
        return self.state == EngineState.SOLVED

    def movable_cells(self, x: int, y: int) -> list[tuple[int, int]]:
        """Cells a click on ``(x, y)`` would slide, empty when not interactive."""
        if self.state != EngineState.IDLE or not self.grid.contains(x, y):
            return []
        ex, ey = self.grid.empty_coords()
        return MoveResolver.chain_cells(x, y, ex, ey)

    # -- user intents ---------------------------------------------------------

    def click_cell(self, x: int, y: int) -> bool:
        """Slide the tiles between ``(x, y)`` and the empty cell.

        Returns True if a move was applied.  Clicks while shuffling, after
        completion, from inside a listener, or off the empty cell's row and
        column are ignored.
        """
        if not self.grid.contains(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the {self.size}×{self.size} board."
            )
        if self.state != EngineState.IDLE or self._applying:
            logger.debug("Ignoring click at (%d, %d) in state %s", x, y, self.state)
            return False

        ex, ey = self.grid.empty_coords()
        if not MoveResolver.can_move(x, y, ex, ey):
            logger.debug("Illegal click at (%d, %d), empty at (%d, %d)", x, y, ex, ey)
            return False

        self._apply(x, y)
        self.moves += 1

        if self.grid.is_solved():
            self.state = EngineState.SOLVED
            logger.info("Puzzle solved in %d moves", self.moves)
            for listener in list(self._solved_listeners):
                listener()
        return True

    def shuffle(self) -> None:
        """Scramble the grid with ``SHUFFLE_MOVES`` random adjacent moves.

        Completion is never evaluated here, even if the walk happens to end
        on the solved layout.
        """
        if self.state == EngineState.SHUFFLING or self._applying:
            logger.debug("Ignoring re-entrant shuffle request")
            return

        self.state = EngineState.SHUFFLING
        try:
            self._shuffler.scramble(lambda: self.grid, self._apply, SHUFFLE_MOVES)
        finally:
            self.state = EngineState.IDLE
        self.moves = 0
        logger.info("Shuffled %d×%d board", self.size, self.size)

    # -- helpers --------------------------------------------------------------

    def _apply(self, x: int, y: int) -> None:
        ex, ey = self.grid.empty_coords()
        chain = MoveResolver.resolve_chain(x, y, ex, ey)
        self._applying = True
        try:
            for shift in chain:
                self.grid.apply_shift(shift.from_x, shift.from_y, shift.to_x, shift.to_y)
                for listener in list(self._shift_listeners):
                    listener(shift)
        finally:
            self._applying = False


def _unsubscriber(listeners: list, listener: Callable) -> Callable[[], None]:
    def unsubscribe() -> None:
        if listener in listeners:
            listeners.remove(listener)

    return unsubscribe


def create_engine(size: int, rng: random.Random | None = None) -> PuzzleEngine:
    """Return a new engine holding a solved ``size``×``size`` grid."""
    return PuzzleEngine(size, rng)
