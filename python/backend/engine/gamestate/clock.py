"""Elapsed-time tracking for a game in progress."""

from __future__ import annotations

import time


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" + ("" if n == 1 else "s")


def format_elapsed(seconds: float) -> str:
    """Render whole seconds as ``"Time: 2 minutes, 1 second"``.

    Zero components are left out, so a fresh clock reads ``"Time: "``.
    """
    minutes, secs = divmod(int(seconds), 60)
    parts: list[str] = []
    if minutes:
        parts.append(_plural(minutes, "minute"))
    if secs:
        parts.append(_plural(secs, "second"))
    return "Time: " + ", ".join(parts)


class GameClock:
    """Counts seconds from the last shuffle until the puzzle is solved."""

    def __init__(self) -> None:
        self._start_time: float = 0.0
        self._elapsed_banked: float = 0.0
        self._running: bool = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed(self) -> float:
        if self._running:
            return time.time() - self._start_time
        return self._elapsed_banked

    def start(self) -> None:
        """(Re)start from zero; shuffling again restarts the count."""
        self._start_time = time.time()
        self._elapsed_banked = 0.0
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._elapsed_banked = time.time() - self._start_time
            self._running = False

    def reset(self) -> None:
        self._start_time = 0.0
        self._elapsed_banked = 0.0
        self._running = False

    def formatted(self) -> str:
        return format_elapsed(self.elapsed)
