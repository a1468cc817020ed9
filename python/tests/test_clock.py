"""GameClock and elapsed-time formatting tests."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

import backend.engine.gamestate.clock as clock_module
from backend.engine.gamestate import GameClock, format_elapsed


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "Time: "),
        (1, "Time: 1 second"),
        (59.9, "Time: 59 seconds"),
        (60, "Time: 1 minute"),
        (65, "Time: 1 minute, 5 seconds"),
        (121, "Time: 2 minutes, 1 second"),
    ],
)
def test_format_elapsed(seconds: float, expected: str) -> None:
    assert format_elapsed(seconds) == expected


@pytest.fixture
def fake_now(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    now = [1000.0]
    monkeypatch.setattr(clock_module, "time", SimpleNamespace(time=lambda: now[0]))
    return now


def test_clock_counts_until_stopped(fake_now: list[float]) -> None:
    clock = GameClock()
    assert not clock.running
    assert clock.elapsed == 0

    clock.start()
    fake_now[0] += 42
    assert clock.running
    assert clock.elapsed == 42

    clock.stop()
    fake_now[0] += 100
    assert not clock.running
    assert clock.elapsed == 42
    assert clock.formatted() == "Time: 42 seconds"


def test_restart_counts_from_zero(fake_now: list[float]) -> None:
    clock = GameClock()
    clock.start()
    fake_now[0] += 30
    clock.start()
    fake_now[0] += 5
    assert clock.elapsed == 5


def test_reset_clears(fake_now: list[float]) -> None:
    clock = GameClock()
    clock.start()
    fake_now[0] += 30
    clock.stop()
    clock.reset()
    assert clock.elapsed == 0
    assert not clock.running
