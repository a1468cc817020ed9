"""Command-line option handling."""

from __future__ import annotations

import random

import pytest
from typer.testing import CliRunner

import main

runner = CliRunner()


@pytest.fixture
def launches(monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
    calls: list[tuple] = []
    monkeypatch.setattr(main, "_launch", lambda *args: calls.append(args))
    return calls


def test_frontend_and_size(launches: list[tuple]) -> None:
    result = runner.invoke(main.app, ["-f", "rich", "-s", "3", "--seed", "7"])
    assert result.exit_code == 0, result.output
    frontend, size, rng = launches[0]
    assert frontend == main.Frontend.rich
    assert size == 3
    assert isinstance(rng, random.Random)


def test_size_from_environment(launches: list[tuple]) -> None:
    result = runner.invoke(
        main.app, ["-f", "vanilla"], env={"SLIDING_TILES_SIZE": "5"}
    )
    assert result.exit_code == 0, result.output
    assert launches[0][1] == 5
    assert launches[0][2] is None


@pytest.mark.parametrize("size", ["1", "9"])
def test_size_out_of_range(launches: list[tuple], size: str) -> None:
    result = runner.invoke(main.app, ["-f", "vanilla", "-s", size])
    assert result.exit_code != 0
    assert launches == []


def test_unknown_log_level(launches: list[tuple]) -> None:
    result = runner.invoke(main.app, ["-f", "vanilla", "--log-level", "LOUD"])
    assert result.exit_code != 0
    assert launches == []
