"""Shared fixtures for the engine tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import PuzzleEngine, create_engine


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def engine_4x4(rng: random.Random) -> PuzzleEngine:
    return create_engine(4, rng)


@pytest.fixture
def engine_2x2(rng: random.Random) -> PuzzleEngine:
    return create_engine(2, rng)
