"""Shared fixtures for the sliding puzzle tests."""

from __future__ import annotations

import random

import pytest

from slidingcore.engine.gamegenerator import GameGenerator
from slidingcore.models.board import Board


@pytest.fixture
def rng() -> random.Random:
    return random.Random(2024)


@pytest.fixture
def solved4() -> Board:
    return GameGenerator.solved(4)


def assert_bijection(board: Board) -> None:
    """Every cell holds exactly one tile and every value appears once."""
    n = board.size
    positions = sorted(t.position for t in board.tiles)
    values = sorted(t.value for t in board.tiles)
    assert positions == [(r, c) for r in range(n) for c in range(n)]
    assert values == list(range(n * n))
