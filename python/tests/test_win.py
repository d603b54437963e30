"""Win detector — exact goal layout only."""

from __future__ import annotations

import random

import pytest

from slidingcore.engine.gamegenerator import GameGenerator
from slidingcore.engine.gameplay import MoveEngine, WinDetector
from slidingcore.models.board import Board


@pytest.mark.parametrize("size", [2, 3, 4, 7])
def test_solved_board_is_won(size: int) -> None:
    assert WinDetector.is_won(GameGenerator.solved(size))


def test_one_slide_away_is_not_won(solved4: Board) -> None:
    board, moved = MoveEngine.apply_move(solved4, 15)
    assert moved
    assert not WinDetector.is_won(board)
    assert WinDetector.misplaced(board) == [0, 15]


def test_blank_in_wrong_corner_is_not_won() -> None:
    # Numbered tiles are in order but shifted by the blank at the front.
    board = Board.from_flat(2, [0, 1, 2, 3])
    assert not WinDetector.is_won(board)
    assert WinDetector.misplaced(board) == [0, 1, 2, 3]


def test_single_transposition_is_not_won() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 8, 7, 0])
    assert not WinDetector.is_won(board)
    assert WinDetector.misplaced(board) == [7, 8]


def test_misplaced_is_empty_when_solved(solved4: Board) -> None:
    assert WinDetector.misplaced(solved4) == []


def test_win_agrees_with_tile_checks(rng: random.Random) -> None:
    for _ in range(20):
        board = GameGenerator.generate(3, rng)
        every_tile = all(
            board.is_tile_correct((r, c)) for r in range(3) for c in range(3)
        )
        assert WinDetector.is_won(board) is every_tile
