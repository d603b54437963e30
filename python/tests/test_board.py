"""Board model — construction invariants and positional queries."""

from __future__ import annotations

import pytest

from slidingcore.errors import OutOfBoundsError, TileNotFoundError
from slidingcore.models.board import (
    Board,
    Position,
    Tile,
    canonical_position,
)

# 3×3, blank in the middle of the bottom row.
_FLAT = [1, 2, 3, 4, 5, 6, 7, 0, 8]


# -- construction -------------------------------------------------------------


def test_from_flat_assigns_slots_row_major() -> None:
    board = Board.from_flat(3, _FLAT)

    assert board.size == 3
    assert [t.id for t in board.tiles] == list(range(9))
    assert board.tiles[5] == Tile(id=5, value=6, position=Position(1, 2))
    assert board.rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    assert board.to_flat() == _FLAT


@pytest.mark.parametrize(
    "size, flat",
    [
        (3, [1, 2, 3, 4, 5, 6, 7, 0]),  # too short
        (3, [1, 2, 3, 4, 5, 6, 7, 8, 8]),  # duplicate, no blank
        (3, [1, 2, 3, 4, 5, 6, 7, 0, 9]),  # value out of range
        (1, [0]),  # below minimum size
    ],
    ids=["short", "duplicate", "out-of-range", "size-1"],
)
def test_invalid_boards_are_rejected(size: int, flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(size, flat)


def test_overlapping_positions_are_rejected() -> None:
    tiles = (
        Tile(id=0, value=1, position=Position(0, 0)),
        Tile(id=1, value=2, position=Position(0, 0)),
        Tile(id=2, value=3, position=Position(1, 0)),
        Tile(id=3, value=0, position=Position(1, 1)),
    )
    with pytest.raises(ValueError, match="every cell"):
        Board(size=2, tiles=tiles)


# -- queries ------------------------------------------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [(1, (0, 0)), (6, (1, 2)), (0, (2, 1)), (8, (2, 2))],
)
def test_position_of(value: int, expected: tuple[int, int]) -> None:
    board = Board.from_flat(3, _FLAT)
    assert board.position_of(value) == expected


@pytest.mark.parametrize("value", [-1, 9, 100])
def test_position_of_unknown_value(value: int) -> None:
    board = Board.from_flat(3, _FLAT)
    with pytest.raises(TileNotFoundError) as exc:
        board.position_of(value)
    assert exc.value.value == value
    assert isinstance(exc.value, LookupError)


def test_tile_at() -> None:
    board = Board.from_flat(3, _FLAT)
    assert board.tile_at((0, 0)) == 1
    assert board.tile_at(Position(2, 1)) == 0
    assert board.tile_at((2, 2)) == 8


@pytest.mark.parametrize("position", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_tile_at_out_of_bounds(position: tuple[int, int]) -> None:
    board = Board.from_flat(3, _FLAT)
    with pytest.raises(OutOfBoundsError):
        board.tile_at(position)


def test_empty_position() -> None:
    assert Board.from_flat(3, _FLAT).empty_position == (2, 1)


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, _FLAT)
    assert board.is_tile_correct((0, 0))
    assert board.is_tile_correct((2, 0))
    assert not board.is_tile_correct((2, 1))  # blank belongs bottom-right
    assert not board.is_tile_correct((2, 2))  # 8 belongs at (2, 1)


@pytest.mark.parametrize(
    "value, size, expected",
    [
        (1, 4, (0, 0)),
        (4, 4, (0, 3)),
        (5, 4, (1, 0)),
        (15, 4, (3, 2)),
        (0, 4, (3, 3)),
        (3, 2, (1, 0)),
    ],
)
def test_canonical_position(value: int, size: int, expected: tuple[int, int]) -> None:
    assert canonical_position(value, size) == expected
