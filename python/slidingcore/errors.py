"""Exceptions raised by the sliding puzzle core.

Rejected moves are not errors; these only signal broken contracts.
"""

from __future__ import annotations


class SlidingPuzzleError(Exception):
    """Base class for every error raised by :mod:`slidingcore`."""


class OutOfBoundsError(SlidingPuzzleError, IndexError):
    """A position lies outside the board."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {size}×{size} board."
        )
        self.row = row
        self.col = col
        self.size = size


class TileNotFoundError(SlidingPuzzleError, LookupError):
    """No tile on the board carries the requested value."""

    def __init__(self, value: int, size: int) -> None:
        super().__init__(
            f"No tile with value {value} on a {size}×{size} board "
            f"(expected 0..{size * size - 1})."
        )
        self.value = value
        self.size = size


class ShuffleError(SlidingPuzzleError, RuntimeError):
    """The shuffle loop gave up before finding a solvable permutation."""
