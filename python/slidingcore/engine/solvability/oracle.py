"""Solvability check for sliding puzzle permutations."""

from __future__ import annotations

from typing import Sequence

from slidingcore.models.board import EMPTY


class SolvabilityOracle:
    """Stateless parity test — all methods are static."""

    @staticmethod
    def count_inversions(values: Sequence[int]) -> int:
        """Count pairs of numbered tiles that appear out of order."""
        flat = [v for v in values if v != EMPTY]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(values: Sequence[int], size: int) -> bool:
        """Return True if the row-major *values* can reach the goal state.

        Odd widths only depend on inversion parity. Even widths also
        count the blank's row from the bottom (1-based): the board is
        solvable when exactly one of the two numbers is even.
        """
        if sorted(values) != list(range(size * size)):
            raise ValueError(
                f"Expected a permutation of 0..{size * size - 1} for a "
                f"{size}×{size} board, got {list(values)}."
            )
        inversions = SolvabilityOracle.count_inversions(values)
        if size % 2 == 1:
            return inversions % 2 == 0

        empty_row = list(values).index(EMPTY) // size
        empty_row_from_bottom = size - empty_row
        return (empty_row_from_bottom % 2 == 0 and inversions % 2 == 1) or (
            empty_row_from_bottom % 2 == 1 and inversions % 2 == 0
        )
