"""Win condition."""

from __future__ import annotations

from slidingcore.models.board import Board, canonical_position


class WinDetector:
    @staticmethod
    def is_won(board: Board) -> bool:
        """Check if every tile, blank included, sits in its goal cell."""
        return all(
            t.position == canonical_position(t.value, board.size)
            for t in board.tiles
        )

    @staticmethod
    def misplaced(board: Board) -> list[int]:
        """Return the sorted values that are not in their goal cell."""
        return sorted(
            t.value
            for t in board.tiles
            if t.position != canonical_position(t.value, board.size)
        )
