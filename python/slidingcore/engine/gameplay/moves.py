"""Move validation and application."""

from __future__ import annotations

import logging
from dataclasses import replace

from slidingcore.models.board import EMPTY, Board, Direction, Position, Tile

logger = logging.getLogger(__name__)

# Offset from the blank to the tile that slides in the given direction.
# UP    → tile below the blank moves up
# DOWN  → tile above the blank moves down
# LEFT  → tile right of the blank moves left
# RIGHT → tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class MoveEngine:
    """Stateless move rules — all methods are static."""

    @staticmethod
    def is_adjacent(a: tuple[int, int], b: tuple[int, int]) -> bool:
        """True when *a* and *b* share an edge (diagonals do not count)."""
        (ar, ac), (br, bc) = a, b
        return (ar == br and abs(ac - bc) == 1) or (ac == bc and abs(ar - br) == 1)

    @staticmethod
    def apply_move(board: Board, target_value: int) -> tuple[Board, bool]:
        """Slide *target_value* into the blank if they are adjacent.

        Returns ``(new_board, True)`` on success. A rejected move returns
        the same *board* and ``False``. Passing the blank itself is a
        rejected move.
        """
        target = board.position_of(target_value)
        blank = board.empty_position

        if not MoveEngine.is_adjacent(target, blank):
            logger.debug(
                "Rejected move of %d: %s is not next to blank %s",
                target_value, target, blank,
            )
            return board, False

        tiles: list[Tile] = []
        for tile in board.tiles:
            if tile.value == target_value:
                tile = replace(tile, position=blank)
            elif tile.value == EMPTY:
                tile = replace(tile, position=target)
            tiles.append(tile)
        logger.debug("Moved %d from %s to %s", target_value, target, blank)
        return Board(size=board.size, tiles=tuple(tiles)), True

    @staticmethod
    def movable_values(board: Board) -> list[int]:
        """Values of the tiles that can currently slide, in row-major order."""
        blank = board.empty_position
        return [
            t.value
            for t in sorted(board.tiles, key=lambda t: t.position)
            if MoveEngine.is_adjacent(t.position, blank)
        ]

    @staticmethod
    def target_for(board: Board, direction: Direction) -> int | None:
        """Value of the tile that would slide in *direction*, if any."""
        br, bc = board.empty_position
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return None
        return board.tile_at(Position(tr, tc))
