from slidingcore.models.board import (
    EMPTY,
    Board,
    Direction,
    Position,
    Tile,
    canonical_position,
)

__all__ = ["EMPTY", "Board", "Direction", "Position", "Tile", "canonical_position"]
