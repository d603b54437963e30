"""Logic core of an N×N sliding tile puzzle."""

from slidingcore.engine.gameplay import (
    DEFAULT_SIZE,
    GamePlay,
    apply_move,
    is_won,
    new_game,
    play,
)
from slidingcore.engine.gamestate import GameState
from slidingcore.errors import (
    OutOfBoundsError,
    ShuffleError,
    SlidingPuzzleError,
    TileNotFoundError,
)
from slidingcore.models import Board, Direction, Position, Tile

__all__ = [
    "DEFAULT_SIZE",
    "Board",
    "Direction",
    "GamePlay",
    "GameState",
    "OutOfBoundsError",
    "Position",
    "ShuffleError",
    "SlidingPuzzleError",
    "Tile",
    "TileNotFoundError",
    "apply_move",
    "is_won",
    "new_game",
    "play",
]
