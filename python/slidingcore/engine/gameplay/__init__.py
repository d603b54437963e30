from slidingcore.engine.gameplay.game import (
    DEFAULT_SIZE,
    GamePlay,
    apply_move,
    is_won,
    new_game,
    play,
)
from slidingcore.engine.gameplay.moves import MoveEngine
from slidingcore.engine.gameplay.win import WinDetector

__all__ = [
    "DEFAULT_SIZE",
    "GamePlay",
    "MoveEngine",
    "WinDetector",
    "apply_move",
    "is_won",
    "new_game",
    "play",
]
