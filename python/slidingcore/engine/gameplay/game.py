"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random

from slidingcore.engine.gamegenerator import GameGenerator
from slidingcore.engine.gameplay.moves import MoveEngine
from slidingcore.engine.gameplay.win import WinDetector
from slidingcore.engine.gamestate import GameState
from slidingcore.models.board import Board, Direction

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 4


# -- pure transformations -----------------------------------------------------


def new_game(
    size: int = DEFAULT_SIZE, rng: random.Random | None = None
) -> tuple[Board, GameState]:
    """Return a freshly shuffled board with zeroed counters and a running clock."""
    board = GameGenerator.generate(size, rng)
    logger.info("New %d×%d game", size, size)
    return board, GameState()


def apply_move(board: Board, target_value: int) -> tuple[Board, bool]:
    return MoveEngine.apply_move(board, target_value)


def is_won(board: Board) -> bool:
    return WinDetector.is_won(board)


def play(
    board: Board, state: GameState, target_value: int
) -> tuple[Board, GameState, bool]:
    """Apply one move and update the session counters.

    Nothing happens once the game is won. A board that is already solved
    only counts as a win after at least one move has been made.
    """
    if state.won:
        return board, state, False

    board, moved = MoveEngine.apply_move(board, target_value)
    if not moved:
        return board, state, False

    state = state.record_move()
    # Only reached after an accepted move, which is what keeps a board dealt
    # already solved from counting as won; the moves check always holds here.
    if WinDetector.is_won(board) and state.moves > 0:
        state = state.mark_won()
        logger.info("Solved in %d moves, %d s", state.moves, state.elapsed)
    return board, state, True


# -- session wrapper ----------------------------------------------------------


class GamePlay:
    """Orchestrates a single game session for an interactive shell."""

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        rng: random.Random | None = None,
        board: Board | None = None,
    ) -> None:
        """Start a shuffled game, or play on *board* when one is given."""
        self._rng = rng
        if board is None:
            self.size = size
            self.board, self.state = new_game(size, rng)
        else:
            self.size = board.size
            self.board, self.state = board, GameState()

    # -- movement -------------------------------------------------------------

    def move_tile(self, value: int) -> bool:
        """Slide the tile numbered *value* into the blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        self.board, self.state, moved = play(self.board, self.state, value)
        return moved

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        value = MoveEngine.target_for(self.board, direction)
        if value is None:
            return False
        return self.move_tile(value)

    # -- session controls -----------------------------------------------------

    def tick(self, seconds: int = 1) -> None:
        self.state = self.state.tick(seconds)

    def reshuffle(self) -> None:
        self.board, self.state = new_game(self.size, self._rng)

    def reset_timer(self) -> None:
        self.state = self.state.restart_clock()

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.won
