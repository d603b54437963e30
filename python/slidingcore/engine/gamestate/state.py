"""Session counters for a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GameState:
    """Move counter, elapsed seconds, clock flag and win flag.

    Instances are immutable; every transition returns a new state.
    """

    moves: int = 0
    elapsed: int = 0
    running: bool = True
    won: bool = False

    # -- time tracking --------------------------------------------------------

    def tick(self, seconds: int = 1) -> GameState:
        """Advance the clock while it runs and the game is not won."""
        if not self.running or self.won:
            return self
        return replace(self, elapsed=self.elapsed + seconds)

    def restart_clock(self) -> GameState:
        """Zero the counters and restart the clock, keeping the board.

        A won game stays won; only a new board clears the flag.
        """
        if self.won:
            return self
        return GameState()

    # -- moves ----------------------------------------------------------------

    def record_move(self) -> GameState:
        """Count one accepted move and make sure the clock is running."""
        return replace(self, moves=self.moves + 1, running=True)

    def mark_won(self) -> GameState:
        """Set the terminal win flag and stop the clock."""
        return replace(self, won=True, running=False)
