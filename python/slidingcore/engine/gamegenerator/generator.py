"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from slidingcore.engine.gamegenerator.permutation import PermutationGenerator
from slidingcore.engine.solvability import SolvabilityOracle
from slidingcore.errors import ShuffleError
from slidingcore.models.board import EMPTY, Board

logger = logging.getLogger(__name__)

# Half of all permutations are solvable, so about two attempts are expected.
MAX_SHUFFLE_ATTEMPTS = 1000


class GameGenerator:
    """Creates solvable puzzles by rejection-sampling random permutations."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, size * size)) + [EMPTY]
        return Board.from_flat(size, flat)

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        max_attempts: int = MAX_SHUFFLE_ATTEMPTS,
    ) -> Board:
        """Return a random *solvable* board of the given size.

        A shuffle that happens to land on the solved layout is returned
        as is.
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")

        values = list(range(size * size))
        for attempt in range(1, max_attempts + 1):
            PermutationGenerator.shuffle(values, rng)
            if SolvabilityOracle.is_solvable(values, size):
                logger.debug(
                    "Accepted %d×%d shuffle after %d attempt(s)", size, size, attempt
                )
                return Board.from_flat(size, values)

        raise ShuffleError(
            f"No solvable {size}×{size} permutation after {max_attempts} attempts."
        )
