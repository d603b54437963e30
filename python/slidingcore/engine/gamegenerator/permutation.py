"""Uniform random permutations (Fisher–Yates)."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")


class PermutationGenerator:
    """Stateless shuffler — all methods are static."""

    @staticmethod
    def shuffle(
        values: MutableSequence[T], rng: random.Random | None = None
    ) -> MutableSequence[T]:
        """Shuffle *values* in place and return it.

        For ``i`` from the last index down to 1, swap ``values[i]`` with
        ``values[j]`` where ``j`` is drawn uniformly from ``[0, i]``
        inclusive. Drawing from ``[0, i)`` instead would never leave an
        element in place and skews the distribution.
        """
        # The module-level generator is seeded from OS entropy at import.
        randint = rng.randint if rng is not None else random.randint
        for i in range(len(values) - 1, 0, -1):
            j = randint(0, i)
            values[i], values[j] = values[j], values[i]
        return values
