from slidingcore.engine.gamegenerator.generator import (
    MAX_SHUFFLE_ATTEMPTS,
    GameGenerator,
)
from slidingcore.engine.gamegenerator.permutation import PermutationGenerator

__all__ = ["MAX_SHUFFLE_ATTEMPTS", "GameGenerator", "PermutationGenerator"]
