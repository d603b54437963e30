from slidingcore.engine.solvability.oracle import SolvabilityOracle

__all__ = ["SolvabilityOracle"]
