from slidingcore.engine.gamestate.state import GameState

__all__ = ["GameState"]
