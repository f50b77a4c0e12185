from backend.engine.gamestate.state import ExpandHook, SearchContext

__all__ = ["ExpandHook", "SearchContext"]
