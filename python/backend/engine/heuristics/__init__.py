from backend.engine.heuristics.heuristics import manhattan_distance, misplaced_count

__all__ = ["manhattan_distance", "misplaced_count"]
