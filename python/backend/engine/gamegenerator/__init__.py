from backend.engine.gamegenerator.generator import (
    GameGenerator,
    count_inversions,
    is_solvable,
    make_solvable,
)

__all__ = ["GameGenerator", "count_inversions", "is_solvable", "make_solvable"]
