from backend.engine.gamesolver.solver import (
    Engine,
    SearchOutcome,
    SearchResult,
    Solver,
    SolverConfig,
)

__all__ = ["Engine", "SearchOutcome", "SearchResult", "Solver", "SolverConfig"]
