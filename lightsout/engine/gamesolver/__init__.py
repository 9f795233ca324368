from lightsout.engine.gamesolver.bestfirst import Outcome, SearchResult, search
from lightsout.engine.gamesolver.solver import SolveReport, Solver

__all__ = ["Outcome", "SearchResult", "SolveReport", "Solver", "search"]
