"""Best-first solver for the Lights Out puzzle."""

from lightsout.engine.gamegenerator import GameGenerator
from lightsout.engine.gameplay import ReplayError, replay
from lightsout.engine.gamesolver import Outcome, SearchResult, SolveReport, Solver, search
from lightsout.engine.gamestate import SearchState
from lightsout.models import Board, Puzzle

__all__ = [
    "Board",
    "GameGenerator",
    "Outcome",
    "Puzzle",
    "ReplayError",
    "SearchResult",
    "SearchState",
    "SolveReport",
    "Solver",
    "replay",
    "search",
]
