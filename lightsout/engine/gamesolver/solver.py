"""Lights-out solver facade: a timed search plus the replayed solution."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from lightsout.engine.gameplay.replay import ReplayError, replay
from lightsout.engine.gamesolver.bestfirst import SearchResult, search
from lightsout.models.board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveReport:
    initial: Board
    result: SearchResult[Board]
    boards: list[Board] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.result.solved


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(board: Board, max_depth: int | None = None) -> SolveReport:
        """Search *board* and replay the solution, if any.

        *max_depth* defaults to the number of cells on the board.
        """
        if max_depth is None:
            max_depth = board.width * board.height

        start = time.perf_counter()
        result = search(board, max_depth)
        elapsed = time.perf_counter() - start
        logger.info("Search took %.4fs", elapsed)

        boards = replay(board, result.history) if result.solved else []
        if boards and boards[-1] != result.board:
            raise ReplayError(
                f"Replayed history {result.history} does not reach the solved board."
            )
        return SolveReport(initial=board, result=result, boards=boards, elapsed=elapsed)

    @staticmethod
    def hint(board: Board, max_depth: int | None = None) -> int | None:
        """Return the first move id of a solution, or ``None`` if solved / none found."""
        if board.end():
            return None

        history = Solver.solve(board, max_depth).result.history
        return history[0] if history else None
