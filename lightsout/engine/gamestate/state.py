"""Tracks a puzzle value together with the moves that reached it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from lightsout.models.puzzle import Puzzle

P = TypeVar("P", bound=Puzzle)


@dataclass(frozen=True, order=True)
class SearchState(Generic[P]):
    """Holds a puzzle, its move history, and its cached score.

    States compare by score only, which is all the frontier needs.
    ``history`` lists the moves that produced this state's ancestors; the
    move that produced this state itself is ``latest_move``.
    """

    score: Any
    puzzle: P = field(compare=False)
    history: tuple[int, ...] = field(default=(), compare=False)
    latest_move: int | None = field(default=None, compare=False)

    @classmethod
    def root(cls, puzzle: P) -> SearchState[P]:
        return cls(score=puzzle.score(), puzzle=puzzle)

    # -- derivation -----------------------------------------------------------

    def child(self, puzzle: P, move: int) -> SearchState[P]:
        history = self.history
        if self.latest_move is not None:
            history = history + (self.latest_move,)
        return SearchState(
            score=puzzle.score(),
            puzzle=puzzle,
            history=history,
            latest_move=move,
        )

    def expand(self) -> list[SearchState[P]]:
        return [self.child(puzzle, move) for puzzle, move in self.puzzle.moves()]

    # -- queries --------------------------------------------------------------

    @property
    def depth(self) -> int:
        return len(self.history)

    @property
    def path(self) -> tuple[int, ...]:
        """Every move from the initial puzzle to this one, in order."""
        if self.latest_move is None:
            return self.history
        return self.history + (self.latest_move,)

    @property
    def is_solved(self) -> bool:
        return self.puzzle.end()
