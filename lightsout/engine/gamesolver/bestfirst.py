"""Greedy best-first search over any ``Puzzle``.

The frontier is ordered by the puzzle's heuristic score alone, so the first
terminal state popped is returned; it is not guaranteed to be the shortest
solution.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, Iterator, TypeVar

from lightsout.engine.gamestate.state import SearchState
from lightsout.models.puzzle import Puzzle

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Puzzle)


class Outcome(StrEnum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SearchResult(Generic[P]):
    """How a search ended and how many puzzles it expanded.

    Unpacks as ``(state, explored)`` where *state* is ``None`` unless solved.
    """

    outcome: Outcome
    state: SearchState[P] | None
    explored: int

    @property
    def solved(self) -> bool:
        return self.outcome is Outcome.SOLVED

    @property
    def history(self) -> tuple[int, ...]:
        """Move ids from the initial puzzle to the solution (empty otherwise)."""
        return self.state.path if self.state is not None else ()

    @property
    def board(self) -> P | None:
        return self.state.puzzle if self.state is not None else None

    def __iter__(self) -> Iterator[object]:
        return iter((self.state, self.explored))


class _Frontier(Generic[P]):
    """Max-priority queue of search states, FIFO among equal scores."""

    def __init__(self) -> None:
        self._heap: list[tuple[_Highest, int, SearchState[P]]] = []
        self._counter = itertools.count()

    def push(self, state: SearchState[P]) -> None:
        heapq.heappush(self._heap, (_Highest(state), next(self._counter), state))

    def pop(self) -> SearchState[P] | None:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)


class _Highest:
    """Inverts a state's ordering so ``heapq`` pops the best score first."""

    __slots__ = ("state",)

    def __init__(self, state: SearchState) -> None:
        self.state = state

    def __lt__(self, other: _Highest) -> bool:
        return other.state < self.state

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Highest) and self.state == other.state


def search(initial: P, max_depth: int) -> SearchResult[P]:
    """Search from *initial* for a terminal puzzle.

    States whose history already holds *max_depth* moves are dropped without
    being expanded.  ``explored`` counts the distinct puzzles expanded.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}.")

    explored: set[P] = set()
    frontier: _Frontier[P] = _Frontier()
    frontier.push(SearchState.root(initial))
    logger.info("Starting best-first search (max_depth=%d)", max_depth)

    while True:
        state = frontier.pop()
        if state is None:
            logger.info("Search exhausted after exploring %d states", len(explored))
            return SearchResult(Outcome.EXHAUSTED, None, len(explored))

        if state.is_solved:
            logger.info(
                "Solved in %d moves after exploring %d states",
                len(state.path),
                len(explored),
            )
            return SearchResult(Outcome.SOLVED, state, len(explored))

        if state.depth >= max_depth:
            continue

        explored.add(state.puzzle)
        for child in state.expand():
            if child.puzzle not in explored:
                frontier.push(child)
        logger.debug(
            "Expanded depth=%d score=%s frontier=%d explored=%d",
            state.depth,
            state.score,
            len(frontier),
            len(explored),
        )
