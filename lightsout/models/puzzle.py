"""Capability contract for puzzles the search engine can explore."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar

P = TypeVar("P", bound="Puzzle")


class Puzzle(Protocol):
    """Anything searchable: a hashable value with a score and successors.

    ``score()`` is ordered and higher means closer to solved.  ``score`` and
    ``end`` must depend only on the puzzle's content, so two equal puzzles
    always score the same.  ``moves()`` must be finite and must not contain
    the puzzle itself.
    """

    def score(self) -> Any: ...

    def end(self) -> bool: ...

    def moves(self: P) -> Sequence[tuple[P, int]]: ...

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...
