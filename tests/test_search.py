"""Best-first search tests.

Small boards are searched to completion; every solution is replayed through
the board model to verify that its history really reaches the final board.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from lightsout.engine.gameplay import replay
from lightsout.engine.gamesolver import Outcome, bestfirst, search
from lightsout.engine.gamestate import SearchState
from lightsout.models.board import Board

PLUS = Board.from_rows(3, [0b010, 0b111, 0b010])


# -- a second puzzle, to exercise the engine without a board ------------------


@dataclass(frozen=True)
class NumberLine:
    """Walk from ``position`` to ``target`` one step at a time."""

    position: int
    target: int = 7
    limit: int = 10

    def score(self) -> int:
        return -abs(self.target - self.position)

    def end(self) -> bool:
        return self.position == self.target

    def moves(self) -> list[tuple[NumberLine, int]]:
        result: list[tuple[NumberLine, int]] = []
        if self.position > 0:
            result.append((NumberLine(self.position - 1, self.target, self.limit), 0))
        if self.position < self.limit:
            result.append((NumberLine(self.position + 1, self.target, self.limit), 1))
        return result


# -- trivial boards -----------------------------------------------------------


def test_already_solved() -> None:
    result = search(Board.from_rows(1, [0]), 0)
    assert result.outcome is Outcome.SOLVED
    assert result.history == ()
    assert result.explored == 0
    assert result.board == Board.from_rows(1, [0])


def test_single_light() -> None:
    result = search(Board.from_rows(1, [1]), 1)
    assert result.solved
    assert result.history == (0,)
    assert result.explored == 1
    assert result.board == Board.from_rows(1, [0])


def test_depth_zero_does_not_expand() -> None:
    result = search(Board.from_rows(1, [1]), 0)
    assert result.outcome is Outcome.EXHAUSTED
    assert result.state is None
    assert result.history == ()
    assert result.board is None
    assert result.explored == 0


def test_negative_depth_rejected() -> None:
    with pytest.raises(ValueError):
        search(Board.from_rows(1, [1]), -1)


def test_result_unpacks_as_pair() -> None:
    state, explored = search(PLUS, 9)
    assert state is not None
    assert state.puzzle == Board.empty(3, 3)
    assert explored == 1


# -- one-move boards ----------------------------------------------------------


def test_plus_solved_by_center() -> None:
    result = search(PLUS, 9)
    assert result.history == (4,)
    assert result.explored == 1


def test_corner_solved_by_corner() -> None:
    result = search(Board.empty(3, 3).toggle(0, 0), 9)
    assert result.history == (0,)
    assert result.explored == 1


def test_depth_bound_stops_one_move_short() -> None:
    # the root and its children share depth 0, so a bound of 1 still reaches
    # boards two moves away but never expands them
    board = Board.empty(3, 3).toggle(0, 0).toggle(2, 2)
    result = search(board, 1)
    assert result.solved
    assert sorted(result.history) == [0, 8]


# -- generic puzzles ----------------------------------------------------------


def test_number_line_walks_to_target() -> None:
    result = search(NumberLine(0), 10)
    assert result.solved
    assert result.board == NumberLine(7)
    assert result.history == (1,) * 7
    assert result.explored == 7


def test_number_line_depth_bound() -> None:
    result = search(NumberLine(0), 3)
    assert result.outcome is Outcome.EXHAUSTED
    assert result.explored == 4


# -- random boards ------------------------------------------------------------


_CASES = [(3, 3, seed) for seed in range(40)] + [(3, 2, seed) for seed in range(20)]


def _ids(case: tuple[int, int, int]) -> str:
    width, height, seed = case
    return f"{width}x{height}-seed{seed}"


@pytest.mark.parametrize("case", _CASES, ids=_ids)
def test_search_terminates_and_replays(case: tuple[int, int, int]) -> None:
    width, height, seed = case
    board = Board.empty(width, height).randomize(seed)

    result = search(board, width * height)

    assert result.outcome in (Outcome.SOLVED, Outcome.EXHAUSTED)
    assert 0 <= result.explored <= 2 ** (width * height)
    if not result.solved:
        return

    assert result.board.end()
    boards = replay(board, result.history)
    assert len(boards) == len(result.history)
    if boards:
        assert boards[-1] == result.board
    else:
        assert board.end()


@pytest.mark.parametrize("seed", range(10))
def test_search_is_deterministic(seed: int) -> None:
    board = Board.empty(3, 3).randomize(seed)
    first = search(board, 9)
    second = search(board, 9)
    assert first.outcome is second.outcome
    assert first.explored == second.explored
    assert first.history == second.history
    assert first.board == second.board


# -- exhaustion and the visited set -------------------------------------------


def test_unsolvable_board_exhausts() -> None:
    # both toggles of a 2x1 board flip both cells, so 0b01 and 0b10 are the
    # only reachable boards and neither is solved
    board = Board.from_rows(2, [0b01])
    result = search(board, 10)
    assert result.outcome is Outcome.EXHAUSTED
    assert result.explored == 2


@pytest.mark.parametrize(
    "board",
    [Board.from_rows(2, [0b01])] + [Board.empty(3, 3).randomize(seed) for seed in range(10)],
)
def test_visited_puzzles_never_requeued(monkeypatch: pytest.MonkeyPatch, board: Board) -> None:
    expanded: set[Board] = set()
    pushed: list[Board] = []
    moves = Board.moves
    push = bestfirst._Frontier.push

    def recording_moves(self: Board) -> list[tuple[Board, int]]:
        expanded.add(self)
        return moves(self)

    def checked_push(self: bestfirst._Frontier, state: SearchState[Board]) -> None:
        assert state.puzzle not in expanded
        pushed.append(state.puzzle)
        push(self, state)

    monkeypatch.setattr(Board, "moves", recording_moves)
    monkeypatch.setattr(bestfirst._Frontier, "push", checked_push)

    result = search(board, board.width * board.height)

    assert pushed[0] == board
    assert result.explored == len(expanded)


def test_search_module_is_not_shadowed() -> None:
    assert bestfirst.search is search
    assert bestfirst.Outcome is Outcome
