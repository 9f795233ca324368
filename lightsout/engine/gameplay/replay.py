"""Replays a solution's move history to recover the intermediate boards."""

from __future__ import annotations

from typing import Iterable

from lightsout.models.board import Board


class ReplayError(RuntimeError):
    """A recorded move id cannot be replayed on the board it is applied to.

    Either no move has that id, which means the history was not produced by
    searching from that board, or several moves share it and lead to
    different boards, so the move the search made cannot be recovered.
    """


def replay(initial: Board, history: Iterable[int]) -> list[Board]:
    """Return the board reached after each move of *history*, in order."""
    board = initial
    boards: list[Board] = []
    for step, move_id in enumerate(history):
        board = _apply(board, move_id, step)
        boards.append(board)
    return boards


def _apply(board: Board, move_id: int, step: int) -> Board:
    matches = {next_board for next_board, candidate in board.moves() if candidate == move_id}
    if not matches:
        raise ReplayError(f"Unable to find move id {move_id} at step {step}.")
    if len(matches) > 1:
        raise ReplayError(
            f"Move id {move_id} at step {step} is ambiguous on a "
            f"{board.width}×{board.height} board."
        )
    return matches.pop()
