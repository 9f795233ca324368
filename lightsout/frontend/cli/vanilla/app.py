"""Vanilla terminal frontend with no third-party dependencies.

Prints the solve transcript with plain text and ANSI colour codes.
"""

from __future__ import annotations

import sys
from typing import TextIO

from lightsout.engine.gamegenerator import GameGenerator
from lightsout.engine.gamesolver import SolveReport, Solver


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- transcript ---------------------------------------------------------------


def show(report: SolveReport, seed: int, out: TextIO) -> None:
    """Write the full transcript of *report* to *out*."""
    result = report.result

    def emit(line: str = "") -> None:
        out.write(line + "\n")

    emit(f"Seed: {seed}")
    emit(str(report.initial))
    emit()

    if report.solved:
        emit(f"{_C}Solution:{_R}")
        for board in report.boards:
            emit(str(board))
            emit()
        emit(f"{_G}{len(result.history)} moves{_R}")
    else:
        emit(f"{_Y}No solution :({_R}")

    emit(f"Explored {result.explored} states")
    emit(f"{_DIM}Took {report.elapsed:.4f}s{_R}")
    out.flush()


def run(
    width: int,
    height: int,
    seed: int | None = None,
    max_depth: int | None = None,
    out: TextIO | None = None,
) -> bool:
    """Generate, solve and print one board.  Returns True if it was solved."""
    seed, board = GameGenerator.generate(width, height, seed)
    report = Solver.solve(board, max_depth)
    show(report, seed, out or sys.stdout)
    return report.solved
