"""Rich terminal frontend: tables, colours and panels.

Uses the ``rich`` library to print the solve transcript: the seed, the
initial board, every board along the solution, and the search statistics.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lightsout.engine.gamegenerator import GameGenerator
from lightsout.engine.gamesolver import SolveReport, Solver
from lightsout.models.board import Board


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the light grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(board.width):
        table.add_column(width=2, justify="center")

    for y in range(board.height):
        cells: list[str] = []
        for x in range(board.width):
            if board.get(x, y):
                cells.append("[bold yellow]██[/bold yellow]")
            else:
                cells.append("[dim]░░[/dim]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, style: str = "cyan") -> Panel:
    return Panel(
        Align.center(_render_board(board)),
        title=f"[bold {style}]{title}[/bold {style}]",
        border_style=style,
        padding=(0, 1),
        expand=False,
    )


# -- transcript ---------------------------------------------------------------


def _stats(report: SolveReport) -> Text:
    result = report.result
    stats = Text()
    if report.solved:
        stats.append(f"  {len(result.history)} moves", style="bold green")
    else:
        stats.append("  No solution :(", style="bold red")
    stats.append(f"   Explored {result.explored} states", style="cyan")
    stats.append(f"   Took {report.elapsed:.4f}s", style="dim")
    return stats


def show(report: SolveReport, seed: int, console: Console) -> None:
    """Print the full transcript of *report*."""
    board = report.initial
    console.print(Text(f"  Seed: {seed}", style="bold"))
    console.print(
        _board_panel(board, f"Lights Out  {board.width}×{board.height}")
    )

    if report.solved:
        history = report.result.history
        panels = [
            _board_panel(step, f"Move {i} (id {move_id})", style="blue")
            for i, (move_id, step) in enumerate(zip(history, report.boards), 1)
        ]
        console.print(Text("  Solution:", style="bold green"))
        if panels:
            console.print(Group(*panels))
        console.print(_board_panel(report.result.board, "Solved", style="green"))

    console.print(_stats(report))


def run(
    width: int,
    height: int,
    seed: int | None = None,
    max_depth: int | None = None,
    console: Console | None = None,
) -> bool:
    """Generate, solve and print one board.  Returns True if it was solved."""
    console = console or Console()
    seed, board = GameGenerator.generate(width, height, seed)
    report = Solver.solve(board, max_depth)
    show(report, seed, console)
    return report.solved
