"""Lights Out solver.

Usage::

    lightsout                       # random 5×5 board, Rich output
    lightsout -W 3 -H 3 --seed 42   # reproduce a 3×3 run
    lightsout -f vanilla -d 10      # plain output, at most 10 moves deep
"""

import importlib
import logging
from enum import StrEnum
from typing import Optional

import typer
from rich.logging import RichHandler


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "lightsout.frontend.cli.vanilla.app",
    Frontend.rich: "lightsout.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    width: int = typer.Option(
        5, "-W", "--width",
        min=1, envvar="LIGHTSOUT_WIDTH",
        help="Board width.",
    ),
    height: int = typer.Option(
        5, "-H", "--height",
        min=1, envvar="LIGHTSOUT_HEIGHT",
        help="Board height.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="LIGHTSOUT_SEED",
        help="Seed for the random board. Omit for a fresh one.",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "-d", "--max-depth",
        min=0, envvar="LIGHTSOUT_MAX_DEPTH",
        help="Longest move history to expand. Defaults to width*height.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        envvar="LIGHTSOUT_FRONTEND",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve a random Lights Out board with best-first search."""
    if height > width:
        # move ids (x * width + y) collide on taller boards and cannot be replayed
        raise typer.BadParameter(
            f"height {height} must not exceed width {width}.",
            param_hint="'-H' / '--height'",
        )
    _configure_logging(verbose)
    mod = importlib.import_module(_RUNNERS[frontend])
    solved = mod.run(width=width, height=height, seed=seed, max_depth=max_depth)
    if not solved:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
