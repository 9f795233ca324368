"""Board model for the lights-out puzzle."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

ON = "██"
OFF = "░░"


@dataclass(frozen=True)
class Board:
    """Represents the lights-out board.

    Cells are bit-packed, one integer per row: bit ``x`` of ``rows[y]`` is
    the cell at column ``x``, row ``y``.  A set bit is a lit cell.  Boards
    are immutable; every transition returns a new board.
    """

    width: int
    height: int
    rows: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Board dimensions must be positive, got "
                f"{self.width}×{self.height}."
            )
        if len(self.rows) != self.height:
            raise ValueError(
                f"Expected {self.height} rows for a "
                f"{self.width}×{self.height} board, got {len(self.rows)}."
            )
        limit = 1 << self.width
        for y, row in enumerate(self.rows):
            if not 0 <= row < limit:
                raise ValueError(
                    f"Row {y} value {row} does not fit in {self.width} columns."
                )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, width: int, height: int) -> Board:
        """Return an all-off board."""
        return cls(width=width, height=height, rows=(0,) * height)

    @classmethod
    def from_rows(cls, width: int, rows: Iterable[int]) -> Board:
        """Create a board from row integers, top row first.

        Example::

            Board.from_rows(3, [0b010, 0b111, 0b010])
        """
        rows = tuple(rows)
        return cls(width=width, height=len(rows), rows=rows)

    def randomize(self, seed: int) -> Board:
        """Return a board of the same size with every row drawn from *seed*."""
        rng = random.Random(seed)
        return Board(
            width=self.width,
            height=self.height,
            rows=tuple(rng.getrandbits(self.width) for _ in range(self.height)),
        )

    # -- queries --------------------------------------------------------------

    def get(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self.rows[y] & (1 << x) != 0

    def with_cell(self, x: int, y: int, value: bool) -> Board:
        self._check(x, y)
        rows = list(self.rows)
        rows[y] = (rows[y] & ~(1 << x)) | (int(value) << x)
        return Board(width=self.width, height=self.height, rows=tuple(rows))

    def toggle(self, x: int, y: int) -> Board:
        """Flip ``(x, y)`` and its orthogonal neighbours that are on the grid."""
        self._check(x, y)
        rows = list(self.rows)
        if y > 0:
            rows[y - 1] ^= 1 << x
        # left, self, right; clipped to the board's columns
        rows[y] ^= ((0b111 << x) >> 1) & ((1 << self.width) - 1)
        if y < self.height - 1:
            rows[y + 1] ^= 1 << x
        return Board(width=self.width, height=self.height, rows=tuple(rows))

    # -- search capabilities --------------------------------------------------

    def score(self) -> int:
        """Number of cells that are off."""
        return self.width * self.height - sum(row.bit_count() for row in self.rows)

    def end(self) -> bool:
        return self.score() == self.width * self.height

    def moves(self) -> list[tuple[Board, int]]:
        """Return ``(board, move_id)`` for every toggle worth exploring.

        A toggle whose score drops by exactly its expected flip count (three
        cells, plus one for an interior column and one for an interior row)
        only lights cells and is pruned.
        """
        init_score = self.score()
        result: list[tuple[Board, int]] = []
        for x in range(self.width):
            for y in range(self.height):
                board = self.toggle(x, y)
                expected = 3
                if 0 < x < self.width - 1:
                    expected += 1
                if 0 < y < self.height - 1:
                    expected += 1
                if board.score() != init_score - expected:
                    result.append((board, self.move_id(x, y)))
        return result

    def move_id(self, x: int, y: int) -> int:
        return x * self.width + y

    # -- rendering ------------------------------------------------------------

    def render(self, on: str = ON, off: str = OFF) -> str:
        return "\n".join(
            "".join(on if row & (1 << x) else off for x in range(self.width))
            for row in self.rows
        )

    def __str__(self) -> str:
        return self.render()

    # -- helpers --------------------------------------------------------------

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the "
                f"{self.width}×{self.height} board."
            )
