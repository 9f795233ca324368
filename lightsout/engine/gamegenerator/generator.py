"""Generates reproducible random lights-out boards."""

from __future__ import annotations

import random

from lightsout.models.board import Board


class GameGenerator:
    """Creates boards from explicit seeds so any run can be reproduced."""

    @staticmethod
    def new_seed() -> int:
        """Return a fresh 64-bit seed from the OS entropy source."""
        return random.SystemRandom().getrandbits(64)

    @staticmethod
    def generate(width: int, height: int, seed: int | None = None) -> tuple[int, Board]:
        """Return ``(seed, board)``; a seed is drawn when none is given."""
        if seed is None:
            seed = GameGenerator.new_seed()
        return seed, Board.empty(width, height).randomize(seed)
