from lightsout.models.board import Board
from lightsout.models.puzzle import Puzzle

__all__ = ["Board", "Puzzle"]
