"""Move definitions and cell states for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from minimax.move import Move

SIZE = 3


class Cell(str, Enum):
    """Contents of one grid square."""

    EMPTY = "."
    X = "X"
    O = "O"


# Player 0 plays X and moves first.
PLAYER_MARKS: tuple[Cell, Cell] = (Cell.X, Cell.O)


@dataclass(frozen=True)
class Place(Move):
    """Mark the square at ``(row, col)``."""

    row: int
    col: int
    move_type = "Place"

    def __post_init__(self) -> None:
        if not (0 <= self.row < SIZE and 0 <= self.col < SIZE):
            raise ValueError(f"Square ({self.row}, {self.col}) is off the board.")

    @property
    def index(self) -> int:
        return self.row * SIZE + self.col

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
