"""Tic-tac-toe on a 3x3 grid, searched with plain minimax."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cached_property

from minimax.board import LOSS, WIN, Board
from minimax.errors import ForeignMoveError

from .tictactoe_moves import PLAYER_MARKS, SIZE, Cell, Place
from .tictactoe_symmetry import Symmetry, canonical_hash

EMPTY_GRID: tuple[Cell, ...] = (Cell.EMPTY,) * (SIZE * SIZE)

# Row-major indices of every line of three.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
)


@dataclass(frozen=True)
class TicTacToe(Board[Place]):
    """Immutable tic-tac-toe position.

    Scores are +inf when ``current_player`` has three in a row, -inf when the
    opponent does and 0 otherwise.
    """

    cells: tuple[Cell, ...] = EMPTY_GRID

    def __post_init__(self) -> None:
        if len(self.cells) != SIZE * SIZE:
            raise ValueError(f"Expected {SIZE * SIZE} cells, got {len(self.cells)}.")

    @classmethod
    def from_rows(cls, rows: str, vantage_point: int | None = None, current_player: int = 0) -> TicTacToe:
        """Build a board from ``"X.O/.X./..O"`` notation.

        The player to move defaults to whoever has fewer marks, X on ties.
        """
        cells = tuple(Cell(char) for char in rows.replace("/", ""))
        if vantage_point is None:
            vantage_point = 0 if cells.count(Cell.X) <= cells.count(Cell.O) else 1
        return cls(cells=cells, vantage_point=vantage_point, current_player=current_player)

    @property
    def player_mark(self) -> Cell:
        """Mark of the player doing the evaluating."""
        return PLAYER_MARKS[self.current_player]

    @property
    def mover_mark(self) -> Cell:
        """Mark of the player whose turn it is."""
        return PLAYER_MARKS[self.vantage_point]

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row * SIZE + col]

    @cached_property
    def winner(self) -> Cell | None:
        """Return the mark with three in a row, if any."""
        for a, b, c in WINNING_LINES:
            first = self.cells[a]
            if first is not Cell.EMPTY and first is self.cells[b] and first is self.cells[c]:
                return first
        return None

    def is_full(self) -> bool:
        return Cell.EMPTY not in self.cells

    def moves(self) -> list[Place]:
        return [
            Place(row=index // SIZE, col=index % SIZE)
            for index, cell in enumerate(self.cells)
            if cell is Cell.EMPTY
        ]

    def apply_move(self, move: Place) -> TicTacToe:
        if not isinstance(move, Place):
            raise ForeignMoveError(self, move, "not a tic-tac-toe move")
        if self.cells[move.index] is not Cell.EMPTY:
            raise ForeignMoveError(self, move, "square is already taken")
        cells = list(self.cells)
        cells[move.index] = self.mover_mark
        return replace(self, cells=tuple(cells), vantage_point=1 - self.vantage_point)

    def continue_evaluating_tree(self, plies: int) -> bool:
        # Keep going while nobody has won and the grid still has room.
        return self.winner is None and not self.is_full()

    def heuristic_score(self) -> float:
        winner = self.winner
        if winner is None:
            return 0.0
        return WIN if winner is self.player_mark else LOSS

    @cached_property
    def canonical(self) -> tuple[Symmetry, int]:
        """Canonical hash and the symmetry that maps this board onto it."""
        return canonical_hash(self.cells)

    def __hash__(self) -> int:
        return self.canonical[1]

    def render(self) -> str:
        return "/".join(
            "".join(cell.value for cell in self.cells[row * SIZE : (row + 1) * SIZE])
            for row in range(SIZE)
        )

    def __str__(self) -> str:
        return self.render()
