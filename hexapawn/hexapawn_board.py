"""Hexapawn: pawns advance straight and capture diagonally on a small grid."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cached_property
from typing import Iterator

from minimax.adversarial import TwoPlayerAdversarialBoard
from minimax.board import LOSS, WIN
from minimax.errors import ForeignMoveError

from .hexapawn_moves import PLAYER_COLORS, MoveKind, PawnColor, PawnMove

PAWN_VALUE = 10
ADVANCE_VALUE = 7

Grid = tuple[tuple[PawnColor, ...], ...]


def starting_grid(width: int, height: int) -> Grid:
    """White fills row 0, Black fills the top row, everything between is empty."""
    rows = [(PawnColor.WHITE,) * width]
    rows.extend((PawnColor.EMPTY,) * width for _ in range(height - 2))
    rows.append((PawnColor.BLACK,) * width)
    return tuple(rows)


@dataclass(frozen=True)
class Hexapawn(TwoPlayerAdversarialBoard[PawnMove]):
    """Immutable Hexapawn position.

    A side wins by moving a pawn onto the far row, by capturing every enemy
    pawn, or by leaving the opponent to move with no legal move. ``max_plies``
    optionally cuts the search off below that depth.
    """

    width: int = 3
    height: int = 3
    max_plies: int | None = None
    grid: Grid = ()

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("width must be >= 1.")
        if self.height < 3:
            raise ValueError("height must be >= 3.")
        if not self.grid:
            object.__setattr__(self, "grid", starting_grid(self.width, self.height))
        elif len(self.grid) != self.height or any(len(row) != self.width for row in self.grid):
            raise ValueError(f"Grid must be {self.height} rows of {self.width} squares.")

    @property
    def player_color(self) -> PawnColor:
        return PLAYER_COLORS[self.current_player]

    @property
    def mover_color(self) -> PawnColor:
        return PLAYER_COLORS[self.vantage_point]

    def square(self, row: int, col: int) -> PawnColor:
        return self.grid[row][col]

    def pawns(self, color: PawnColor) -> Iterator[tuple[int, int]]:
        for row, squares in enumerate(self.grid):
            for col, square in enumerate(squares):
                if square is color:
                    yield row, col

    def pawn_count(self, color: PawnColor) -> int:
        return sum(row.count(color) for row in self.grid)

    def rows_from_start(self, color: PawnColor, row: int) -> int:
        return row if color is PawnColor.WHITE else self.height - 1 - row

    def furthest_advance(self, color: PawnColor) -> int:
        """Rows travelled by the most advanced ``color`` pawn, -1 with no pawns left."""
        return max((self.rows_from_start(color, row) for row, _ in self.pawns(color)), default=-1)

    @cached_property
    def winner(self) -> PawnColor | None:
        """Side that has promoted a pawn or wiped out the other side."""
        if self.furthest_advance(PawnColor.WHITE) == self.height - 1 or self.pawn_count(PawnColor.BLACK) == 0:
            return PawnColor.WHITE
        if self.furthest_advance(PawnColor.BLACK) == self.height - 1 or self.pawn_count(PawnColor.WHITE) == 0:
            return PawnColor.BLACK
        return None

    def _can_move(self, color: PawnColor, row: int, col: int, kind: MoveKind) -> bool:
        target_row = row + color.direction
        target_col = col + kind.column_step
        if not (0 <= target_row < self.height and 0 <= target_col < self.width):
            return False
        occupant = self.grid[target_row][target_col]
        if kind is MoveKind.ADVANCE:
            return occupant is PawnColor.EMPTY
        return occupant is color.foe

    def moves(self) -> list[PawnMove]:
        color = self.mover_color
        captures: list[PawnMove] = []
        advances: list[PawnMove] = []
        for row, col in self.pawns(color):
            # Captures are listed ahead of advances as the likelier good moves.
            for kind in (MoveKind.CAPTURE_RIGHT, MoveKind.CAPTURE_LEFT):
                if self._can_move(color, row, col, kind):
                    captures.append(PawnMove(color=color, row=row, col=col, kind=kind))
            if self._can_move(color, row, col, MoveKind.ADVANCE):
                advances.append(PawnMove(color=color, row=row, col=col, kind=MoveKind.ADVANCE))
        return captures + advances

    def apply_move(self, move: PawnMove) -> Hexapawn:
        if not isinstance(move, PawnMove):
            raise ForeignMoveError(self, move, "not a Hexapawn move")
        if move.color is not self.mover_color:
            raise ForeignMoveError(self, move, f"it is {self.mover_color.name}'s turn")
        if not (0 <= move.row < self.height and 0 <= move.col < self.width) or self.grid[move.row][move.col] is not move.color:
            raise ForeignMoveError(self, move, "no such pawn on this board")
        if not self._can_move(move.color, move.row, move.col, move.kind):
            raise ForeignMoveError(self, move, "target square is not reachable")

        target_row, target_col = move.target
        rows = [list(row) for row in self.grid]
        rows[move.row][move.col] = PawnColor.EMPTY
        rows[target_row][target_col] = move.color
        return replace(
            self,
            grid=tuple(tuple(row) for row in rows),
            vantage_point=1 - self.vantage_point,
        )

    def continue_evaluating_tree(self, plies: int) -> bool:
        if self.max_plies is not None and plies >= self.max_plies:
            return False
        return self.winner is None

    def heuristic_score(self) -> float:
        winner = self.winner
        if winner is not None:
            return WIN if winner is self.player_color else LOSS
        if not self.moves():
            # Stuck with no legal move loses.
            return LOSS if self.mover_color is self.player_color else WIN

        value = (self.pawn_count(PawnColor.WHITE) - self.pawn_count(PawnColor.BLACK)) * PAWN_VALUE
        value += (self.furthest_advance(PawnColor.WHITE) - self.furthest_advance(PawnColor.BLACK)) * ADVANCE_VALUE
        # Computed for White; flip for Black.
        return float(value if self.player_color is PawnColor.WHITE else -value)

    def render(self) -> str:
        rows = ("".join(square.value for square in row) for row in reversed(self.grid))
        return "/".join(rows) + f" : {self.mover_color.value}"

    def __str__(self) -> str:
        return self.render()
