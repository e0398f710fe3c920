"""Pawn colors and move definitions for Hexapawn."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from minimax.move import Move


class PawnColor(str, Enum):
    """Contents of one square."""

    EMPTY = "."
    WHITE = "W"
    BLACK = "B"

    @property
    def foe(self) -> PawnColor:
        if self is PawnColor.WHITE:
            return PawnColor.BLACK
        if self is PawnColor.BLACK:
            return PawnColor.WHITE
        raise ValueError("An empty square has no foe.")

    @property
    def direction(self) -> int:
        """Row step of a forward move: White climbs, Black descends."""
        return 1 if self is PawnColor.WHITE else -1


# Player 0 is White and moves first from row 0.
PLAYER_COLORS: tuple[PawnColor, PawnColor] = (PawnColor.WHITE, PawnColor.BLACK)


class MoveKind(str, Enum):
    """Ways a pawn can move."""

    ADVANCE = "ADVANCE"
    CAPTURE_LEFT = "CAPLEFT"
    CAPTURE_RIGHT = "CAPRIGHT"

    @property
    def column_step(self) -> int:
        if self is MoveKind.CAPTURE_LEFT:
            return -1
        if self is MoveKind.CAPTURE_RIGHT:
            return 1
        return 0


@dataclass(frozen=True)
class PawnMove(Move):
    """Move the ``color`` pawn standing on ``(row, col)``."""

    color: PawnColor
    row: int
    col: int
    kind: MoveKind
    move_type = "PawnMove"

    @property
    def target(self) -> tuple[int, int]:
        return self.row + self.color.direction, self.col + self.kind.column_step

    @property
    def is_capture(self) -> bool:
        return self.kind is not MoveKind.ADVANCE

    def __str__(self) -> str:
        return f"{self.color.value}({self.row}, {self.col}) {self.kind.value}"
