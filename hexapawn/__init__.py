"""Hexapawn package exports."""

from .hexapawn_board import ADVANCE_VALUE, PAWN_VALUE, Hexapawn, starting_grid
from .hexapawn_moves import PLAYER_COLORS, MoveKind, PawnColor, PawnMove

__all__ = [
    "ADVANCE_VALUE",
    "Hexapawn",
    "MoveKind",
    "PAWN_VALUE",
    "PLAYER_COLORS",
    "PawnColor",
    "PawnMove",
    "starting_grid",
]
