"""Tic-tac-toe package exports."""

from .tictactoe_board import WINNING_LINES, TicTacToe
from .tictactoe_moves import PLAYER_MARKS, Cell, Place
from .tictactoe_symmetry import Symmetry, canonical_hash, encode, transform

__all__ = [
    "Cell",
    "PLAYER_MARKS",
    "Place",
    "Symmetry",
    "TicTacToe",
    "WINNING_LINES",
    "canonical_hash",
    "encode",
    "transform",
]
