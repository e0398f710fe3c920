"""Symmetry-canonical hashing for 3x3 boards.

Each board encodes to an 18-bit integer, two bits per square in row-major
order starting from the low bits: ``00`` empty, ``01`` X, ``10`` O. The
canonical hash is the smallest encoding over the eight rotations and
reflections of the square, so boards that are symmetric images of each other
hash alike.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .tictactoe_moves import SIZE, Cell

_LAST = SIZE - 1
_CELL_BITS = {Cell.EMPTY: 0, Cell.X: 1, Cell.O: 2}


class Symmetry(str, Enum):
    """The dihedral symmetries of the square. Flips mirror left-right first."""

    NONE = "none"
    ROTATE_90 = "rotate_90"
    ROTATE_180 = "rotate_180"
    ROTATE_270 = "rotate_270"
    FLIP = "flip"
    FLIP_ROTATE_90 = "flip_rotate_90"
    FLIP_ROTATE_180 = "flip_rotate_180"
    FLIP_ROTATE_270 = "flip_rotate_270"

    def source(self, row: int, col: int) -> tuple[int, int]:
        """Return the square of the original board that lands on ``(row, col)``."""
        if self is Symmetry.NONE:
            return row, col
        if self is Symmetry.ROTATE_90:
            return _LAST - col, row
        if self is Symmetry.ROTATE_180:
            return _LAST - row, _LAST - col
        if self is Symmetry.ROTATE_270:
            return col, _LAST - row
        if self is Symmetry.FLIP:
            return row, _LAST - col
        if self is Symmetry.FLIP_ROTATE_90:
            return _LAST - col, _LAST - row
        if self is Symmetry.FLIP_ROTATE_180:
            return _LAST - row, col
        return col, row

    @property
    def inverse(self) -> Symmetry:
        """Return the symmetry that undoes this one."""
        if self is Symmetry.ROTATE_90:
            return Symmetry.ROTATE_270
        if self is Symmetry.ROTATE_270:
            return Symmetry.ROTATE_90
        # Every reflection, the half turn and the identity are their own inverse.
        return self


def transform(cells: Sequence[Cell], symmetry: Symmetry) -> tuple[Cell, ...]:
    """Return row-major cells of the board seen through ``symmetry``."""
    result = []
    for row in range(SIZE):
        for col in range(SIZE):
            src_row, src_col = symmetry.source(row, col)
            result.append(cells[src_row * SIZE + src_col])
    return tuple(result)


def encode(cells: Sequence[Cell]) -> int:
    """Pack row-major cells into the two-bits-per-square integer."""
    code = 0
    for shift, cell in enumerate(cells):
        code |= _CELL_BITS[cell] << (2 * shift)
    return code


def canonical_hash(cells: Sequence[Cell]) -> tuple[Symmetry, int]:
    """Return the smallest encoding over all symmetries and the symmetry producing it."""
    best_symmetry = Symmetry.NONE
    best_code = encode(cells)
    for symmetry in Symmetry:
        code = encode(transform(cells, symmetry))
        if code < best_code:
            best_symmetry, best_code = symmetry, code
    return best_symmetry, best_code
