"""Base move abstraction shared by every game."""

from __future__ import annotations

from abc import ABC
from dataclasses import fields, is_dataclass
from typing import Any, ClassVar

from .serialize import to_serializable


class Move(ABC):
    """Opaque, game-defined move.

    The engine never inspects a move: it takes moves from ``Board.moves()``,
    hands them back to the same board's ``apply_move()`` and returns the chosen
    one at the root of a search. Games decide equality and ordering.
    """

    move_type: ClassVar[str] = "Move"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the move."""
        if is_dataclass(self):
            payload = {field.name: to_serializable(getattr(self, field.name)) for field in fields(self)}
        else:
            payload = {
                key: to_serializable(value)
                for key, value in vars(self).items()
                if not key.startswith("_")
            }
        payload["type"] = self.move_type
        return payload
