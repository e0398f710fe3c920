"""Search result record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from .serialize import to_serializable


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one top-level evaluation.

    Unpacks as ``move, value = result``.
    """

    move: Any | None
    value: float
    nodes: int = 1
    cutoffs: int = 0

    def __iter__(self) -> Iterator[Any]:
        return iter((self.move, self.value))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable result object."""
        return {
            "move": to_serializable(self.move),
            "value": to_serializable(self.value),
            "nodes": self.nodes,
            "cutoffs": self.cutoffs,
        }
