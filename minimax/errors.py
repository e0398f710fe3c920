"""Structured exceptions raised by the search engine and board implementations."""

from __future__ import annotations

from typing import Any


class SearchError(Exception):
    """Base class for engine-level exceptions."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {"type": self.__class__.__name__, "message": str(self)}


class ContractViolationError(SearchError):
    """Raised when a Board implementation breaks the evaluation contract.

    These are programmer errors in a game, never runtime game conditions, so the
    engine reports them immediately and never retries.
    """


class OppositionError(ContractViolationError):
    """Raised when a two-player adversarial child is not set up in opposition."""

    def __init__(
        self,
        reason: str,
        *,
        parent_vantage: int,
        child_vantage: int,
        parent_maximize: bool,
        child_maximize: bool,
    ):
        self.reason = reason
        self.parent_vantage = parent_vantage
        self.child_vantage = child_vantage
        self.parent_maximize = parent_maximize
        self.child_maximize = child_maximize
        super().__init__(
            f"{reason} (vantage {parent_vantage} -> {child_vantage}, "
            f"maximize {parent_maximize} -> {child_maximize})"
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            {
                "reason": self.reason,
                "parent_vantage": self.parent_vantage,
                "child_vantage": self.child_vantage,
                "parent_maximize": self.parent_maximize,
                "child_maximize": self.child_maximize,
            }
        )
        return payload


class ForeignMoveError(ContractViolationError):
    """Raised when a move is applied to a board that did not produce it."""

    def __init__(self, board: Any, move: Any, reason: str | None = None):
        self.board = board
        self.move = move
        self.reason = reason
        message = f"{type(board).__name__} cannot apply move {move!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            {
                "board": type(self.board).__name__,
                "move": getattr(self.move, "to_dict", lambda: repr(self.move))(),
            }
        )
        if self.reason is not None:
            payload["reason"] = self.reason
        return payload
