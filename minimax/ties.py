"""Tie-break policies for choosing among equally good moves."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any


class TieStrategy(str, Enum):
    """How a search picks among moves tied at the extremal value."""

    LAST_TIE_WINS = "last_tie_wins"
    RANDOMLY_SELECT_FROM_TIES = "randomly_select_from_ties"


class TieBreaker:
    """Folds ``(move, value)`` offers for one node and remembers the tied best moves.

    A strictly better value resets the tie set, an equal value joins it and a
    worse value is dropped. The first offer is always recorded, even when its
    value is the worst possible score.
    """

    def __init__(self, strategy: TieStrategy, maximize: bool):
        self.strategy = strategy
        self.maximize = maximize
        self.best_value: float | None = None
        self._ties: list[Any] = []

    def offer(self, move: Any, value: float) -> None:
        """Fold one child's value into the running best."""
        if self.best_value is None or self._improves(value, self.best_value):
            self.best_value = value
            self._ties = [move]
        elif value == self.best_value:
            self._ties.append(move)

    def _improves(self, value: float, best: float) -> bool:
        return value > best if self.maximize else value < best

    @property
    def ties(self) -> tuple[Any, ...]:
        return tuple(self._ties)

    def choose(self, rng: random.Random) -> Any | None:
        """Return the selected move, or None if nothing was offered."""
        if not self._ties:
            return None
        if self.strategy is TieStrategy.RANDOMLY_SELECT_FROM_TIES:
            return rng.choice(self._ties)
        return self._ties[-1]
