"""Search configuration."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Mapping, Self

from .ties import TieStrategy


@dataclass(frozen=True)
class SearchConfig:
    """Settings that hold for one whole evaluation run.

    ``seed`` controls tie-break reproducibility: ``None`` builds a fresh,
    unseeded random source for every top-level call, any integer makes repeated
    calls draw the same tied moves.
    """

    ties: TieStrategy = TieStrategy.LAST_TIE_WINS
    seed: int | None = None

    def make_rng(self) -> random.Random:
        """Build the random source used to break ties."""
        return random.Random(self.seed)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable configuration object."""
        return {"ties": self.ties.value, "seed": self.seed}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a configuration from serialized data."""
        seed = data.get("seed")
        return cls(
            ties=TieStrategy(str(data.get("ties", TieStrategy.LAST_TIE_WINS.value))),
            seed=None if seed is None else int(seed),
        )
