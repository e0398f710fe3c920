"""Board contract and the plain minimax evaluator."""

from __future__ import annotations

import logging
import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from functools import cached_property
from typing import Any, ClassVar, Generic, Iterable, TypeVar

from .config import SearchConfig
from .result import SearchResult
from .serialize import digest, to_serializable
from .ties import TieBreaker, TieStrategy

LOGGER = logging.getLogger(__name__)

WIN = math.inf
LOSS = -math.inf

MoveT = TypeVar("MoveT")


@dataclass
class SearchContext:
    """Mutable bookkeeping shared by every node of one top-level search."""

    rng: random.Random
    ties: TieStrategy
    nodes: int = 0
    cutoffs: int = 0

    def result(self, move: Any | None, value: float) -> SearchResult:
        return SearchResult(move=move, value=value, nodes=self.nodes, cutoffs=self.cutoffs)


def indent(plies: int) -> str:
    return " " * (4 * plies)


@dataclass(frozen=True, kw_only=True)
class Board(ABC, Generic[MoveT]):
    """Immutable snapshot of one position plus the metadata that drives a search.

    ``current_player`` is the player in whose frame every score is expressed.
    It is fixed for a whole search and ``apply_move`` never changes it.
    ``vantage_point`` is the player to move at this node; setting it (and, for
    unusual opposition models, ``maximize``) is entirely up to the game's
    ``apply_move``.

    Higher scores are always better for ``current_player``. Whether a node
    takes the highest or the lowest child score is decided by ``maximize``,
    which defaults to plain two-player opposition but can be overridden for
    puzzles (nobody opposes), cooperative games, or secret and shifting
    alliances.
    """

    current_player: int = 0
    vantage_point: int = 0

    search_config: ClassVar[SearchConfig] = SearchConfig()

    @property
    def maximize(self) -> bool:
        """Whether this node keeps the largest child value (else the smallest)."""
        return self.vantage_point == self.current_player

    @cached_property
    def value(self) -> float:
        """Heuristic score of this snapshot, computed at most once."""
        return self.heuristic_score()

    @abstractmethod
    def moves(self) -> Iterable[MoveT]:
        """Return the legal moves for the player at ``vantage_point``."""

    @abstractmethod
    def heuristic_score(self) -> float:
        """Return the no-lookahead value of this board for ``current_player``."""

    @abstractmethod
    def apply_move(self, move: MoveT) -> Board[MoveT]:
        """Return a new board with ``move`` made and the next vantage point set."""

    @abstractmethod
    def continue_evaluating_tree(self, plies: int) -> bool:
        """Return False when this node is a search leaf.

        ``plies`` counts from 0 at the board the search was started on. Games
        return False for decided positions and may also cut off at a depth.
        """

    def evaluate_tree(
        self,
        plies: int = 0,
        rng: random.Random | None = None,
        *,
        config: SearchConfig | None = None,
    ) -> SearchResult:
        """Return the best move (if any) and the value of the game tree below this board."""
        return self.evaluate_tree_minimax(plies, rng, config=config)

    def evaluate_tree_minimax(
        self,
        plies: int = 0,
        rng: random.Random | None = None,
        *,
        config: SearchConfig | None = None,
    ) -> SearchResult:
        """Exhaustive minimax over the whole tree; works for any opposition model.

        Ties between equally good moves are broken only at this board, the one
        whose move the caller sees. ``rng`` wins over the config's seed.
        """
        context = self.start_search(rng, config)
        move, value = self._minimax(plies, context, choose_move=True)
        return context.result(move, value)

    def start_search(self, rng: random.Random | None, config: SearchConfig | None) -> SearchContext:
        settings = config or self.search_config
        return SearchContext(rng=rng if rng is not None else settings.make_rng(), ties=settings.ties)

    def _minimax(self, plies: int, context: SearchContext, choose_move: bool = False) -> tuple[MoveT | None, float]:
        context.nodes += 1
        trace = LOGGER.isEnabledFor(logging.DEBUG)
        padding = indent(plies) if trace else ""
        if trace:
            LOGGER.debug(
                "%sEvaluating %s for player %d, %s",
                padding,
                self,
                self.vantage_point,
                "max" if self.maximize else "min",
            )

        if not self.continue_evaluating_tree(plies):
            if trace:
                LOGGER.debug("%sValue: %s", padding, self.value)
            return None, self.value

        breaker = TieBreaker(context.ties, self.maximize)
        for move in self.moves():
            if trace:
                LOGGER.debug("%sPlayer %d trying move %s", padding, self.vantage_point, move)
            child = self.apply_move(move)
            # The reply to this move changes with depth, so the child's move is discarded.
            _, child_value = child._minimax(plies + 1, context)
            breaker.offer(move, child_value)

        if breaker.best_value is None:
            if trace:
                LOGGER.debug("%sNo legal moves, falling back to %s", padding, self.value)
            return None, self.value

        if trace:
            LOGGER.debug("%sFinal value: %s", padding, breaker.best_value)
        return (breaker.choose(context.rng) if choose_move else None), breaker.best_value

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary of the board's fields."""
        return {field.name: to_serializable(getattr(self, field.name)) for field in fields(self)}

    def board_digest(self) -> str:
        """Return a deterministic digest for logging and comparisons."""
        return digest(self.to_dict())

