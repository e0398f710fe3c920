"""Alpha-beta search for the common case of two players in strict opposition."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

from .board import LOSS, WIN, Board, MoveT, SearchContext, indent
from .config import SearchConfig
from .errors import ContractViolationError, OppositionError
from .result import SearchResult
from .ties import TieBreaker

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TwoPlayerAdversarialBoard(Board[MoveT]):
    """Board for players ``0`` and ``1`` taking turns against each other.

    ``evaluate_tree`` runs alpha-beta instead of plain minimax. Every board
    produced by ``apply_move`` is checked: it must be another
    ``TwoPlayerAdversarialBoard``, the other player must be to move, and its
    ``maximize`` must be the negation of ours. The game still sets those values
    itself in ``apply_move``; the search only verifies them.
    """

    @property
    def opponent(self) -> int:
        return 1 - self.vantage_point

    def evaluate_tree(
        self,
        plies: int = 0,
        rng: random.Random | None = None,
        *,
        config: SearchConfig | None = None,
    ) -> SearchResult:
        return self.evaluate_tree_alpha_beta(plies, LOSS, WIN, rng, config=config)

    def evaluate_tree_alpha_beta(
        self,
        plies: int,
        alpha: float,
        beta: float,
        rng: random.Random | None = None,
        *,
        config: SearchConfig | None = None,
    ) -> SearchResult:
        """Evaluate the tree with alpha-beta pruning inside the window ``[alpha, beta]``.

        ``beta`` is the lowest value an ancestor minimizer can already hold us
        to: once a maximizer reaches it, the remaining siblings can only raise
        a value that ancestor will discard anyway, so they are skipped.
        ``alpha`` is the mirror image for ancestor maximizers.

        Only this board breaks ties between moves. Here the window is kept
        open one step past both bounds and siblings are only skipped once the
        best value lies strictly outside the window, so every move tied for
        best is evaluated exactly and offered to the tie breaker.
        """
        context = self.start_search(rng, config)
        move, value = self._alpha_beta(plies, alpha, beta, context, choose_move=True)
        return context.result(move, value)

    def _alpha_beta(
        self,
        plies: int,
        alpha: float,
        beta: float,
        context: SearchContext,
        choose_move: bool = False,
    ) -> tuple[MoveT | None, float]:
        context.nodes += 1
        trace = LOGGER.isEnabledFor(logging.DEBUG)
        padding = indent(plies) if trace else ""
        if trace:
            LOGGER.debug(
                "%sEvaluating %s for player %d, %s (alpha, beta) = (%s, %s)",
                padding,
                self,
                self.vantage_point,
                "max" if self.maximize else "min",
                alpha,
                beta,
            )

        if not self.continue_evaluating_tree(plies):
            if trace:
                LOGGER.debug("%sValue: %s", padding, self.value)
            return None, self.value

        breaker = TieBreaker(context.ties, self.maximize) if choose_move else None
        best = LOSS if self.maximize else WIN
        # The root keeps going past a value equal to a bound; later moves may tie it.
        prune_on_bound = breaker is None
        found_move = False

        for move in self.moves():
            found_move = True
            if trace:
                LOGGER.debug("%sPlayer %d trying move %s", padding, self.vantage_point, move)
            child = self._checked_child(move)

            child_alpha, child_beta = alpha, beta
            if breaker is not None:
                child_alpha = math.nextafter(alpha, -math.inf)
                child_beta = math.nextafter(beta, math.inf)
            _, value = child._alpha_beta(plies + 1, child_alpha, child_beta, context)

            if breaker is not None:
                breaker.offer(move, value)

            if self.maximize:
                best = max(best, value)
                if best > beta or (prune_on_bound and best == beta):
                    context.cutoffs += 1
                    if trace:
                        LOGGER.debug("%sPruned: %s >= %s", padding, best, beta)
                    break
                alpha = max(alpha, value)
            else:
                best = min(best, value)
                if best < alpha or (prune_on_bound and best == alpha):
                    context.cutoffs += 1
                    if trace:
                        LOGGER.debug("%sPruned: %s <= %s", padding, best, alpha)
                    break
                beta = min(beta, value)

        if not found_move:
            if trace:
                LOGGER.debug("%sNo legal moves, falling back to %s", padding, self.value)
            return None, self.value

        if trace:
            LOGGER.debug("%sFinal value: %s", padding, best)
        return (breaker.choose(context.rng) if breaker is not None else None), best

    def _checked_child(self, move: MoveT) -> TwoPlayerAdversarialBoard[MoveT]:
        child = self.apply_move(move)
        if not isinstance(child, TwoPlayerAdversarialBoard):
            raise ContractViolationError(
                f"{type(self).__name__}.apply_move() must return a TwoPlayerAdversarialBoard, "
                f"got {type(child).__name__}."
            )
        if child.vantage_point != self.opponent:
            raise OppositionError(
                "Adversarial opponent wasn't set up correctly in apply_move()",
                parent_vantage=self.vantage_point,
                child_vantage=child.vantage_point,
                parent_maximize=self.maximize,
                child_maximize=child.maximize,
            )
        if child.maximize == self.maximize:
            raise OppositionError(
                "Two-player adversarial boards require the players to be in opposition",
                parent_vantage=self.vantage_point,
                child_vantage=child.vantage_point,
                parent_maximize=self.maximize,
                child_maximize=child.maximize,
            )
        return child
