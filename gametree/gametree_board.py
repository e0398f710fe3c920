"""Two-player board that walks a hand-built game tree."""

from __future__ import annotations

from dataclasses import dataclass, replace

from minimax.adversarial import TwoPlayerAdversarialBoard
from minimax.errors import ForeignMoveError

from .gametree_node import GameNode, GameTreeBuilder


@dataclass(frozen=True)
class GameTreeBoard(TwoPlayerAdversarialBoard[GameNode]):
    """Position at ``node``; the moves are the node's children."""

    node: GameNode

    @classmethod
    def from_builder(cls, builder: GameTreeBuilder) -> GameTreeBoard:
        return cls(node=builder.root)

    def moves(self) -> list[GameNode]:
        return list(self.node.children)

    def heuristic_score(self) -> float:
        return self.node.score if self.node.score is not None else 0.0

    def apply_move(self, move: GameNode) -> GameTreeBoard:
        if not any(child is move for child in self.node.children):
            raise ForeignMoveError(self, move, f"not a child of {self.node.label}")
        return replace(self, node=move, vantage_point=self.opponent)

    def continue_evaluating_tree(self, plies: int) -> bool:
        return not self.node.is_leaf

    def __str__(self) -> str:
        return self.node.label
