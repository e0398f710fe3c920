"""Hand-built game trees for exercising the search engine."""

from .gametree_board import GameTreeBoard
from .gametree_node import GameNode, GameTreeBuilder, shorthand_label

__all__ = [
    "GameNode",
    "GameTreeBoard",
    "GameTreeBuilder",
    "shorthand_label",
]
