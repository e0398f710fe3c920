"""Nodes of a hand-built game tree and the builder that wires them up."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from minimax.move import Move

LabelConverter = Callable[[str], tuple[str, float | None]]


@dataclass(frozen=True, eq=False)
class GameNode(Move):
    """One position of the tree, also used as the move that leads to it.

    Nodes compare by identity, so two nodes may share a label. A node is built
    with all of its children and never changes afterwards.
    """

    label: str
    score: float | None = None
    children: tuple[GameNode, ...] = ()
    move_type = "GameNode"

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __str__(self) -> str:
        return self.label


def shorthand_label(shorthand: str) -> tuple[str, float | None]:
    """Expand ``"rc..."`` or ``"rc...-s"`` into a label and optional leaf score.

    The first character is the row and the rest up to an optional dash is the
    column, so ``"512-9"`` becomes ``("(5, 12) - 9", 9.0)``. Only single-digit
    rows are supported.
    """
    row, rest = shorthand[:1], shorthand[1:]
    if "-" not in rest:
        return f"({row}, {rest})", None
    col, score = rest.split("-", 1)
    return f"({row}, {col}) - {score}", float(score)


class GameTreeBuilder:
    """Builds a tree from parent/children declarations keyed by shorthand names.

    Declarations are collected first. The first call to ``root`` or ``node``
    builds the immutable nodes, after which the tree can no longer grow.
    """

    def __init__(self, root: str, convert: LabelConverter | None = None):
        self._convert = convert or shorthand_label
        self._root_key = root
        self._labels: dict[str, tuple[str, float | None]] = {}
        self._children: dict[str, list[str]] = {}
        self._nodes: dict[str, GameNode] | None = None
        self._declare(root)

    def _declare(self, key: str) -> None:
        if key in self._labels:
            raise ValueError(f"Node {key!r} is already in the tree.")
        self._labels[key] = self._convert(key)
        self._children[key] = []

    def add_children(self, parent: str, *children: str) -> None:
        """Attach new nodes, in order, below the already declared ``parent``."""
        if self._nodes is not None:
            raise RuntimeError("The tree has already been built.")
        if parent not in self._labels:
            raise KeyError(f"Unknown parent node {parent!r}.")
        for child in children:
            self._declare(child)
            self._children[parent].append(child)

    def _build(self) -> dict[str, GameNode]:
        if self._nodes is None:
            nodes: dict[str, GameNode] = {}

            def build(key: str) -> GameNode:
                label, score = self._labels[key]
                node = GameNode(label=label, score=score, children=tuple(build(child) for child in self._children[key]))
                nodes[key] = node
                return node

            build(self._root_key)
            self._nodes = nodes
        return self._nodes

    @property
    def root(self) -> GameNode:
        return self._build()[self._root_key]

    def node(self, key: str) -> GameNode:
        return self._build()[key]
