"""Board contract behaviour: leaves, perspective, opposition models, results."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from gametree.gametree_node import GameNode, GameTreeBuilder
from minimax.board import LOSS, WIN, Board
from minimax.errors import ForeignMoveError
from minimax.result import SearchResult
from minimax.serialize import json_dumps, to_serializable


@dataclass(frozen=True)
class _CountingBoard(Board[int]):
    """Counts its own heuristic calls; stops after ``depth`` plies."""

    total: int = 0
    depth: int = 2
    calls: list[int] | None = None

    def moves(self) -> list[int]:
        return [1, 2, 3]

    def heuristic_score(self) -> float:
        if self.calls is not None:
            self.calls.append(self.total)
        return float(self.total)

    def apply_move(self, move: int) -> _CountingBoard:
        return _CountingBoard(
            total=self.total + move,
            depth=self.depth,
            calls=self.calls,
            current_player=self.current_player,
            vantage_point=1 - self.vantage_point,
        )

    def continue_evaluating_tree(self, plies: int) -> bool:
        return plies < self.depth


@dataclass(frozen=True)
class _PuzzleBoard(Board[GameNode]):
    """Cooperative walk over a tree: every player wants the score high."""

    node: GameNode

    @property
    def maximize(self) -> bool:
        return True

    def moves(self) -> list[GameNode]:
        return list(self.node.children)

    def heuristic_score(self) -> float:
        return self.node.score if self.node.score is not None else 0.0

    def apply_move(self, move: GameNode) -> _PuzzleBoard:
        if not any(child is move for child in self.node.children):
            raise ForeignMoveError(self, move)
        return _PuzzleBoard(node=move, current_player=self.current_player, vantage_point=1 - self.vantage_point)

    def continue_evaluating_tree(self, plies: int) -> bool:
        return not self.node.is_leaf


@dataclass(frozen=True)
class _DeadEndBoard(_CountingBoard):
    def moves(self) -> list[int]:
        return []


def test_board_that_stops_at_ply_zero_returns_its_heuristic() -> None:
    board = _CountingBoard(total=4, depth=0)

    result = board.evaluate_tree(0)

    assert result.move is None
    assert result.value == 4.0
    assert result.nodes == 1


def test_two_ply_opposed_search_folds_max_then_min() -> None:
    board = _CountingBoard(depth=2)

    result = board.evaluate_tree(0)

    # Each reply minimizes to move + 1, so the maximizer picks 3 for 3 + 1.
    assert result.value == 4.0
    assert result.move == 3
    assert result.nodes == 1 + 3 + 9


def test_heuristic_is_computed_once_per_board() -> None:
    calls: list[int] = []
    board = _CountingBoard(total=7, calls=calls)

    assert board.value == board.value == 7.0
    assert calls == [7]
    assert board.heuristic_score() == board.heuristic_score()


def test_apply_move_returns_a_new_board() -> None:
    board = _CountingBoard(total=1)

    child = board.apply_move(2)

    assert child is not board
    assert board.total == 1
    assert child.total == 3
    assert child.vantage_point == 1
    assert child.current_player == board.current_player
    with pytest.raises(AttributeError):
        board.total = 9  # type: ignore[misc]


def test_non_terminal_board_without_moves_falls_back_to_heuristic() -> None:
    board = _DeadEndBoard(total=5, depth=3)

    move, value = board.evaluate_tree(0)

    assert move is None
    assert value == 5.0


def test_cooperative_players_all_maximize() -> None:
    builder = GameTreeBuilder("11")
    builder.add_children("11", "21", "22")
    builder.add_children("21", "31-1", "32-8")
    builder.add_children("22", "33-5", "34-6")
    board = _PuzzleBoard(node=builder.root)

    result = board.evaluate_tree(0)

    assert result.value == 8.0
    assert result.move is builder.node("21")


def test_minimizing_root_reports_the_smallest_value() -> None:
    # Player 1 evaluates while player 0 moves: a root minimizer.
    board = _CountingBoard(depth=1, current_player=1)

    result = board.evaluate_tree(0)

    assert not board.maximize
    assert result.value == 1.0
    assert result.move == 1


def test_result_unpacks_and_serializes() -> None:
    result = SearchResult(move=None, value=LOSS, nodes=3, cutoffs=1)

    move, value = result

    assert move is None
    assert value == LOSS
    assert result.to_dict() == {"move": None, "value": "-inf", "nodes": 3, "cutoffs": 1}
    assert json.loads(json_dumps(result)) == result.to_dict()


def test_sentinels_serialize_as_strings() -> None:
    assert to_serializable([WIN, LOSS, 1.5]) == ["inf", "-inf", 1.5]
    with pytest.raises(TypeError):
        to_serializable(object())


def test_board_digest_is_stable() -> None:
    assert _CountingBoard(total=2).board_digest() == _CountingBoard(total=2).board_digest()
    assert _CountingBoard(total=2).board_digest() != _CountingBoard(total=3).board_digest()
