"""Alpha-beta search against the textbook demonstration tree and random trees."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

import pytest

from gametree.gametree_board import GameTreeBoard
from gametree.gametree_node import GameNode, GameTreeBuilder
from minimax.board import Board
from minimax.errors import ContractViolationError, ForeignMoveError, OppositionError


def _demonstration_tree() -> GameTreeBuilder:
    # The tree from the alpha-beta pruning article on Wikipedia: root fan-out
    # 3, leaves 5,6,7,4,5,3,6,6,9,7,5,9,8,6, minimax value 6.
    builder = GameTreeBuilder("11")
    builder.add_children("11", "21", "22", "23")
    builder.add_children("21", "31", "32")
    builder.add_children("22", "33", "34")
    builder.add_children("23", "35", "36")
    builder.add_children("31", "41", "42")
    builder.add_children("32", "43")
    builder.add_children("33", "44", "45")
    builder.add_children("34", "46")
    builder.add_children("35", "47")
    builder.add_children("36", "48", "49")
    builder.add_children("41", "51-5", "52-6")
    builder.add_children("42", "53-7", "54-4", "55-5")
    builder.add_children("43", "56-3")
    builder.add_children("44", "57-6")
    builder.add_children("45", "58-6", "59-9")
    builder.add_children("46", "510-7")
    builder.add_children("47", "511-5")
    builder.add_children("48", "512-9", "513-8")
    builder.add_children("49", "514-6")
    return builder


def _random_tree(rng: random.Random, depth: int, label: str = "root") -> GameNode:
    if depth == 0:
        return GameNode(label=label, score=float(rng.randint(-9, 9)))
    children = tuple(_random_tree(rng, depth - 1, f"{label}.{index}") for index in range(rng.randint(0, 3)))
    if not children:
        return GameNode(label=label, score=float(rng.randint(-9, 9)))
    return GameNode(label=label, children=children)


def test_demonstration_tree_evaluates_to_six() -> None:
    builder = _demonstration_tree()
    board = GameTreeBoard.from_builder(builder)

    result = board.evaluate_tree(0)

    assert result.value == 6
    assert result.move is builder.node("22")


def test_demonstration_tree_prunes_but_agrees_with_minimax() -> None:
    board = GameTreeBoard.from_builder(_demonstration_tree())

    pruned = board.evaluate_tree_alpha_beta(0, float("-inf"), float("inf"))
    exhaustive = board.evaluate_tree_minimax(0)

    assert pruned.value == exhaustive.value == 6
    assert exhaustive.nodes == 33
    assert exhaustive.cutoffs == 0
    assert pruned.nodes < exhaustive.nodes
    assert pruned.cutoffs > 0


@pytest.mark.parametrize("seed", range(40))
def test_alpha_beta_matches_minimax_on_random_trees(seed: int) -> None:
    rng = random.Random(seed)
    board = GameTreeBoard(node=_random_tree(rng, depth=5))

    pruned = board.evaluate_tree(0)
    exhaustive = board.evaluate_tree_minimax(0)

    assert pruned.value == exhaustive.value
    assert pruned.nodes <= exhaustive.nodes


@pytest.mark.parametrize("seed", range(10))
def test_alpha_beta_matches_minimax_from_the_minimizing_side(seed: int) -> None:
    rng = random.Random(1000 + seed)
    # Player 1 evaluates while player 0 is to move, so the root minimizes.
    board = GameTreeBoard(node=_random_tree(rng, depth=4), current_player=1)

    assert not board.maximize
    assert board.evaluate_tree(0).value == board.evaluate_tree_minimax(0).value


def test_leaf_root_returns_its_own_score() -> None:
    board = GameTreeBoard(node=GameNode(label="alone", score=3.5))

    move, value = board.evaluate_tree(0)

    assert move is None
    assert value == 3.5


def test_narrow_window_fails_high_with_a_bound() -> None:
    board = GameTreeBoard.from_builder(_demonstration_tree())

    result = board.evaluate_tree_alpha_beta(0, float("-inf"), 4.0)

    # True value is 6; a window capped at 4 only proves "at least 4".
    assert result.value >= 4.0


@dataclass(frozen=True)
class _ForgetfulBoard(GameTreeBoard):
    def apply_move(self, move: GameNode) -> GameTreeBoard:
        # Never hands the turn over.
        return replace(self, node=move)


@dataclass(frozen=True)
class _AlliedBoard(GameTreeBoard):
    @property
    def maximize(self) -> bool:
        return True


@dataclass(frozen=True)
class _PlainTreeBoard(Board[GameNode]):
    node: GameNode

    def moves(self) -> list[GameNode]:
        return list(self.node.children)

    def heuristic_score(self) -> float:
        return self.node.score or 0.0

    def apply_move(self, move: GameNode) -> Board[GameNode]:
        return _PlainTreeBoard(node=move, vantage_point=1 - self.vantage_point)

    def continue_evaluating_tree(self, plies: int) -> bool:
        return not self.node.is_leaf


@dataclass(frozen=True)
class _DowngradingBoard(GameTreeBoard):
    def apply_move(self, move: GameNode) -> Board[GameNode]:
        return _PlainTreeBoard(node=move, vantage_point=self.opponent)


def test_child_without_turn_change_is_rejected() -> None:
    board = _ForgetfulBoard(node=_demonstration_tree().root)

    with pytest.raises(OppositionError) as excinfo:
        board.evaluate_tree(0)

    assert excinfo.value.parent_vantage == 0
    assert excinfo.value.child_vantage == 0
    assert excinfo.value.to_dict()["type"] == "OppositionError"


def test_allied_players_are_rejected() -> None:
    board = _AlliedBoard(node=_demonstration_tree().root)

    with pytest.raises(OppositionError, match="opposition"):
        board.evaluate_tree(0)


def test_child_must_stay_adversarial() -> None:
    board = _DowngradingBoard(node=_demonstration_tree().root)

    with pytest.raises(ContractViolationError, match="TwoPlayerAdversarialBoard"):
        board.evaluate_tree(0)


def test_plain_minimax_does_not_enforce_opposition() -> None:
    board = _AlliedBoard(node=_demonstration_tree().root)

    # Everyone maximizes, so the best leaf anywhere is reachable.
    assert board.evaluate_tree_minimax(0).value == 9


def test_applying_a_node_from_elsewhere_is_rejected() -> None:
    builder = _demonstration_tree()
    board = GameTreeBoard.from_builder(builder)

    with pytest.raises(ForeignMoveError):
        board.apply_move(builder.node("31"))


def test_pruning_is_traced_at_debug_level(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="minimax")
    board = GameTreeBoard.from_builder(_demonstration_tree())

    board.evaluate_tree(0)

    assert "Evaluating (1, 1) for player 0, max" in caplog.text
    assert "Pruned" in caplog.text
    assert "Final value: 6" in caplog.text
