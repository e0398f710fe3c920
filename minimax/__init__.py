"""Generic game-tree search: the Board contract, minimax and alpha-beta evaluators."""

from .adversarial import TwoPlayerAdversarialBoard
from .board import LOSS, WIN, Board
from .config import SearchConfig
from .errors import ContractViolationError, ForeignMoveError, OppositionError, SearchError
from .move import Move
from .result import SearchResult
from .ties import TieBreaker, TieStrategy

__all__ = [
    "Board",
    "ContractViolationError",
    "ForeignMoveError",
    "LOSS",
    "Move",
    "OppositionError",
    "SearchConfig",
    "SearchError",
    "SearchResult",
    "TieBreaker",
    "TieStrategy",
    "TwoPlayerAdversarialBoard",
    "WIN",
]
