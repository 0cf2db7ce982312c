"""Engine package: static evaluation and one-ply move selection."""

from oneply.engine.evaluation import CENTRE_BONUS, PIECE_VALUES, evaluate
from oneply.engine.search import IEngine, SelectionLimits, SelectionResult
from oneply.engine.selector import OnePlyEngine, choose_move, split_moves

__all__ = [
    "CENTRE_BONUS",
    "IEngine",
    "OnePlyEngine",
    "PIECE_VALUES",
    "SelectionLimits",
    "SelectionResult",
    "choose_move",
    "evaluate",
    "split_moves",
]
