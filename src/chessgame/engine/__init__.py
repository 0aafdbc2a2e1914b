"""Computer adversary: random (Easy) and one-ply greedy (Medium) engines."""

from chessgame.engine._default import engine_for, select_move
from chessgame.engine.evaluation import PIECE_VALUES, evaluate_for, material_balance
from chessgame.engine.greedy_engine import GreedyEngine
from chessgame.engine.random_engine import RandomEngine
from chessgame.engine.search import IEngine, SearchResult

__all__ = [
    "GreedyEngine",
    "IEngine",
    "PIECE_VALUES",
    "RandomEngine",
    "SearchResult",
    "engine_for",
    "evaluate_for",
    "material_balance",
    "select_move",
]
