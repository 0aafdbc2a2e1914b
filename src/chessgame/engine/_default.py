"""Resolves engines by difficulty without causing circular imports.

Both ``chessgame.engine.__init__`` and ``chessgame.engine.qt_bridge`` import
from here instead of from each other.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from chessgame.core.enums import Difficulty
from chessgame.engine.greedy_engine import GreedyEngine
from chessgame.engine.random_engine import RandomEngine

if TYPE_CHECKING:
    from chessgame.core.enums import Color
    from chessgame.core.move import Move
    from chessgame.core.position import Position
    from chessgame.engine.search import IEngine


def engine_for(difficulty: Difficulty, rng: random.Random | None = None) -> IEngine:
    """Build the engine that plays at *difficulty*."""
    if difficulty == Difficulty.MEDIUM:
        return GreedyEngine()
    return RandomEngine(rng)


def select_move(
    position: Position,
    color: Color,
    difficulty: Difficulty,
    rng: random.Random | None = None,
) -> Move | None:
    """One-shot helper: the move *color* would play at *difficulty*."""
    return engine_for(difficulty, rng).select_move(position, color).best_move


__all__ = ["engine_for", "select_move"]
