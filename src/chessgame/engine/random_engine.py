"""Easy adversary: a uniformly random legal move."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from chessgame.core.move_generator import MoveGenerator
from chessgame.engine.evaluation import evaluate_for
from chessgame.engine.search import IEngine, SearchResult

if TYPE_CHECKING:
    from chessgame.core.enums import Color
    from chessgame.core.position import Position

_LOGGER = logging.getLogger(__name__)


class RandomEngine(IEngine):
    """Picks uniformly among every legal move of the requested color.

    Args:
        rng: Source of randomness; pass a seeded ``random.Random`` for
            reproducible games.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def select_move(self, position: Position, color: Color) -> SearchResult:
        moves = MoveGenerator(position).generate_legal_moves(color)
        if not moves:
            return SearchResult(None, 0, 0)

        move = self._rng.choice(moves)
        _LOGGER.debug("Random choice %s out of %d moves", move, len(moves))
        return SearchResult(move, evaluate_for(position.board, color), len(moves))
