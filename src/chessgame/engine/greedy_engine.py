"""Medium adversary: one-ply material maximisation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessgame.core.move_generator import MoveGenerator
from chessgame.engine.evaluation import evaluate_for
from chessgame.engine.search import IEngine, SearchResult

if TYPE_CHECKING:
    from chessgame.core.enums import Color
    from chessgame.core.move import Move
    from chessgame.core.position import Position

_LOGGER = logging.getLogger(__name__)


class GreedyEngine(IEngine):
    """Plays the move whose resulting material balance is best for the mover.

    Each candidate is tried by plain relocation on a copy of the board; the
    castling rook, en passant victim and promotion are ignored.  Ties keep the
    first move in generation order.
    """

    __slots__ = ()

    def select_move(self, position: Position, color: Color) -> SearchResult:
        moves = MoveGenerator(position).generate_legal_moves(color)
        best_move: Move | None = None
        best_score = 0

        for move in moves:
            score = self._score_after(position, move, color)
            if best_move is None or score > best_score:
                best_move = move
                best_score = score

        if best_move is not None:
            _LOGGER.debug("Greedy choice %s scores %d", best_move, best_score)
        return SearchResult(best_move, best_score, len(moves))

    @staticmethod
    def _score_after(position: Position, move: Move, color: Color) -> int:
        scratch = position.board.copy()
        scratch.move_piece(move.from_sq, move.to_sq)
        return evaluate_for(scratch, color)
