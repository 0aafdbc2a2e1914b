"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgame.core.enums import Color, GameStatus
from chessgame.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessgame.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Every query concerns the side to move.  A king missing from the board
    raises :class:`~chessgame.core.board.MissingKingError`.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.status(position) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.status(position) == GameStatus.STALEMATE

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Classify the position for the side to move."""
        gen = MoveGenerator(position)
        in_check = gen.is_in_check(position.side_to_move)

        if not gen.has_legal_move():
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.ONGOING

    @staticmethod
    def winner(position: Position) -> Color | None:
        """The side that delivered mate, or ``None`` if nobody has won."""
        if Rules.status(position) == GameStatus.CHECKMATE:
            return position.side_to_move.opposite
        return None
