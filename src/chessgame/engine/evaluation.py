"""Static material evaluation."""

from __future__ import annotations

from chessgame.core.board import Board
from chessgame.core.enums import Color, PieceType

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 10,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.ROOK: 50,
    PieceType.QUEEN: 90,
    PieceType.KING: 900,
}


def material_balance(board: Board) -> int:
    """Sum of piece values, White positive and Black negative."""
    score = 0
    for _, piece in board.occupied():
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == Color.WHITE else -value
    return score


def evaluate_for(board: Board, color: Color) -> int:
    """Material balance seen from *color*'s side of the board."""
    balance = material_balance(board)
    return balance if color == Color.WHITE else -balance
