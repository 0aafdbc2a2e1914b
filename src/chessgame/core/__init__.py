"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessgame.core import MoveGenerator, Rules, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
    print(Rules.status(pos))
"""

from chessgame.core.board import Board, MissingKingError
from chessgame.core.enums import (
    CastlingRights,
    Color,
    Difficulty,
    GameStatus,
    MoveFlag,
    PieceType,
)
from chessgame.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessgame.core.move import Move
from chessgame.core.move_generator import MoveGenerator, is_square_attacked
from chessgame.core.piece import Piece
from chessgame.core.position import (
    PROMOTION_TYPES,
    AppliedMove,
    Position,
    PromotionChooser,
    resolve_promotion,
)
from chessgame.core.rules import Rules
from chessgame.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "Difficulty",
    "GameStatus",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "AppliedMove",
    "Board",
    "MissingKingError",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "PromotionChooser",
    "PROMOTION_TYPES",
    "Rules",
    "is_square_attacked",
    "resolve_promotion",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
