"""Position: complete game state (board + metadata) and the move executor."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from chessgame.core.board import Board
from chessgame.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessgame.core.move import Move
from chessgame.core.piece import Piece
from chessgame.core.types import Square, make_square

_LOGGER = logging.getLogger(__name__)

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Asked synchronously when a pawn reaches the last rank.  The answer may be a
# PieceType, a piece name ("Rook", "knight", ...) or None.
PromotionChooser = Callable[[Color], "PieceType | str | None"]


def resolve_promotion(choice: object) -> PieceType:
    """Map a promotion answer to a piece type; anything unrecognised is a queen."""
    if isinstance(choice, PieceType) and choice in PROMOTION_TYPES:
        return choice
    if isinstance(choice, str):
        by_name = {pt.name: pt for pt in PROMOTION_TYPES}
        resolved = by_name.get(choice.strip().upper())
        if resolved is not None:
            return resolved
    if choice is not None:
        _LOGGER.debug("Unrecognised promotion choice %r, promoting to queen", choice)
    return PieceType.QUEEN


def back_rank(color: Color) -> int:
    """Row holding *color*'s pieces at the start of the game."""
    return 7 if color == Color.WHITE else 0


def pawn_direction(color: Color) -> int:
    """Row delta of a single pawn step for *color*."""
    return -1 if color == Color.WHITE else 1


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """What actually happened when a move was applied to the board."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


class Position:
    """Full chess position: board + side to move + castling + en passant.

    The board and its auxiliary flags are mutated only by :meth:`apply_move`;
    turn tracking is left to the caller via :meth:`pass_turn`.
    """

    __slots__ = ("board", "side_to_move", "castling", "en_passant")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant

    # ── Move executor ────────────────────────────────────────────────────

    def apply_move(
        self,
        move: Move,
        choose_promotion: PromotionChooser | None = None,
    ) -> AppliedMove:
        """Apply an already-validated *move* as one logical transition.

        Caller is responsible for the legality check and for flipping the turn.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        from_row, from_col = move.from_sq
        to_row, to_col = move.to_sq
        captured = board[move.to_sq]
        flag = MoveFlag.NORMAL

        # The previous en passant target expires with this move
        self.en_passant = None

        if piece.piece_type == PieceType.PAWN:
            if abs(to_row - from_row) == 2:
                self.en_passant = make_square((from_row + to_row) // 2, from_col)
                flag = MoveFlag.DOUBLE_PAWN
            elif from_col != to_col and captured is None:
                # En passant: the captured pawn sits beside the origin square
                victim_sq = make_square(from_row, to_col)
                captured = board[victim_sq]
                board[victim_sq] = None
                flag = MoveFlag.EN_PASSANT

        # Slide the rook for castling
        if piece.piece_type == PieceType.KING and abs(to_col - from_col) == 2:
            if to_col > from_col:
                rook_from = make_square(from_row, 7)
                rook_to = make_square(from_row, from_col + 1)
                flag = MoveFlag.CASTLE_KINGSIDE
            else:
                rook_from = make_square(from_row, 0)
                rook_to = make_square(from_row, from_col - 1)
                flag = MoveFlag.CASTLE_QUEENSIDE
            board.move_piece(rook_from, rook_to)

        self._update_castling(move, piece)
        board.move_piece(move.from_sq, move.to_sq)

        promotion: PieceType | None = None
        last_rank = back_rank(piece.color.opposite)
        if piece.piece_type == PieceType.PAWN and to_row == last_rank:
            answer = None
            if choose_promotion is not None:
                answer = choose_promotion(piece.color)
            promotion = resolve_promotion(answer)
            board[move.to_sq] = Piece(piece.color, promotion)
            flag = MoveFlag.PROMOTION

        return AppliedMove(move, piece, captured, flag, promotion)

    def pass_turn(self) -> None:
        """Hand the move to the other side."""
        self.side_to_move = self.side_to_move.opposite

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        make_square(7, 0): CastlingRights.WHITE_QUEENSIDE,
        make_square(7, 7): CastlingRights.WHITE_KINGSIDE,
        make_square(0, 0): CastlingRights.BLACK_QUEENSIDE,
        make_square(0, 7): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, move: Move, piece: Piece) -> None:
        if piece.piece_type == PieceType.KING:
            if piece.color == Color.WHITE:
                self.castling &= ~CastlingRights.WHITE_BOTH
            else:
                self.castling &= ~CastlingRights.BLACK_BOTH

        # A rook leaving its corner, or being captured there, loses its right
        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                self.castling &= ~self._ROOK_CORNERS[sq]

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy of the board and flags."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, "
            f"castling={self.castling!r}, en_passant={self.en_passant})\n{self.board!r}"
        )
