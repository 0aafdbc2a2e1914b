"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgame.core.board import Board
from chessgame.core.enums import CastlingRights, Color, PieceType
from chessgame.core.move import Move
from chessgame.core.piece import Piece
from chessgame.core.position import back_rank, pawn_direction
from chessgame.core.types import ALL_SQUARES, Square, is_on_board, make_square

if TYPE_CHECKING:
    from chessgame.core.position import Position


# Offsets are (row delta, column delta).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_KINGSIDE_RIGHT: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_KINGSIDE,
    Color.BLACK: CastlingRights.BLACK_KINGSIDE,
}
_QUEENSIDE_RIGHT: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_QUEENSIDE,
    Color.BLACK: CastlingRights.BLACK_QUEENSIDE,
}
_KING_HOME_COL = 4


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row, col in ALL_SQUARES:
        targets[(row, col)] = tuple(
            make_square(row + dr, col + dc)
            for dr, dc in offsets
            if is_on_board(row + dr, col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row, col in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            ray: list[Square] = []
            while is_on_board(r, c):
                ray.append(make_square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color* on *board*?

    Pawns attack both forward diagonals whether or not anything stands there,
    and kings attack their neighbours only (castling is never an attack).
    """
    row, col = sq

    # A pawn of by_color attacks sq from one step "behind" it
    pawn_row = row - pawn_direction(by_color)
    pawn = Piece(by_color, PieceType.PAWN)
    for dc in (-1, 1):
        if is_on_board(pawn_row, col + dc) and board[(pawn_row, col + dc)] == pawn:
            return True

    knight = Piece(by_color, PieceType.KNIGHT)
    if any(board[from_sq] == knight for from_sq in _KNIGHT_TARGETS[sq]):
        return True

    king = Piece(by_color, PieceType.KING)
    if any(board[from_sq] == king for from_sq in _KING_TARGETS[sq]):
        return True

    for rays, sliders in (
        (_BISHOP_RAYS[sq], _DIAGONAL_SLIDERS),
        (_ROOK_RAYS[sq], _ORTHOGONAL_SLIDERS),
    ):
        for ray in rays:
            for from_sq in ray:
                piece = board[from_sq]
                if piece is None:
                    continue
                if piece.color == by_color and piece.piece_type in sliders:
                    return True
                break

    return False


class MoveGenerator:
    """Generates pseudo-legal and legal moves for a given :class:`Position`.

    Legality is tested on a scratch copy of the board, so the position is
    never touched while moves are generated.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Destinations from *sq* that do not leave the mover's king attacked."""
        piece = self._board[sq]
        if piece is None:
            return []
        return [
            to_sq
            for to_sq in self.pseudo_legal_destinations(sq)
            if self._keeps_king_safe(sq, to_sq, piece.color)
        ]

    def pseudo_legal_destinations(self, sq: Square) -> list[Square]:
        """Destinations from *sq* by movement rules alone (may leave king in check)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Square] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_jumps(sq, piece.color, _KNIGHT_TARGETS[sq], moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(sq, piece.color, _BISHOP_RAYS[sq], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, piece.color, _ROOK_RAYS[sq], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, piece.color, _QUEEN_RAYS[sq], moves)
        else:
            self._gen_jumps(sq, piece.color, _KING_TARGETS[sq], moves)
            self._gen_castling(sq, piece.color, moves)
        return moves

    def generate_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All legal moves for *color* (default: side to move), board order."""
        if color is None:
            color = self._pos.side_to_move
        return [
            Move(from_sq, to_sq)
            for from_sq in self._board.all_pieces(color)
            for to_sq in self.legal_destinations(from_sq)
        ]

    def has_legal_move(self, color: Color | None = None) -> bool:
        """Whether *color* (default: side to move) can make any move at all."""
        if color is None:
            color = self._pos.side_to_move
        return any(
            self.legal_destinations(from_sq)
            for from_sq in self._board.all_pieces(color)
        )

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        return is_square_attacked(self._board, king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._board, sq, by_color)

    # -- Legality filter (private) -----------------------------------------

    def _keeps_king_safe(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        scratch = self._board.copy()
        piece = scratch[from_sq]
        if (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and from_sq[1] != to_sq[1]
            and scratch[to_sq] is None
        ):
            # En passant also lifts the passed pawn off the board
            scratch[make_square(from_sq[0], to_sq[1])] = None
        scratch.move_piece(from_sq, to_sq)
        return not is_square_attacked(
            scratch, scratch.king_square(color), color.opposite
        )

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Square]) -> None:
        board = self._board
        row, col = sq
        step = pawn_direction(color)
        start_row = back_rank(color) + step

        one_row = row + step
        if not is_on_board(one_row, col):
            return

        if board.is_empty((one_row, col)):
            moves.append((one_row, col))
            two_step = (row + 2 * step, col)
            if row == start_row and board.is_empty(two_step):
                moves.append(two_step)

        for dc in (-1, 1):
            if not is_on_board(one_row, col + dc):
                continue
            cap_sq = (one_row, col + dc)
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)
            elif cap_sq == self._pos.en_passant:
                moves.append(cap_sq)

    def _gen_jumps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Square]) -> None:
        row = back_rank(color)
        if king_sq != (row, _KING_HOME_COL):
            return

        castling = self._pos.castling
        if not castling & (_KINGSIDE_RIGHT[color] | _QUEENSIDE_RIGHT[color]):
            return

        board = self._board
        opponent = color.opposite
        if is_square_attacked(board, king_sq, opponent):
            return

        rook = Piece(color, PieceType.ROOK)

        if castling & _KINGSIDE_RIGHT[color] and board[(row, 7)] == rook:
            f_sq = (row, 5)
            g_sq = (row, 6)
            if (
                board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not is_square_attacked(board, f_sq, opponent)
                and not is_square_attacked(board, g_sq, opponent)
            ):
                moves.append(g_sq)

        if castling & _QUEENSIDE_RIGHT[color] and board[(row, 0)] == rook:
            b_sq = (row, 1)
            c_sq = (row, 2)
            d_sq = (row, 3)
            # The b-file square must be empty but may be attacked
            if (
                board.is_empty(b_sq)
                and board.is_empty(c_sq)
                and board.is_empty(d_sq)
                and not is_square_attacked(board, d_sq, opponent)
                and not is_square_attacked(board, c_sq, opponent)
            ):
                moves.append(c_sq)
