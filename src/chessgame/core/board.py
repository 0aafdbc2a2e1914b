"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessgame.core.enums import Color, PieceType
from chessgame.core.piece import Piece
from chessgame.core.types import ALL_SQUARES, BOARD_SIZE, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class MissingKingError(RuntimeError):
    """A king is absent from the board; legal play can never produce this."""


class Board:
    """Mutable 8x8 grid of optional pieces with a king-square cache."""

    __slots__ = ("_grid", "_king_squares")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        old_piece = self._grid[row][col]
        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            if self._king_squares[int(old_piece.color)] == sq:
                self._king_squares[int(old_piece.color)] = None

        self._grid[row][col] = piece
        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate the piece on *from_sq*, returning whatever was captured."""
        captured = self[to_sq]
        self[to_sq] = self[from_sq]
        self[from_sq] = None
        return captured

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square in row-major order."""
        for sq in ALL_SQUARES:
            piece = self[sq]
            if piece is not None:
                yield sq, piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, row-major."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def has_king(self, color: Color) -> bool:
        return self._king_squares[int(color)] is not None

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*.

        Raises:
            MissingKingError: no king of that color is on the board.
        """
        sq = self._king_squares[int(color)]
        if sq is None:
            raise MissingKingError(f"No {color.name} king on board")
        return sq

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (Black on row 0, White on row 7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, pt)
            b[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
