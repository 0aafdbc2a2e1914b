"""Move value object: an (origin, destination) pair."""

from __future__ import annotations

from dataclasses import dataclass

from chessgame.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable origin/destination pair.

    Special-move semantics (castling, en passant, promotion) are derived from
    the board when the move is applied, not carried by the move itself.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
