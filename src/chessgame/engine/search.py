"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessgame.core.enums import Color
    from chessgame.core.move import Move
    from chessgame.core.position import Position


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine.

    ``best_move`` is ``None`` only when the side has no legal move.
    """

    best_move: Move | None
    score: int
    nodes: int


class IEngine(Protocol):
    """Protocol for move selectors used by the game layer."""

    def select_move(self, position: Position, color: Color) -> SearchResult: ...
