"""Abstract interfaces and configuration for the game layer.

Follows Dependency Inversion: the high-level GameController depends on these
ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessgame.core.enums import Color, Difficulty, GameStatus

if TYPE_CHECKING:
    from chessgame.core.move import Move
    from chessgame.core.position import Position
    from chessgame.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # computer is choosing
    GAME_OVER = auto()


class MoveAttempt(IntEnum):
    """Outcome of a move submitted by the presentation layer."""

    APPLIED = auto()
    REJECTED = auto()


# ── Configuration ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameMode:
    """Who plays whom; fixed for the lifetime of a game.

    Args:
        vs_computer: Whether one side is played by the engine.
        difficulty: Engine strength when ``vs_computer`` is set.
        computer_color: Side the engine plays.
        move_delay_ms: Cosmetic pause before a deferred computer move.
    """

    vs_computer: bool = False
    difficulty: Difficulty = Difficulty.EASY
    computer_color: Color = Color.BLACK
    move_delay_ms: int = 500

    def __repr__(self) -> str:
        if not self.vs_computer:
            return "GameMode(human vs human)"
        return (
            f"GameMode(vs computer, {self.difficulty.name.lower()}, "
            f"computer plays {self.computer_color})"
        )


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, position: Position) -> Move | None:
        """Begin the move-selection process.

        Returns the move when it is known immediately, or ``None`` when it
        will arrive later (humans via the UI, deferred engines via a callback).
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (computer only)."""


class IGameController(ABC):
    """Interface for the game orchestrator, as seen by a presentation layer."""

    @abstractmethod
    def new_game(self, mode: GameMode | None = None, fen: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def legal_moves(self, square: Square) -> list[Square]:
        """Legal destinations from *square* for highlighting."""

    @abstractmethod
    def attempt_move(self, origin: Square, destination: Square) -> MoveAttempt:
        """Try a human move; rejected attempts leave the game untouched."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move for the side to move. Returns True if applied."""

    @abstractmethod
    def current_status(self) -> GameStatus:
        """Status of the side to move."""
