"""Game state machine that tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessgame.core.enums import Color, GameStatus
from chessgame.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessgame.core.move_generator import MoveGenerator
from chessgame.core.position import Position
from chessgame.core.rules import Rules
from chessgame.game.interfaces import GamePhase

if TYPE_CHECKING:
    from chessgame.core.move import Move
    from chessgame.core.position import AppliedMove, PromotionChooser
    from chessgame.core.types import Square


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    applied: AppliedMove
    status_after: GameStatus
    fen_after: str

    @property
    def was_check(self) -> bool:
        return self.status_after in (GameStatus.CHECK, GameStatus.CHECKMATE)

    @property
    def was_capture(self) -> bool:
        return self.applied.is_capture


@dataclass
class GameState:
    """Manages game lifecycle: phase, status, move history.

    This is a pure data/logic class with no threading or UI.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    status: GameStatus = field(default=GameStatus.ONGOING, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.position = position_from_fen(self.start_fen)
        self.move_history.clear()
        self.status = Rules.status(self.position)
        self.phase = (
            GamePhase.GAME_OVER if self.status.is_terminal else GamePhase.AWAITING_MOVE
        )

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self,
        move: Move,
        choose_promotion: PromotionChooser | None = None,
    ) -> MoveRecord:
        """Apply a validated move, hand over the turn and re-evaluate.

        Caller is responsible for legality check.
        """
        applied = self.position.apply_move(move, choose_promotion)
        self.position.pass_turn()
        self.status = Rules.status(self.position)

        record = MoveRecord(
            move=move,
            applied=applied,
            status_after=self.status,
            fen_after=position_to_fen(self.position),
        )
        self.move_history.append(record)

        if self.status.is_terminal:
            self.phase = GamePhase.GAME_OVER
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        """Side that delivered checkmate, if any."""
        if self.status == GameStatus.CHECKMATE:
            return self.side_to_move.opposite
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Legal destinations from *sq* for the side to move."""
        piece = self.position.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return []
        return MoveGenerator(self.position).legal_destinations(sq)
