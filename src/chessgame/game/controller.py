"""GameController: the central orchestrator of a chess game.

Coordinates: Players, GameState, MoveGenerator, engines.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgame.core.enums import Color, Difficulty, GameStatus
from chessgame.core.move import Move
from chessgame.core.position import Position, PromotionChooser
from chessgame.core.types import Square, is_on_board
from chessgame.engine._default import engine_for
from chessgame.game.interfaces import (
    GameMode,
    GamePhase,
    IGameController,
    IPlayer,
    MoveAttempt,
)
from chessgame.game.player import AIPlayer, HumanPlayer
from chessgame.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameStatus, Color | None], None]  # status, winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full chess game: validates moves, evaluates the status
    after every half-move, prompts the computer, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Deferred computer moves come back through
    ``submit_move`` on that same thread.

    Args:
        choose_promotion: Asked which piece a human pawn promotes to;
            without it (or on an unrecognised answer) pawns become queens.
        rng: Randomness for the Easy engine.
    """

    __slots__ = ("_state", "_players", "_mode", "_choose_promotion", "_rng", "events")

    def __init__(
        self,
        choose_promotion: PromotionChooser | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._mode = GameMode()
        self._choose_promotion = choose_promotion
        self._rng = rng
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def position(self) -> Position:
        return self._state.position

    @property
    def color_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def current_player(self) -> IPlayer | None:
        if self._state.phase == GamePhase.NOT_STARTED:
            return None
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        mode: GameMode | None = None,
        fen: str | None = None,
        *,
        on_request_move: Callable[[Position], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        """Start a game; ``on_request_move`` defers the computer's moves."""
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

        self._mode = mode or GameMode()
        self._players = {
            Color.WHITE: HumanPlayer(Color.WHITE, "White"),
            Color.BLACK: HumanPlayer(Color.BLACK, "Black"),
        }
        if self._mode.vs_computer:
            computer = self._mode.computer_color
            self._players[computer] = AIPlayer(
                computer,
                engine_for(self._mode.difficulty, self._rng),
                name=f"Computer ({self._mode.difficulty.name.lower()})",
                on_request_move=on_request_move,
                on_cancel=on_cancel,
            )

        self._state = GameState()
        self._state.setup(fen)
        _LOGGER.info("New game: %r", self._mode)

        if self._state.is_game_over:
            self._emit_game_over()
            return
        self._prompt_current_player()

    def configure_game_mode(self, vs_computer: bool, difficulty: Difficulty) -> None:
        """Start a fresh game in the given mode.

        The mode is fixed once play is under way.
        """
        if self._state.ply_count and not self._state.is_game_over:
            raise ValueError("Game mode cannot change while a game is in progress")
        self.new_game(GameMode(vs_computer=vs_computer, difficulty=difficulty))

    def legal_moves(self, square: Square) -> list[Square]:
        if self._state.phase == GamePhase.NOT_STARTED or self._state.is_game_over:
            return []
        if not is_on_board(*square):
            return []
        return self._state.legal_destinations(square)

    def attempt_move(self, origin: Square, destination: Square) -> MoveAttempt:
        cp = self.current_player
        if cp is None or not cp.is_human:
            return MoveAttempt.REJECTED
        if destination not in self.legal_moves(origin):
            return MoveAttempt.REJECTED
        applied = self._apply(Move(origin, destination), self._choose_promotion)
        return MoveAttempt.APPLIED if applied else MoveAttempt.REJECTED

    def submit_move(self, move: Move) -> bool:
        """Apply *move* for the side to move (human or computer).

        Computer promotions always become queens.
        """
        if move.to_sq not in self.legal_moves(move.from_sq):
            return False
        cp = self.current_player
        chooser = self._choose_promotion if cp is not None and cp.is_human else None
        return self._apply(move, chooser)

    def current_status(self) -> GameStatus:
        return self._state.status

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, move: Move, chooser: PromotionChooser | None) -> bool:
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        record = self._state.apply_move(move, chooser)
        _LOGGER.debug("Applied %s -> %s", move, record.status_after.name)
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over()
            return True

        self._prompt_current_player()
        return True

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
            return

        self._set_phase(GamePhase.THINKING)
        move = cp.request_move(self._state.position)
        if move is None:
            return
        if not self.submit_move(move):
            raise RuntimeError(f"Engine produced an illegal move: {move}")

    def _set_phase(self, phase: GamePhase) -> None:
        self._state.phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self) -> None:
        status = self._state.status
        winner = self._state.winner
        _LOGGER.info("Game over: %s (winner: %s)", status.name, winner)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(status, winner)
