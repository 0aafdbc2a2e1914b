"""Qt bridge that paces computer moves behind a single-shot timer."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from chessgame.core.enums import Color, Difficulty
from chessgame.core.position import Position
from chessgame.engine._default import engine_for

if TYPE_CHECKING:
    from chessgame.game.interfaces import GameMode

_LOGGER = logging.getLogger(__name__)

DEFAULT_MOVE_DELAY_MS = 500


class EngineWorker(QObject):
    """Computes the computer's move after a short cosmetic delay.

    The delay only paces the UI; the chosen move is the same one the engine
    would return synchronously.  Results are delivered through signals so the
    receiver can submit the move on its own thread.
    """

    best_move_ready = pyqtSignal(int, object, int)  # request id, move, score
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        *,
        delay_ms: int = DEFAULT_MOVE_DELAY_MS,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._engine = engine_for(difficulty, rng)
        self._delay_ms = max(delay_ms, 0)
        self._pending: tuple[Position, Color, int] | None = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    @classmethod
    def for_mode(
        cls, mode: GameMode, *, rng: random.Random | None = None
    ) -> EngineWorker:
        """Worker playing at *mode*'s difficulty after its move delay."""
        return cls(mode.difficulty, delay_ms=mode.move_delay_ms, rng=rng)

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @pyqtSlot(object, object, int)
    def schedule_move(
        self, position_obj: object, color: object, request_id: int
    ) -> None:
        """Compute *color*'s move in *position_obj* once the delay elapses.

        A snapshot of the position is taken now, so later changes to the
        caller's position do not leak into the search.
        """
        if not isinstance(position_obj, Position) or not isinstance(color, Color):
            self.search_error.emit(request_id, "Engine received invalid request")
            return
        self._pending = (position_obj.copy(), color, request_id)
        self._timer.start(self._delay_ms)

    @pyqtSlot(object, object, int)
    def request_move(
        self, position_obj: object, color: object, request_id: int
    ) -> None:
        """Select a move for *color* right away and emit the result."""
        if not isinstance(position_obj, Position) or not isinstance(color, Color):
            self.search_error.emit(request_id, "Engine received invalid request")
            return

        try:
            result = self._engine.select_move(position_obj, color)
        except Exception as exc:
            _LOGGER.exception("Engine failed on request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, result.best_move, result.score)

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop a scheduled request that has not fired yet."""
        self._timer.stop()
        self._pending = None

    def _on_timeout(self) -> None:
        pending, self._pending = self._pending, None
        if pending is None:
            return
        self.request_move(*pending)
