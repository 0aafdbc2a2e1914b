"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chessgame.core.enums import Color
from chessgame.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessgame.core.move import Move
    from chessgame.core.position import Position
    from chessgame.engine.search import IEngine


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the UI.

    ``request_move`` returns nothing because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, position: Position) -> Move | None:
        return None  # Human moves arrive via controller.attempt_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """A computer participant backed by an engine.

    Without a callback the engine runs synchronously inside
    ``request_move`` and the chosen move is returned.  With
    ``on_request_move`` the work is handed off (e.g. to a Qt
    ``EngineWorker`` that waits out a cosmetic delay) and the move is
    expected back through ``GameController.submit_move``.

    Args:
        color: Side the computer plays.
        engine: Move selector used for synchronous play.
        name: Display name.
        on_request_move: ``(Position) -> None``, deferred move request.
        on_cancel: ``() -> None``, called to abort a deferred request.
    """

    __slots__ = ("_color", "_engine", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        engine: IEngine,
        name: str = "Computer",
        on_request_move: Callable[[Position], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._engine = engine
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def engine(self) -> IEngine:
        return self._engine

    def choose_move(self, position: Position) -> Move | None:
        """Ask the engine for a move right now."""
        return self._engine.select_move(position, self._color).best_move

    def request_move(self, position: Position) -> Move | None:
        if self._on_request_move is not None:
            self._on_request_move(position)
            return None
        return self.choose_move(position)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
