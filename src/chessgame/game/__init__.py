"""Game management layer: controller, players, state machine.

Quick start::

    from chessgame.core import Difficulty
    from chessgame.game import GameController, GameMode

    ctrl = GameController()
    ctrl.new_game(GameMode(vs_computer=True, difficulty=Difficulty.MEDIUM))
"""

from chessgame.game.controller import GameController, GameEvents
from chessgame.game.interfaces import (
    GameMode,
    GamePhase,
    IGameController,
    IPlayer,
    MoveAttempt,
)
from chessgame.game.player import AIPlayer, HumanPlayer
from chessgame.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces / configuration
    "GameMode",
    "GamePhase",
    "IGameController",
    "IPlayer",
    "MoveAttempt",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
