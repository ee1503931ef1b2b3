"""Game management layer — state, session operations, controller.

Quick start::

    from hotseat.game import GameController

    ctrl = GameController()
    ctrl.click(parse_square("e2"))
    ctrl.click(parse_square("e4"))
"""

from hotseat.game.controller import GameController, GameEvents
from hotseat.game.interfaces import GamePhase, IGameController
from hotseat.game.state import (
    GameState,
    MoveOutcome,
    new_game,
    reset,
    select_square,
    try_move,
)

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveOutcome",
    # Session operations
    "new_game",
    "reset",
    "select_square",
    "try_move",
]
