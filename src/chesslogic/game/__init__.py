"""Game management layer — state machine and the controller a UI drives.

Quick start::

    from chesslogic.game import GameController
    from chesslogic.core import parse_square

    ctrl = GameController()
    ctrl.select(parse_square("e2"))
    ctrl.move_to(parse_square("e4"))

The Qt adapter lives in :mod:`chesslogic.game.qt_bridge` and is not imported
here, so the rules can be used without PyQt6 loaded.
"""

from chesslogic.game.controller import GameController, GameEvents
from chesslogic.game.interfaces import (
    ChessError,
    GameOverError,
    GamePhase,
    IGameController,
    IllegalMoveError,
)
from chesslogic.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces / errors
    "ChessError",
    "GameOverError",
    "GamePhase",
    "IGameController",
    "IllegalMoveError",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
