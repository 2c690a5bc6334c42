"""Abstract interfaces and error types for the game layer.

Presentation code depends on :class:`IGameController`, not on the concrete
controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesslogic.core.enums import PieceType
    from chesslogic.core.geometry import Position
    from chesslogic.game.state import MoveRecord


# ── Errors ───────────────────────────────────────────────────────────────────


class ChessError(ValueError):
    """Base class for rule violations reported by the engine."""


class IllegalMoveError(ChessError):
    """The submitted move is not in the current legal set."""


class GameOverError(ChessError):
    """A move was submitted after the game ended."""


# ── Controller FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of the select-then-move flow."""

    AWAITING_SELECTION = auto()
    AWAITING_DESTINATION = auto()
    AWAITING_PROMOTION = auto()  # promotion piece still to be chosen
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the object a presentation layer drives."""

    @abstractmethod
    def new_game(self, state_string: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def select(self, position: Position) -> list[Position]:
        """Select the piece on *position*; returns its legal destinations."""

    @abstractmethod
    def move_to(
        self, position: Position, promotion: PieceType | None = None
    ) -> MoveRecord | None:
        """Move the selected piece to *position*."""

    @abstractmethod
    def choose_promotion(self, piece_type: PieceType) -> MoveRecord:
        """Finish a pending promotion with *piece_type*."""
