"""Qt bridge exposing a game controller through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesslogic.config import EngineConfig
from chesslogic.core.enums import PieceType
from chesslogic.core.geometry import Position
from chesslogic.core.move import Move
from chesslogic.game.controller import GameController
from chesslogic.game.interfaces import ChessError


class GameSession(QObject):
    """Main-thread adapter between a board widget and :class:`GameController`."""

    selection_changed = pyqtSignal(object, object)  # square, destinations
    move_made = pyqtSignal(object)  # MoveRecord
    promotion_requested = pyqtSignal(object, object)  # from square, to square
    game_over = pyqtSignal(object)  # Result
    illegal_move = pyqtSignal(str)

    def __init__(
        self,
        config: EngineConfig | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = GameController(config)
        self._controller.events.on_move.append(
            lambda record, _state: self.move_made.emit(record)
        )
        self._controller.events.on_game_over.append(self.game_over.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(object)
    def select_square(self, square: object) -> None:
        """Select the piece on *square* and announce its destinations."""
        if not isinstance(square, Position):
            self.illegal_move.emit(f"Invalid square: {square!r}")
            return
        destinations = self._controller.select(square)
        self.selection_changed.emit(square if destinations else None, destinations)

    @pyqtSlot(object)
    def move_to(self, square: object) -> None:
        """Move the selected piece to *square*, asking for a promotion piece if needed."""
        if not isinstance(square, Position):
            self.illegal_move.emit(f"Invalid square: {square!r}")
            return
        self._controller.move_to(square)
        pending = self._controller.pending_promotion
        if pending is not None:
            self.promotion_requested.emit(pending.from_pos, pending.to_pos)

    @pyqtSlot(int)
    def choose_promotion(self, piece_type: int) -> None:
        try:
            self._controller.choose_promotion(PieceType(piece_type))
        except ValueError as exc:
            self.illegal_move.emit(str(exc))

    @pyqtSlot(object)
    def submit_move(self, move: object) -> None:
        if not isinstance(move, Move):
            self.illegal_move.emit(f"Invalid move: {move!r}")
            return
        try:
            self._controller.submit_move(move)
        except ChessError as exc:
            self.illegal_move.emit(str(exc))

    @pyqtSlot()
    @pyqtSlot(str)
    def new_game(self, state_string: str | None = None) -> None:
        self._controller.new_game(state_string)
