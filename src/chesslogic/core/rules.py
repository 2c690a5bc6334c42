"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesslogic.core.enums import Color, EndReason

if TYPE_CHECKING:
    from chesslogic.game.state import GameState


@dataclass(frozen=True, slots=True)
class Result:
    """Final outcome of a game. ``winner`` is ``None`` for draws."""

    winner: Color | None
    reason: EndReason

    @classmethod
    def win(cls, winner: Color) -> Result:
        return cls(winner, EndReason.CHECKMATE)

    @classmethod
    def draw(cls, reason: EndReason) -> Result:
        return cls(None, reason)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return f"draw ({self.reason})"
        return f"{self.winner} wins ({self.reason})"


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Draws are automatic: a game ends as soon as any draw rule holds.

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        return state.board.is_in_check(state.current_player)

    @staticmethod
    def has_legal_moves(state: GameState) -> bool:
        return bool(state.all_legal_moves_for(state.current_player))

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        return Rules.is_in_check(state) and not Rules.has_legal_moves(state)

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        return not Rules.is_in_check(state) and not Rules.has_legal_moves(state)

    @staticmethod
    def is_insufficient_material(state: GameState) -> bool:
        return state.board.insufficient_material()

    @staticmethod
    def is_fifty_move_rule(state: GameState) -> bool:
        return state.halfmove_clock >= state.config.fifty_move_plies

    @staticmethod
    def is_threefold_repetition(state: GameState) -> bool:
        return state.repetition_count() >= state.config.repetition_count

    @staticmethod
    def evaluate(state: GameState) -> Result | None:
        """Terminal result for the side to move, or ``None`` if play goes on."""
        player = state.current_player
        if not Rules.has_legal_moves(state):
            if state.board.is_in_check(player):
                return Result.win(player.opponent)
            return Result.draw(EndReason.STALEMATE)

        if Rules.is_insufficient_material(state):
            return Result.draw(EndReason.INSUFFICIENT_MATERIAL)

        if Rules.is_fifty_move_rule(state):
            return Result.draw(EndReason.FIFTY_MOVE_RULE)

        if Rules.is_threefold_repetition(state):
            return Result.draw(EndReason.THREEFOLD_REPETITION)

        return None
