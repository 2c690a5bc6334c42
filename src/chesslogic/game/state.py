"""Game state machine — turn order, move application and game-end detection."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from chesslogic.config import DEFAULT_CONFIG, EngineConfig
from chesslogic.core.board import Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.geometry import Position
from chesslogic.core.move import Move
from chesslogic.core.notation import board_from_state_string, state_string
from chesslogic.core.rules import Result, Rules
from chesslogic.game.interfaces import GameOverError, IllegalMoveError

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    player: Color
    state_after: str
    was_capture: bool = False
    was_check: bool = False


@dataclass
class GameState:
    """Owns the live board and drives turns until a :class:`Result` is set.

    This is a pure data/logic class — no threading, no UI.
    """

    board: Board = field(default_factory=Board.initial)
    current_player: Color = Color.WHITE
    config: EngineConfig = DEFAULT_CONFIG
    halfmove_clock: int = 0
    fullmove_number: int = 1
    result: Result | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _state_counts: Counter[str] = field(default_factory=Counter, init=False, repr=False)
    _current_key: str = field(default="", init=False, repr=False)

    def __post_init__(self) -> None:
        self._record_position()

    @classmethod
    def from_state_string(
        cls, text: str, config: EngineConfig | None = None
    ) -> GameState:
        """Set up a game from a canonical position string (clocks optional)."""
        board, side, halfmove, fullmove = board_from_state_string(text)
        return cls(
            board=board,
            current_player=side,
            config=config or DEFAULT_CONFIG,
            halfmove_clock=halfmove,
            fullmove_number=fullmove,
        )

    # ── Move queries ─────────────────────────────────────────────────────

    def legal_moves_for_piece(self, position: Position) -> list[Move]:
        """Legal moves of the piece on *position*.

        Empty for an empty square, an opponent piece or a finished game.
        """
        if self.result is not None:
            return []
        piece = self.board[position]
        if piece is None or piece.color != self.current_player:
            return []
        return [
            move
            for move in piece.get_moves(position, self.board)
            if move.is_legal(self.board, self.config)
        ]

    def all_legal_moves_for(self, player: Color) -> list[Move]:
        """Legal moves for every piece *player* owns."""
        moves: list[Move] = []
        for position in self.board.piece_positions_for(player):
            piece = self.board[position]
            assert piece is not None
            moves.extend(
                move
                for move in piece.get_moves(position, self.board)
                if move.is_legal(self.board, self.config)
            )
        return moves

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return self.all_legal_moves_for(self.current_player)

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, move: Move) -> MoveRecord:
        """Apply a legal *move* for the side to move and return its record.

        Raises :class:`GameOverError` once a result is set and
        :class:`IllegalMoveError` for anything not in the legal set.
        """
        if self.result is not None:
            raise GameOverError(f"Game is over: {self.result}")

        if move.is_promotion and move.promotion is None:
            move = move.with_promotion(self.config.default_promotion)

        if move not in self.legal_moves_for_piece(move.from_pos):
            _LOGGER.warning("Rejected illegal move %s for %s", move, self.current_player)
            raise IllegalMoveError(f"Illegal move for {self.current_player}: {move}")

        mover = self.current_player
        piece = self.board[move.from_pos]
        assert piece is not None
        is_pawn_move = piece.piece_type == PieceType.PAWN

        # Only the latest double step may be captured en passant.
        self.board.set_pawn_skip_position(mover, None)
        captured = move.execute(self.board)

        if captured or is_pawn_move:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1
        if mover == Color.BLACK:
            self.fullmove_number += 1

        self.current_player = mover.opponent
        self._record_position()

        record = MoveRecord(
            move=move,
            player=mover,
            state_after=self._current_key,
            was_capture=captured,
            was_check=self.board.is_in_check(self.current_player),
        )
        self.move_history.append(record)
        _LOGGER.debug("%s played %s -> %s", mover, move, self._current_key)

        self.result = Rules.evaluate(self)
        if self.result is not None:
            _LOGGER.info("Game over after %d plies: %s", self.ply_count, self.result)
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    def is_game_over(self) -> bool:
        return self.result is not None

    def is_in_check(self) -> bool:
        return self.board.is_in_check(self.current_player)

    def state_string(self) -> str:
        """Canonical string of the current position."""
        return self._current_key

    def repetition_count(self) -> int:
        """How many times the current position occurred in this game."""
        return self._state_counts[self._current_key]

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    # ── Internal ─────────────────────────────────────────────────────────

    def _record_position(self) -> None:
        key = state_string(self.current_player, self.board)
        self._current_key = key
        self._state_counts[key] += 1
