"""GameController — the select-piece / select-destination flow.

Coordinates: GameState, the per-selection move cache and pending promotions.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslogic.config import DEFAULT_CONFIG, EngineConfig
from chesslogic.core.enums import PieceType
from chesslogic.core.geometry import Position
from chesslogic.core.move import Move
from chesslogic.core.rules import Result
from chesslogic.game.interfaces import ChessError, GamePhase, IGameController
from chesslogic.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[Result], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Drives a game the way a board UI does: pick a piece, then a square.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = (
        "_config",
        "_state",
        "_phase",
        "_selected",
        "_move_cache",
        "_pending_promotion",
        "events",
    )

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._state = GameState(config=self._config)
        self._phase = GamePhase.AWAITING_SELECTION
        self._selected: Position | None = None
        self._move_cache: dict[Position, Move] = {}
        self._pending_promotion: Move | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def selected(self) -> Position | None:
        return self._selected

    @property
    def pending_promotion(self) -> Move | None:
        return self._pending_promotion

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, state_string: str | None = None) -> None:
        if state_string is None:
            self._state = GameState(config=self._config)
        else:
            self._state = GameState.from_state_string(state_string, self._config)
        self._clear_selection()
        self._pending_promotion = None
        _LOGGER.debug("New game: %s", self._state.state_string())
        self._set_phase(GamePhase.AWAITING_SELECTION)

    def select(self, position: Position) -> list[Position]:
        if self._state.is_game_over() or self._pending_promotion is not None:
            return []

        moves = self._state.legal_moves_for_piece(position)
        self._clear_selection()
        if not moves:
            self._set_phase(GamePhase.AWAITING_SELECTION)
            return []

        self._selected = position
        for move in moves:
            # The four promotion moves share a destination; one entry is enough.
            self._move_cache[move.to_pos] = move
        self._set_phase(GamePhase.AWAITING_DESTINATION)
        return list(self._move_cache)

    def move_to(
        self, position: Position, promotion: PieceType | None = None
    ) -> MoveRecord | None:
        if self._phase != GamePhase.AWAITING_DESTINATION:
            return None

        move = self._move_cache.get(position)
        self._clear_selection()
        if move is None:
            self._set_phase(GamePhase.AWAITING_SELECTION)
            return None

        if move.is_promotion:
            if promotion is None:
                self._pending_promotion = move
                self._set_phase(GamePhase.AWAITING_PROMOTION)
                return None
            move = move.with_promotion(promotion)

        return self._apply(move)

    def choose_promotion(self, piece_type: PieceType) -> MoveRecord:
        if self._pending_promotion is None:
            raise ChessError("No promotion is pending")
        move = self._pending_promotion.with_promotion(piece_type)
        self._pending_promotion = None
        return self._apply(move)

    def cancel_promotion(self) -> None:
        """Drop a pending promotion without moving."""
        if self._pending_promotion is None:
            return
        self._pending_promotion = None
        self._set_phase(GamePhase.AWAITING_SELECTION)

    def submit_move(self, move: Move) -> MoveRecord:
        """Apply *move* directly, bypassing the selection flow."""
        self._clear_selection()
        self._pending_promotion = None
        return self._apply(move)

    def destinations(self) -> list[Position]:
        """Destinations of the current selection."""
        return list(self._move_cache)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, move: Move) -> MoveRecord:
        record = self._state.make_move(move)
        for cb in self.events.on_move:
            cb(record, self._state)

        result = self._state.result
        if result is not None:
            self._set_phase(GamePhase.GAME_OVER)
            for cb in self.events.on_game_over:
                cb(result)
        else:
            self._set_phase(GamePhase.AWAITING_SELECTION)
        return record

    def _clear_selection(self) -> None:
        self._selected = None
        self._move_cache = {}

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
