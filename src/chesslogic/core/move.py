"""Move value object: one variant tag, board mutation and legality probing."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chesslogic.core.enums import MoveType, PieceType
from chesslogic.core.geometry import Position
from chesslogic.core.piece import Piece

if TYPE_CHECKING:
    from chesslogic.config import EngineConfig
    from chesslogic.core.board import Board

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)

_CASTLE_TYPES = (MoveType.CASTLE_KINGSIDE, MoveType.CASTLE_QUEENSIDE)

# castle kind -> (king target column, rook origin column, rook target column)
_CASTLE_COLUMNS: dict[MoveType, tuple[int, int, int]] = {
    MoveType.CASTLE_KINGSIDE: (6, 7, 5),
    MoveType.CASTLE_QUEENSIDE: (2, 0, 3),
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``promotion`` is only used by ``PAWN_PROMOTION``; ``None`` there means
    a queen.
    """

    from_pos: Position
    to_pos: Position
    kind: MoveType = MoveType.NORMAL
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.promotion is None:
            return
        if self.kind != MoveType.PAWN_PROMOTION:
            raise ValueError(f"Only promotion moves carry a piece type: {self!r}")
        if self.promotion not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.promotion.name}")

    # ── Construction helpers ─────────────────────────────────────────────

    @classmethod
    def castle(cls, kind: MoveType, king_pos: Position) -> Move:
        """Castle of *kind* for the king standing on *king_pos*."""
        king_column, _, _ = _CASTLE_COLUMNS[kind]
        return cls(king_pos, Position(king_pos.row, king_column), kind)

    def with_promotion(self, piece_type: PieceType) -> Move:
        """Same promotion move with an explicit target piece."""
        return replace(self, promotion=piece_type)

    @property
    def is_promotion(self) -> bool:
        return self.kind == MoveType.PAWN_PROMOTION

    @property
    def is_castle(self) -> bool:
        return self.kind in _CASTLE_TYPES

    @property
    def skipped_position(self) -> Position:
        """Square a double pawn step passes over."""
        return Position((self.from_pos.row + self.to_pos.row) // 2, self.from_pos.column)

    @property
    def capture_position(self) -> Position:
        """Square of the pawn taken en passant."""
        return Position(self.from_pos.row, self.to_pos.column)

    # ── Board mutation ───────────────────────────────────────────────────

    def execute(self, board: Board) -> bool:
        """Apply the move to *board*. Returns True if a piece was captured."""
        if self.kind == MoveType.DOUBLE_PAWN:
            pawn = board[self.from_pos]
            assert pawn is not None
            board.set_pawn_skip_position(pawn.color, self.skipped_position)
            return _relocate(board, self.from_pos, self.to_pos)

        if self.kind == MoveType.EN_PASSANT:
            _relocate(board, self.from_pos, self.to_pos)
            board[self.capture_position] = None
            return True

        if self.kind in _CASTLE_TYPES:
            _, rook_column, rook_target = _CASTLE_COLUMNS[self.kind]
            row = self.from_pos.row
            _relocate(board, self.from_pos, self.to_pos)
            _relocate(board, Position(row, rook_column), Position(row, rook_target))
            return False

        if self.kind == MoveType.PAWN_PROMOTION:
            pawn = board[self.from_pos]
            assert pawn is not None
            captured = board[self.to_pos] is not None
            board[self.from_pos] = None
            board[self.to_pos] = Piece(
                pawn.color, self.promotion or PieceType.QUEEN, has_moved=True
            )
            return captured

        return _relocate(board, self.from_pos, self.to_pos)

    # ── Legality ─────────────────────────────────────────────────────────

    def is_legal(self, board: Board, config: EngineConfig | None = None) -> bool:
        """Whether the move keeps the mover's king out of check.

        Simulates on a copy; *board* is never touched.
        """
        piece = board[self.from_pos]
        if piece is None:
            return False
        player = piece.color

        if self.kind in _CASTLE_TYPES and (config is None or config.strict_castling):
            if board.is_in_check(player):
                return False
            step = 1 if self.to_pos.column > self.from_pos.column else -1
            transit = Position(self.from_pos.row, self.from_pos.column + step)
            probe = board.copy()
            _relocate(probe, self.from_pos, transit)
            if probe.is_in_check(player):
                return False

        probe = board.copy()
        self.execute(probe)
        return not probe.is_in_check(player)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_pos.name}{self.to_pos.name}"
        if self.kind == MoveType.PAWN_PROMOTION:
            base += _PROMO_CHARS[self.promotion or PieceType.QUEEN]
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


def _relocate(board: Board, from_pos: Position, to_pos: Position) -> bool:
    piece = board[from_pos]
    assert piece is not None
    captured = board[to_pos] is not None
    board[from_pos] = None
    board[to_pos] = piece
    piece.has_moved = True
    return captured
