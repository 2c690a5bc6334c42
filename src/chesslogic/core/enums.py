"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveType(IntEnum):
    """Move variant tag."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PAWN_PROMOTION = 5


class EndReason(IntEnum):
    """Why a game ended."""

    CHECKMATE = 1
    STALEMATE = 2
    FIFTY_MOVE_RULE = 3
    INSUFFICIENT_MATERIAL = 4
    THREEFOLD_REPETITION = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
