"""Piece record: color, kind and moved flag."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesslogic.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chesslogic.core.board import Board
    from chesslogic.core.geometry import Position
    from chesslogic.core.move import Move

# Canonical-string character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class Piece:
    """A piece owned by a board.

    ``has_moved`` only ever goes from False to True; castling rights and the
    pawn double step are derived from it.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Canonical character (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    def copy(self) -> Piece:
        return Piece(self.color, self.piece_type, self.has_moved)

    def is_same_kind(self, other: Piece | None) -> bool:
        """Same colour and type, ignoring the moved flag."""
        return (
            other is not None
            and other.color == self.color
            and other.piece_type == self.piece_type
        )

    # ── Move generation ──────────────────────────────────────────────────

    def get_moves(self, position: Position, board: Board) -> list[Move]:
        """Pseudo-legal moves from *position*; king safety is not checked."""
        from chesslogic.core.move_generator import generate_moves

        return generate_moves(self, position, board)

    def can_capture_opponent_king(self, position: Position, board: Board) -> bool:
        """Whether this piece attacks the enemy king from *position*."""
        from chesslogic.core.move_generator import attacks_king

        return attacks_king(self, position, board)
