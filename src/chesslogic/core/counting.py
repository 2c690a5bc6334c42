"""Material tally per colour and piece type."""

from __future__ import annotations

from chesslogic.core.enums import Color, PieceType


class Counting:
    """Counts pieces on a board; built by :meth:`Board.count_pieces`."""

    __slots__ = ("_counts", "_total")

    def __init__(self) -> None:
        self._counts: dict[tuple[Color, PieceType], int] = {}
        self._total = 0

    def increment(self, color: Color, piece_type: PieceType) -> None:
        key = (color, piece_type)
        self._counts[key] = self._counts.get(key, 0) + 1
        self._total += 1

    def count(self, color: Color, piece_type: PieceType) -> int:
        return self._counts.get((color, piece_type), 0)

    def white(self, piece_type: PieceType) -> int:
        return self.count(Color.WHITE, piece_type)

    def black(self, piece_type: PieceType) -> int:
        return self.count(Color.BLACK, piece_type)

    @property
    def total_count(self) -> int:
        return self._total

    def __repr__(self) -> str:
        parts = [
            f"{color}:{ptype.name.lower()}={n}"
            for (color, ptype), n in sorted(self._counts.items())
        ]
        return f"Counting({', '.join(parts)})"
