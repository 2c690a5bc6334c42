"""Board - piece placement on an 8x8 board plus per-player pawn-skip squares."""

from __future__ import annotations

from collections.abc import Iterator

from chesslogic.core.counting import Counting
from chesslogic.core.enums import Color, MoveType, PieceType
from chesslogic.core.geometry import (
    BOARD_SIZE,
    NORTH_EAST,
    NORTH_WEST,
    SOUTH_EAST,
    SOUTH_WEST,
    Direction,
    Position,
)
from chesslogic.core.geometry import is_inside as _is_inside
from chesslogic.core.move import Move
from chesslogic.core.piece import Piece

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Home rows: back rank and pawn rank per colour.
HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
PAWN_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

_KING_COLUMN = 4
_KINGSIDE_ROOK_COLUMN = 7
_QUEENSIDE_ROOK_COLUMN = 0

_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)

# Squares an en-passant capturer may stand on, relative to the skipped square.
_EN_PASSANT_ORIGINS: dict[Color, tuple[Direction, Direction]] = {
    Color.WHITE: (SOUTH_WEST, SOUTH_EAST),
    Color.BLACK: (NORTH_WEST, NORTH_EAST),
}

BoardKey = Position | tuple[int, int]


def _index(key: BoardKey) -> int:
    if isinstance(key, Position):
        return key.row * BOARD_SIZE + key.column
    row, column = key
    if not _is_inside(row, column):
        raise IndexError(f"Square out of range: ({row}, {column})")
    return row * BOARD_SIZE + column


class Board:
    """Mutable 64-square board that owns the pieces placed on it."""

    __slots__ = ("_squares", "_pawn_skip")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._pawn_skip: dict[Color, Position | None] = {
            Color.WHITE: None,
            Color.BLACK: None,
        }

    # -- Element access -----------------------------------------------------

    def __getitem__(self, key: BoardKey) -> Piece | None:
        return self._squares[_index(key)]

    def __setitem__(self, key: BoardKey, piece: Piece | None) -> None:
        self._squares[_index(key)] = piece

    @staticmethod
    def is_inside(row: int, column: int) -> bool:
        return _is_inside(row, column)

    def is_empty(self, position: Position) -> bool:
        return self[position] is None

    def get_pawn_skip_position(self, color: Color) -> Position | None:
        """Square *color*'s pawn skipped on its latest double step."""
        return self._pawn_skip[color]

    def set_pawn_skip_position(self, color: Color, position: Position | None) -> None:
        self._pawn_skip[color] = position

    # -- Query helpers ------------------------------------------------------

    def piece_positions(self) -> Iterator[Position]:
        """Occupied squares in row-major order."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield Position(*divmod(idx, BOARD_SIZE))

    def piece_positions_for(self, color: Color) -> Iterator[Position]:
        """Squares occupied by *color*."""
        for pos in self.piece_positions():
            piece = self[pos]
            if piece is not None and piece.color == color:
                yield pos

    def find_piece(self, color: Color, piece_type: PieceType) -> Position | None:
        for pos in self.piece_positions_for(color):
            piece = self[pos]
            if piece is not None and piece.piece_type == piece_type:
                return pos
        return None

    def find_king(self, color: Color) -> Position | None:
        return self.find_piece(color, PieceType.KING)

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by any opponent piece?"""
        for pos in self.piece_positions_for(color.opponent):
            piece = self[pos]
            if piece is not None and piece.can_capture_opponent_king(pos, self):
                return True
        return False

    # -- Material -----------------------------------------------------------

    def count_pieces(self) -> Counting:
        counting = Counting()
        for piece in self._squares:
            if piece is not None:
                counting.increment(piece.color, piece.piece_type)
        return counting

    def insufficient_material(self) -> bool:
        """K vs K, K+minor vs K, K+B vs K+B with same-colour bishops."""
        counting = self.count_pieces()
        total = counting.total_count

        # K vs K
        if total == 2:
            return True

        # K+minor vs K
        if total == 3:
            return any(
                counting.white(pt) == 1 or counting.black(pt) == 1
                for pt in _MINOR_PIECES
            )

        # K+B vs K+B with same-colour bishops
        if total == 4:
            if counting.white(PieceType.BISHOP) != 1:
                return False
            if counting.black(PieceType.BISHOP) != 1:
                return False
            w_sq = self.find_piece(Color.WHITE, PieceType.BISHOP)
            b_sq = self.find_piece(Color.BLACK, PieceType.BISHOP)
            assert w_sq is not None and b_sq is not None
            return w_sq.square_color() == b_sq.square_color()

        return False

    # -- Castling / en passant ---------------------------------------------

    def _is_unmoved_king_and_rook(self, color: Color, rook_column: int) -> bool:
        row = HOME_ROW[color]
        king = self[Position(row, _KING_COLUMN)]
        rook = self[Position(row, rook_column)]
        if king is None or rook is None:
            return False
        return (
            king.piece_type == PieceType.KING
            and rook.piece_type == PieceType.ROOK
            and king.color == color
            and rook.color == color
            and not king.has_moved
            and not rook.has_moved
        )

    def castle_right_kingside(self, color: Color) -> bool:
        return self._is_unmoved_king_and_rook(color, _KINGSIDE_ROOK_COLUMN)

    def castle_right_queenside(self, color: Color) -> bool:
        return self._is_unmoved_king_and_rook(color, _QUEENSIDE_ROOK_COLUMN)

    def can_capture_en_passant(self, color: Color) -> bool:
        """Whether *color* has a legal en-passant capture right now."""
        skip_pos = self.get_pawn_skip_position(color.opponent)
        if skip_pos is None:
            return False

        for direction in _EN_PASSANT_ORIGINS[color]:
            origin = skip_pos.offset(direction)
            if origin is None:
                continue
            piece = self[origin]
            if piece is None or piece.color != color:
                continue
            if piece.piece_type != PieceType.PAWN:
                continue
            if Move(origin, skip_pos, MoveType.EN_PASSANT).is_legal(self):
                return True
        return False

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Independent clone: every piece and both pawn-skip squares."""
        b = Board()
        b._squares = [p.copy() if p is not None else None for p in self._squares]
        b._pawn_skip = self._pawn_skip.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._pawn_skip = {Color.WHITE: None, Color.BLACK: None}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for color in (Color.WHITE, Color.BLACK):
            for column, pt in enumerate(_BACK_RANK):
                b[Position(HOME_ROW[color], column)] = Piece(color, pt)
                b[Position(PAWN_ROW[color], column)] = Piece(color, PieceType.PAWN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return all(
            (a is None and b is None) or (a is not None and a.is_same_kind(b))
            for a, b in zip(self._squares, other._squares)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for column in range(BOARD_SIZE):
                p = self[Position(row, column)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
