"""Canonical position string: serialization and parsing.

Format: ``<placement> <side> <castling> <en-passant>``, the first four FEN
fields. The parser also accepts the optional FEN clock fields.
"""

from __future__ import annotations

from chesslogic.core.board import HOME_ROW, PAWN_ROW, Board
from chesslogic.core.enums import Color, PieceType
from chesslogic.core.geometry import BOARD_SIZE, Position, parse_square
from chesslogic.core.piece import Piece

STARTING_STATE = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -"

_CASTLING_CHARS = "KQkq"
# castling char -> (colour, rook column)
_CASTLING_CORNERS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


def state_string(current_player: Color, board: Board) -> str:
    """Serialise *board* with *current_player* to move."""
    # 1. Board
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for column in range(BOARD_SIZE):
            piece = board[Position(row, column)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if current_player == Color.WHITE else "b"

    # 3. Castling
    castling_str = ""
    if board.castle_right_kingside(Color.WHITE):
        castling_str += "K"
    if board.castle_right_queenside(Color.WHITE):
        castling_str += "Q"
    if board.castle_right_kingside(Color.BLACK):
        castling_str += "k"
    if board.castle_right_queenside(Color.BLACK):
        castling_str += "q"
    if not castling_str:
        castling_str = "-"

    # 4. En passant (only when the capture is actually playable)
    ep_str = "-"
    if board.can_capture_en_passant(current_player):
        skip_pos = board.get_pawn_skip_position(current_player.opponent)
        assert skip_pos is not None
        ep_str = skip_pos.name

    return f"{board_str} {side_str} {castling_str} {ep_str}"


def board_from_state_string(text: str) -> tuple[Board, Color, int, int]:
    """Parse *text* into ``(board, side_to_move, halfmove_clock, fullmove)``.

    Moved flags are rebuilt from the castling field and pawn rows; the
    en-passant square becomes the opponent's pawn-skip square.
    """
    parts = text.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid position string (need 4-6 fields): {text!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {text!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        column = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid digit {ch!r}: {text!r}")
                column += step
            else:
                if column >= BOARD_SIZE:
                    raise ValueError(f"Invalid rank width: {text!r}")
                board[Position(row, column)] = Piece.from_char(ch)
                column += 1
            if column > BOARD_SIZE:
                raise ValueError(f"Invalid rank width: {text!r}")
        if column != BOARD_SIZE:
            raise ValueError(f"Invalid rank width: {text!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid side-to-move field: {side_part!r}")

    # 3. Castling
    rights: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _CASTLING_CHARS or ch in rights:
                raise ValueError(f"Invalid castling field: {castling_part!r}")
            rights.add(ch)
    _apply_moved_flags(board, rights)
    for ch in rights:
        color, rook_column = _CASTLING_CORNERS[ch]
        has_right = (
            board.castle_right_kingside(color)
            if rook_column == 7
            else board.castle_right_queenside(color)
        )
        if not has_right:
            raise ValueError(f"Castling right {ch!r} without king and rook: {text!r}")

    # 4. En passant
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_row = 2 if side == Color.WHITE else 5
        if ep.row != expected_row:
            raise ValueError(f"Invalid en-passant square for side-to-move: {ep_part!r}")
        board.set_pawn_skip_position(side.opponent, ep)

    # 5–6. Clocks (optional)
    halfmove = 0
    if len(parts) > 4:
        halfmove = int(parts[4])
        if halfmove < 0:
            raise ValueError(f"Invalid halfmove clock: {parts[4]!r}")

    fullmove = 1
    if len(parts) > 5:
        fullmove = int(parts[5])
        if fullmove < 1:
            raise ValueError(f"Invalid fullmove number: {parts[5]!r}")

    return board, side, halfmove, fullmove


def _apply_moved_flags(board: Board, rights: set[str]) -> None:
    unmoved_rooks = {
        Position(HOME_ROW[color], column)
        for ch, (color, column) in _CASTLING_CORNERS.items()
        if ch in rights
    }
    for pos in list(board.piece_positions()):
        piece = board[pos]
        assert piece is not None
        if piece.piece_type == PieceType.PAWN:
            piece.has_moved = pos.row != PAWN_ROW[piece.color]
        elif piece.piece_type == PieceType.ROOK:
            piece.has_moved = pos not in unmoved_rooks
        elif piece.piece_type == PieceType.KING:
            home = Position(HOME_ROW[piece.color], 4)
            own_rights = "KQ" if piece.color == Color.WHITE else "kq"
            piece.has_moved = pos != home or not any(ch in rights for ch in own_rights)
