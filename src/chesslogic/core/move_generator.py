"""Pseudo-legal move generation and king-attack probes, per piece kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesslogic.core.board import HOME_ROW, PAWN_ROW
from chesslogic.core.enums import Color, MoveType, PieceType
from chesslogic.core.geometry import (
    ALL_DIRECTIONS,
    DIAGONALS,
    EAST,
    NORTH,
    ORTHOGONALS,
    SOUTH,
    WEST,
    Direction,
    Position,
    all_positions,
)
from chesslogic.core.move import PROMOTION_TYPES, Move

if TYPE_CHECKING:
    from chesslogic.core.board import Board
    from chesslogic.core.piece import Piece

KNIGHT_OFFSETS: tuple[Direction, ...] = tuple(
    offset
    for vertical in (NORTH, SOUTH)
    for horizontal in (WEST, EAST)
    for offset in (2 * vertical + horizontal, 2 * horizontal + vertical)
)
KING_OFFSETS: tuple[Direction, ...] = ALL_DIRECTIONS

BISHOP_DIRS: tuple[Direction, ...] = DIAGONALS
ROOK_DIRS: tuple[Direction, ...] = ORTHOGONALS
QUEEN_DIRS: tuple[Direction, ...] = ALL_DIRECTIONS

_FORWARD: dict[Color, Direction] = {Color.WHITE: NORTH, Color.BLACK: SOUTH}
_LAST_ROWS = (0, 7)
_KING_HOME_COLUMN = 4


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[Direction, ...],
) -> dict[Position, tuple[Position, ...]]:
    targets: dict[Position, tuple[Position, ...]] = {}
    for pos in all_positions():
        moves: list[Position] = []
        for offset in offsets:
            to_pos = pos.offset(offset)
            if to_pos is not None:
                moves.append(to_pos)
        targets[pos] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[Direction, ...],
) -> dict[Position, tuple[tuple[Position, ...], ...]]:
    rays_per_square: dict[Position, tuple[tuple[Position, ...], ...]] = {}
    for pos in all_positions():
        square_rays: list[tuple[Position, ...]] = []
        for direction in directions:
            ray: list[Position] = []
            current = pos.offset(direction)
            while current is not None:
                ray.append(current)
                current = current.offset(direction)
            square_rays.append(tuple(ray))
        rays_per_square[pos] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Public API --------------------------------------------------------------


def generate_moves(piece: Piece, position: Position, board: Board) -> list[Move]:
    """Pseudo-legal moves for *piece* standing on *position*."""
    return _GENERATORS[piece.piece_type](piece, position, board)


def attacks_king(piece: Piece, position: Position, board: Board) -> bool:
    """Whether *piece* on *position* could capture the opposing king.

    Works on raw movement patterns only, so it is safe to call from check
    detection without going through legality filtering.
    """
    if piece.piece_type == PieceType.PAWN:
        targets = _pawn_attack_targets(piece, position)
    elif piece.piece_type == PieceType.KING:
        targets = _step_targets(piece, _KING_TARGETS[position], board)
    else:
        targets = [move.to_pos for move in generate_moves(piece, position, board)]

    for to_pos in targets:
        target = board[to_pos]
        if (
            target is not None
            and target.piece_type == PieceType.KING
            and target.color != piece.color
        ):
            return True
    return False


# -- Piece-specific generators (private) -------------------------------------


def _step_targets(
    piece: Piece, candidates: tuple[Position, ...], board: Board
) -> list[Position]:
    targets: list[Position] = []
    for to_pos in candidates:
        target = board[to_pos]
        if target is None or target.color != piece.color:
            targets.append(to_pos)
    return targets


def _gen_sliding(
    piece: Piece,
    position: Position,
    board: Board,
    rays: tuple[tuple[Position, ...], ...],
) -> list[Move]:
    moves: list[Move] = []
    for ray in rays:
        for to_pos in ray:
            target = board[to_pos]
            if target is None:
                moves.append(Move(position, to_pos))
                continue
            if target.color != piece.color:
                moves.append(Move(position, to_pos))
            break
    return moves


def _gen_bishop(piece: Piece, position: Position, board: Board) -> list[Move]:
    return _gen_sliding(piece, position, board, _BISHOP_RAYS[position])


def _gen_rook(piece: Piece, position: Position, board: Board) -> list[Move]:
    return _gen_sliding(piece, position, board, _ROOK_RAYS[position])


def _gen_queen(piece: Piece, position: Position, board: Board) -> list[Move]:
    return _gen_sliding(piece, position, board, _QUEEN_RAYS[position])


def _gen_knight(piece: Piece, position: Position, board: Board) -> list[Move]:
    return [
        Move(position, to_pos)
        for to_pos in _step_targets(piece, _KNIGHT_TARGETS[position], board)
    ]


def _gen_king(piece: Piece, position: Position, board: Board) -> list[Move]:
    moves = [
        Move(position, to_pos)
        for to_pos in _step_targets(piece, _KING_TARGETS[position], board)
    ]
    home = Position(HOME_ROW[piece.color], _KING_HOME_COLUMN)
    if piece.has_moved or position != home:
        return moves

    if _can_castle(piece, position, board, rook_column=7, between=(5, 6)):
        moves.append(Move.castle(MoveType.CASTLE_KINGSIDE, position))
    if _can_castle(piece, position, board, rook_column=0, between=(1, 2, 3)):
        moves.append(Move.castle(MoveType.CASTLE_QUEENSIDE, position))
    return moves


def _can_castle(
    king: Piece,
    position: Position,
    board: Board,
    *,
    rook_column: int,
    between: tuple[int, ...],
) -> bool:
    row = position.row
    rook = board[Position(row, rook_column)]
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != king.color
        or rook.has_moved
    ):
        return False
    return all(board.is_empty(Position(row, column)) for column in between)


def _promotion_moves(from_pos: Position, to_pos: Position) -> list[Move]:
    return [
        Move(from_pos, to_pos, MoveType.PAWN_PROMOTION, pt) for pt in PROMOTION_TYPES
    ]


def _pawn_attack_targets(piece: Piece, position: Position) -> list[Position]:
    forward = _FORWARD[piece.color]
    targets: list[Position] = []
    for side in (WEST, EAST):
        to_pos = position.offset(forward + side)
        if to_pos is not None:
            targets.append(to_pos)
    return targets


def _gen_pawn(piece: Piece, position: Position, board: Board) -> list[Move]:
    moves: list[Move] = []
    forward = _FORWARD[piece.color]

    one_step = position.offset(forward)
    if one_step is not None and board.is_empty(one_step):
        if one_step.row in _LAST_ROWS:
            moves.extend(_promotion_moves(position, one_step))
        else:
            moves.append(Move(position, one_step))

        two_step = one_step.offset(forward)
        if (
            not piece.has_moved
            and position.row == PAWN_ROW[piece.color]
            and two_step is not None
            and board.is_empty(two_step)
        ):
            moves.append(Move(position, two_step, MoveType.DOUBLE_PAWN))

    skip_pos = board.get_pawn_skip_position(piece.color.opponent)
    for to_pos in _pawn_attack_targets(piece, position):
        if to_pos == skip_pos:
            moves.append(Move(position, to_pos, MoveType.EN_PASSANT))
            continue
        target = board[to_pos]
        if target is None or target.color == piece.color:
            continue
        if to_pos.row in _LAST_ROWS:
            moves.extend(_promotion_moves(position, to_pos))
        else:
            moves.append(Move(position, to_pos))
    return moves


_GENERATORS: dict[PieceType, Callable[[Piece, Position, Board], list[Move]]] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}
