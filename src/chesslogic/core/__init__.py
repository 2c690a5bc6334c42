"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesslogic.core import Board, Color, parse_square

    board = Board.initial()
    knight = board[parse_square("g1")]
    for move in knight.get_moves(parse_square("g1"), board):
        print(move, move.is_legal(board))
"""

from chesslogic.core.board import Board
from chesslogic.core.counting import Counting
from chesslogic.core.enums import Color, EndReason, MoveType, PieceType
from chesslogic.core.geometry import Direction, Position, parse_square
from chesslogic.core.move import Move
from chesslogic.core.notation import (
    STARTING_STATE,
    board_from_state_string,
    state_string,
)
from chesslogic.core.piece import Piece
from chesslogic.core.rules import Result, Rules

__all__ = [
    # Enums
    "Color",
    "EndReason",
    "MoveType",
    "PieceType",
    # Geometry
    "Direction",
    "Position",
    "parse_square",
    # Domain objects
    "Board",
    "Counting",
    "Move",
    "Piece",
    "Result",
    "Rules",
    # Notation
    "STARTING_STATE",
    "board_from_state_string",
    "state_string",
]
