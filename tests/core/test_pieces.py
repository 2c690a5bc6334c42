"""Tests for pseudo-legal move generation per piece kind."""

import pytest

from chesslogic.core.board import Board
from chesslogic.core.enums import Color, MoveType, PieceType
from chesslogic.core.geometry import (
    A1,
    A8,
    B1,
    B7,
    B8,
    C1,
    D1,
    D5,
    D6,
    D7,
    D8,
    E1,
    E2,
    E3,
    E4,
    E5,
    E8,
    F1,
    F5,
    G1,
    G5,
    H1,
    H5,
    Position,
)
from chesslogic.core.move import Move
from chesslogic.core.piece import Piece


def _put(board: Board, square: Position, color: Color, piece_type: PieceType) -> Piece:
    piece = Piece(color, piece_type)
    board[square] = piece
    return piece


def _targets(piece: Piece, square: Position, board: Board) -> set[Position]:
    return {move.to_pos for move in piece.get_moves(square, board)}


class TestEmptyBoardCounts:
    @pytest.mark.parametrize(
        "piece_type, expected",
        [
            (PieceType.KNIGHT, 8),
            (PieceType.BISHOP, 13),
            (PieceType.ROOK, 14),
            (PieceType.QUEEN, 27),
            (PieceType.KING, 8),
        ],
    )
    def test_central_square(self, piece_type: PieceType, expected: int) -> None:
        board = Board()
        piece = _put(board, D5, Color.WHITE, piece_type)
        piece.has_moved = True  # keep castling out of the king count
        assert len(piece.get_moves(D5, board)) == expected

    def test_knight_corner(self) -> None:
        board = Board()
        knight = _put(board, A8, Color.WHITE, PieceType.KNIGHT)
        assert len(knight.get_moves(A8, board)) == 2

    def test_moves_are_rebuilt_each_call(self) -> None:
        board = Board()
        rook = _put(board, D5, Color.WHITE, PieceType.ROOK)
        first = rook.get_moves(D5, board)
        second = rook.get_moves(D5, board)
        assert first == second
        assert first is not second


class TestSlidingPieces:
    def test_stops_before_own_piece(self) -> None:
        board = Board()
        rook = _put(board, D5, Color.WHITE, PieceType.ROOK)
        _put(board, D7, Color.WHITE, PieceType.PAWN)
        targets = _targets(rook, D5, board)
        assert D6 in targets
        assert D7 not in targets
        assert D8 not in targets

    def test_includes_first_enemy_piece_only(self) -> None:
        board = Board()
        rook = _put(board, D5, Color.WHITE, PieceType.ROOK)
        _put(board, F5, Color.BLACK, PieceType.PAWN)
        targets = _targets(rook, D5, board)
        assert F5 in targets
        assert G5 not in targets
        assert H5 not in targets

    def test_bishop_cannot_jump(self) -> None:
        board = Board()
        bishop = _put(board, Position(7, 2), Color.WHITE, PieceType.BISHOP)
        _put(board, Position(6, 3), Color.WHITE, PieceType.PAWN)
        _put(board, Position(6, 1), Color.WHITE, PieceType.PAWN)
        assert bishop.get_moves(Position(7, 2), board) == []


class TestKnight:
    def test_own_piece_excluded(self) -> None:
        board = Board()
        knight = _put(board, Position(3, 3), Color.WHITE, PieceType.KNIGHT)
        _put(board, Position(4, 5), Color.WHITE, PieceType.PAWN)
        assert Position(4, 5) not in _targets(knight, Position(3, 3), board)

    def test_enemy_piece_included(self) -> None:
        board = Board()
        knight = _put(board, Position(3, 3), Color.WHITE, PieceType.KNIGHT)
        _put(board, Position(4, 5), Color.BLACK, PieceType.PAWN)
        assert Position(4, 5) in _targets(knight, Position(3, 3), board)


class TestPawn:
    def test_start_rank_single_and_double(self) -> None:
        board = Board()
        pawn = _put(board, E2, Color.WHITE, PieceType.PAWN)
        moves = pawn.get_moves(E2, board)
        assert len(moves) == 2
        assert Move(E2, E3) in moves
        assert Move(E2, E4, MoveType.DOUBLE_PAWN) in moves

    def test_black_moves_down_the_board(self) -> None:
        board = Board()
        pawn = _put(board, Position(1, 1), Color.BLACK, PieceType.PAWN)
        assert _targets(pawn, Position(1, 1), board) == {Position(2, 1), Position(3, 1)}

    def test_moved_pawn_single_step_only(self) -> None:
        board = Board()
        pawn = _put(board, E2, Color.WHITE, PieceType.PAWN)
        pawn.has_moved = True
        assert pawn.get_moves(E2, board) == [Move(E2, E3)]

    def test_unmoved_pawn_off_start_rank_single_step_only(self) -> None:
        board = Board()
        pawn = _put(board, E4, Color.WHITE, PieceType.PAWN)
        assert pawn.get_moves(E4, board) == [Move(E4, E5)]

    def test_blocked_pawn(self) -> None:
        board = Board()
        pawn = _put(board, E2, Color.WHITE, PieceType.PAWN)
        _put(board, E3, Color.BLACK, PieceType.KNIGHT)
        assert pawn.get_moves(E2, board) == []

    def test_double_step_blocked_on_second_square(self) -> None:
        board = Board()
        pawn = _put(board, E2, Color.WHITE, PieceType.PAWN)
        _put(board, E4, Color.BLACK, PieceType.KNIGHT)
        assert pawn.get_moves(E2, board) == [Move(E2, E3)]

    def test_promotion_fan(self) -> None:
        board = Board()
        pawn = _put(board, B7, Color.WHITE, PieceType.PAWN)
        moves = pawn.get_moves(B7, board)
        assert len(moves) == 4
        assert all(m.kind == MoveType.PAWN_PROMOTION for m in moves)
        assert all(m.to_pos == B8 for m in moves)
        assert {m.promotion for m in moves} == {
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.ROOK,
            PieceType.QUEEN,
        }

    def test_promotion_fan_on_capture(self) -> None:
        board = Board()
        pawn = _put(board, B7, Color.WHITE, PieceType.PAWN)
        _put(board, A8, Color.BLACK, PieceType.ROOK)
        moves = pawn.get_moves(B7, board)
        assert len(moves) == 8
        assert sum(1 for m in moves if m.to_pos == A8) == 4

    def test_diagonal_capture(self) -> None:
        board = Board()
        pawn = _put(board, E4, Color.WHITE, PieceType.PAWN)
        pawn.has_moved = True
        _put(board, D5, Color.BLACK, PieceType.PAWN)
        assert Move(E4, D5) in pawn.get_moves(E4, board)

    def test_no_diagonal_onto_own_piece(self) -> None:
        board = Board()
        pawn = _put(board, E4, Color.WHITE, PieceType.PAWN)
        pawn.has_moved = True
        _put(board, D5, Color.WHITE, PieceType.PAWN)
        assert D5 not in _targets(pawn, E4, board)

    def test_en_passant_from_skip_square(self) -> None:
        board = Board()
        pawn = _put(board, E5, Color.WHITE, PieceType.PAWN)
        pawn.has_moved = True
        _put(board, D5, Color.BLACK, PieceType.PAWN)
        board.set_pawn_skip_position(Color.BLACK, D6)
        assert Move(E5, D6, MoveType.EN_PASSANT) in pawn.get_moves(E5, board)

    def test_own_skip_square_ignored(self) -> None:
        board = Board()
        pawn = _put(board, E5, Color.WHITE, PieceType.PAWN)
        pawn.has_moved = True
        board.set_pawn_skip_position(Color.WHITE, D6)
        assert D6 not in _targets(pawn, E5, board)


class TestKingCastling:
    def _setup(self) -> tuple[Board, Piece]:
        board = Board()
        king = _put(board, E1, Color.WHITE, PieceType.KING)
        _put(board, A1, Color.WHITE, PieceType.ROOK)
        _put(board, H1, Color.WHITE, PieceType.ROOK)
        return board, king

    def test_both_sides_offered(self) -> None:
        board, king = self._setup()
        castles = [m for m in king.get_moves(E1, board) if m.is_castle]
        assert len(castles) == 2
        assert Move.castle(MoveType.CASTLE_KINGSIDE, E1) in castles
        assert Move.castle(MoveType.CASTLE_QUEENSIDE, E1) in castles

    def test_castle_destinations(self) -> None:
        assert Move.castle(MoveType.CASTLE_KINGSIDE, E1).to_pos == G1
        assert Move.castle(MoveType.CASTLE_QUEENSIDE, E1).to_pos == C1

    def test_blocked_path(self) -> None:
        board, king = self._setup()
        _put(board, F1, Color.WHITE, PieceType.BISHOP)
        kinds = {m.kind for m in king.get_moves(E1, board) if m.is_castle}
        assert kinds == {MoveType.CASTLE_QUEENSIDE}

    def test_queenside_b_file_must_be_empty(self) -> None:
        board, king = self._setup()
        _put(board, Position(7, 1), Color.WHITE, PieceType.KNIGHT)
        kinds = {m.kind for m in king.get_moves(E1, board) if m.is_castle}
        assert kinds == {MoveType.CASTLE_KINGSIDE}

    def test_moved_rook(self) -> None:
        board, king = self._setup()
        rook = board[H1]
        assert rook is not None
        rook.has_moved = True
        kinds = {m.kind for m in king.get_moves(E1, board) if m.is_castle}
        assert kinds == {MoveType.CASTLE_QUEENSIDE}

    def test_unmoved_king_off_home_square(self) -> None:
        board = Board()
        king = _put(board, B1, Color.WHITE, PieceType.KING)
        _put(board, H1, Color.WHITE, PieceType.ROOK)
        _put(board, D1, Color.WHITE, PieceType.KNIGHT)
        _put(board, E8, Color.BLACK, PieceType.KING)
        assert not any(m.is_castle for m in king.get_moves(B1, board))

    def test_moved_king(self) -> None:
        board, king = self._setup()
        king.has_moved = True
        assert not any(m.is_castle for m in king.get_moves(E1, board))

    def test_enemy_rook_in_corner(self) -> None:
        board, king = self._setup()
        _put(board, H1, Color.BLACK, PieceType.ROOK)
        kinds = {m.kind for m in king.get_moves(E1, board) if m.is_castle}
        assert kinds == {MoveType.CASTLE_QUEENSIDE}


class TestKingCaptureProbe:
    def test_pawn_attacks_diagonally_only(self) -> None:
        board = Board()
        pawn = _put(board, E4, Color.WHITE, PieceType.PAWN)
        _put(board, E5, Color.BLACK, PieceType.KING)
        assert not pawn.can_capture_opponent_king(E4, board)
        board[E5] = None
        _put(board, D5, Color.BLACK, PieceType.KING)
        assert pawn.can_capture_opponent_king(E4, board)

    def test_king_adjacent(self) -> None:
        board = Board()
        king = _put(board, E4, Color.WHITE, PieceType.KING)
        _put(board, E5, Color.BLACK, PieceType.KING)
        assert king.can_capture_opponent_king(E4, board)

    def test_slider_blocked(self) -> None:
        board = Board()
        rook = _put(board, A1, Color.WHITE, PieceType.ROOK)
        _put(board, A8, Color.BLACK, PieceType.KING)
        assert rook.can_capture_opponent_king(A1, board)
        _put(board, Position(3, 0), Color.BLACK, PieceType.PAWN)
        assert not rook.can_capture_opponent_king(A1, board)

    def test_own_king_not_a_target(self) -> None:
        board = Board()
        knight = _put(board, D5, Color.WHITE, PieceType.KNIGHT)
        _put(board, Position(1, 4), Color.WHITE, PieceType.KING)
        assert not knight.can_capture_opponent_king(D5, board)
