"""Tests for Board and the square helpers."""

import pytest

from chessrules.core.board import Board, piece_at
from chessrules.core.enums import Color, PieceType
from chessrules.core.notation import STARTING_FEN, position_from_fen
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1,
    A8,
    E1,
    E4,
    E8,
    H1,
    Square,
    in_bounds,
    parse_square,
    square_name,
    squares_equal,
)


class TestSquares:
    def test_labels(self) -> None:
        assert square_name(A8) == "a8"
        assert square_name(H1) == "h1"
        assert square_name(Square(4, 4)) == "e4"

    def test_parse(self) -> None:
        assert parse_square("a8") == Square(0, 0)
        assert parse_square("a1") == Square(7, 0)
        assert parse_square("e4") == E4

    @pytest.mark.parametrize("label", ["", "e", "i1", "a9", "a0", "e44"])
    def test_parse_invalid(self, label: str) -> None:
        with pytest.raises(ValueError):
            parse_square(label)

    def test_in_bounds(self) -> None:
        assert in_bounds(Square(0, 0))
        assert in_bounds(Square(7, 7))
        assert not in_bounds(Square(-1, 0))
        assert not in_bounds(Square(0, 8))
        assert not in_bounds(Square(8, 3))

    def test_squares_equal(self) -> None:
        assert squares_equal(Square(3, 4), parse_square("e5"))
        assert not squares_equal(Square(3, 4), Square(4, 3))


class TestBoardAccess:
    def test_empty_board(self) -> None:
        b = Board()
        assert all(b.piece_at(Square(r, c)) is None for r in range(8) for c in range(8))

    def test_piece_at_out_of_bounds_is_none(self) -> None:
        b = Board.initial()
        assert piece_at(b, Square(-1, 4)) is None
        assert piece_at(b, Square(8, 0)) is None
        assert piece_at(b, Square(3, 9)) is None

    def test_getitem_out_of_bounds_raises(self) -> None:
        with pytest.raises(IndexError):
            Board()[Square(8, 8)]

    def test_is_empty(self) -> None:
        b = Board.initial()
        assert b.is_empty(E4)
        assert not b.is_empty(E1)
        assert b.is_empty(Square(-1, 0))

    def test_initial_kings(self) -> None:
        b = Board.initial()
        assert b.king_square(Color.WHITE) == E1
        assert b.king_square(Color.BLACK) == E8

    def test_initial_corners(self) -> None:
        b = Board.initial()
        rook = b[A1]
        assert rook is not None
        assert rook.is_a(Color.WHITE, PieceType.ROOK)
        assert not rook.has_moved

    def test_missing_king(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_pieces_row_major(self) -> None:
        b = Board.initial()
        black = b.pieces(Color.BLACK)
        assert len(black) == 16
        assert black[0][0] == A8
        assert [sq for sq, _ in black] == sorted(sq for sq, _ in black)


class TestCopyOnWrite:
    def test_with_changes_leaves_original(self) -> None:
        b = Board.initial()
        knight = Piece(Color.WHITE, PieceType.KNIGHT, "N-x")
        changed = b.with_changes({E4: knight, E1: None})
        assert changed[E4] == knight
        assert changed[E1] is None
        assert b[E4] is None
        assert b[E1] is not None

    def test_with_changes_off_board_raises(self) -> None:
        with pytest.raises(IndexError):
            Board().with_changes({Square(9, 9): None})

    def test_equality_by_value(self) -> None:
        assert Board.initial() == Board.initial()
        assert Board.initial() != Board()

    def test_initial_matches_fen(self) -> None:
        assert Board.initial() == position_from_fen(STARTING_FEN).board

    def test_repr_top_rank_first(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"


class TestPiece:
    def test_from_char(self) -> None:
        p = Piece.from_char("n", Square(0, 1))
        assert p.color == Color.BLACK
        assert p.piece_type == PieceType.KNIGHT
        assert p.ident == "n-0-1"
        assert str(p) == "n"

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x", Square(0, 0))

    def test_moved_keeps_identity(self) -> None:
        p = Piece.from_char("P", Square(6, 4))
        moved = p.moved()
        assert moved.has_moved
        assert moved.ident == p.ident
        assert not p.has_moved

    def test_promoted_keeps_identity(self) -> None:
        p = Piece.from_char("P", Square(1, 4))
        queen = p.promoted(PieceType.QUEEN)
        assert queen.piece_type == PieceType.QUEEN
        assert queen.ident == p.ident
        assert queen.color == Color.WHITE
