"""Move legality, legal move enumeration and attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.config import DEFAULT_CONFIG, RulesConfig
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.types import Square, all_squares, in_bounds

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece
    from chessrules.core.position import Position


KNIGHT_DELTAS: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})

_SQUARES: tuple[Square, ...] = tuple(all_squares())


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Every square strictly between *from_sq* and *to_sq* is empty.

    Only meaningful for squares sharing a row, column or diagonal.
    """
    d_row = _sign(to_sq.row - from_sq.row)
    d_col = _sign(to_sq.col - from_sq.col)
    row, col = from_sq.row + d_row, from_sq.col + d_col
    while (row, col) != (to_sq.row, to_sq.col):
        if not board.is_empty(Square(row, col)):
            return False
        row += d_row
        col += d_col
    return True


class MoveGenerator:
    """Answers legality questions about a single :class:`Position`.

    Positions are immutable, so every check-safety test runs against a
    throwaway board built with :meth:`Board.with_changes`.
    """

    __slots__ = ("_pos", "_board", "_config")

    def __init__(self, position: Position, config: RulesConfig | None = None) -> None:
        self._pos = position
        self._board = position.board
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> RulesConfig:
        return self._config

    # -- Public API ---------------------------------------------------------

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the side to move may play *from_sq* → *to_sq*."""
        board = self._board
        piece = board.piece_at(from_sq)
        if piece is None or piece.color != self._pos.side_to_move:
            return False
        if not in_bounds(to_sq):
            return False
        target = board.piece_at(to_sq)
        if target is not None and target.color == piece.color:
            return False
        if not self._movement_valid(board, piece, from_sq, to_sq, castling=True):
            return False
        return not self._leaves_king_attacked(piece, from_sq, to_sq)

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Legal target squares for the piece on *from_sq*, row-major."""
        piece = self._board.piece_at(from_sq)
        if piece is None or piece.color != self._pos.side_to_move:
            return []
        return [to_sq for to_sq in _SQUARES if self.is_legal(from_sq, to_sq)]

    def legal_moves(self) -> list[tuple[Square, Square]]:
        """All (from, to) pairs legal for the side to move, row-major."""
        moves: list[tuple[Square, Square]] = []
        for from_sq, _piece in self._board.pieces(self._pos.side_to_move):
            for to_sq in self.legal_destinations(from_sq):
                moves.append((from_sq, to_sq))
        return moves

    def has_legal_move(self) -> bool:
        """Whether the side to move has at least one legal move."""
        for from_sq, _piece in self._board.pieces(self._pos.side_to_move):
            for to_sq in _SQUARES:
                if self.is_legal(from_sq, to_sq):
                    return True
        return False

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return self._king_attacked(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return self._square_attacked(self._board, sq, by_color)

    # -- Attack detection (private) ----------------------------------------

    def _king_attacked(self, board: Board, color: Color) -> bool:
        king_sq = board.king_square(color)
        if king_sq is None:
            return False
        return self._square_attacked(board, king_sq, color.opposite)

    def _square_attacked(self, board: Board, sq: Square, by_color: Color) -> bool:
        for from_sq, piece in board.pieces(by_color):
            if from_sq == sq:
                continue
            if piece.piece_type == PieceType.PAWN:
                # Pawns threaten both forward diagonals, occupied or not.
                if (
                    sq.row - from_sq.row == by_color.forward
                    and abs(sq.col - from_sq.col) == 1
                ):
                    return True
            elif self._movement_valid(board, piece, from_sq, sq, castling=False):
                return True
        return False

    def _leaves_king_attacked(
        self, piece: Piece, from_sq: Square, to_sq: Square
    ) -> bool:
        changes: dict[Square, Piece | None] = {from_sq: None, to_sq: piece}
        if self._is_en_passant(piece, from_sq, to_sq):
            changes[Square(from_sq.row, to_sq.col)] = None
        trial = self._board.with_changes(changes)
        return self._king_attacked(trial, piece.color)

    # -- Movement predicates (private) -------------------------------------

    def _movement_valid(
        self,
        board: Board,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        *,
        castling: bool,
    ) -> bool:
        d_row = to_sq.row - from_sq.row
        d_col = to_sq.col - from_sq.col
        abs_row, abs_col = abs(d_row), abs(d_col)

        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            return self._pawn_valid(board, piece, from_sq, to_sq)
        if piece_type == PieceType.ROOK:
            if d_row != 0 and d_col != 0:
                return False
            return is_path_clear(board, from_sq, to_sq)
        if piece_type == PieceType.BISHOP:
            if abs_row != abs_col:
                return False
            return is_path_clear(board, from_sq, to_sq)
        if piece_type == PieceType.QUEEN:
            if d_row != 0 and d_col != 0 and abs_row != abs_col:
                return False
            return is_path_clear(board, from_sq, to_sq)
        if piece_type == PieceType.KNIGHT:
            return (abs_row, abs_col) in KNIGHT_DELTAS
        if piece_type == PieceType.KING:
            if abs_row <= 1 and abs_col <= 1:
                return True
            if castling and d_row == 0 and abs_col == 2:
                return self._castling_valid(board, piece, from_sq, to_sq)
            return False
        raise ValueError(f"Unknown piece type: {piece_type!r}")

    def _pawn_valid(
        self, board: Board, piece: Piece, from_sq: Square, to_sq: Square
    ) -> bool:
        forward = piece.color.forward
        d_row = to_sq.row - from_sq.row
        d_col = to_sq.col - from_sq.col
        target = board.piece_at(to_sq)

        if d_col == 0:
            if target is not None:
                return False
            if d_row == forward:
                return True
            if d_row == 2 * forward and from_sq.row == piece.color.pawn_row:
                if self._config.check_double_step_path:
                    return board.is_empty(from_sq.offset(forward, 0))
                return True
            return False

        if abs(d_col) == 1 and d_row == forward:
            if target is not None and target.color != piece.color:
                return True
            return self._en_passant_capturable(board, piece, from_sq, to_sq)

        return False

    def _castling_valid(
        self, board: Board, king: Piece, from_sq: Square, to_sq: Square
    ) -> bool:
        if king.has_moved:
            return False

        kingside = to_sq.col > from_sq.col
        rook_col = 7 if kingside else 0
        rook = board.piece_at(Square(from_sq.row, rook_col))
        if (
            rook is None
            or not rook.is_a(king.color, PieceType.ROOK)
            or rook.has_moved
        ):
            return False

        if not self._pos.castling & CastlingRights.for_side(king.color, kingside):
            return False

        low, high = sorted((from_sq.col, rook_col))
        for col in range(low + 1, high):
            if not board.is_empty(Square(from_sq.row, col)):
                return False

        step = 1 if kingside else -1
        opponent = king.color.opposite
        for col in (from_sq.col, from_sq.col + step, from_sq.col + 2 * step):
            if self._square_attacked(board, Square(from_sq.row, col), opponent):
                return False
        return True

    def _is_en_passant(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        return (
            piece.piece_type == PieceType.PAWN
            and abs(to_sq.col - from_sq.col) == 1
            and self._board.piece_at(to_sq) is None
            and self._en_passant_capturable(self._board, piece, from_sq, to_sq)
        )

    def _en_passant_capturable(
        self, board: Board, piece: Piece, from_sq: Square, to_sq: Square
    ) -> bool:
        # The target only counts when an enemy pawn sits beside the mover.
        if self._pos.en_passant is None or to_sq != self._pos.en_passant:
            return False
        victim = board.piece_at(Square(from_sq.row, to_sq.col))
        return victim is not None and victim.is_a(
            piece.color.opposite, PieceType.PAWN
        )

    # -- Classification (public) -------------------------------------------

    def is_en_passant(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether *from_sq* → *to_sq* is an en passant capture here."""
        piece = self._board.piece_at(from_sq)
        return piece is not None and self._is_en_passant(piece, from_sq, to_sq)
