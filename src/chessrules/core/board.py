"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece, piece_ident
from chessrules.core.types import Square, in_bounds

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


def _index(sq: Square) -> int:
    return sq.row * 8 + sq.col


class Board:
    """Immutable 64-square board.

    Updates go through :meth:`with_changes`, which copies the square tuple
    and returns a new board; the receiver is never touched.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: tuple[Piece | None, ...] | None = None) -> None:
        if squares is None:
            squares = (None,) * 64
        if len(squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")
        self._squares = squares

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not in_bounds(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        return self._squares[_index(sq)]

    def piece_at(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` when empty or off the board."""
        if not in_bounds(sq):
            return None
        return self._squares[_index(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Every occupied square with its piece, row-major."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield Square(idx // 8, idx % 8), piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """Squares and pieces belonging to *color*, row-major."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for sq, piece in self.occupied():
            if piece.is_a(color, PieceType.KING):
                return sq
        return None

    # -- Copy-on-write ------------------------------------------------------

    def with_changes(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with each square in *changes* set to its value."""
        squares = list(self._squares)
        for sq, piece in changes.items():
            if not in_bounds(sq):
                raise IndexError(f"Square off the board: {sq!r}")
            squares[_index(sq)] = piece
        return Board(tuple(squares))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        changes: dict[Square, Piece | None] = {}
        for color in (Color.WHITE, Color.BLACK):
            for col, piece_type in enumerate(_BACK_RANK):
                changes[Square(color.back_row, col)] = _fresh(
                    color, piece_type, color.back_row, col
                )
                changes[Square(color.pawn_row, col)] = _fresh(
                    color, PieceType.PAWN, color.pawn_row, col
                )
        return cls().with_changes(changes)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self._squares[row * 8 + col]
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _fresh(color: Color, piece_type: PieceType, row: int, col: int) -> Piece:
    char = piece_type.letter if color == Color.WHITE else piece_type.letter.lower()
    return Piece(color, piece_type, piece_ident(char, Square(row, col)))


def piece_at(board: Board, sq: Square) -> Piece | None:
    """Piece on *sq*; ``None`` for empty or out-of-bounds squares."""
    return board.piece_at(sq)
