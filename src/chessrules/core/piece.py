"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square


def piece_ident(char: str, sq: Square) -> str:
    """Deterministic identity token for a piece first seen on *sq*."""
    return f"{char}-{sq.row}-{sq.col}"

@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing one chess piece.

    ``ident`` follows the piece across moves and promotion; ``has_moved``
    records whether this piece ever left its square.
    """

    color: Color
    piece_type: PieceType
    ident: str = ""
    has_moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str, sq: Square) -> Piece:
        """Create an unmoved piece from a FEN character standing on *sq*."""
        if len(char) != 1 or not char.isalpha():
            raise ValueError(f"Invalid piece character: {char!r}")
        piece_type = PieceType.from_letter(char)
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type, piece_ident(char, sq))

    # ── Derived values ───────────────────────────────────────────────────

    def moved(self) -> Piece:
        return replace(self, has_moved=True)

    def promoted(self, piece_type: PieceType) -> Piece:
        return replace(self, piece_type=piece_type, has_moved=True)

    def is_a(self, color: Color, piece_type: PieceType) -> bool:
        return self.color == color and self.piece_type == piece_type
