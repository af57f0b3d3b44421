"""Move record - one accepted move, as appended to the game history."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a completed move.

    ``piece`` and ``captured`` are snapshots taken before the move was
    played. ``captured`` is the pawn behind the target square for an en
    passant capture.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    is_castling: bool = False
    is_en_passant: bool = False
    promotion: PieceType | None = None
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    notation: str = ""

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.notation or self.uci

    @property
    def uci(self) -> str:
        """Long-algebraic coordinates, e.g. ``e7e8q``."""
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += self.promotion.letter.lower()
        return base

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_kingside_castle(self) -> bool:
        return self.is_castling and self.to_sq.col > self.from_sq.col
