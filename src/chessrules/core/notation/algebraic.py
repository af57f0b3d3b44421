"""Move notation in the engine's simplified algebraic dialect.

The dialect always spells out the origin square (``Ng1f3``, ``e2e4``,
``Qd8xh4#``) and never disambiguates between same-kind pieces.
"""

from __future__ import annotations

from chessrules.core.enums import GameStatus, PieceType
from chessrules.core.move import Move
from chessrules.core.types import square_name

CASTLE_KINGSIDE = "O-O"
CASTLE_QUEENSIDE = "O-O-O"


def move_notation(move: Move, status: GameStatus) -> str:
    """Notation for a completed *move*; *status* is the resulting status."""
    if move.is_castling:
        text = CASTLE_KINGSIDE if move.is_kingside_castle else CASTLE_QUEENSIDE
    else:
        text = ""
        if move.piece.piece_type != PieceType.PAWN:
            text += move.piece.piece_type.letter
        text += square_name(move.from_sq)
        if move.captured is not None:
            text += "x"
        text += square_name(move.to_sq)
        if move.promotion is not None:
            text += "=" + move.promotion.letter

    if status == GameStatus.CHECKMATE:
        text += "#"
    elif status == GameStatus.CHECK:
        text += "+"
    return text
