"""Notation package: FEN codec and move notation."""

from chessrules.core.notation.algebraic import (
    CASTLE_KINGSIDE,
    CASTLE_QUEENSIDE,
    move_notation,
)
from chessrules.core.notation.fen import (
    STARTING_FEN,
    FenError,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "CASTLE_KINGSIDE",
    "CASTLE_QUEENSIDE",
    "STARTING_FEN",
    "FenError",
    "move_notation",
    "position_from_fen",
    "position_to_fen",
]
