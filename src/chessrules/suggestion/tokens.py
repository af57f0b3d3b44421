"""Recognising and resolving move tokens produced by a suggester.

Only two token shapes resolve to a concrete move here:

* a bare destination square (``e4``) - the first piece of the side to move,
  scanning a8→h1, that can legally reach it;
* ``O-O`` / ``O-O-O`` - the king on its home square castling.

Piece moves, captures and promotions are recognised but left unresolved.
"""

from __future__ import annotations

import re

from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation.algebraic import CASTLE_KINGSIDE, CASTLE_QUEENSIDE
from chessrules.core.position import Position
from chessrules.core.types import Square, parse_square

_BARE_SQUARE_RE = re.compile(r"^[a-h][1-8]$")

MOVE_TOKEN_PATTERNS: tuple[re.Pattern[str], ...] = (
    _BARE_SQUARE_RE,
    re.compile(r"^[KQRBN][a-h]?[1-8]?x?[a-h][1-8][+#]?$"),
    re.compile(r"^[a-h]x?[a-h][1-8][+#]?$"),
    re.compile(r"^(O-O|O-O-O)[+#]?$"),
    re.compile(r"^[a-h][1-8]=[QRBN][+#]?$"),
)

_TRAILING_PUNCTUATION = ".,!?"
_KING_HOME_COL = 4


def is_move_token(token: str) -> bool:
    """Whether *token* has one of the recognised move shapes."""
    return any(pattern.match(token) for pattern in MOVE_TOKEN_PATTERNS)


def extract_move_token(text: str) -> str | None:
    """Pull the first move-shaped token out of free-form suggester output."""
    cleaned = text.strip()
    if cleaned and cleaned[-1] in _TRAILING_PUNCTUATION:
        cleaned = cleaned[:-1]
    if is_move_token(cleaned):
        return cleaned
    for word in cleaned.split():
        if is_move_token(word):
            return word
    return None


def parse_move_token(
    token: str, position: Position
) -> tuple[Square, Square] | None:
    """Resolve *token* to a legal (from, to) pair, or ``None``."""
    clean = token.strip().replace("+", "").replace("#", "")
    gen = MoveGenerator(position)

    if clean in (CASTLE_KINGSIDE, CASTLE_QUEENSIDE):
        row = position.side_to_move.back_row
        from_sq = Square(row, _KING_HOME_COL)
        to_sq = Square(row, 6 if clean == CASTLE_KINGSIDE else 2)
        if gen.is_legal(from_sq, to_sq):
            return from_sq, to_sq
        return None

    if _BARE_SQUARE_RE.match(clean):
        to_sq = parse_square(clean)
        for from_sq, _piece in position.board.pieces(position.side_to_move):
            if gen.is_legal(from_sq, to_sq):
                return from_sq, to_sq
    return None
