"""FEN parsing and serialization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, parse_square, square_name

if TYPE_CHECKING:
    from chessrules.core.config import RulesConfig

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)

_RANK_DIGITS = "12345678"

# Grid row an en-passant target may sit on, keyed by the side to move.
_EN_PASSANT_ROW: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 5}


class FenError(ValueError):
    """Position text could not be decoded."""


def position_from_fen(fen: str, config: RulesConfig | None = None) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Moved flags cannot be recovered from FEN and start out ``False``; history
    and captures start empty. Status and winner are derived from the board.
    """
    from chessrules.core.rules import Rules

    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise FenError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    pieces: dict[Square, Piece | None] = {}
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                if ch not in _RANK_DIGITS:
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += int(ch)
            else:
                if col >= 8:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                sq = Square(row, col)
                try:
                    pieces[sq] = Piece.from_char(ch, sq)
                except ValueError:
                    raise FenError(
                        f"Invalid FEN piece letter {ch!r}: {fen!r}"
                    ) from None
                col += 1
            if col > 8:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise FenError(f"Invalid FEN rank width: {fen!r}")
    board = Board().with_changes(pieces)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_CHARS)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise FenError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError:
            raise FenError(f"Invalid FEN en-passant square: {ep_part!r}") from None
        if ep.row != _EN_PASSANT_ROW[side]:
            raise FenError(
                f"Invalid FEN en-passant square for side to move: {ep_part!r}"
            )

    # 5–6. Counters are validated but not tracked.
    for label, text, minimum in (
        ("halfmove clock", parts[4] if len(parts) > 4 else "0", 0),
        ("fullmove number", parts[5] if len(parts) > 5 else "1", 1),
    ):
        if not (text.isascii() and text.isdigit()) or int(text) < minimum:
            raise FenError(f"Invalid FEN {label}: {text!r}")

    position = Position(
        board=board,
        side_to_move=side,
        castling=castling,
        en_passant=ep,
    )
    return Rules.evaluate(position, config)


def position_to_fen(pos: Position, halfmove_clock: int = 0) -> str:
    """Serialise a :class:`Position` to FEN.

    The halfmove counter is not tracked by positions; callers that keep one
    pass it in. The fullmove number follows the position's history.

    Castling rights are written as the position holds them. A capture on a
    rook's home corner has already cleared that corner's right, so after
    such a capture the field can be shorter than in tools that only clear
    rights when the rook itself moves.
    """
    # 1. Board
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.board[Square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(ch for ch, right in _CASTLING_CHARS if pos.castling & right)
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{halfmove_clock} {pos.fullmove_number}"
    )
