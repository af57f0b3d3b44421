"""Core domain layer: pure chess rules with no third-party dependencies.

Quick start::

    from chessrules.core import Rules, position_from_fen, parse_square, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    pos = Rules.apply_move(pos, parse_square("e2"), parse_square("e4"))
    print(pos.last_move.notation, pos.status)
"""

from chessrules.core.board import Board, piece_at
from chessrules.core.config import DEFAULT_CONFIG, RulesConfig
from chessrules.core.enums import CastlingRights, Color, GameStatus, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    FenError,
    move_notation,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Square,
    in_bounds,
    parse_square,
    square_name,
    squares_equal,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "piece_at",
    "square_name",
    "squares_equal",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Configuration
    "DEFAULT_CONFIG",
    "RulesConfig",
    # Notation
    "STARTING_FEN",
    "FenError",
    "move_notation",
    "position_from_fen",
    "position_to_fen",
]
