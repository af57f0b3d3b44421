"""Position: complete immutable game state (board + metadata)."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, GameStatus
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board, side to move, history, castling, en passant.

    A position is never modified. :meth:`chessrules.core.rules.Rules.apply_move`
    builds a successor whose ``history`` and ``captured`` extend this one's,
    so the chain of positions forms the game record.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    history: tuple[Move, ...] = ()
    captured: tuple[Piece, ...] = ()
    status: GameStatus = GameStatus.ONGOING
    winner: Color | None = None
    en_passant: Square | None = None
    castling: CastlingRights = CastlingRights.ALL

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, White to move."""
        return cls()

    # ── Derived values ───────────────────────────────────────────────────

    @property
    def last_move(self) -> Move | None:
        return self.history[-1] if self.history else None

    @property
    def fullmove_number(self) -> int:
        return self.ply_count // 2 + 1

    @property
    def ply_count(self) -> int:
        return len(self.history)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    def has_castling_right(self, right: CastlingRights) -> bool:
        return bool(self.castling & right)
