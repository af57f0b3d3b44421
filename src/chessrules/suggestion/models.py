"""Data exchanged with the move-suggestion collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square, square_name

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


class Difficulty(StrEnum):
    """How hard the suggester is asked to play."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def temperature(self) -> float:
        """Sampling temperature handed to the suggester."""
        return _TEMPERATURE[self]


_TEMPERATURE: dict[Difficulty, float] = {
    Difficulty.EASY: 0.8,
    Difficulty.MEDIUM: 0.5,
    Difficulty.HARD: 0.2,
}


@dataclass(slots=True, frozen=True)
class MaterialBalance:
    """Summed piece values per side."""

    white: int
    black: int

    @property
    def difference(self) -> int:
        """White minus Black."""
        return self.white - self.black


def material_balance(board: Board) -> MaterialBalance:
    totals = {Color.WHITE: 0, Color.BLACK: 0}
    for _sq, piece in board.occupied():
        totals[piece.color] += PIECE_VALUES[piece.piece_type]
    return MaterialBalance(white=totals[Color.WHITE], black=totals[Color.BLACK])


@dataclass(slots=True, frozen=True)
class SuggestionRequest:
    """Everything the suggester gets to see about the current position."""

    fen: str
    recent_moves: tuple[str, ...]
    material: MaterialBalance
    side_to_move: Color
    in_check: bool
    difficulty: Difficulty = Difficulty.MEDIUM

    def describe(self) -> str:
        """Plain-text summary of the request, one fact per line."""
        lines = [f"Current position (FEN): {self.fen}"]
        if self.recent_moves:
            lines.append(f"Recent moves: {' '.join(self.recent_moves)}")
        lines.append(
            f"Material balance: White {self.material.white}, "
            f"Black {self.material.black}"
        )
        lines.append(f"To move: {self.side_to_move}")
        if self.in_check:
            lines.append("In check: the reply must get out of check.")
        return "\n".join(lines)


@dataclass(slots=True, frozen=True)
class ResolvedMove:
    """A move the rules engine accepted for the side to move."""

    from_sq: Square
    to_sq: Square
    token: str
    used_fallback: bool = False

    @property
    def uci(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
