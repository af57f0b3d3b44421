"""Turns suggester output into a legal move, falling back when it cannot."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Protocol

from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation.fen import position_to_fen
from chessrules.core.types import Square, square_name
from chessrules.suggestion.models import (
    Difficulty,
    ResolvedMove,
    SuggestionRequest,
    material_balance,
)
from chessrules.suggestion.tokens import extract_move_token, parse_move_token

if TYPE_CHECKING:
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

RECENT_MOVE_COUNT = 6


class MoveSuggester(Protocol):
    """Anything that proposes a move for a position.

    Returns free-form text containing a move token, or ``None``.
    """

    def suggest(self, request: SuggestionRequest) -> str | None: ...


def fallback_move(
    position: Position, rng: random.Random
) -> tuple[Square, Square] | None:
    """Uniformly random legal move, or ``None`` when there is none."""
    moves = MoveGenerator(position).legal_moves()
    if not moves:
        return None
    return rng.choice(moves)


def build_request(
    position: Position,
    difficulty: Difficulty = Difficulty.MEDIUM,
    recent_move_count: int = RECENT_MOVE_COUNT,
) -> SuggestionRequest:
    recent = position.history[-recent_move_count:] if recent_move_count else ()
    return SuggestionRequest(
        fen=position_to_fen(position),
        recent_moves=tuple(move.notation for move in recent),
        material=material_balance(position.board),
        side_to_move=position.side_to_move,
        in_check=MoveGenerator(position).is_in_check(position.side_to_move),
        difficulty=difficulty,
    )


class SuggestionAdapter:
    """Asks a :class:`MoveSuggester` for a move and validates the answer.

    Args:
        suggester: The external move source.
        rng: Randomness for the fallback pick. Pass a seeded
            ``random.Random`` for reproducible games.
        recent_move_count: How many past notations go into each request.
    """

    __slots__ = ("_suggester", "_rng", "_recent_move_count")

    def __init__(
        self,
        suggester: MoveSuggester,
        rng: random.Random | None = None,
        recent_move_count: int = RECENT_MOVE_COUNT,
    ) -> None:
        self._suggester = suggester
        self._rng = rng if rng is not None else random.Random()
        self._recent_move_count = recent_move_count

    def choose_move(
        self,
        position: Position,
        difficulty: Difficulty = Difficulty.MEDIUM,
    ) -> ResolvedMove | None:
        """Legal move for the side to move, or ``None`` if it has none."""
        request = build_request(position, difficulty, self._recent_move_count)
        try:
            reply = self._suggester.suggest(request)
        except Exception:
            _LOGGER.warning("Move suggester failed, using fallback", exc_info=True)
            return self._fallback(position)

        if reply is None:
            _LOGGER.warning("Move suggester returned nothing, using fallback")
            return self._fallback(position)

        token = extract_move_token(reply)
        if token is None:
            _LOGGER.warning(
                "No move token in suggester reply %r, using fallback", reply
            )
            return self._fallback(position)

        resolved = parse_move_token(token, position)
        if resolved is None:
            _LOGGER.warning(
                "Suggested move %r is not playable, using fallback", token
            )
            return self._fallback(position)

        from_sq, to_sq = resolved
        return ResolvedMove(from_sq, to_sq, token)

    def _fallback(self, position: Position) -> ResolvedMove | None:
        picked = fallback_move(position, self._rng)
        if picked is None:
            _LOGGER.info("No legal move available for %s", position.side_to_move)
            return None
        from_sq, to_sq = picked
        return ResolvedMove(from_sq, to_sq, square_name(to_sq), used_fallback=True)
