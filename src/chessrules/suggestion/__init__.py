"""Move-suggestion adapter: validates externally proposed moves.

The Qt worker lives in :mod:`chessrules.suggestion.qt_bridge` and is not
imported here, so the adapter works without a Qt installation loaded.
"""

from chessrules.suggestion.adapter import (
    MoveSuggester,
    SuggestionAdapter,
    build_request,
    fallback_move,
)
from chessrules.suggestion.models import (
    Difficulty,
    MaterialBalance,
    ResolvedMove,
    SuggestionRequest,
    material_balance,
)
from chessrules.suggestion.tokens import (
    MOVE_TOKEN_PATTERNS,
    extract_move_token,
    is_move_token,
    parse_move_token,
)

__all__ = [
    "Difficulty",
    "MOVE_TOKEN_PATTERNS",
    "MaterialBalance",
    "MoveSuggester",
    "ResolvedMove",
    "SuggestionAdapter",
    "SuggestionRequest",
    "build_request",
    "extract_move_token",
    "fallback_move",
    "is_move_token",
    "material_balance",
    "parse_move_token",
]
