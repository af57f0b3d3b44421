"""Rules engine settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType


@dataclass(slots=True, frozen=True)
class RulesConfig:
    """Tunable rule policies for :class:`~chessrules.core.move_generator.MoveGenerator`."""

    # A two-square pawn advance only looks at its destination unless this
    # is set, in which case the skipped square must be empty as well.
    check_double_step_path: bool = False

    # Kind a pawn becomes on the last row when the caller names none.
    default_promotion: PieceType = PieceType.QUEEN


DEFAULT_CONFIG = RulesConfig()
