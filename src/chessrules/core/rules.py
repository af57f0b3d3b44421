"""High-level chess rules: applying moves and deriving game status."""

from __future__ import annotations

import logging
from dataclasses import replace

from chessrules.core.config import RulesConfig
from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    GameStatus,
    PieceType,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation.algebraic import move_notation
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square(7, 0): CastlingRights.WHITE_QUEENSIDE,
    Square(7, 7): CastlingRights.WHITE_KINGSIDE,
    Square(0, 0): CastlingRights.BLACK_QUEENSIDE,
    Square(0, 7): CastlingRights.BLACK_KINGSIDE,
}


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy:
    # - Illegal moves are rejected in-band (``None``), never raised.
    # - Draw claims (repetition, fifty-move rule) are not modelled.

    @staticmethod
    def is_legal(
        position: Position,
        from_sq: Square,
        to_sq: Square,
        config: RulesConfig | None = None,
    ) -> bool:
        return MoveGenerator(position, config).is_legal(from_sq, to_sq)

    @staticmethod
    def legal_moves(
        position: Position, config: RulesConfig | None = None
    ) -> list[tuple[Square, Square]]:
        return MoveGenerator(position, config).legal_moves()

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position, config: RulesConfig | None = None) -> bool:
        return Rules.game_status(position, config) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position, config: RulesConfig | None = None) -> bool:
        return Rules.game_status(position, config) == GameStatus.STALEMATE

    @staticmethod
    def game_status(
        position: Position, config: RulesConfig | None = None
    ) -> GameStatus:
        """Status of *position* for its side to move."""
        gen = MoveGenerator(position, config)
        in_check = gen.is_in_check(position.side_to_move)
        if gen.has_legal_move():
            return GameStatus.CHECK if in_check else GameStatus.ONGOING
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

    @staticmethod
    def evaluate(position: Position, config: RulesConfig | None = None) -> Position:
        """Copy of *position* with ``status`` and ``winner`` recomputed."""
        status = Rules.game_status(position, config)
        winner = (
            position.side_to_move.opposite if status == GameStatus.CHECKMATE else None
        )
        return replace(position, status=status, winner=winner)

    # ── Move application ─────────────────────────────────────────────────

    @staticmethod
    def apply_move(
        position: Position,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
        *,
        config: RulesConfig | None = None,
    ) -> Position | None:
        """Play *from_sq* → *to_sq* and return the successor position.

        Returns ``None`` and leaves *position* untouched when the move is
        illegal or names an invalid promotion.
        """
        gen = MoveGenerator(position, config)
        if not gen.is_legal(from_sq, to_sq):
            _LOGGER.debug(
                "Rejected illegal move %s%s for %s",
                square_name(from_sq),
                square_name(to_sq),
                position.side_to_move,
            )
            return None

        board = position.board
        piece = board[from_sq]
        assert piece is not None
        color = piece.color

        is_castling = (
            piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2
        )
        is_en_passant = gen.is_en_passant(from_sq, to_sq)

        # The pawn taken en passant sits beside the mover, behind the target.
        capture_sq = Square(from_sq.row, to_sq.col) if is_en_passant else to_sq
        captured = board.piece_at(capture_sq)

        promotes = (
            piece.piece_type == PieceType.PAWN
            and to_sq.row == color.opposite.back_row
        )
        if promotes:
            promotion = promotion or gen.config.default_promotion
            if promotion not in PROMOTION_TYPES:
                _LOGGER.debug("Rejected promotion to %s", promotion)
                return None
        elif promotion is not None:
            _LOGGER.debug(
                "Rejected promotion on non-promoting move %s%s",
                square_name(from_sq),
                square_name(to_sq),
            )
            return None

        placed = piece.promoted(promotion) if promotion is not None else piece.moved()
        changes: dict[Square, Piece | None] = {from_sq: None, to_sq: placed}
        if is_en_passant:
            changes[capture_sq] = None
        if is_castling:
            kingside = to_sq.col > from_sq.col
            rook_from = Square(from_sq.row, 7 if kingside else 0)
            rook_to = Square(from_sq.row, 5 if kingside else 3)
            rook = board[rook_from]
            assert rook is not None
            changes[rook_from] = None
            changes[rook_to] = rook.moved()
        new_board = board.with_changes(changes)

        castling = _updated_castling(position.castling, piece, from_sq, to_sq)

        en_passant: Square | None = None
        if piece.piece_type == PieceType.PAWN and abs(to_sq.row - from_sq.row) == 2:
            en_passant = Square((from_sq.row + to_sq.row) // 2, from_sq.col)

        move = Move(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=piece,
            captured=captured,
            is_castling=is_castling,
            is_en_passant=is_en_passant,
            promotion=promotion,
        )

        successor = Rules.evaluate(
            Position(
                board=new_board,
                side_to_move=color.opposite,
                history=position.history,
                captured=(
                    position.captured + (captured,)
                    if captured is not None
                    else position.captured
                ),
                en_passant=en_passant,
                castling=castling,
            ),
            config,
        )

        status = successor.status
        move = replace(
            move,
            is_check=status in (GameStatus.CHECK, GameStatus.CHECKMATE),
            is_checkmate=status == GameStatus.CHECKMATE,
            is_stalemate=status == GameStatus.STALEMATE,
        )
        move = replace(move, notation=move_notation(move, status))

        _LOGGER.debug(
            "Applied %s; %s to move, %s", move.notation, color.opposite, status
        )
        return replace(successor, history=position.history + (move,))


def _updated_castling(
    castling: CastlingRights, piece: Piece, from_sq: Square, to_sq: Square
) -> CastlingRights:
    if piece.piece_type == PieceType.KING:
        castling &= ~CastlingRights.both(piece.color)
    # Rights for a corner go once its rook leaves or is captured there.
    for sq in (from_sq, to_sq):
        right = _ROOK_CORNERS.get(sq)
        if right is not None:
            castling &= ~right
    return castling

