"""Qt bridge to run the move suggester in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.position import Position
from chessrules.suggestion.adapter import MoveSuggester, SuggestionAdapter
from chessrules.suggestion.models import Difficulty

_LOGGER = logging.getLogger(__name__)


class SuggestionWorker(QObject):
    """Thread-affine worker that resolves suggested moves on demand."""

    # request_id, from_sq, to_sq, token, used_fallback
    move_ready = pyqtSignal(int, object, object, str, bool)
    no_move = pyqtSignal(int)
    cancelled = pyqtSignal(int)
    error = pyqtSignal(int, str)

    __slots__ = ("_adapter", "_cancel_event", "_difficulty")

    def __init__(
        self,
        suggester: MoveSuggester,
        *,
        difficulty: Difficulty = Difficulty.MEDIUM,
        adapter: SuggestionAdapter | None = None,
    ) -> None:
        super().__init__()
        self._adapter = (
            adapter if adapter is not None else SuggestionAdapter(suggester)
        )
        self._difficulty = difficulty
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Resolve a move for *position_obj* and emit the outcome."""
        if not isinstance(position_obj, Position):
            self.error.emit(
                request_id, "Suggestion worker received invalid position"
            )
            return

        self._cancel_event.clear()
        try:
            resolved = self._adapter.choose_move(position_obj, self._difficulty)
        except Exception as exc:
            self.error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.cancelled.emit(request_id)
            return

        if resolved is None:
            self.no_move.emit(request_id)
            return

        self.move_ready.emit(
            request_id,
            resolved.from_sq,
            resolved.to_sq,
            resolved.token,
            resolved.used_fallback,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop the result of the request currently in flight."""
        self._cancel_event.set()

    @pyqtSlot(str)
    def set_difficulty(self, difficulty: str) -> None:
        """Update difficulty (takes effect on the next request).

        Unknown names are logged and leave the current level in place.
        """
        try:
            self._difficulty = Difficulty(difficulty)
        except ValueError:
            _LOGGER.warning(
                "Ignoring unknown difficulty %r, keeping %s",
                difficulty,
                self._difficulty,
            )
