"""Tests for the Qt suggestion worker."""

from __future__ import annotations

import logging

import pytest
from PyQt6.QtTest import QSignalSpy

from chessrules.core.notation import position_from_fen
from chessrules.core.position import Position
from chessrules.suggestion.models import Difficulty, SuggestionRequest
from chessrules.suggestion.qt_bridge import SuggestionWorker

pytestmark = pytest.mark.usefixtures("qapp")


class _FixedSuggester:
    def __init__(self, reply: str | None) -> None:
        self._reply = reply
        self.requests: list[SuggestionRequest] = []

    def suggest(self, request: SuggestionRequest) -> str | None:
        self.requests.append(request)
        return self._reply


class _CancellingSuggester:
    def __init__(self) -> None:
        self.worker: SuggestionWorker | None = None

    def suggest(self, request: SuggestionRequest) -> str | None:
        del request
        assert self.worker is not None
        self.worker.cancel()
        return "e4"


class _BrokenAdapter:
    def choose_move(self, position: Position, difficulty: Difficulty) -> None:
        del position, difficulty
        raise RuntimeError("adapter exploded")


class TestSuggestionWorker:
    def test_emits_move_ready(self, start: Position) -> None:
        worker = SuggestionWorker(_FixedSuggester("e4"))
        ready = QSignalSpy(worker.move_ready)
        errors = QSignalSpy(worker.error)

        worker.request_move(start, 3)

        assert len(ready) == 1
        assert ready[0][0] == 3
        assert ready[0][3] == "e4"
        assert ready[0][4] is False
        assert len(errors) == 0

    def test_fallback_flag(self, start: Position) -> None:
        worker = SuggestionWorker(_FixedSuggester("resign"))
        ready = QSignalSpy(worker.move_ready)

        worker.request_move(start, 4)

        assert len(ready) == 1
        assert ready[0][4] is True

    def test_emits_cancelled(self, start: Position) -> None:
        suggester = _CancellingSuggester()
        worker = SuggestionWorker(suggester)
        suggester.worker = worker
        cancelled = QSignalSpy(worker.cancelled)
        ready = QSignalSpy(worker.move_ready)

        worker.request_move(start, 7)

        assert len(cancelled) == 1
        assert cancelled[0][0] == 7
        assert len(ready) == 0

    def test_cancel_resets_for_next_request(self, start: Position) -> None:
        worker = SuggestionWorker(_FixedSuggester("e4"))
        worker.cancel()
        ready = QSignalSpy(worker.move_ready)

        worker.request_move(start, 8)

        assert len(ready) == 1

    def test_emits_no_move(self) -> None:
        mated = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        worker = SuggestionWorker(_FixedSuggester("e4"))
        no_move = QSignalSpy(worker.no_move)
        ready = QSignalSpy(worker.move_ready)

        worker.request_move(mated, 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(ready) == 0

    def test_rejects_non_position(self) -> None:
        worker = SuggestionWorker(_FixedSuggester("e4"))
        errors = QSignalSpy(worker.error)

        worker.request_move("not a position", 5)

        assert len(errors) == 1
        assert errors[0][0] == 5

    def test_adapter_error_reported(self, start: Position) -> None:
        worker = SuggestionWorker(
            _FixedSuggester("e4"),
            adapter=_BrokenAdapter(),  # type: ignore[arg-type]
        )
        errors = QSignalSpy(worker.error)

        worker.request_move(start, 9)

        assert len(errors) == 1
        assert errors[0][1] == "adapter exploded"

    def test_set_difficulty(self, start: Position) -> None:
        suggester = _FixedSuggester("e4")
        worker = SuggestionWorker(suggester)

        worker.set_difficulty("hard")
        worker.request_move(start, 1)

        assert suggester.requests[0].difficulty == Difficulty.HARD

    def test_unknown_difficulty_ignored(
        self, start: Position, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="chessrules.suggestion.qt_bridge")
        suggester = _FixedSuggester("e4")
        worker = SuggestionWorker(suggester, difficulty=Difficulty.EASY)

        worker.set_difficulty("grandmaster")
        worker.request_move(start, 2)

        assert suggester.requests[0].difficulty == Difficulty.EASY
        assert "Ignoring unknown difficulty 'grandmaster'" in caplog.text
