"""Tests for the Qt engine bridge worker."""

from __future__ import annotations

import random

import pytest
from PyQt6.QtTest import QSignalSpy

from chessgame.core.enums import Color, Difficulty
from chessgame.core.fen import STARTING_FEN, position_from_fen
from chessgame.core.move import Move
from chessgame.core.position import Position
from chessgame.core.types import A2, A3, A6, B8, D5, E2, E4, F6
from chessgame.engine.qt_bridge import DEFAULT_MOVE_DELAY_MS, EngineWorker
from chessgame.engine.search import SearchResult
from chessgame.game.controller import GameController
from chessgame.game.interfaces import GameMode, GamePhase

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class _FailingEngine:
    def select_move(self, _position: Position, _color: Color) -> SearchResult:
        raise RuntimeError("boom")


def _collect(signal) -> list[tuple]:
    received: list[tuple] = []
    signal.connect(lambda *args: received.append(args))
    return received


class TestEngineWorker:
    def test_defaults(self) -> None:
        worker = EngineWorker()
        assert worker.delay_ms == DEFAULT_MOVE_DELAY_MS
        assert not worker.is_pending

    def test_negative_delay_is_clamped(self) -> None:
        assert EngineWorker(delay_ms=-5).delay_ms == 0

    def test_request_move_emits_best_move(self) -> None:
        worker = EngineWorker(Difficulty.MEDIUM)
        spy = QSignalSpy(worker.best_move_ready)
        received = _collect(worker.best_move_ready)

        worker.request_move(position_from_fen(STARTING_FEN), Color.WHITE, 3)

        assert len(spy) == 1
        assert received == [(3, Move(A2, A3), 0)]

    def test_greedy_capture_through_worker(self) -> None:
        worker = EngineWorker(Difficulty.MEDIUM)
        received = _collect(worker.best_move_ready)
        pos = position_from_fen("4k3/8/5n2/3Q4/8/8/8/4K3 b - - 0 1")

        worker.request_move(pos, Color.BLACK, 1)

        assert received == [(1, Move(F6, D5), 30)]

    def test_emits_no_move_when_checkmated(self) -> None:
        worker = EngineWorker(rng=random.Random(0))
        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(position_from_fen(FOOLS_MATE), Color.WHITE, 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0
        assert len(errors) == 0

    def test_invalid_request_emits_error(self) -> None:
        worker = EngineWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not a position", Color.WHITE, 5)

        assert len(errors) == 1
        assert errors[0][0] == 5

    def test_engine_failure_emits_error(self) -> None:
        worker = EngineWorker()
        worker._engine = _FailingEngine()
        errors = QSignalSpy(worker.search_error)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(position_from_fen(STARTING_FEN), Color.WHITE, 9)

        assert len(errors) == 1
        assert errors[0][0] == 9
        assert errors[0][1] == "boom"
        assert len(best_moves) == 0


@pytest.mark.usefixtures("qapp")
class TestScheduledMoves:
    def test_scheduled_move_arrives_after_delay(self) -> None:
        worker = EngineWorker(Difficulty.MEDIUM, delay_ms=10)
        spy = QSignalSpy(worker.best_move_ready)
        received = _collect(worker.best_move_ready)

        worker.schedule_move(position_from_fen(STARTING_FEN), Color.WHITE, 2)
        assert worker.is_pending
        assert len(spy) == 0

        assert spy.wait(2000)
        assert received == [(2, Move(A2, A3), 0)]
        assert not worker.is_pending

    def test_schedule_snapshots_position(self) -> None:
        worker = EngineWorker(Difficulty.MEDIUM, delay_ms=10)
        spy = QSignalSpy(worker.best_move_ready)
        received = _collect(worker.best_move_ready)
        pos = position_from_fen("4k3/8/5n2/3Q4/8/8/8/4K3 b - - 0 1")

        worker.schedule_move(pos, Color.BLACK, 4)
        pos.board[D5] = None

        assert spy.wait(2000)
        assert received == [(4, Move(F6, D5), 30)]

    def test_cancel_drops_pending_request(self) -> None:
        worker = EngineWorker(delay_ms=50)
        spy = QSignalSpy(worker.best_move_ready)

        worker.schedule_move(position_from_fen(STARTING_FEN), Color.WHITE, 6)
        worker.cancel()

        assert not worker.is_pending
        assert not spy.wait(200)
        assert len(spy) == 0

    def test_schedule_invalid_request_emits_error_now(self) -> None:
        worker = EngineWorker(delay_ms=10)
        errors = QSignalSpy(worker.search_error)

        worker.schedule_move(position_from_fen(STARTING_FEN), "white", 8)

        assert len(errors) == 1
        assert not worker.is_pending


@pytest.mark.usefixtures("qapp")
class TestWorkerForGameMode:
    def test_mode_settings_are_used(self) -> None:
        mode = GameMode(
            vs_computer=True, difficulty=Difficulty.MEDIUM, move_delay_ms=10
        )
        worker = EngineWorker.for_mode(mode)
        assert worker.delay_ms == 10
        received = _collect(worker.best_move_ready)

        worker.request_move(position_from_fen(STARTING_FEN), Color.WHITE, 1)

        # Medium keeps the first of equally scored moves
        assert received == [(1, Move(A2, A3), 0)]

    def test_default_mode_delay(self) -> None:
        assert EngineWorker.for_mode(GameMode()).delay_ms == DEFAULT_MOVE_DELAY_MS

    def test_deferred_game_through_worker(self) -> None:
        mode = GameMode(
            vs_computer=True, difficulty=Difficulty.MEDIUM, move_delay_ms=10
        )
        worker = EngineWorker.for_mode(mode)
        spy = QSignalSpy(worker.best_move_ready)
        ctrl = GameController()
        worker.best_move_ready.connect(
            lambda _rid, move, _score: ctrl.submit_move(move)
        )
        ctrl.new_game(
            mode,
            on_request_move=lambda pos: worker.schedule_move(
                pos, ctrl.mode.computer_color, 1
            ),
            on_cancel=worker.cancel,
        )

        ctrl.attempt_move(E2, E4)
        assert ctrl.state.phase == GamePhase.THINKING
        assert worker.delay_ms == ctrl.mode.move_delay_ms

        assert spy.wait(2000)
        assert ctrl.state.move_history[-1].move == Move(B8, A6)
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
