"""Tests for GameState."""

from chessgame.core.enums import Color, GameStatus, MoveFlag
from chessgame.core.fen import STARTING_FEN, position_to_fen
from chessgame.core.move import Move
from chessgame.core.types import (
    A1,
    A8,
    D5,
    D6,
    D7,
    D8,
    E2,
    E3,
    E4,
    E5,
    E7,
    F2,
    F3,
    G2,
    G4,
    H4,
)
from chessgame.game.interfaces import GamePhase
from chessgame.game.state import GameState


def _fools_mate(gs: GameState) -> None:
    for move in (Move(F2, F3), Move(E7, E5), Move(G2, G4), Move(D8, H4)):
        gs.apply_move(move)


class TestGameStateSetup:
    def test_position_is_available_before_setup(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert gs.side_to_move == Color.WHITE

    def test_setup_default(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.status == GameStatus.ONGOING
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0
        assert gs.start_fen == STARTING_FEN

    def test_setup_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        gs = GameState()
        gs.setup(fen)
        assert gs.side_to_move == Color.BLACK
        assert gs.start_fen == fen

    def test_setup_on_finished_position(self) -> None:
        gs = GameState()
        gs.setup("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert gs.status == GameStatus.STALEMATE
        assert gs.phase == GamePhase.GAME_OVER
        assert gs.is_game_over

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move(Move(E2, E4))
        assert gs.ply_count == 1
        gs.setup()
        assert gs.ply_count == 0
        assert gs.side_to_move == Color.WHITE


class TestGameStateMoves:
    def test_apply_move_records(self) -> None:
        gs = GameState()
        gs.setup()
        record = gs.apply_move(Move(E2, E4))
        assert record.move == Move(E2, E4)
        assert record.applied.flag == MoveFlag.DOUBLE_PAWN
        assert record.status_after == GameStatus.ONGOING
        assert record.fen_after == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert gs.side_to_move == Color.BLACK
        assert gs.ply_count == 1
        assert gs.move_history == [record]

    def test_fen_after_matches_position(self) -> None:
        gs = GameState()
        gs.setup()
        record = gs.apply_move(Move(E2, E3))
        assert record.fen_after == position_to_fen(gs.position)

    def test_fullmove_display(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.fullmove_display == 1
        gs.apply_move(Move(E2, E4))
        assert gs.fullmove_display == 1  # still move 1 (black hasn't moved)
        gs.apply_move(Move(D7, D5))
        assert gs.fullmove_display == 2

    def test_apply_move_marks_en_passant_capture(self) -> None:
        gs = GameState()
        gs.setup("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        record = gs.apply_move(Move(E5, D6))
        assert record.was_capture
        assert record.applied.flag == MoveFlag.EN_PASSANT
        assert gs.position.board[D5] is None

    def test_check_is_recorded(self) -> None:
        gs = GameState()
        gs.setup("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        record = gs.apply_move(Move(A1, A8))
        assert record.status_after == GameStatus.CHECK
        assert record.was_check
        assert gs.phase == GamePhase.AWAITING_MOVE

    def test_checkmate_ends_game(self) -> None:
        gs = GameState()
        gs.setup()
        _fools_mate(gs)
        assert gs.status == GameStatus.CHECKMATE
        assert gs.phase == GamePhase.GAME_OVER
        assert gs.winner == Color.BLACK
        assert gs.move_history[-1].was_check

    def test_no_winner_while_playing(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.winner is None


class TestGameStateQueries:
    def test_legal_moves_for_side_to_move(self) -> None:
        gs = GameState()
        gs.setup()
        assert len(gs.legal_moves()) == 20

    def test_legal_destinations(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.legal_destinations(E2) == [E3, E4]

    def test_legal_destinations_ignore_opponent_pieces(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.legal_destinations(E7) == []

    def test_legal_destinations_empty_square(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.legal_destinations(D6) == []
