"""Tests for GameState and the session operations."""

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameResult, GameStatus, PieceType
from hotseat.core.move import Move
from hotseat.core.piece import Piece
from hotseat.core.types import parse_square
from hotseat.game.interfaces import GamePhase
from hotseat.game.state import (
    GameState,
    new_game,
    reset,
    select_square,
    try_move,
)

sq = parse_square

ROOK_TAKES_KNIGHT = """
    n...k...
    ........
    ........
    ........
    ........
    ........
    ........
    R...K...
"""


def _play(board: Board, state: GameState, from_name: str, to_name: str):
    state = select_square(board, state, sq(from_name))
    return try_move(board, state, sq(from_name), sq(to_name))


class TestNewGame:
    def test_defaults(self) -> None:
        board, state = new_game()
        assert board == Board.initial()
        assert state.side_to_move == Color.WHITE
        assert state.selected is None
        assert state.legal_targets == frozenset()
        assert state.captured == {Color.WHITE: [], Color.BLACK: []}
        assert state.phase == GamePhase.AWAITING_MOVE
        assert state.result == GameResult.IN_PROGRESS
        assert state.status_message == "White's Turn"

    def test_reset_matches_new_game(self) -> None:
        board, state = reset()
        fresh_board, fresh_state = new_game()
        assert board == fresh_board
        assert state == fresh_state

    def test_games_are_independent(self) -> None:
        board_a, state_a = new_game()
        board_b, _ = new_game()
        _play(board_a, state_a, "e2", "e4")
        assert board_b == Board.initial()

    def test_default_evaluation_follows_side_to_move(self) -> None:
        state = GameState(side_to_move=Color.BLACK)
        assert state.evaluation.side_to_move == Color.BLACK
        assert state.evaluation.status == GameStatus.TO_MOVE
        assert state.status_message == "Black's Turn"


class TestSelectSquare:
    def test_own_piece(self) -> None:
        board, state = new_game()
        state = select_square(board, state, sq("g1"))
        assert state.selected == sq("g1")
        assert state.legal_targets == {sq("f3"), sq("h3")}

    def test_opponent_piece_yields_nothing(self) -> None:
        board, state = new_game()
        state = select_square(board, state, sq("e7"))
        assert state.selected is None
        assert state.legal_targets == frozenset()

    def test_empty_square_yields_nothing(self) -> None:
        board, state = new_game()
        state = select_square(board, state, sq("g1"))
        state = select_square(board, state, sq("e4"))
        assert state.selected is None
        assert state.legal_targets == frozenset()

    def test_black_selectable_after_white_moves(self) -> None:
        board, state = new_game()
        board, state, _ = _play(board, state, "e2", "e4")
        state = select_square(board, state, sq("e2"))
        assert state.legal_targets == frozenset()
        state = select_square(board, state, sq("e7"))
        assert state.legal_targets == {sq("e6"), sq("e5")}

    def test_does_not_mutate_input_state(self) -> None:
        board, state = new_game()
        select_square(board, state, sq("e2"))
        assert state.selected is None


class TestTryMove:
    def test_round_trip(self) -> None:
        board, state = new_game()
        board, state, outcome = _play(board, state, "e2", "e4")
        assert outcome.accepted
        assert outcome.move == Move(sq("e2"), sq("e4"))
        assert outcome.captured is None
        assert board[sq("e4")] == Piece(PieceType.PAWN, Color.WHITE)
        assert board[sq("e2")] is None
        assert state.side_to_move == Color.BLACK
        assert state.selected is None
        assert state.legal_targets == frozenset()
        assert state.last_move == Move(sq("e2"), sq("e4"))
        assert state.status_message == "Black's Turn"

    def test_capture_recorded_by_captured_color(self) -> None:
        board = Board.from_diagram(ROOK_TAKES_KNIGHT)
        state = GameState()
        board, state, outcome = _play(board, state, "a1", "a8")
        knight = Piece(PieceType.KNIGHT, Color.BLACK)
        assert outcome.accepted
        assert outcome.captured == knight
        assert state.captured[Color.BLACK] == [knight]
        assert state.captured[Color.WHITE] == []
        assert state.captured_by(Color.WHITE) == [knight]
        assert board[sq("a8")] == Piece(PieceType.ROOK, Color.WHITE)
        assert board[sq("a1")] is None

    def test_move_can_give_check(self) -> None:
        board = Board.from_diagram(ROOK_TAKES_KNIGHT)
        _, state, outcome = _play(board, GameState(), "a1", "a8")
        assert outcome.evaluation is not None
        assert outcome.evaluation.status == GameStatus.CHECK
        assert state.status_message == "Black's Turn - Check!"
        assert not state.is_game_over

    def test_captures_keep_order(self) -> None:
        board = Board.from_diagram(
            """
            n...k..b
            ........
            ........
            ........
            ........
            ........
            ........
            R...K...
            """
        )
        state = GameState()
        board, state, _ = _play(board, state, "a1", "a8")
        board, state, _ = _play(board, state, "e8", "e7")
        board, state, outcome = _play(board, state, "a8", "h8")
        assert outcome.accepted
        assert state.captured[Color.BLACK] == [
            Piece(PieceType.KNIGHT, Color.BLACK),
            Piece(PieceType.BISHOP, Color.BLACK),
        ]
        assert state.captured[Color.WHITE] == []

    def test_illegal_destination_rejected(self) -> None:
        board, state = new_game()
        state = select_square(board, state, sq("e2"))
        before = board.copy()
        board, new_state, outcome = try_move(board, state, sq("e2"), sq("e5"))
        assert not outcome.accepted
        assert new_state is state
        assert board == before

    def test_without_selection_rejected(self) -> None:
        board, state = new_game()
        _, new_state, outcome = try_move(board, state, sq("e2"), sq("e4"))
        assert not outcome.accepted
        assert new_state.side_to_move == Color.WHITE
        assert board == Board.initial()

    def test_from_must_match_selection(self) -> None:
        board, state = new_game()
        state = select_square(board, state, sq("d2"))
        _, _, outcome = try_move(board, state, sq("e2"), sq("d4"))
        assert not outcome.accepted
        assert board == Board.initial()


class TestGameOver:
    def _fools_mate(self):
        board, state = new_game()
        for from_name, to_name in (("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")):
            board, state, outcome = _play(board, state, from_name, to_name)
            assert outcome.accepted
        return board, state, outcome

    def test_checkmate_is_terminal(self) -> None:
        _, state, outcome = self._fools_mate()
        assert outcome.evaluation is not None
        assert outcome.evaluation.status == GameStatus.CHECKMATE
        assert state.is_game_over
        assert state.phase == GamePhase.GAME_OVER
        assert state.result == GameResult.BLACK_WINS
        assert state.status_message == "Checkmate! Black wins!"

    def test_no_selection_after_game_over(self) -> None:
        board, state, _ = self._fools_mate()
        after = select_square(board, state, sq("e1"))
        assert after is state
        assert after.legal_targets == frozenset()

    def test_no_move_after_game_over(self) -> None:
        board, state, _ = self._fools_mate()
        over = GameState(
            side_to_move=state.side_to_move,
            selected=sq("h2"),
            legal_targets=frozenset({sq("h3")}),
            evaluation=state.evaluation,
            phase=GamePhase.GAME_OVER,
        )
        _, _, outcome = try_move(board, over, sq("h2"), sq("h3"))
        assert not outcome.accepted

    def test_stalemate_is_terminal(self) -> None:
        board = Board.from_diagram(
            """
            .......k
            ........
            .....K..
            ......Q.
            ........
            ........
            ........
            ........
            """
        )
        board, state, outcome = _play(board, GameState(), "g5", "g6")
        assert outcome.accepted
        assert state.is_game_over
        assert state.result == GameResult.DRAW
        assert state.status_message == "Stalemate! Game is a draw."
