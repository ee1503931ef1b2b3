"""Tests for Rules: check, checkmate and stalemate detection."""

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameResult, GameStatus
from hotseat.core.rules import Evaluation, Rules

BACK_RANK_MATE = """
    R..k....
    ........
    ...K....
    ........
    ........
    ........
    ........
    ........
"""

# Black king h8, white king f6, white queen g6.
STALEMATE = """
    .......k
    ........
    .....KQ.
    ........
    ........
    ........
    ........
    ........
"""

# After 1.f3 e5 2.g4 Qh4#
FOOLS_MATE = """
    rnb.kbnr
    pppp.ppp
    ........
    ....p...
    ......Pq
    .....P..
    PPPPP..P
    RNBQKBNR
"""

ROOK_CHECK = """
    ....k...
    ........
    ........
    ........
    ........
    ........
    ........
    r...K...
"""


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, Color.WHITE)
        assert Rules.evaluate(board, Color.WHITE).status == GameStatus.TO_MOVE

    def test_rook_check(self) -> None:
        board = Board.from_diagram(ROOK_CHECK)
        assert Rules.is_in_check(board, Color.WHITE)
        evaluation = Rules.evaluate(board, Color.WHITE)
        assert evaluation.status == GameStatus.CHECK
        assert not evaluation.is_terminal
        assert evaluation.result == GameResult.IN_PROGRESS

    def test_check_message(self) -> None:
        board = Board.from_diagram(ROOK_CHECK)
        assert Rules.evaluate(board, Color.WHITE).message == "White's Turn - Check!"


class TestCheckmate:
    def test_back_rank_mate(self) -> None:
        board = Board.from_diagram(BACK_RANK_MATE)
        evaluation = Rules.evaluate(board, Color.BLACK)
        assert evaluation.status == GameStatus.CHECKMATE
        assert evaluation.winner == Color.WHITE
        assert evaluation.result == GameResult.WHITE_WINS
        assert evaluation.is_terminal
        assert evaluation.message == "Checkmate! White wins!"

    def test_fools_mate(self) -> None:
        board = Board.from_diagram(FOOLS_MATE)
        assert Rules.is_checkmate(board, Color.WHITE)
        evaluation = Rules.evaluate(board, Color.WHITE)
        assert evaluation.winner == Color.BLACK
        assert evaluation.message == "Checkmate! Black wins!"

    def test_not_checkmate_when_can_escape(self) -> None:
        board = Board.from_diagram(ROOK_CHECK)
        assert not Rules.is_checkmate(board, Color.WHITE)


class TestStalemate:
    def test_king_trapped(self) -> None:
        board = Board.from_diagram(STALEMATE)
        assert not Rules.is_in_check(board, Color.BLACK)
        evaluation = Rules.evaluate(board, Color.BLACK)
        assert evaluation.status == GameStatus.STALEMATE
        assert evaluation.winner is None
        assert evaluation.result == GameResult.DRAW
        assert evaluation.message == "Stalemate! Game is a draw."
        assert Rules.is_stalemate(board, Color.BLACK)

    def test_not_stalemate_for_side_with_moves(self) -> None:
        board = Board.from_diagram(STALEMATE)
        assert not Rules.is_stalemate(board, Color.WHITE)

    def test_not_stalemate_when_in_check(self) -> None:
        board = Board.from_diagram(BACK_RANK_MATE)
        assert not Rules.is_stalemate(board, Color.BLACK)


class TestEvaluation:
    def test_to_move_message(self) -> None:
        assert Evaluation(GameStatus.TO_MOVE, Color.BLACK).message == "Black's Turn"

    def test_missing_king_is_not_terminal(self) -> None:
        board = Board.from_diagram(
            """
            ........
            ........
            ........
            ...R....
            ........
            ........
            ........
            ........
            """
        )
        evaluation = Rules.evaluate(board, Color.WHITE)
        assert evaluation.status == GameStatus.TO_MOVE
