"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hotseat.core.enums import Color, GameResult, GameStatus
from hotseat.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from hotseat.core.board import Board


def _side_name(color: Color) -> str:
    return str(color).capitalize()


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Status of the side to move, plus a display message."""

    status: GameStatus
    side_to_move: Color
    winner: Color | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def result(self) -> GameResult:
        if self.status == GameStatus.STALEMATE:
            return GameResult.DRAW
        if self.winner == Color.WHITE:
            return GameResult.WHITE_WINS
        if self.winner == Color.BLACK:
            return GameResult.BLACK_WINS
        return GameResult.IN_PROGRESS

    @property
    def message(self) -> str:
        if self.status == GameStatus.CHECKMATE and self.winner is not None:
            return f"Checkmate! {_side_name(self.winner)} wins!"
        if self.status == GameStatus.STALEMATE:
            return "Stalemate! Game is a draw."
        if self.status == GameStatus.CHECK:
            return f"{_side_name(self.side_to_move)}'s Turn - Check!"
        return f"{_side_name(self.side_to_move)}'s Turn"


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.evaluate(board, color).status == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return Rules.evaluate(board, color).status == GameStatus.STALEMATE

    @staticmethod
    def evaluate(board: Board, side_to_move: Color) -> Evaluation:
        """Classify the position for *side_to_move*.

        ====== ========= ==========================
        check  has moves result
        ====== ========= ==========================
        yes    no        checkmate, opponent wins
        no     no        stalemate, draw
        yes    yes       check, game continues
        no     yes       to move, game continues
        ====== ========= ==========================
        """
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(side_to_move)
        has_moves = gen.has_any_legal_moves(side_to_move)

        if not has_moves:
            if in_check:
                return Evaluation(
                    GameStatus.CHECKMATE, side_to_move, winner=side_to_move.opposite
                )
            return Evaluation(GameStatus.STALEMATE, side_to_move)
        if in_check:
            return Evaluation(GameStatus.CHECK, side_to_move)
        return Evaluation(GameStatus.TO_MOVE, side_to_move)
