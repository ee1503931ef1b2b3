"""Game state and the session operations the presentation layer calls.

The board and the state are plain values owned by the caller and passed into
every operation, so any number of games can live side by side::

    board, state = new_game()
    state = select_square(board, state, parse_square("e2"))
    board, state, outcome = try_move(board, state, parse_square("e2"), parse_square("e4"))
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameResult, GameStatus
from hotseat.core.move import Move, apply_move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.piece import Piece
from hotseat.core.rules import Evaluation, Rules
from hotseat.core.types import Square
from hotseat.game.interfaces import GamePhase


def _empty_captures() -> dict[Color, list[Piece]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a move attempt."""

    accepted: bool
    move: Move | None = None
    captured: Piece | None = None
    evaluation: Evaluation | None = None

    @classmethod
    def rejected(cls) -> MoveOutcome:
        return cls(accepted=False)


@dataclass
class GameState:
    """Side to move, selection, captures and the latest evaluation.

    ``captured`` is keyed by the color of the captured piece, in capture order.
    """

    side_to_move: Color = Color.WHITE
    selected: Square | None = None
    legal_targets: frozenset[Square] = frozenset()
    captured: dict[Color, list[Piece]] = field(default_factory=_empty_captures)
    evaluation: Evaluation = None  # type: ignore[assignment]
    phase: GamePhase = GamePhase.AWAITING_MOVE
    last_move: Move | None = None

    def __post_init__(self) -> None:
        if self.evaluation is None:
            self.evaluation = Evaluation(GameStatus.TO_MOVE, self.side_to_move)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def result(self) -> GameResult:
        return self.evaluation.result

    @property
    def status_message(self) -> str:
        return self.evaluation.message

    def captured_by(self, color: Color) -> list[Piece]:
        """Pieces *color* has taken from the opponent."""
        return list(self.captured[color.opposite])


# ── Session operations ───────────────────────────────────────────────────────


def new_game() -> tuple[Board, GameState]:
    """Standard initial layout, white to move."""
    return Board.initial(), GameState()


def reset() -> tuple[Board, GameState]:
    """Equivalent to :func:`new_game`."""
    return new_game()


def select_square(board: Board, state: GameState, square: Square) -> GameState:
    """Select *square* and compute the legal targets of the piece on it.

    Empty squares and opponent pieces clear the selection instead.
    """
    if state.is_game_over:
        return state

    piece = board[square]
    if piece is None or piece.color != state.side_to_move:
        return replace(state, selected=None, legal_targets=frozenset())

    targets = MoveGenerator(board).legal_moves(square)
    return replace(state, selected=square, legal_targets=frozenset(targets))


def clear_selection(state: GameState) -> GameState:
    return replace(state, selected=None, legal_targets=frozenset())


def try_move(
    board: Board,
    state: GameState,
    from_sq: Square,
    to_sq: Square,
) -> tuple[Board, GameState, MoveOutcome]:
    """Apply *from_sq* → *to_sq* if it is in the current selection's legal set.

    Rejected attempts leave both board and state untouched.
    """
    if (
        state.is_game_over
        or state.selected != from_sq
        or to_sq not in state.legal_targets
    ):
        return board, state, MoveOutcome.rejected()

    captured = apply_move(board, from_sq, to_sq)

    captures = {color: list(pieces) for color, pieces in state.captured.items()}
    if captured is not None:
        captures[captured.color].append(captured)

    next_side = state.side_to_move.opposite
    evaluation = Rules.evaluate(board, next_side)
    move = Move(from_sq, to_sq)

    new_state = GameState(
        side_to_move=next_side,
        captured=captures,
        evaluation=evaluation,
        phase=GamePhase.GAME_OVER if evaluation.is_terminal else GamePhase.AWAITING_MOVE,
        last_move=move,
    )
    return board, new_state, MoveOutcome(True, move, captured, evaluation)
