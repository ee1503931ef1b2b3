"""GameController — owns one board and state on behalf of the UI.

Translates clicks into selections and moves, and emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hotseat.core.board import Board
from hotseat.core.rules import Evaluation
from hotseat.core.types import Square, square_name
from hotseat.game import state as session
from hotseat.game.interfaces import IGameController
from hotseat.game.state import GameState, MoveOutcome

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome, GameState], None]
GameOverCallback = Callable[[Evaluation], None]
StateCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_selection_changed: list[StateCallback] = field(default_factory=list)
    on_reset: list[StateCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a same-device game: selection, moves, turn switching.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread), one click at a time.
    """

    __slots__ = ("_board", "_state", "events")

    def __init__(self) -> None:
        self._board, self._state = session.new_game()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    # ── IGameController impl ─────────────────────────────────────────────

    def select(self, square: Square) -> GameState:
        self._state = session.select_square(self._board, self._state, square)
        self._emit_selection()
        return self._state

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        self._board, self._state, outcome = session.try_move(
            self._board, self._state, from_sq, to_sq
        )
        if not outcome.accepted:
            _LOGGER.debug(
                "Rejected move %s%s", square_name(from_sq), square_name(to_sq)
            )
            return outcome

        if outcome.captured is not None:
            _LOGGER.info("%s: captured %s", outcome.move, outcome.captured)
        else:
            _LOGGER.info("%s", outcome.move)

        self._emit_move(outcome)
        if self._state.is_game_over:
            _LOGGER.info("Game over: %s", self._state.status_message)
            self._emit_game_over(self._state.evaluation)
        return outcome

    def click(self, square: Square) -> MoveOutcome | None:
        if self._state.is_game_over:
            return None

        piece = self._board[square]
        own_piece = piece is not None and piece.color == self._state.side_to_move
        selected = self._state.selected

        if selected is not None:
            if square in self._state.legal_targets:
                return self.submit_move(selected, square)
            if own_piece:
                self.select(square)
            else:
                self._state = session.clear_selection(self._state)
                self._emit_selection()
        elif own_piece:
            self.select(square)
        return None

    def reset(self) -> None:
        self._board, self._state = session.reset()
        _LOGGER.info("New game")
        for cb in self.events.on_reset:
            cb(self._state)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(outcome, self._state)

    def _emit_game_over(self, evaluation: Evaluation) -> None:
        for cb in self.events.on_game_over:
            cb(evaluation)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._state)
