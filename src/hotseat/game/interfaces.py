"""Abstract interfaces for the game layer.

The presentation layer depends on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hotseat.core.board import Board
    from hotseat.core.types import Square
    from hotseat.game.state import GameState, MoveOutcome


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @property
    @abstractmethod
    def board(self) -> Board: ...

    @property
    @abstractmethod
    def state(self) -> GameState: ...

    @abstractmethod
    def select(self, square: Square) -> GameState:
        """Select *square*; populates legal targets for an own piece."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Submit a move. ``outcome.accepted`` tells whether it was applied."""

    @abstractmethod
    def click(self, square: Square) -> MoveOutcome | None:
        """Handle a single click on *square*.

        Returns the outcome when the click completed a move, else ``None``.
        """

    @abstractmethod
    def reset(self) -> None:
        """Start over from the standard layout."""
