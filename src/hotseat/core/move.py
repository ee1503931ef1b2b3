"""Move value object and the move executor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hotseat.core.types import Square, square_name

if TYPE_CHECKING:
    from hotseat.core.board import Board
    from hotseat.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move."""

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


def apply_move(board: Board, from_sq: Square, to_sq: Square) -> Piece | None:
    """Move the piece on *from_sq* to *to_sq* and return any captured piece.

    Caller is responsible for the legality check.
    """
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(from_sq)}")

    captured = board[to_sq]
    board[to_sq] = piece
    board[from_sq] = None
    return captured
