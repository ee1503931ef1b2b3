"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from hotseat.core import Board, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.legal_moves(parse_square("g1")))
"""

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameResult, GameStatus, PieceType
from hotseat.core.move import Move, apply_move
from hotseat.core.move_generator import MoveGenerator, pseudo_legal_targets
from hotseat.core.piece import Piece
from hotseat.core.rules import Evaluation, Rules
from hotseat.core.types import (
    ALL_SQUARES,
    Square,
    in_bounds,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "in_bounds",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Evaluation",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Functions
    "apply_move",
    "pseudo_legal_targets",
]
