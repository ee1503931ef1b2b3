"""Tests for Move and the move executor."""

import pytest

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.move import Move, apply_move
from hotseat.core.piece import Piece
from hotseat.core.types import parse_square

E2 = parse_square("e2")
E4 = parse_square("e4")


class TestMove:
    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"

    def test_equality(self) -> None:
        assert Move(E2, E4) == Move((6, 4), (4, 4))


class TestApplyMove:
    def test_quiet_move(self) -> None:
        board = Board.initial()
        captured = apply_move(board, E2, E4)
        assert captured is None
        assert board[E4] == Piece(PieceType.PAWN, Color.WHITE)
        assert board[E2] is None

    def test_capture_returns_piece(self) -> None:
        board = Board()
        board[parse_square("a1")] = Piece(PieceType.ROOK, Color.WHITE)
        board[parse_square("a8")] = Piece(PieceType.ROOK, Color.BLACK)
        captured = apply_move(board, parse_square("a1"), parse_square("a8"))
        assert captured == Piece(PieceType.ROOK, Color.BLACK)
        assert board[parse_square("a8")] == Piece(PieceType.ROOK, Color.WHITE)
        assert board[parse_square("a1")] is None

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(ValueError):
            apply_move(Board.initial(), parse_square("e4"), parse_square("e5"))
