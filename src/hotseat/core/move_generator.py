"""Pseudo-legal and legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from hotseat.core.enums import Color, PieceType
from hotseat.core.move import Move
from hotseat.core.types import ALL_SQUARES, Square, in_bounds

if TYPE_CHECKING:
    from hotseat.core.board import Board


# Offsets are (d_row, d_col).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# White pawns advance toward row 0, black pawns toward row 7.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row, col in ALL_SQUARES:
        targets[(row, col)] = tuple(
            (row + dr, col + dc)
            for dr, dc in offsets
            if in_bounds(row + dr, col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row, col in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r, c = row + dr, col + dc
            ray: list[Square] = []
            while in_bounds(r, c):
                ray.append((r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Piece-specific generators ---------------------------------------------


def _gen_pawn(board: Board, sq: Square, color: Color) -> set[Square]:
    targets: set[Square] = set()
    row, col = sq
    step = PAWN_DIRECTION[color]
    fwd_row = row + step

    if in_bounds(fwd_row, col) and board[(fwd_row, col)] is None:
        targets.add((fwd_row, col))
        two_row = row + 2 * step
        if (
            row == PAWN_START_ROW[color]
            and in_bounds(two_row, col)
            and board[(two_row, col)] is None
        ):
            targets.add((two_row, col))

    for d_col in (-1, 1):
        cap_col = col + d_col
        if not in_bounds(fwd_row, cap_col):
            continue
        target = board[(fwd_row, cap_col)]
        if target is not None and target.color != color:
            targets.add((fwd_row, cap_col))
    return targets


def _gen_stepper(
    board: Board,
    color: Color,
    candidates: tuple[Square, ...],
) -> set[Square]:
    targets: set[Square] = set()
    for to_sq in candidates:
        target = board[to_sq]
        if target is None or target.color != color:
            targets.add(to_sq)
    return targets


def _gen_sliding(
    board: Board,
    color: Color,
    rays: tuple[tuple[Square, ...], ...],
) -> set[Square]:
    targets: set[Square] = set()
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                targets.add(to_sq)
                continue
            if target.color != color:
                targets.add(to_sq)
            break
    return targets


def _gen_knight(board: Board, sq: Square, color: Color) -> set[Square]:
    return _gen_stepper(board, color, _KNIGHT_TARGETS[sq])


def _gen_king(board: Board, sq: Square, color: Color) -> set[Square]:
    return _gen_stepper(board, color, _KING_TARGETS[sq])


def _gen_rook(board: Board, sq: Square, color: Color) -> set[Square]:
    return _gen_sliding(board, color, _ROOK_RAYS[sq])


def _gen_bishop(board: Board, sq: Square, color: Color) -> set[Square]:
    return _gen_sliding(board, color, _BISHOP_RAYS[sq])


def _gen_queen(board: Board, sq: Square, color: Color) -> set[Square]:
    return _gen_sliding(board, color, _QUEEN_RAYS[sq])


GENERATORS: dict[PieceType, Callable[[Board, Square, Color], set[Square]]] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}


def pseudo_legal_targets(board: Board, sq: Square, color: Color) -> set[Square]:
    """Destinations for the piece on *sq* moving as *color*.

    Pure: ignores whose turn it is and whether the own king ends up attacked.
    """
    piece = board[sq]
    if piece is None:
        return set()
    return GENERATORS[piece.piece_type](board, sq, color)


class MoveGenerator:
    """Generates legal moves for a given :class:`Board`.

    Legality is decided on a scratch copy of the board, so the wrapped board
    is never touched.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: Square) -> set[Square]:
        """Pseudo-legal destinations for the piece on *sq* (may leave own king in check)."""
        piece = self._board[sq]
        if piece is None:
            return set()
        return pseudo_legal_targets(self._board, sq, piece.color)

    def legal_moves(self, sq: Square) -> set[Square]:
        """Strictly legal destinations for the piece on *sq*."""
        piece = self._board[sq]
        if piece is None:
            return set()
        return {
            to_sq
            for to_sq in pseudo_legal_targets(self._board, sq, piece.color)
            if not self.would_be_in_check(sq, to_sq, piece.color)
        }

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move for *color*, grouped by origin square."""
        moves: list[Move] = []
        for from_sq in self._board.pieces(color):
            for to_sq in sorted(self.legal_moves(from_sq)):
                moves.append(Move(from_sq, to_sq))
        return moves

    def has_any_legal_moves(self, color: Color) -> bool:
        for from_sq in self._board.pieces(color):
            if self.legal_moves(from_sq):
                return True
        return False

    def would_be_in_check(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        """Would *color*'s king be attacked after moving *from_sq* → *to_sq*?"""
        scratch = self._board.copy()
        scratch[to_sq] = scratch[from_sq]
        scratch[from_sq] = None
        return MoveGenerator(scratch).is_in_check(color)

    # -- Attack detection ----------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without that king is reported as not in check.
        """
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        board = self._board
        for from_sq in board.pieces(by_color):
            if sq in pseudo_legal_targets(board, from_sq, by_color):
                return True
        return False
