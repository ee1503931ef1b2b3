"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import ALL_SQUARES, BOARD_SIZE, FILES, Square, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square grid, one optional :class:`Piece` per square."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        if not in_bounds(row, col):
            raise IndexError(f"Square off the board: {sq!r}")
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        if not in_bounds(row, col):
            raise IndexError(f"Square off the board: {sq!r}")
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for sq in ALL_SQUARES:
            piece = self._grid[sq[0]][sq[1]]
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, row-major."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0–1, white on rows 6–7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(pt, Color.BLACK)
            b[(1, col)] = Piece(PieceType.PAWN, Color.BLACK)
            b[(6, col)] = Piece(PieceType.PAWN, Color.WHITE)
            b[(7, col)] = Piece(pt, Color.WHITE)
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight lines of eight characters.

        Row 0 comes first. ``.`` marks an empty square, letters follow the
        usual convention (uppercase white, lowercase black)::

            Board.from_diagram('''
                ....k...
                ........
                ........
                ........
                ........
                ........
                ........
                ....K...
            ''')
        """
        lines = [line.strip() for line in diagram.strip().splitlines()]
        lines = [line for line in lines if line]
        if len(lines) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(lines)}")

        b = cls()
        for row, line in enumerate(lines):
            if len(line) != BOARD_SIZE:
                raise ValueError(f"Row {row} must have {BOARD_SIZE} squares: {line!r}")
            for col, char in enumerate(line):
                if char != ".":
                    b[(row, col)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  " + " ".join(FILES))
        return "\n".join(rows)
