"""Square type alias and coordinate helpers.

Board layout (row-major, white at the bottom):
    row 0 = rank 8 (black's home), row 7 = rank 1 (white's home)
    col 0 = file a, col 7 = file h

So ``(7, 4)`` is e1 and ``(0, 4)`` is e8.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8

FILES = "abcdefgh"
RANKS = "12345678"


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    return (row, col)


def in_bounds(row: int, col: int) -> bool:
    """Check whether a coordinate pair lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    if not in_bounds(row, col):
        raise ValueError(f"Square off the board: {sq!r}")
    return FILES[col] + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → (6, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(BOARD_SIZE - int(name[1]), FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    (row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
