"""
Square geometry for Gobblet.

Board layout (4 rows x 4 cols = 16 squares, fits in a 16-bit int):

  +----+----+----+----+
  | A1 | B1 | C1 | D1 |     bits 15 14 13 12
  +----+----+----+----+
  | A2 | B2 | C2 | D2 |     bits 11 10  9  8
  +----+----+----+----+
  | A3 | B3 | C3 | D3 |     bits  7  6  5  4
  +----+----+----+----+
  | A4 | B4 | C4 | D4 |     bits  3  2  1  0
  +----+----+----+----+

Each square is a singleton bit: A1 is the most significant bit, D4 the least.
"""

from __future__ import annotations
from enum import IntEnum

# Board dimensions
ROWS = 4
COLS = 4
NUM_SQUARES = ROWS * COLS  # 16

COLUMN_NAMES = "ABCD"


class Square(IntEnum):
    """One of the 16 board cells, valued by its singleton bit."""
    A1 = 1 << 15
    B1 = 1 << 14
    C1 = 1 << 13
    D1 = 1 << 12
    A2 = 1 << 11
    B2 = 1 << 10
    C2 = 1 << 9
    D2 = 1 << 8
    A3 = 1 << 7
    B3 = 1 << 6
    C3 = 1 << 5
    D3 = 1 << 4
    A4 = 1 << 3
    B4 = 1 << 2
    C4 = 1 << 1
    D4 = 1 << 0

    @property
    def index(self) -> int:
        """Bit position of this square (0 for D4, 15 for A1)."""
        return self.value.bit_length() - 1

    @property
    def row(self) -> int:
        """Row number, 0 for row "1" (top) through 3 for row "4"."""
        return (NUM_SQUARES - 1 - self.index) // COLS

    @property
    def col(self) -> int:
        """Column number, 0 for column "A" through 3 for column "D"."""
        return (NUM_SQUARES - 1 - self.index) % COLS

    def __str__(self) -> str:
        return self.name

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


# Canonical iteration order: row by row, A to D
ALL_SQUARES: tuple[Square, ...] = tuple(Square)


def square_at(row: int, col: int) -> Square:
    """Convert (row, col) to a square."""
    if not (0 <= row < ROWS and 0 <= col < COLS):
        raise ValueError(f"Square out of range: row={row}, col={col}")
    return ALL_SQUARES[row * COLS + col]
