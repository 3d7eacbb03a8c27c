"""
Bitboard utilities for Gobblet.

A BitBoard is a set of squares stored as a 16-bit mask; bit i is set iff the
square whose value is ``1 << i`` is a member (see ``square.py`` for the layout).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Union

from .square import ROWS, COLS, NUM_SQUARES, ALL_SQUARES, Square

# Mask for valid squares (bits 0-15)
VALID_MASK = (1 << NUM_SQUARES) - 1


def popcount(bb: int) -> int:
    """Count number of set bits."""
    return bin(int(bb)).count('1')


def lsb(bb: int) -> int:
    """Return index of least significant bit (or -1 if empty)."""
    bb = int(bb)  # Handle numpy integers
    if bb == 0:
        return -1
    return (bb & -bb).bit_length() - 1


def iter_bits(bb: int) -> Iterator[int]:
    """Iterate over indices of set bits, lowest first."""
    bb = int(bb)  # Handle numpy integers
    while bb:
        yield lsb(bb)
        bb &= bb - 1  # Clear LSB


@dataclass(frozen=True)
class BitBoard:
    """Immutable set of squares with bitwise composition operators."""
    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) & VALID_MASK)

    @classmethod
    def from_square(cls, square: Square) -> BitBoard:
        """Return a bitboard containing only the given square."""
        return cls(int(square))

    @classmethod
    def from_squares(cls, squares) -> BitBoard:
        result = 0
        for sq in squares:
            result |= int(sq)
        return cls(result)

    def popcount(self) -> int:
        return popcount(self.value)

    def squares(self) -> list[Square]:
        """Member squares in canonical order."""
        return [sq for sq in ALL_SQUARES if self.value & sq]

    def __and__(self, other: Union[BitBoard, Square]) -> BitBoard:
        mask = _mask_of(other)
        if mask is None:
            return NotImplemented
        return BitBoard(self.value & mask)

    def __or__(self, other: Union[BitBoard, Square]) -> BitBoard:
        mask = _mask_of(other)
        if mask is None:
            return NotImplemented
        return BitBoard(self.value | mask)

    def __xor__(self, other: Union[BitBoard, Square]) -> BitBoard:
        mask = _mask_of(other)
        if mask is None:
            return NotImplemented
        return BitBoard(self.value ^ mask)

    # Square is an int subclass, so `square & bitboard` lands here
    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __invert__(self) -> BitBoard:
        return BitBoard(~self.value & VALID_MASK)

    def __contains__(self, square: Square) -> bool:
        return bool(self.value & int(square))

    def __bool__(self) -> bool:
        return self.value != 0

    def __iter__(self) -> Iterator[Square]:
        return iter(self.squares())

    def __len__(self) -> int:
        return self.popcount()

    def __repr__(self) -> str:
        return f"BitBoard(0x{self.value:04X})"


def _mask_of(other: object) -> int | None:
    if isinstance(other, BitBoard):
        return other.value
    if isinstance(other, Square):
        return int(other)
    return None


EMPTY = BitBoard(0)
FULL = BitBoard(VALID_MASK)

# Masks for the columns, rows, and diagonals of the board
COLUMN_MASKS: tuple[BitBoard, ...] = (
    BitBoard(0x8888),  # A
    BitBoard(0x4444),  # B
    BitBoard(0x2222),  # C
    BitBoard(0x1111),  # D
)
ROW_MASKS: tuple[BitBoard, ...] = (
    BitBoard(0xF000),  # 1
    BitBoard(0x0F00),  # 2
    BitBoard(0x00F0),  # 3
    BitBoard(0x000F),  # 4
)
DIAGONAL_MASKS: tuple[BitBoard, ...] = (
    BitBoard(0x8421),  # A1-D4
    BitBoard(0x1248),  # D1-A4
)
LINE_MASKS: tuple[BitBoard, ...] = COLUMN_MASKS + ROW_MASKS + DIAGONAL_MASKS


def print_bitboard(bb: BitBoard, label: str = "") -> None:
    """Print bitboard in readable format."""
    if label:
        print(f"{label}:")
    print("    " + " ".join("ABCD"))
    for row in range(ROWS):
        rank = str(row + 1) + " |"
        for col in range(COLS):
            sq = ALL_SQUARES[row * COLS + col]
            rank += " 1" if sq in bb else " ."
        print(rank)
