"""
Pieces for Gobblet: colors, sizes, and LIFO piece stacks.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional


class Color(IntEnum):
    """The two players."""
    BLACK = 0
    WHITE = 1

    def reverse(self) -> Color:
        """Return the opposing color."""
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class Size(IntEnum):
    """Piece sizes, ordered smallest to largest."""
    TINY = 0
    SMALL = 1
    MEDIUM = 2
    BIG = 3

    def can_gobble(self, other: Size) -> bool:
        """A piece may only cover a strictly smaller one."""
        return self > other

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


ALL_COLORS: tuple[Color, ...] = (Color.BLACK, Color.WHITE)
ALL_SIZES: tuple[Size, ...] = (Size.TINY, Size.SMALL, Size.MEDIUM, Size.BIG)


@dataclass(frozen=True, order=True)
class Piece:
    """A (color, size) pair."""
    color: Color
    size: Size

    def __str__(self) -> str:
        return f"{self.color} {self.size}"


# Black Tiny..Big, then White Tiny..Big
ALL_PIECES: tuple[Piece, ...] = tuple(
    Piece(color, size) for color in ALL_COLORS for size in ALL_SIZES
)


class PieceSet:
    """
    A LIFO stack of pieces.

    Used as a supply pile in a hand and as the read-only view of everything
    physically present on one square (bottom to top by ascending size).
    """

    def __init__(self, pieces: Iterable[Piece] = ()):
        self._pieces: list[Piece] = list(pieces)

    @classmethod
    def initial(cls, color: Color) -> PieceSet:
        """One piece of every size, Big on top."""
        return cls(Piece(color, size) for size in ALL_SIZES)

    def peek(self) -> Optional[Piece]:
        """Return the top piece without removing it, or None if empty."""
        return self._pieces[-1] if self._pieces else None

    def pop(self) -> Optional[Piece]:
        """Remove and return the top piece, or None if empty."""
        return self._pieces.pop() if self._pieces else None

    def push(self, piece: Piece) -> None:
        self._pieces.append(piece)

    def copy(self) -> PieceSet:
        return PieceSet(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PieceSet):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        return f"PieceSet({self._pieces!r})"
