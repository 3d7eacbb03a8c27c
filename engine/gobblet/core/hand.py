"""
Off-board piece supply for one player.
"""

from __future__ import annotations
from typing import Optional

from .piece import Color, Piece, PieceSet

# Number of parallel supply piles per player
PIECE_SET_NUM = 3


class Hand:
    """
    A player's pieces not yet on the board.

    Holds ``num_piles`` independent piles, each starting with one Tiny, Small,
    Medium and Big piece (Big on top). Pile indices are clamped into range, so
    any integer selects some pile. Pieces never come back once popped.
    """

    def __init__(self, color: Color, num_piles: int = PIECE_SET_NUM):
        if num_piles < 1:
            raise ValueError(f"A hand needs at least one pile, got {num_piles}")
        self.color = color
        self._piles: list[PieceSet] = [PieceSet.initial(color) for _ in range(num_piles)]

    @property
    def num_piles(self) -> int:
        return len(self._piles)

    def _clamp(self, i: int) -> int:
        return min(max(i, 0), len(self._piles) - 1)

    def peek(self, i: int) -> Optional[Piece]:
        """Top piece of pile i (clamped), or None if that pile is empty."""
        return self._piles[self._clamp(i)].peek()

    def pop(self, i: int) -> Optional[Piece]:
        """Remove and return the top piece of pile i (clamped)."""
        return self._piles[self._clamp(i)].pop()

    def pile(self, i: int) -> PieceSet:
        """Copy of pile i (clamped), bottom to top."""
        return self._piles[self._clamp(i)].copy()

    def copy(self) -> Hand:
        hand = Hand.__new__(Hand)
        hand.color = self.color
        hand._piles = [pile.copy() for pile in self._piles]
        return hand

    def __len__(self) -> int:
        """Total pieces remaining across all piles."""
        return sum(len(pile) for pile in self._piles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.color == other.color and self._piles == other._piles

    def __repr__(self) -> str:
        return f"Hand({self.color}, piles={self._piles!r})"
