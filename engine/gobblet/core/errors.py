"""Errors raised by the rules engine."""

from __future__ import annotations

from .square import Square


class GobbletError(ValueError):
    """Base class for illegal actions."""


class InvalidPlacing(GobbletError):
    """A piece cannot be placed on the square, e.g. a larger piece is already there."""

    def __init__(self, square: Square):
        self.square = square
        super().__init__(f"Couldn't place on {square}.")


class InvalidMoving(GobbletError):
    """A move is impossible, e.g. `src` holds no piece or `dst` holds a larger one."""

    def __init__(self, src: Square, dst: Square):
        self.src = src
        self.dst = dst
        super().__init__(f"Couldn't move from {src} to {dst}.")


class EmptyHand(GobbletError):
    """The selected supply pile has no pieces left."""

    def __init__(self) -> None:
        super().__init__("Couldn't extract a piece from empty hand.")
