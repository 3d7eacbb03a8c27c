"""
Board representation for Gobblet.

The board keeps one bitboard per (color, size) piece. Stacks are never stored
explicitly: the piece visible on a square is always the largest one present,
so "what each color shows from above" is recomputed from the raw boards after
every mutation (see ``Board._combine``).
"""

from __future__ import annotations
from typing import Iterator, Mapping, Optional
import numpy as np

from .bitboard import EMPTY, LINE_MASKS, BitBoard, iter_bits
from .errors import InvalidMoving, InvalidPlacing
from .piece import ALL_COLORS, ALL_PIECES, ALL_SIZES, Color, Piece, PieceSet, Size
from .square import ALL_SQUARES, COLS, ROWS, NUM_SQUARES, Square

# Sizes walked when combining; Big is never covered so it seeds the result
_COVERABLE_SIZES = (Size.MEDIUM, Size.SMALL, Size.TINY)

NUM_PLANES = len(ALL_PIECES) + len(ALL_COLORS)  # 10


class Board:
    """
    Immutable Gobblet board.

    Attributes (derived, read through methods):
        bitboards: Raw occupancy per Piece, no stacking filter
        color_combined: Per color, the squares where that color is on top
        combined: Every occupied square

    ``place`` and ``move`` return a new Board and leave the receiver untouched,
    so earlier boards can be kept as snapshots.
    """

    __slots__ = ("_bitboards", "_color_combined", "_combined")

    def __init__(self) -> None:
        self._bitboards: dict[Piece, BitBoard] = {piece: EMPTY for piece in ALL_PIECES}
        self._color_combined: dict[Color, BitBoard] = {color: EMPTY for color in ALL_COLORS}
        self._combined: BitBoard = EMPTY

    @classmethod
    def from_bitboards(cls, bitboards: Mapping[Piece, BitBoard]) -> Board:
        """
        Rebuild a board from raw per-piece bitboards.

        Missing pieces are treated as absent; derived boards are recomputed.
        """
        board = cls()
        for piece in ALL_PIECES:
            board._bitboards[piece] = BitBoard(bitboards.get(piece, EMPTY).value)
        board._combine()
        return board

    def raw_bitboards(self) -> dict[Piece, BitBoard]:
        """Copy of the 8 raw per-piece bitboards, enough to rebuild the board."""
        return dict(self._bitboards)

    def copy(self) -> Board:
        board = Board.__new__(Board)
        board._bitboards = dict(self._bitboards)
        board._color_combined = dict(self._color_combined)
        board._combined = self._combined
        return board

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def pieces(self, piece: Piece) -> BitBoard:
        """Raw occupancy of the given piece, ignoring what covers it."""
        return self._bitboards[piece]

    def color_combined(self, color: Color) -> BitBoard:
        """Squares where the given color's piece is the top piece."""
        return self._color_combined[color]

    def combined(self) -> BitBoard:
        """All occupied squares."""
        return self._combined

    def exists(self, square: Square) -> bool:
        return square in self._combined

    def get_top(self, square: Square) -> Optional[Piece]:
        """Return the piece visible from above at square, or None if empty."""
        if square not in self._combined:
            return None

        if square in self._color_combined[Color.BLACK]:
            color = Color.BLACK
        else:
            color = Color.WHITE

        # Keep the largest size of that color present on the square
        size = Size.TINY
        for s in ALL_SIZES:
            if square in self._bitboards[Piece(color, s)]:
                size = s
        return Piece(color, size)

    def pieces_at(self, square: Square) -> PieceSet:
        """All pieces physically on square, ordered by ascending size."""
        present = [piece for piece in ALL_PIECES if square in self._bitboards[piece]]
        present.sort(key=lambda piece: piece.size)
        return PieceSet(present)

    def __iter__(self) -> Iterator[tuple[Square, PieceSet]]:
        """Yield (square, pieces) for every square in canonical order."""
        for square in ALL_SQUARES:
            yield square, self.pieces_at(square)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def can_place(self, piece: Piece, to: Square) -> bool:
        """
        Check whether piece can be placed from a hand onto square.

        Empty squares always accept. An opponent's piece may only be covered
        when that opponent has three in a row through the square, and only by
        a strictly larger piece. Own pieces may be covered by a strictly larger
        piece.
        """
        top = self.get_top(to)
        if top is None:
            return True

        opponent = piece.color.reverse()
        if to in self._color_combined[opponent]:
            if not self._has_three_in_a_row(opponent, to):
                return False
        return piece.size.can_gobble(top.size)

    def can_move(self, piece: Piece, to: Square) -> bool:
        """
        Check whether piece can move onto square.

        Only size matters: any strictly smaller top piece of either color
        may be covered.
        """
        top = self.get_top(to)
        if top is None:
            return True
        return piece.size.can_gobble(top.size)

    def place(self, piece: Piece, to: Square) -> Board:
        """Return a new board with piece placed on square."""
        if not self.can_place(piece, to):
            raise InvalidPlacing(to)
        board = self.copy()
        board._set(piece, to)
        return board

    def move(self, src: Square, dst: Square) -> Board:
        """Return a new board with the top piece at src moved to dst."""
        piece = self.get_top(src)
        if piece is None:
            raise InvalidMoving(src, dst)
        if not self.can_move(piece, dst):
            raise InvalidMoving(src, dst)

        board = self.copy()
        board._unset(piece, src)
        board._set(piece, dst)
        return board

    def has_won(self, color: Color) -> bool:
        """True if color shows on all four squares of a row, column, or diagonal."""
        color_combined = self._color_combined[color]
        for mask in LINE_MASKS:
            if (color_combined & mask) == mask:
                return True
        return False

    def _has_three_in_a_row(self, color: Color, square: Square) -> bool:
        """True if some line through square has exactly three squares showing color."""
        color_combined = self._color_combined[color]
        for mask in LINE_MASKS:
            if square in mask and (color_combined & mask).popcount() == 3:
                return True
        return False

    # ------------------------------------------------------------------
    # Mutation helpers (only used on fresh copies)
    # ------------------------------------------------------------------

    def _set(self, piece: Piece, square: Square) -> None:
        self._bitboards[piece] = self._bitboards[piece] | square
        self._combine()

    def _unset(self, piece: Piece, square: Square) -> None:
        self._bitboards[piece] = self._bitboards[piece] & ~BitBoard.from_square(square)
        self._combine()

    def _combine(self) -> None:
        """Recompute the per-color top views and the combined occupancy."""
        for color in ALL_COLORS:
            opponent = color.reverse()
            result = self._bitboards[Piece(color, Size.BIG)]
            for size in _COVERABLE_SIZES:
                bigger = EMPTY
                for larger in ALL_SIZES[size + 1:]:
                    bigger = bigger | self._bitboards[Piece(opponent, larger)]
                result = result | (~bigger & self._bitboards[Piece(color, size)])
            self._color_combined[color] = result
        self._combined = self._color_combined[Color.BLACK] | self._color_combined[Color.WHITE]

    # ------------------------------------------------------------------
    # Encoding / display
    # ------------------------------------------------------------------

    def to_tensor(self) -> np.ndarray:
        """
        Convert board to a network-friendly tensor.

        Returns (10, 4, 4) float32 array:
          - Planes 0-3: Black Tiny, Small, Medium, Big (raw occupancy)
          - Planes 4-7: White Tiny, Small, Medium, Big (raw occupancy)
          - Plane 8: Squares where Black is on top
          - Plane 9: Squares where White is on top
        Row 0 of each plane is board row "1", column 0 is column "A".
        """
        planes = np.zeros((NUM_PLANES, ROWS, COLS), dtype=np.float32)

        boards = [self._bitboards[piece] for piece in ALL_PIECES]
        boards += [self._color_combined[color] for color in ALL_COLORS]

        for plane, bb in enumerate(boards):
            for idx in iter_bits(bb.value):
                pos = NUM_SQUARES - 1 - idx
                planes[plane, pos // COLS, pos % COLS] = 1.0

        return planes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._bitboards == other._bitboards

    def __hash__(self) -> int:
        return hash(tuple(self._bitboards[piece].value for piece in ALL_PIECES))

    def __repr__(self) -> str:
        """Pretty print the top pieces (uppercase Black, lowercase White)."""
        symbols = {Size.TINY: "t", Size.SMALL: "s", Size.MEDIUM: "m", Size.BIG: "b"}

        lines = ["    A B C D"]
        for row in range(ROWS):
            rank = f"{row + 1} |"
            for col in range(COLS):
                top = self.get_top(ALL_SQUARES[row * COLS + col])
                if top is None:
                    rank += " ."
                elif top.color is Color.BLACK:
                    rank += " " + symbols[top.size].upper()
                else:
                    rank += " " + symbols[top.size]
            lines.append(rank)

        return "\n".join(lines)
