"""
Game orchestration for Gobblet: turn order, hands, and win status.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union
import logging

from .board import Board
from .errors import EmptyHand, GobbletError
from .hand import PIECE_SET_NUM, Hand
from .piece import ALL_COLORS, Color
from .square import Square

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """Move the top piece at src onto dst."""
    src: Square
    dst: Square


@dataclass(frozen=True)
class PlaceFromHand:
    """Place the top piece of the current player's pile `index` onto dst."""
    index: int
    dst: Square


Action = Union[Move, PlaceFromHand]


class Status(Enum):
    """Progress or result of the game."""
    ONGOING = "ongoing"
    BLACK_WINS = "black_wins"
    WHITE_WINS = "white_wins"

    @property
    def is_terminal(self) -> bool:
        return self is not Status.ONGOING


_WIN_STATUS = {
    Color.BLACK: Status.BLACK_WINS,
    Color.WHITE: Status.WHITE_WINS,
}


@dataclass
class GameConfig:
    """Configuration for a game."""
    first_player: Color = Color.BLACK
    num_piles: int = PIECE_SET_NUM  # Supply piles per player


@dataclass
class Game:
    """
    Manages board, hands, turn, and result of a Gobblet game.

    Attributes:
        board: Current board snapshot (replaced, never mutated, by actions)
        hands: Hand per color
        turn: Color to act next
        status: ONGOING until a color completes a line
    """
    config: GameConfig = field(default_factory=GameConfig)
    board: Board = field(default_factory=Board)
    hands: dict[Color, Hand] = field(default_factory=dict)
    turn: Optional[Color] = None
    status: Status = Status.ONGOING

    def __post_init__(self) -> None:
        for color in ALL_COLORS:
            if color not in self.hands:
                self.hands[color] = Hand(color, self.config.num_piles)
        if self.turn is None:
            self.turn = self.config.first_player

    @classmethod
    def new_game(cls, config: Optional[GameConfig] = None) -> Game:
        """Create a new game: empty board, full hands, first player to move."""
        return cls(config=config or GameConfig())

    def hand(self, color: Color) -> Hand:
        """Return the hand of the given color."""
        return self.hands[color]

    def copy(self) -> Game:
        """Independent copy; boards are immutable so only hands are duplicated."""
        return Game(
            config=self.config,
            board=self.board,
            hands={color: hand.copy() for color, hand in self.hands.items()},
            turn=self.turn,
            status=self.status,
        )

    def execute(self, action: Action) -> Status:
        """
        Execute an action for the current player and return the status.

        Once the game is won, further actions are ignored and the final status
        is returned. Illegal actions raise a GobbletError and leave the game
        unchanged; in particular a rejected placement keeps the piece in hand.
        """
        if self.status.is_terminal:
            return self.status

        try:
            self._apply(action)
        except GobbletError as e:
            logger.debug(f"{self.turn} rejected {action}: {e}")
            raise

        if self.board.has_won(Color.BLACK):
            self.status = Status.BLACK_WINS
        # Checked second: a simultaneous double line counts for White
        if self.board.has_won(Color.WHITE):
            self.status = Status.WHITE_WINS

        if self.status.is_terminal:
            logger.info(f"Game over after {self.turn} played {action}: {self.status.name}")

        self.turn = self.turn.reverse()
        return self.status

    def _apply(self, action: Action) -> None:
        if isinstance(action, Move):
            self.board = self.board.move(action.src, action.dst)
            logger.debug(f"{self.turn} moved {action.src}-{action.dst}")
        elif isinstance(action, PlaceFromHand):
            hand = self.hands[self.turn]
            piece = hand.peek(action.index)
            if piece is None:
                raise EmptyHand()
            self.board = self.board.place(piece, action.dst)
            hand.pop(action.index)
            logger.debug(f"{self.turn} placed {piece} on {action.dst}")
        else:
            raise TypeError(f"Unknown action: {action!r}")

    def __repr__(self) -> str:
        return f"{self.board!r}\n\n{self.turn} to act ({self.status.name})"
