"""
Gobblet rules engine.

Places a black piece on B2 and a white piece on C3 from the hands:

    >>> from gobblet import Game, PlaceFromHand, Square, Piece, Color, Size
    >>> game = Game.new_game()
    >>> game.execute(PlaceFromHand(0, Square.B2))
    <Status.ONGOING: 'ongoing'>
    >>> game.execute(PlaceFromHand(0, Square.C3))
    <Status.ONGOING: 'ongoing'>
    >>> game.board.get_top(Square.B2) == Piece(Color.BLACK, Size.BIG)
    True
"""

from .core import (
    Square, BitBoard, Color, Size, Piece, PieceSet,
    Board, Hand, Game, GameConfig, Action, Move, PlaceFromHand, Status,
    GobbletError, InvalidPlacing, InvalidMoving, EmptyHand,
    ActionGenerator, get_legal_actions,
)

__all__ = [
    "Action",
    "ActionGenerator",
    "BitBoard",
    "Board",
    "Color",
    "EmptyHand",
    "Game",
    "GameConfig",
    "GobbletError",
    "Hand",
    "InvalidMoving",
    "InvalidPlacing",
    "Move",
    "Piece",
    "PieceSet",
    "PlaceFromHand",
    "Size",
    "Square",
    "Status",
    "get_legal_actions",
]
