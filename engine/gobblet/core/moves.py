"""
Legal action generation for Gobblet.

Enumerates every action the current player could execute without error.
"""

from __future__ import annotations
from typing import Iterator

from .game import Action, Game, Move, PlaceFromHand
from .square import ALL_SQUARES


def action_to_str(action: Action) -> str:
    """Display string: "B2-C3" for moves, "0@B2" for placements from pile 0."""
    if isinstance(action, Move):
        return f"{action.src}-{action.dst}"
    return f"{action.index}@{action.dst}"


class ActionGenerator:
    """Generates legal actions for a game."""

    @staticmethod
    def get_place_actions(game: Game) -> Iterator[PlaceFromHand]:
        """
        Placements from each non-empty pile of the current player's hand.

        Piles holding the same top piece yield equivalent actions; each pile
        index is still listed so every listed action executes as-is.
        """
        hand = game.hand(game.turn)
        board = game.board
        for index in range(hand.num_piles):
            piece = hand.peek(index)
            if piece is None:
                continue
            for dst in ALL_SQUARES:
                if board.can_place(piece, dst):
                    yield PlaceFromHand(index, dst)

    @staticmethod
    def get_move_actions(game: Game) -> Iterator[Move]:
        """Moves of every top piece the current player shows on the board."""
        board = game.board
        for src in board.color_combined(game.turn):
            piece = board.get_top(src)
            for dst in ALL_SQUARES:
                if dst != src and board.can_move(piece, dst):
                    yield Move(src, dst)

    @staticmethod
    def get_legal_actions(game: Game) -> list[Action]:
        """All legal actions for the current player (none once the game is over)."""
        if game.status.is_terminal:
            return []
        actions: list[Action] = []
        actions.extend(ActionGenerator.get_place_actions(game))
        actions.extend(ActionGenerator.get_move_actions(game))
        return actions


# Convenience functions
def get_legal_actions(game: Game) -> list[Action]:
    """Get all legal actions for the current player."""
    return ActionGenerator.get_legal_actions(game)


def is_legal_action(game: Game, action: Action) -> bool:
    """Check if an action is legal."""
    return action in ActionGenerator.get_legal_actions(game)


def get_action_count(game: Game) -> int:
    """Get number of legal actions."""
    return len(ActionGenerator.get_legal_actions(game))
