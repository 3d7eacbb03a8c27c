"""Tests for game flow: turns, hands, errors, and win status."""

import logging

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from gobblet.core.bitboard import BitBoard
from gobblet.core.board import Board
from gobblet.core.errors import EmptyHand, InvalidMoving, InvalidPlacing
from gobblet.core.game import Game, GameConfig, Move, PlaceFromHand, Status
from gobblet.core.piece import Color, Piece, Size
from gobblet.core.square import Square

BLACK, WHITE = Color.BLACK, Color.WHITE


def play(game, *actions):
    status = None
    for action in actions:
        status = game.execute(action)
    return status


class TestNewGame:
    def test_new_game(self):
        game = Game.new_game()
        assert game.turn is BLACK
        assert game.status is Status.ONGOING
        assert game.board == Board()
        assert len(game.hand(BLACK)) == 12
        assert len(game.hand(WHITE)) == 12
        assert game.hand(WHITE).color is WHITE

    def test_config(self):
        game = Game.new_game(GameConfig(first_player=WHITE, num_piles=2))
        assert game.turn is WHITE
        assert game.hand(BLACK).num_piles == 2
        assert len(game.hand(WHITE)) == 8


class TestTurns:
    def test_place_alternates_turns(self):
        game = Game.new_game()
        assert game.execute(PlaceFromHand(0, Square.B2)) is Status.ONGOING
        assert game.turn is WHITE
        assert game.execute(PlaceFromHand(0, Square.C3)) is Status.ONGOING
        assert game.turn is BLACK

        # Piles pop Big first
        assert game.board.get_top(Square.B2) == Piece(BLACK, Size.BIG)
        assert game.board.get_top(Square.C3) == Piece(WHITE, Size.BIG)
        assert game.hand(BLACK).peek(0) == Piece(BLACK, Size.MEDIUM)
        assert len(game.hand(BLACK)) == 11
        assert len(game.hand(WHITE)) == 11

    def test_move_action(self):
        game = Game.new_game()
        play(game, PlaceFromHand(0, Square.A1), PlaceFromHand(0, Square.D4))
        game.execute(Move(Square.A1, Square.B2))
        assert game.board.get_top(Square.B2) == Piece(BLACK, Size.BIG)
        assert not game.board.exists(Square.A1)
        assert game.turn is WHITE

    def test_board_snapshots_are_kept(self):
        game = Game.new_game()
        before = game.board
        game.execute(PlaceFromHand(0, Square.A1))
        assert not before.exists(Square.A1)
        assert game.board.exists(Square.A1)

    def test_hand_index_clamped(self):
        game = Game.new_game()
        game.execute(PlaceFromHand(-3, Square.A1))
        game.execute(PlaceFromHand(42, Square.A2))
        assert len(game.hand(BLACK).pile(0)) == 3
        assert len(game.hand(WHITE).pile(2)) == 3


class TestErrors:
    def test_failed_move_keeps_state(self):
        game = Game.new_game()
        with pytest.raises(InvalidMoving):
            game.execute(Move(Square.A1, Square.A2))
        assert game.turn is BLACK
        assert game.status is Status.ONGOING
        assert game.board == Board()

    def test_failed_place_keeps_piece_in_hand(self):
        game = Game.new_game()
        game.execute(PlaceFromHand(0, Square.B2))
        with pytest.raises(InvalidPlacing) as exc_info:
            game.execute(PlaceFromHand(0, Square.B2))
        assert exc_info.value.square is Square.B2
        assert game.turn is WHITE
        assert len(game.hand(WHITE)) == 12
        assert game.hand(WHITE).peek(0) == Piece(WHITE, Size.BIG)
        assert game.board.get_top(Square.B2) == Piece(BLACK, Size.BIG)

    def test_empty_hand(self):
        game = Game.new_game()
        for _ in range(4):
            game.hand(BLACK).pop(1)
        with pytest.raises(EmptyHand):
            game.execute(PlaceFromHand(1, Square.A1))
        assert game.turn is BLACK
        assert not game.board.exists(Square.A1)

    def test_error_message(self):
        game = Game.new_game()
        with pytest.raises(InvalidMoving, match="Couldn't move from A1 to A2."):
            game.execute(Move(Square.A1, Square.A2))

    def test_unknown_action(self):
        game = Game.new_game()
        with pytest.raises(TypeError):
            game.execute("A1-A2")

    def test_move_opponent_piece(self):
        # Moves pick up whatever is on top, including the opponent's piece
        game = Game.new_game()
        game.execute(PlaceFromHand(0, Square.A1))
        game.execute(Move(Square.A1, Square.B1))
        assert game.board.get_top(Square.B1) == Piece(BLACK, Size.BIG)
        assert game.turn is BLACK


class TestWinStatus:
    def test_row_completes_win(self):
        game = Game.new_game()
        status = play(
            game,
            PlaceFromHand(0, Square.A1), PlaceFromHand(0, Square.A4),
            PlaceFromHand(1, Square.B1), PlaceFromHand(1, Square.B4),
            PlaceFromHand(2, Square.C1), PlaceFromHand(2, Square.C4),
        )
        assert status is Status.ONGOING

        assert game.execute(PlaceFromHand(0, Square.D1)) is Status.BLACK_WINS
        assert game.status is Status.BLACK_WINS
        assert game.status.is_terminal
        # Turn still flips after the winning action
        assert game.turn is WHITE

    def test_terminal_absorbs_actions(self):
        game = Game.new_game()
        play(
            game,
            PlaceFromHand(0, Square.A1), PlaceFromHand(0, Square.A4),
            PlaceFromHand(1, Square.B1), PlaceFromHand(1, Square.B4),
            PlaceFromHand(2, Square.C1), PlaceFromHand(2, Square.C4),
            PlaceFromHand(0, Square.D1),
        )
        board = game.board
        remaining = len(game.hand(WHITE))

        assert game.execute(PlaceFromHand(0, Square.D4)) is Status.BLACK_WINS
        # Even an illegal action just reports the result
        assert game.execute(Move(Square.B2, Square.C2)) is Status.BLACK_WINS
        assert game.board is board
        assert len(game.hand(WHITE)) == remaining
        assert game.turn is WHITE

    def test_move_can_reveal_opponent_win(self):
        # White Tiny under Black Big on A1; White shows A2, A3, A4
        board = Board.from_bitboards({
            Piece(WHITE, Size.TINY): BitBoard.from_squares([Square.A1]),
            Piece(WHITE, Size.SMALL): BitBoard.from_squares([Square.A2, Square.A3, Square.A4]),
            Piece(BLACK, Size.BIG): BitBoard.from_squares([Square.A1]),
        })
        game = Game(board=board)
        assert game.execute(Move(Square.A1, Square.C2)) is Status.WHITE_WINS

    def test_double_win_goes_to_white(self):
        # Black shows B1, B2, B3; White shows D1, D2, D3 and has a Tiny
        # on D4 under Black's Medium. Moving the Medium to B4 completes
        # both lines at once.
        board = Board.from_bitboards({
            Piece(BLACK, Size.TINY): BitBoard(0x4440),
            Piece(BLACK, Size.MEDIUM): BitBoard(0x0001),
            Piece(WHITE, Size.SMALL): BitBoard(0x1110),
            Piece(WHITE, Size.TINY): BitBoard(0x0001),
        })
        game = Game(board=board)
        assert game.execute(Move(Square.D4, Square.B4)) is Status.WHITE_WINS
        assert game.board.has_won(BLACK)
        assert game.board.has_won(WHITE)

    def test_win_is_logged(self, caplog):
        game = Game.new_game()
        with caplog.at_level(logging.INFO, logger="gobblet.core.game"):
            play(
                game,
                PlaceFromHand(0, Square.A1), PlaceFromHand(0, Square.A4),
                PlaceFromHand(1, Square.B1), PlaceFromHand(1, Square.B4),
                PlaceFromHand(2, Square.C1), PlaceFromHand(2, Square.C4),
                PlaceFromHand(0, Square.D1),
            )
        assert "BLACK_WINS" in caplog.text


class TestCopy:
    def test_copy_is_independent(self):
        game = Game.new_game()
        game.execute(PlaceFromHand(0, Square.B2))
        copy = game.copy()
        copy.execute(PlaceFromHand(0, Square.C3))

        assert game.turn is WHITE
        assert not game.board.exists(Square.C3)
        assert len(game.hand(WHITE)) == 12
        assert copy.board.exists(Square.C3)
        assert len(copy.hand(WHITE)) == 11
