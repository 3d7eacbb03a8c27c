"""Core game logic: squares, bitboards, pieces, board, hands, and game flow."""

from .square import *
from .bitboard import *
from .piece import Color, Size, Piece, PieceSet, ALL_COLORS, ALL_SIZES, ALL_PIECES
from .errors import GobbletError, InvalidPlacing, InvalidMoving, EmptyHand
from .board import Board
from .hand import Hand
from .game import Game, GameConfig, Action, Move, PlaceFromHand, Status
from .moves import ActionGenerator, get_legal_actions
