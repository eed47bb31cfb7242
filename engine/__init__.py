"""
Engine module for the TicTacToe game.
Board model, win/draw detection and the computer's move engine.
"""

__version__ = "1.0.0"

from .board import Board, Mark, WINNING_LINES, CENTER, CORNERS
from .config import EngineConfig
from .errors import EngineError, InvalidState, NoMoveAvailable
from .win_checker import GameOutcome, Outcome, WinChecker, has_win, is_draw
from .move_engine import MoveEngine, Strategy, select_move
