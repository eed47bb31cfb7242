"""
Game module for the TicTacToe game.
Tracks the game, validates the human's moves and runs turns.
"""

from .game_state import GameState, Move
from .move_validator import MoveValidator, ValidationResult
from .messages import status_text
from .session import GameSession
