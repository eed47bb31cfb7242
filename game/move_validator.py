"""
Move validator for the TicTacToe game.
Validates that the human's moves follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional

from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. It must be the human's turn
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a human move.

        Args:
            game_state: Current game state.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if game_state.current_player != game_state.human_mark:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the computer to move!"
            )

        if not 0 <= index <= 8:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-8."
            )

        occupant = game_state.board[index]
        if not game_state.board.is_empty(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell indices.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
