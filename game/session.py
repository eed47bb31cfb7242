"""
Game session for the TicTacToe game.
Runs the turn order: human move, result check, computer move, result check.
"""

from typing import Optional

from engine.board import Mark
from engine.config import EngineConfig
from engine.move_engine import MoveEngine
from engine.win_checker import WinChecker
from .game_state import GameState
from .messages import status_text
from .move_validator import MoveValidator, ValidationResult


class GameSession:
    """
    One human against the computer.

    Used by both the console game and the UI. The session owns the board;
    the engine only ever sees it for the length of one select_move() call.
    """

    def __init__(
        self,
        engine: Optional[MoveEngine] = None,
        human_first: bool = True,
        lang: str = "sv",
        config: Optional[EngineConfig] = None,
        rng=None
    ):
        """
        Initialize the session.

        Args:
            engine: Move engine for the computer (default: one playing X).
            human_first: If False the computer opens the game.
            lang: Language of status texts ("sv" or "en").
            config: Engine configuration, used when no engine is given.
            rng: Random source, used when no engine is given.
        """
        self.engine = engine or MoveEngine(Mark.X, Mark.O, rng=rng, config=config)
        self.human_first = human_first
        self.lang = lang

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.game_state = GameState(
            human_mark=self.engine.opponent_mark,
            computer_mark=self.engine.computer_mark,
            current_player=self.engine.opponent_mark if human_first else self.engine.computer_mark
        )

    @property
    def status(self) -> str:
        return status_text(self.game_state, self.lang)

    def human_move(self, index: int) -> ValidationResult:
        """
        Apply the human's move if it is legal.

        Stale input (occupied cell, wrong turn, finished game) is reported
        and otherwise ignored.
        """
        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            print(f"Ignoring move {index}: {result.error_message}")
            return result

        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        return result

    def computer_move(self) -> Optional[int]:
        """
        Let the engine play if it is the computer's turn.

        Returns:
            The cell the computer played, or None if it was not its turn.
        """
        if not self.game_state.is_computer_turn:
            return None

        index = self.engine.select_move(self.game_state.board)
        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        return index

    def reset(self):
        """Start a new round."""
        print("Resetting game...")
        self.game_state.reset(human_first=self.human_first)
