"""
Win checker for the TicTacToe game.
Checks if a mark has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Mark, WINNING_LINES


class Outcome(Enum):
    """Where a game stands."""
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of looking at a board.

    Derived from the board every time, never stored by the engine.
    """
    outcome: Outcome
    winner: Optional[Mark] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome != Outcome.ONGOING


def has_win(board: Board, mark: Mark) -> bool:
    """True if any winning line holds `mark` in all three cells."""
    if mark == Mark.EMPTY:
        return False
    cells = board.cells
    for a, b, c in WINNING_LINES:
        if cells[a] == mark and cells[b] == mark and cells[c] == mark:
            return True
    return False


def is_draw(board: Board) -> bool:
    """
    True if no empty cell is left and nobody completed a line.

    Never true together with has_win() for either mark.
    """
    return board.is_full() and get_winning_line(board) is None


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the completed line if there is one.

    Returns:
        The winning line as an index triple, or None.
    """
    cells = board.cells
    for line in WINNING_LINES:
        a, b, c = line
        if cells[a] != Mark.EMPTY and cells[a] == cells[b] == cells[c]:
            return line
    return None


def get_outcome(board: Board) -> GameOutcome:
    """Classify the board as ongoing, won or drawn."""
    line = get_winning_line(board)
    if line is not None:
        return GameOutcome(Outcome.WIN, board[line[0]])
    if is_draw(board):
        return GameOutcome(Outcome.DRAW)
    return GameOutcome(Outcome.ONGOING)


class WinChecker:
    """
    Checks for win conditions in TicTacToe and updates a game with the result.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return get_outcome(board).winner

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has a line.
        """
        return is_draw(board)

    def update_game_state(self, game_state):
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        result = get_outcome(game_state.board)

        if result.outcome == Outcome.WIN:
            game_state.winner = result.winner
            game_state.winning_line = get_winning_line(game_state.board)
            game_state.is_game_over = True
        elif result.outcome == Outcome.DRAW:
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        return get_winning_line(board)
