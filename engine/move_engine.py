"""
Move engine for the TicTacToe game.
Chooses the computer's move with a chain of cheap strategies and a
shallow, noisy Minimax search behind them.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .board import Board, Mark, CENTER, CORNERS
from .config import EngineConfig
from .errors import InvalidState, NoMoveAvailable
from .win_checker import has_win


class Strategy(Enum):
    """Which step of the strategy chain produced a move."""
    WIN = "win"
    EXPLORE = "explore"
    BLOCK = "block"
    CENTER = "center"
    CORNER = "corner"
    FIRST_EMPTY = "first_empty"
    SEARCH = "search"


class MoveEngine:
    """
    The computer opponent.

    Strategies are tried in order and the first one that yields a move wins:
    1. Win now if possible
    2. Sometimes play a random cell (exploration)
    3. Block the opponent's immediate win
    4. Take the center, then a random corner
    5. Bounded Minimax over what is left

    The engine keeps no state between calls apart from diagnostics. Trial
    moves are made on the caller's board and always taken back.
    """

    def __init__(
        self,
        computer_mark: Mark = Mark.X,
        opponent_mark: Optional[Mark] = None,
        rng=None,
        config: Optional[EngineConfig] = None
    ):
        """
        Initialize the engine.

        Args:
            computer_mark: Mark the engine plays (default: X).
            opponent_mark: Mark of the other player (default: the opposite mark).
            rng: Random source with random() and integers(n), normally a
                numpy Generator. A fresh unseeded one is used if omitted.
            config: Tuning values (default: EngineConfig()).
        """
        if opponent_mark is None:
            opponent_mark = computer_mark.opposite()
        if Mark.EMPTY in (computer_mark, opponent_mark) or computer_mark == opponent_mark:
            raise ValueError("Computer and opponent need two different non-empty marks")

        self.computer_mark = computer_mark
        self.opponent_mark = opponent_mark
        self.rng = rng if rng is not None else np.random.default_rng()
        self.config = config if config is not None else EngineConfig()

        # Diagnostics from the last select_move() call
        self.last_strategy: Optional[Strategy] = None
        self.positions_evaluated = 0

    def select_move(self, board: Board) -> int:
        """
        Pick the computer's next move.

        Args:
            board: Current board. It is left exactly as it was passed in.

        Returns:
            Index (0-8) of an empty cell.

        Raises:
            InvalidState: If the board is already won or full.
        """
        self.last_strategy = None
        self.positions_evaluated = 0

        if has_win(board, self.computer_mark) or has_win(board, self.opponent_mark):
            raise InvalidState(f"Board is already won: {board.to_string()}")

        empty = board.empty_cells()
        if not empty:
            raise InvalidState(f"Board is full: {board.to_string()}")

        move, strategy = self._choose(board, empty)
        self.last_strategy = strategy

        if self.config.VERBOSE:
            print(
                f"Engine ({self.computer_mark.value}) plays {move} via {strategy.value}"
                f" after {self.positions_evaluated} positions"
            )

        return move

    def _choose(self, board: Board, empty: List[int]) -> Tuple[int, Strategy]:
        move = self.find_winning_move(board, self.computer_mark)
        if move is not None:
            return move, Strategy.WIN

        # Exploration never skips a guaranteed win, so it comes after step 1
        if self.rng.random() < self.config.EXPLORATION_PROBABILITY:
            return self._pick(empty), Strategy.EXPLORE

        move = self.find_winning_move(board, self.opponent_mark)
        if move is not None:
            return move, Strategy.BLOCK

        if board.is_empty(CENTER):
            return CENTER, Strategy.CENTER

        corners = [i for i in CORNERS if board.is_empty(i)]
        if corners:
            return self._pick(corners), Strategy.CORNER

        if self.config.POSITIONAL_FALLBACK == "first_empty":
            return empty[0], Strategy.FIRST_EMPTY

        return self.search_best_move(board), Strategy.SEARCH

    def find_winning_move(self, board: Board, mark: Mark) -> Optional[int]:
        """
        Find the first empty cell (ascending) that completes a line for `mark`.

        Returns:
            The cell index, or None if no single move wins.
        """
        for index in board.empty_cells():
            board.place(index, mark)
            wins = has_win(board, mark)
            board.clear(index)
            if wins:
                return index
        return None

    def search_best_move(self, board: Board) -> int:
        """
        Score every empty cell with Minimax and return the best one.

        Ties go to the first cell that reached the best score.

        Raises:
            NoMoveAvailable: If there is no empty cell to search.
        """
        best_score = float('-inf')
        best_move = -1

        for index in board.empty_cells():
            board.place(index, self.computer_mark)
            score = self.minimax(board, depth=0, maximizing=False)
            board.clear(index)

            if score > best_score:
                best_score = score
                best_move = index

        if best_move == -1:
            raise NoMoveAvailable(f"No empty cell to search on {board.to_string()}")

        return best_move

    def minimax(self, board: Board, depth: int, maximizing: bool) -> float:
        """
        Depth-limited Minimax with noisy terminal scores.

        Args:
            board: Position to evaluate (restored before returning).
            depth: Plies searched so far.
            maximizing: True if the computer is to move.

        Returns:
            Score from the computer's point of view. Quicker wins score
            higher, quicker losses lower, draws and cut-offs are noise.
        """
        self.positions_evaluated += 1

        if depth > self.config.MAX_DEPTH:
            return self._jitter()

        noise = self._jitter()
        if has_win(board, self.computer_mark):
            return self.config.WIN_SCORE - depth + noise
        if has_win(board, self.opponent_mark):
            return depth - self.config.WIN_SCORE + noise
        if board.is_full():
            return noise

        if maximizing:
            mark = self.computer_mark
            best_score = float('-inf')
        else:
            mark = self.opponent_mark
            best_score = float('inf')

        for index in board.empty_cells():
            board.place(index, mark)
            score = self.minimax(board, depth + 1, not maximizing)
            board.clear(index)

            if maximizing:
                best_score = max(best_score, score)
            else:
                best_score = min(best_score, score)

        return best_score

    def _jitter(self) -> float:
        """Uniform noise in [-JITTER, JITTER)."""
        if not self.config.JITTER:
            return 0.0
        return (float(self.rng.random()) - 0.5) * 2 * self.config.JITTER

    def _pick(self, options: Sequence[int]) -> int:
        """Uniformly random element of a non-empty sequence."""
        return options[int(self.rng.integers(len(options)))]


def select_move(
    board: Board,
    computer_mark: Mark,
    opponent_mark: Mark,
    rng,
    config: Optional[EngineConfig] = None
) -> int:
    """
    Choose the computer's move without keeping an engine around.

    See MoveEngine.select_move().
    """
    engine = MoveEngine(computer_mark, opponent_mark, rng, config)
    return engine.select_move(board)
