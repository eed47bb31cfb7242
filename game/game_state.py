"""
Game state management for the TicTacToe game.
Tracks the board, whose turn it is and how the game ended.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from engine.board import Board, Mark


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Position in the game (0-8)


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The board
    - Current player
    - Move history
    - Game status (ongoing, won, draw)
    """

    # The human plays O and moves first, the computer plays X
    board: Board = field(default_factory=Board)
    human_mark: Mark = Mark.O
    computer_mark: Mark = Mark.X
    current_player: Mark = Mark.O

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False
    is_game_over: bool = False

    @classmethod
    def new(cls, human_first: bool = True) -> "GameState":
        """Start a game with the human as O. X moves first when the computer starts."""
        return cls(current_player=Mark.O if human_first else Mark.X)

    @property
    def is_computer_turn(self) -> bool:
        return not self.is_game_over and self.current_player == self.computer_mark

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not 0 <= index < len(self.board):
            print(f"Cell {index} is off the board!")
            return False

        if not self.board.is_empty(index):
            print(f"Cell {index} is already occupied!")
            return False

        self.board.place(index, self.current_player)
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))

        # Winner/draw is checked by WinChecker, just switch turns here
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        return self.board.empty_cells()

    def reset(self, human_first: bool = True):
        """Clear the board for a new round, keeping the players' marks."""
        self.board = Board()
        self.moves = []
        self.winner = None
        self.winning_line = None
        self.is_draw = False
        self.is_game_over = False
        self.current_player = self.human_mark if human_first else self.computer_mark

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            human_mark=self.human_mark,
            computer_mark=self.computer_mark,
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board.render())

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
