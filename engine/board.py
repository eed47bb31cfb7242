"""
Board model for the TicTacToe game.
Nine cells in row-major order, indices 0-8.
"""

from enum import Enum
from typing import Iterable, List, Optional


class Mark(Enum):
    """What a cell can hold."""
    EMPTY = ""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self == Mark.X else Mark.X


# All 8 lines that end the game when uniformly marked
WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)

BOARD_CELLS = 9


class Board:
    """
    The 3x3 TicTacToe board.

    Index layout:
         0 | 1 | 2
        ---+---+---
         3 | 4 | 5
        ---+---+---
         6 | 7 | 8
    """

    def __init__(self, cells: Optional[Iterable[Mark]] = None):
        """
        Initialize the board.

        Args:
            cells: Nine marks in row-major order (default: all empty).
        """
        if cells is None:
            self.cells: List[Mark] = [Mark.EMPTY] * BOARD_CELLS
        else:
            self.cells = list(cells)

        if len(self.cells) != BOARD_CELLS:
            raise ValueError(f"A board has {BOARD_CELLS} cells, got {len(self.cells)}")

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """
        Build a board from a compact string like "XO_ _X_ ___".

        Whitespace is ignored; "_" or "." mean an empty cell.
        """
        symbols = [ch for ch in layout if not ch.isspace()]
        cells = []
        for ch in symbols:
            if ch in "_.":
                cells.append(Mark.EMPTY)
            else:
                cells.append(Mark(ch.upper()))
        return cls(cells)

    def __getitem__(self, index: int) -> Mark:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board.from_string({self.to_string()!r})"

    def to_string(self) -> str:
        """Compact form, the inverse of from_string()."""
        rows = []
        for start in range(0, BOARD_CELLS, 3):
            rows.append("".join(m.value or "_" for m in self.cells[start:start + 3]))
        return " ".join(rows)

    def is_empty(self, index: int) -> bool:
        return self.cells[index] == Mark.EMPTY

    def place(self, index: int, mark: Mark):
        """Put a mark on a cell. The cell must be empty."""
        if not self.is_empty(index):
            raise ValueError(f"Cell {index} is already occupied by {self.cells[index].value}")
        self.cells[index] = mark

    def clear(self, index: int):
        """Remove whatever mark is on a cell."""
        self.cells[index] = Mark.EMPTY

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [i for i, mark in enumerate(self.cells) if mark == Mark.EMPTY]

    def is_full(self) -> bool:
        return Mark.EMPTY not in self.cells

    def copy(self) -> "Board":
        return Board(self.cells)

    def render(self) -> str:
        """Text drawing of the board, empty cells show their 1-9 number."""
        lines = []
        for row in range(3):
            symbols = []
            for col in range(3):
                index = row * 3 + col
                mark = self.cells[index]
                symbols.append(mark.value if mark != Mark.EMPTY else str(index + 1))
            lines.append(" " + " | ".join(symbols))
            if row < 2:
                lines.append("---+---+---")
        return "\n".join(lines)
