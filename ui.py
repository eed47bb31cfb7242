"""
TicTacToe UI
A graphical interface for playing against the computer using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status
- Restart button
"""

import tkinter as tk
from tkinter import ttk

from engine.board import Mark
from engine.config import EngineConfig
from game.session import GameSession

COLORS = {
    "background": '#1a1a2e',
    "cell": '#16213e',
    "winning": '#10b981',
    Mark.O: '#00ff88',
    Mark.X: '#ff6b6b',
}


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.
    """

    def __init__(self, session: GameSession, delay: float = EngineConfig.THINKING_DELAY):
        """Initialize the UI."""
        self.session = session
        self.delay_ms = int(delay * 1000)

        # Pending after() callback for the computer's move
        self.pending_move = None

        self._create_ui()
        self._refresh()
        self._schedule_computer_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=COLORS["background"])
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=COLORS["background"])
        style.configure('Status.TLabel', background=COLORS["background"],
                        font=('Segoe UI', 14), foreground='#ffd700')

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=COLORS["cell"],
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        tk.Button(
            main_frame,
            text="Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._restart
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        result = self.session.human_move(index)
        if not result.is_valid:
            return

        self._refresh()
        self._schedule_computer_move()

    def _schedule_computer_move(self):
        if self.session.game_state.is_computer_turn:
            self.pending_move = self.root.after(self.delay_ms, self._computer_move)

    def _computer_move(self):
        """Play the computer's move after the thinking pause."""
        self.pending_move = None
        self.session.computer_move()
        self._refresh()

    def _refresh(self):
        """Redraw board and status from the game state."""
        state = self.session.game_state
        winning = state.winning_line or ()

        for index, cell in enumerate(self.board_cells):
            mark = state.board[index]
            cell.configure(
                text=mark.value,
                fg=COLORS.get(mark, 'white'),
                bg=COLORS["winning"] if index in winning else COLORS["cell"]
            )

        self.status_label.configure(text=self.session.status)

    def _restart(self):
        """Reset the game."""
        if self.pending_move is not None:
            self.root.after_cancel(self.pending_move)
            self.pending_move = None

        self.session.reset()
        self._refresh()
        self._schedule_computer_move()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
