"""
Main entry point for the TicTacToe game.

Play against the computer in the console, or (by default) in the UI.
The human is O and moves first unless --computer-first is given.
"""

import time
from typing import Callable, Optional

import numpy as np

from engine.config import EngineConfig
from engine.move_engine import MoveEngine
from engine.board import Mark
from game.session import GameSession


class ConsoleGame:
    """
    Console front end for a GameSession.

    Game flow:
    1. Human types a cell number (1-9)
    2. Result is checked
    3. Computer "thinks" for a moment and plays
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        session: GameSession,
        delay: float = EngineConfig.THINKING_DELAY,
        input_fn: Callable[[str], str] = input
    ):
        """
        Initialize the console game.

        Args:
            session: The game to play.
            delay: Thinking pause before the computer's move (seconds).
            input_fn: Where human input comes from.
        """
        self.session = session
        self.delay = delay
        self.input_fn = input_fn
        self.is_running = False

    def start(self):
        """Play rounds until the human quits."""
        print("\nCells are numbered like this:")
        print(" 1 | 2 | 3\n---+---+---\n 4 | 5 | 6\n---+---+---\n 7 | 8 | 9")
        print("Type 'q' to quit, 'r' to restart\n")

        self.is_running = True
        while self.is_running:
            self._game_loop()
            if not self.is_running:
                break
            self._show_game_result()

            answer = self._ask("Play again? [y/N] ")
            if answer is None or answer.strip().lower() not in ("y", "yes", "j", "ja"):
                self.is_running = False
            else:
                self.session.reset()

    def _game_loop(self):
        """Run one round."""
        state = self.session.game_state

        while self.is_running and not state.is_game_over:
            if state.is_computer_turn:
                print(self.session.status)
                if self.delay > 0:
                    time.sleep(self.delay)
                index = self.session.computer_move()
                print(f"Computer plays {index + 1}")
                continue

            state.print_board()
            print(self.session.status)

            index = self._read_human_move()
            if index is None:
                continue
            self.session.human_move(index)

    def _read_human_move(self) -> Optional[int]:
        """Read a cell number; handles quit and restart commands."""
        answer = self._ask("Your move [1-9]: ")
        if answer is None:
            self.is_running = False
            return None

        answer = answer.strip().lower()
        if answer == "q":
            self.is_running = False
            return None
        if answer == "r":
            self.session.reset()
            return None

        try:
            number = int(answer)
        except ValueError:
            print("Please type a number 1-9.")
            return None

        return number - 1

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def _show_game_result(self):
        """Show the final game result."""
        state = self.session.game_state

        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        state.print_board()
        if state.winning_line is not None:
            cells = ", ".join(str(i + 1) for i in state.winning_line)
            print(f"Winning line: {cells}")

        print(f"\n{self.session.status}")
        print("="*40 + "\n")


def build_session(args) -> GameSession:
    """Create the session described by the command line."""
    config = EngineConfig()
    if args.verbose:
        config.VERBOSE = True

    rng = np.random.default_rng(args.seed)
    engine = MoveEngine(Mark.X, Mark.O, rng=rng, config=config)

    return GameSession(engine=engine, human_first=not args.computer_first, lang=args.lang)


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of the window"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer open the game"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices"
    )
    parser.add_argument(
        "--lang",
        choices=["sv", "en"],
        default="sv",
        help="Language of status messages"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=EngineConfig.THINKING_DELAY,
        help="Thinking pause before the computer moves (seconds)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print how the computer picked each move"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    session = build_session(args)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(session, delay=args.delay)
        ui.run()
        return

    game = ConsoleGame(session, delay=args.delay)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
