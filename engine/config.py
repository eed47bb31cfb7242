"""
Engine configuration for the TicTacToe game.
All the tuning values for the computer opponent.
"""


class EngineConfig:
    """
    Configuration class for the move engine.

    Make a variant by subclassing and overriding the constants you need.
    """

    # ==================== EXPLORATION ====================
    # Chance of skipping the heuristics and playing a random empty cell.
    # Checked only after the engine has found no winning move.
    EXPLORATION_PROBABILITY = 0.4

    # ==================== SEARCH ====================
    # Deepest ply the minimax evaluates before returning noise
    MAX_DEPTH = 2

    # Score of a win found at depth 0 (decreases by 1 per ply)
    WIN_SCORE = 5

    # Terminal scores get uniform noise in [-JITTER, JITTER)
    JITTER = 0.25

    # ==================== POSITIONAL HEURISTIC ====================
    # What to do when center and corners are taken:
    #   "search"      - run the bounded minimax over the remaining cells
    #   "first_empty" - play the lowest empty index (minimax never runs)
    POSITIONAL_FALLBACK = "search"

    # ==================== PRESENTATION ====================
    # Pause before the computer's move is shown (seconds)
    THINKING_DELAY = 0.6

    # Print the chosen strategy and search statistics
    VERBOSE = False
