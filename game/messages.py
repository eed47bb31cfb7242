"""
Status texts shown to the player.
Swedish is the default.
"""

from .game_state import GameState

MESSAGES = {
    "sv": {
        "your_turn": "Din tur",
        "thinking": "Datorn tänker...",
        "human_wins": "Svalöv BK vinner!",
        "computer_wins": "Datorn vinner!",
        "draw": "Oavgjort!",
    },
    "en": {
        "your_turn": "Your turn",
        "thinking": "Computer is thinking...",
        "human_wins": "You win!",
        "computer_wins": "Computer wins!",
        "draw": "Draw!",
    },
}

LANGUAGES = tuple(MESSAGES)


def status_key(game_state: GameState) -> str:
    """Which message describes the game right now."""
    if game_state.is_game_over:
        if game_state.winner is None:
            return "draw"
        if game_state.winner == game_state.human_mark:
            return "human_wins"
        return "computer_wins"
    if game_state.current_player == game_state.computer_mark:
        return "thinking"
    return "your_turn"


def status_text(game_state: GameState, lang: str = "sv") -> str:
    if lang not in MESSAGES:
        raise ValueError(f"Unknown language {lang!r}, choose one of {', '.join(LANGUAGES)}")
    return MESSAGES[lang][status_key(game_state)]
