"""Tests for the computer's move engine."""

import numpy as np
import pytest

from engine.board import Board, Mark
from engine.config import EngineConfig
from engine.errors import InvalidState, NoMoveAvailable
from engine.move_engine import MoveEngine, Strategy, select_move
from engine.win_checker import get_outcome


class ScriptedRng:
    """Random source that replays fixed values, then stays out of the way."""

    def __init__(self, randoms=(), integers=()):
        self.randoms = list(randoms)
        self.integer_values = list(integers)

    def random(self):
        # 0.99 is above any exploration probability used here
        return self.randoms.pop(0) if self.randoms else 0.99

    def integers(self, high):
        value = self.integer_values.pop(0) if self.integer_values else 0
        assert 0 <= value < high
        return value


class NoExploration(EngineConfig):
    EXPLORATION_PROBABILITY = 0.0


class Deterministic(NoExploration):
    JITTER = 0.0


class FirstEmptyFallback(Deterministic):
    POSITIONAL_FALLBACK = "first_empty"


class AlwaysExplore(EngineConfig):
    EXPLORATION_PROBABILITY = 1.0


def make_engine(config=None, rng=None, mark=Mark.X):
    return MoveEngine(mark, mark.opposite(), rng=rng or np.random.default_rng(0), config=config)


def random_positions(count, seed=0):
    """Non-terminal positions reached by random play."""
    rng = np.random.default_rng(seed)
    positions = []
    while len(positions) < count:
        board = Board()
        mark = Mark.O
        while True:
            empty = board.empty_cells()
            if get_outcome(board).is_terminal:
                break
            positions.append(board.copy())
            board.place(empty[int(rng.integers(len(empty)))], mark)
            mark = mark.opposite()
    return positions[:count]


# ==================== WIN NOW ====================

def test_takes_immediate_win():
    engine = make_engine(NoExploration())
    board = Board.from_string("XX_ OO_ ___")

    assert engine.select_move(board) == 2
    assert engine.last_strategy == Strategy.WIN


def test_win_is_never_skipped_for_exploration():
    for seed in range(20):
        engine = make_engine(AlwaysExplore(), np.random.default_rng(seed))
        assert engine.select_move(Board.from_string("XX_ OO_ ___")) == 2


def test_win_beats_block():
    engine = make_engine(NoExploration())
    board = Board.from_string("OO_ XX_ ___")

    assert engine.select_move(board) == 5
    assert engine.last_strategy == Strategy.WIN


def test_first_winning_index_is_taken():
    engine = make_engine(NoExploration())
    board = Board.from_string("X_X _O_ X_O")

    # Both 1 and 3 win, the lower index is returned
    assert engine.select_move(board) == 1


# ==================== EXPLORATION ====================

def test_exploration_picks_among_empty_cells():
    rng = ScriptedRng(randoms=[0.0], integers=[2])
    engine = make_engine(rng=rng)
    board = Board.from_string("X__ _O_ __X")

    assert engine.select_move(board) == 3
    assert engine.last_strategy == Strategy.EXPLORE


def test_exploration_threshold():
    board = Board.from_string("OO_ X__ ___")

    below = make_engine(rng=ScriptedRng(randoms=[0.39]))
    below.select_move(board)
    assert below.last_strategy == Strategy.EXPLORE

    at = make_engine(rng=ScriptedRng(randoms=[0.4]))
    assert at.select_move(board) == 2
    assert at.last_strategy == Strategy.BLOCK


# ==================== BLOCK ====================

def test_blocks_opponent_win():
    engine = make_engine(NoExploration())
    board = Board.from_string("OO_ X__ ___")

    assert engine.select_move(board) == 2
    assert engine.last_strategy == Strategy.BLOCK


def test_blocks_as_o():
    engine = make_engine(NoExploration(), mark=Mark.O)
    board = Board.from_string("X_O _X_ ___")

    assert engine.select_move(board) == 8
    assert engine.last_strategy == Strategy.BLOCK


# ==================== POSITIONAL ====================

def test_empty_board_takes_center():
    engine = make_engine(NoExploration())

    assert engine.select_move(Board()) == 4
    assert engine.last_strategy == Strategy.CENTER


def test_takes_a_free_corner_when_center_is_gone():
    board = Board.from_string("X__ _O_ __X")

    for seed in range(10):
        engine = make_engine(NoExploration(), np.random.default_rng(seed))
        assert engine.select_move(board) in (2, 6)
        assert engine.last_strategy == Strategy.CORNER

    engine = make_engine(NoExploration(), ScriptedRng(integers=[1]))
    assert engine.select_move(board) == 6


def test_edges_only_runs_search():
    board = Board.from_string("XOX _O_ OXO")

    engine = make_engine(Deterministic())
    assert engine.select_move(board) == 3
    assert engine.last_strategy == Strategy.SEARCH
    assert engine.positions_evaluated > 0


def test_edges_only_first_empty_fallback():
    board = Board.from_string("XOX _O_ OXO")

    engine = make_engine(FirstEmptyFallback())
    assert engine.select_move(board) == 3
    assert engine.last_strategy == Strategy.FIRST_EMPTY
    assert engine.positions_evaluated == 0


# ==================== SEARCH ====================

def test_search_prefers_immediate_win():
    engine = make_engine(Deterministic())
    assert engine.search_best_move(Board.from_string("XX_ OO_ ___")) == 2


def test_search_on_full_board_has_no_move():
    engine = make_engine(Deterministic())
    with pytest.raises(NoMoveAvailable):
        engine.search_best_move(Board.from_string("XOX XOO OXX"))


def test_minimax_terminal_scores():
    engine = make_engine(Deterministic())

    assert engine.minimax(Board.from_string("XXX OO_ ___"), 0, False) == 5
    assert engine.minimax(Board.from_string("XXX OO_ ___"), 1, True) == 4
    assert engine.minimax(Board.from_string("OOO XX_ X__"), 0, True) == -5
    assert engine.minimax(Board.from_string("OOO XX_ X__"), 2, True) == -3
    assert engine.minimax(Board.from_string("XOX XOO OXX"), 0, True) == 0


def test_minimax_depth_cap_returns_noise():
    board = Board.from_string("XXX OO_ ___")

    assert make_engine(Deterministic()).minimax(board, 3, True) == 0

    for seed in range(20):
        engine = make_engine(rng=np.random.default_rng(seed))
        score = engine.minimax(board, 3, True)
        assert -0.25 <= score < 0.25


def test_terminal_jitter_stays_in_range():
    board = Board.from_string("XXX OO_ ___")
    for seed in range(20):
        engine = make_engine(rng=np.random.default_rng(seed))
        score = engine.minimax(board, 0, False)
        assert 4.75 <= score < 5.25


def test_minimax_sees_opponent_win_one_ply_down():
    engine = make_engine(Deterministic())
    # O to move completes 0-3-6
    board = Board.from_string("O__ _X_ OXO")

    assert engine.minimax(board, 0, False) == -4


# ==================== CONTRACT ====================

def test_single_empty_cell_is_returned():
    full = Board.from_string("XOX XOO OXX")
    for index in range(9):
        board = full.copy()
        board.clear(index)
        for seed in range(5):
            engine = make_engine(rng=np.random.default_rng(seed))
            assert engine.select_move(board) == index


def test_board_is_restored_and_move_is_legal():
    for seed, board in enumerate(random_positions(60)):
        before = board.copy()
        engine = make_engine(rng=np.random.default_rng(seed))

        move = engine.select_move(board)

        assert board == before
        assert board.is_empty(move)


def test_won_board_is_invalid():
    engine = make_engine()
    with pytest.raises(InvalidState):
        engine.select_move(Board.from_string("OOO XX_ ___"))


def test_full_board_is_invalid():
    engine = make_engine()
    with pytest.raises(InvalidState):
        engine.select_move(Board.from_string("XOX XOO OXX"))


def test_marks_must_differ():
    with pytest.raises(ValueError):
        MoveEngine(Mark.X, Mark.X)
    with pytest.raises(ValueError):
        MoveEngine(Mark.EMPTY)


def test_select_move_function():
    board = Board.from_string("OO_ X__ ___")
    move = select_move(board, Mark.X, Mark.O, np.random.default_rng(1), NoExploration())
    assert move == 2


def test_seeded_engines_agree():
    board = Board.from_string("X__ ___ __O")
    first = make_engine(rng=np.random.default_rng(42)).select_move(board)
    second = make_engine(rng=np.random.default_rng(42)).select_move(board)
    assert first == second


def test_verbose_prints_strategy(capsys):
    class Verbose(NoExploration):
        VERBOSE = True

    make_engine(Verbose()).select_move(Board())

    assert "via center" in capsys.readouterr().out
