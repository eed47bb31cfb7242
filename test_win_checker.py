"""Tests for the board model and win/draw detection."""

import itertools

import pytest

from engine.board import Board, Mark, WINNING_LINES
from engine.win_checker import (
    GameOutcome, Outcome, WinChecker, get_outcome, get_winning_line, has_win, is_draw
)


def test_board_round_trips_compact_layout():
    board = Board.from_string("XO_ _X_ __O")

    assert board[0] == Mark.X
    assert board[1] == Mark.O
    assert board[2] == Mark.EMPTY
    assert board.to_string() == "XO_ _X_ __O"
    assert board.empty_cells() == [2, 3, 5, 6, 7]


def test_board_needs_nine_cells():
    with pytest.raises(ValueError):
        Board([Mark.X] * 8)


def test_place_on_occupied_cell_is_rejected():
    board = Board.from_string("X__ ___ ___")
    with pytest.raises(ValueError):
        board.place(0, Mark.O)


def test_mark_opposite():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X
    with pytest.raises(ValueError):
        Mark.EMPTY.opposite()


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_every_line_is_a_win(line, mark):
    board = Board()
    for index in line:
        board.place(index, mark)

    assert has_win(board, mark)
    assert not has_win(board, mark.opposite())
    assert get_winning_line(board) == line
    assert get_outcome(board) == GameOutcome(Outcome.WIN, mark)


def test_empty_mark_never_wins():
    assert not has_win(Board(), Mark.EMPTY)


def test_two_in_a_row_is_not_a_win():
    board = Board.from_string("XX_ OO_ ___")

    assert not has_win(board, Mark.X)
    assert not has_win(board, Mark.O)
    assert get_outcome(board).outcome == Outcome.ONGOING
    assert not get_outcome(board).is_terminal


def test_full_board_without_line_is_draw():
    board = Board.from_string("XOX XOO OXX")

    assert is_draw(board)
    assert get_outcome(board) == GameOutcome(Outcome.DRAW)
    assert WinChecker().check_draw(board)
    assert WinChecker().check_winner(board) is None


def test_partial_board_is_not_draw():
    assert not is_draw(Board.from_string("XOX XOO OX_"))


def test_win_and_draw_are_exclusive_on_every_full_board():
    for marks in itertools.product([Mark.X, Mark.O], repeat=9):
        board = Board(marks)
        won = has_win(board, Mark.X) or has_win(board, Mark.O)
        assert won != is_draw(board)


def test_has_win_is_idempotent_and_pure():
    board = Board.from_string("OOO XX_ X__")
    before = board.copy()

    first = has_win(board, Mark.O)
    second = has_win(board, Mark.O)

    assert first is True and second is True
    assert board == before
