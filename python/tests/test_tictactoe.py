"""Tic-tac-toe — turns, win lines, draws and the running scoreboard."""

from __future__ import annotations

import pytest

from backend.engine.tictactoe.game import WIN_LINES, Outcome, TicTacToe
from backend.models.scoreboard import Mark, Scoreboard


# -- helpers ------------------------------------------------------------------


def _play(ttt: TicTacToe, *cells: int) -> None:
    for cell in cells:
        assert ttt.play(cell), f"move at {cell} was rejected"


# -- turns --------------------------------------------------------------------


def test_x_moves_first_and_marks_alternate() -> None:
    ttt = TicTacToe()
    assert ttt.turn is Mark.X
    _play(ttt, 0)
    assert ttt.cells[0] is Mark.X
    assert ttt.turn is Mark.O
    _play(ttt, 4)
    assert ttt.cells[4] is Mark.O
    assert ttt.turn is Mark.X


def test_occupied_cell_is_ignored() -> None:
    ttt = TicTacToe()
    _play(ttt, 4)
    assert not ttt.play(4)
    assert ttt.cells[4] is Mark.X
    assert ttt.turn is Mark.O


@pytest.mark.parametrize("index", [-1, 9])
def test_out_of_range_is_ignored(index: int) -> None:
    ttt = TicTacToe()
    assert not ttt.play(index)
    assert ttt.turn is Mark.X


# -- win lines ----------------------------------------------------------------


@pytest.mark.parametrize("line", WIN_LINES, ids=lambda line: "-".join(map(str, line)))
def test_every_line_wins(line: tuple[int, int, int]) -> None:
    cells: list[Mark | None] = [None] * 9
    for i in line:
        cells[i] = Mark.O
    assert TicTacToe.find_winner(cells) == Outcome(winner=Mark.O, line=line)


def test_no_winner_on_mixed_line() -> None:
    cells = [Mark.X, Mark.O, Mark.X, None, None, None, None, None, None]
    assert TicTacToe.find_winner(cells) is None


def test_x_wins_top_row() -> None:
    ttt = TicTacToe()
    _play(ttt, 0, 3, 1, 4, 2)
    assert ttt.outcome == Outcome(winner=Mark.X, line=(0, 1, 2))
    assert ttt.winning_line == (0, 1, 2)
    assert ttt.is_over
    assert ttt.scores == Scoreboard(x=1, o=0, draws=0)


def test_o_wins_diagonal() -> None:
    ttt = TicTacToe()
    _play(ttt, 0, 2, 1, 4, 8, 6)
    assert ttt.outcome is not None
    assert ttt.outcome.winner is Mark.O
    assert ttt.outcome.line == (2, 4, 6)
    assert ttt.scores.o == 1


def test_no_moves_after_outcome() -> None:
    ttt = TicTacToe()
    _play(ttt, 0, 3, 1, 4, 2)
    assert not ttt.play(8)
    assert ttt.cells[8] is None
    assert ttt.scores.x == 1


def test_win_on_last_cell_is_not_a_draw() -> None:
    ttt = TicTacToe()
    _play(ttt, 1, 0, 2, 4, 3, 6, 5, 7, 8)
    assert ttt.outcome == Outcome(winner=Mark.X, line=(2, 5, 8))
    assert not ttt.outcome.is_draw
    assert ttt.scores.draws == 0


# -- draws and scores ---------------------------------------------------------


def test_full_board_without_line_is_a_draw() -> None:
    ttt = TicTacToe()
    # X O X / X O O / O X X
    _play(ttt, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert ttt.outcome == Outcome(winner=None)
    assert ttt.outcome.is_draw
    assert ttt.winning_line == ()
    assert ttt.scores.draws == 1


def test_scores_survive_reset() -> None:
    ttt = TicTacToe()
    _play(ttt, 0, 3, 1, 4, 2)
    ttt.reset()
    assert ttt.cells == [None] * 9
    assert ttt.turn is Mark.X
    assert ttt.outcome is None
    _play(ttt, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert ttt.scores == Scoreboard(x=1, o=0, draws=1)
    assert ttt.scores.rounds == 2


def test_shared_scoreboard() -> None:
    scores = Scoreboard()
    ttt = TicTacToe(scores)
    _play(ttt, 3, 0, 4, 1, 8, 2)
    assert scores.wins(Mark.O) == 1
    scores.clear()
    assert ttt.scores.rounds == 0


def test_mark_other() -> None:
    assert Mark.X.other is Mark.O
    assert Mark.O.other is Mark.X


def test_scoreboard_counts() -> None:
    scores = Scoreboard()
    scores.record_win(Mark.X)
    scores.record_win(Mark.X)
    scores.record_draw()
    assert scores.wins(Mark.X) == 2
    assert scores.wins(Mark.O) == 0
    assert scores.rounds == 3
