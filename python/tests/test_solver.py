"""Solvability checks — inversion counting and parity rules."""

from __future__ import annotations

import itertools

import pytest

from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.solver import Solver
from backend.models.board import Board


# -- helpers ------------------------------------------------------------------


def _one_move_boards(size: int) -> list[Board]:
    """Every board one legal slide away from the goal."""
    boards = []
    goal = Board.goal(size)
    blank = goal.blank_index
    for i in range(goal.cell_count):
        if GamePlay.is_adjacent(i, blank, size):
            board = goal.copy()
            board.swap(i, blank)
            boards.append(board)
    return boards


# -- inversions ---------------------------------------------------------------


@pytest.mark.parametrize(
    "tiles, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 0], 0),
        ([2, 1, 3, 4, 5, 6, 7, 8, 0], 1),
        ([0, 8, 7, 6, 5, 4, 3, 2, 1], 28),
        ([1, 2, 3, 0, 4, 5, 6, 7, 8], 0),
        ([3, 1, 2, 0, 4, 5, 6, 7, 8], 2),
    ],
    ids=["goal", "one-swap", "reversed", "blank-ignored", "rotation"],
)
def test_inversions(tiles: list[int], expected: int) -> None:
    assert Solver.inversions(tiles) == expected


# -- solvability --------------------------------------------------------------


@pytest.mark.parametrize("size", [3, 4, 5])
def test_goal_is_solvable(size: int) -> None:
    assert Solver.is_solvable(Board.goal(size))


@pytest.mark.parametrize("size", [3, 4, 5])
def test_boards_one_move_from_goal_are_solvable(size: int) -> None:
    for board in _one_move_boards(size):
        assert Solver.is_solvable(board), board.tiles


@pytest.mark.parametrize("size", [3, 4])
def test_swapping_two_tiles_breaks_solvability(size: int) -> None:
    board = Board.goal(size)
    board.swap(0, 1)
    assert not Solver.is_solvable(board)


def test_even_width_counts_blank_row() -> None:
    # Blank slid up one row from the goal: inversions are odd, but the
    # blank's row from the bottom is 1, so the total parity is even.
    board = Board.from_flat(4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 13, 14, 15, 12])
    assert Solver.inversions(board.tiles) % 2 == 1
    assert Solver.is_solvable(board)


def test_exactly_half_of_small_permutations_are_solvable() -> None:
    solvable = sum(
        Solver.is_solvable(Board(size=2, tiles=list(p)))
        for p in itertools.permutations(range(4))
    )
    assert solvable == 12
