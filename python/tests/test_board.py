"""Board model — construction, coordinates and goal checks."""

from __future__ import annotations

import pytest

from backend.models.board import Board


def test_from_flat_copies_input() -> None:
    flat = [1, 2, 3, 4, 5, 0, 7, 8, 6]
    board = Board.from_flat(3, flat)
    flat[0] = 99
    assert board.tiles[0] == 1
    assert board.blank_index == 5


@pytest.mark.parametrize(
    "size, flat",
    [
        (3, [1, 2, 3, 4, 5, 6, 7, 8]),
        (3, [1, 2, 3, 4, 5, 6, 7, 8, 0, 9]),
        (3, [1, 1, 3, 4, 5, 6, 7, 8, 0]),
        (3, [1, 2, 3, 4, 5, 6, 7, 8, 9]),
        (1, [0]),
    ],
    ids=["short", "long", "duplicate", "no-blank", "too-small"],
)
def test_from_flat_rejects_malformed_boards(size: int, flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(size, flat)


def test_position_and_index_round_trip() -> None:
    board = Board.goal(3)
    assert board.position(0) == (0, 0)
    assert board.position(5) == (1, 2)
    assert board.position(7) == (2, 1)
    assert board.index_of(2, 1) == 7


def test_rows() -> None:
    assert Board.goal(3).rows() == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]


@pytest.mark.parametrize("size", [2, 3, 4, 8])
def test_goal_is_solved(size: int) -> None:
    board = Board.goal(size)
    assert board.is_solved()
    assert board.tiles[-1] == 0
    assert all(board.is_tile_correct(i) for i in range(board.cell_count))


def test_blank_elsewhere_is_not_solved() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert not board.is_solved()
    assert not board.is_tile_correct(7)
    assert not board.is_tile_correct(8)
    assert board.is_tile_correct(0)


def test_copy_is_independent() -> None:
    board = Board.goal(3)
    clone = board.copy()
    clone.swap(7, 8)
    assert board.is_solved()
    assert not clone.is_solved()
