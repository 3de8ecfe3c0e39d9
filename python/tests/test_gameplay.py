"""Sliding puzzle play — adjacency, moves, solved detection and reset."""

from __future__ import annotations

import itertools
import random

import pytest

from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.solver import Solver
from backend.engine.gamestate.state import Phase
from backend.models.board import Board, Direction

GOAL = [1, 2, 3, 4, 5, 6, 7, 8, 0]
ONE_AWAY = [1, 2, 3, 4, 5, 0, 7, 8, 6]  # empty at 5, tile 6 below it


# -- helpers ------------------------------------------------------------------


def _game(tiles: list[int]) -> GamePlay:
    return GamePlay.from_board(Board.from_flat(3, tiles))


# -- adjacency ----------------------------------------------------------------


def test_is_adjacent_is_symmetric_and_irreflexive() -> None:
    for a, b in itertools.product(range(9), repeat=2):
        assert GamePlay.is_adjacent(a, b) == GamePlay.is_adjacent(b, a)
    for a in range(9):
        assert not GamePlay.is_adjacent(a, a)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0, 1, True),
        (0, 3, True),
        (4, 1, True),
        (4, 7, True),
        (2, 3, False),  # end of one row, start of the next
        (0, 4, False),  # diagonal
        (0, 2, False),
        (0, 8, False),
    ],
)
def test_is_adjacent_cases(a: int, b: int, expected: bool) -> None:
    assert GamePlay.is_adjacent(a, b) is expected


def test_each_cell_has_expected_neighbour_count() -> None:
    counts = [sum(GamePlay.is_adjacent(a, b) for b in range(9)) for a in range(9)]
    assert counts == [2, 3, 2, 3, 4, 3, 2, 3, 2]


# -- solved detection ---------------------------------------------------------


def test_goal_board_is_solved() -> None:
    assert GamePlay.is_solved(Board.from_flat(3, GOAL))


def test_adjacent_transpositions_of_goal_are_not_solved() -> None:
    for a, b in itertools.combinations(range(8), 2):
        if not GamePlay.is_adjacent(a, b):
            continue
        tiles = GOAL[:]
        tiles[a], tiles[b] = tiles[b], tiles[a]
        assert not GamePlay.is_solved(Board.from_flat(3, tiles)), tiles


# -- apply_move ---------------------------------------------------------------


def test_winning_move_end_to_end() -> None:
    game = _game(ONE_AWAY)
    assert game.apply_move(8)
    assert game.state.board.tiles == GOAL
    assert game.state.moves == 1
    assert game.is_won
    assert game.state.phase is Phase.SOLVED


def test_non_adjacent_tile_is_ignored() -> None:
    game = _game(ONE_AWAY)
    assert not game.apply_move(0)
    assert game.state.board.tiles == ONE_AWAY
    assert game.state.moves == 0
    assert game.state.phase is Phase.NOT_STARTED


def test_empty_cell_is_ignored() -> None:
    game = _game(ONE_AWAY)
    assert not game.apply_move(5)
    assert game.state.board.tiles == ONE_AWAY
    assert game.state.moves == 0


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_out_of_range_is_ignored(index: int) -> None:
    game = _game(ONE_AWAY)
    assert not game.apply_move(index)
    assert game.state.moves == 0


def test_moves_after_solved_are_ignored() -> None:
    game = _game(ONE_AWAY)
    game.apply_move(8)
    assert not game.apply_move(7)
    assert not game.apply_move(5)
    assert game.state.board.tiles == GOAL
    assert game.state.moves == 1


def test_move_counter_counts_only_accepted_moves() -> None:
    game = GamePlay(3, random.Random(3))
    rng = random.Random(4)
    expected = 0
    for _ in range(200):
        if game.is_won:
            break
        before = game.state.board.tiles[:]
        accepted = game.apply_move(rng.randrange(9))
        if accepted:
            expected += 1
            assert game.state.board.tiles != before
        else:
            assert game.state.board.tiles == before
        assert game.state.moves == expected
        assert game.state.board.tiles.count(0) == 1


def test_accepted_moves_keep_board_solvable() -> None:
    game = GamePlay(3, random.Random(11))
    for index in itertools.islice(itertools.cycle(range(9)), 300):
        game.apply_move(index)
        assert Solver.is_solvable(game.state.board)


def test_first_accepted_move_starts_session() -> None:
    game = _game([1, 2, 3, 4, 0, 5, 7, 8, 6])
    assert game.state.phase is Phase.NOT_STARTED
    game.apply_move(5)
    assert game.state.phase is Phase.PLAYING


# -- keyboard moves -----------------------------------------------------------


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, [1, 2, 3, 4, 8, 5, 7, 0, 6]),
        (Direction.DOWN, [1, 0, 3, 4, 2, 5, 7, 8, 6]),
        (Direction.LEFT, [1, 2, 3, 4, 5, 0, 7, 8, 6]),
        (Direction.RIGHT, [1, 2, 3, 0, 4, 5, 7, 8, 6]),
    ],
)
def test_move_slides_neighbour_into_blank(
    direction: Direction, expected: list[int]
) -> None:
    game = _game([1, 2, 3, 4, 0, 5, 7, 8, 6])
    assert game.move(direction)
    assert game.state.board.tiles == expected
    assert game.state.moves == 1


def test_move_off_the_edge_is_ignored() -> None:
    # blank on the bottom row: there is no tile below it to slide up
    game = _game([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert not game.move(Direction.UP)
    assert game.state.moves == 0


# -- movable tiles ------------------------------------------------------------


def test_movable_indices_are_blank_neighbours() -> None:
    assert sorted(_game(ONE_AWAY).movable_indices()) == [2, 4, 8]
    assert sorted(_game([0, 1, 2, 3, 4, 5, 6, 7, 8]).movable_indices()) == [1, 3]


def test_nothing_is_movable_once_solved() -> None:
    game = _game(ONE_AWAY)
    game.apply_move(8)
    assert game.movable_indices() == []


# -- timing and reset ---------------------------------------------------------


def test_tick_counts_only_while_playing() -> None:
    game = _game(ONE_AWAY)
    game.tick()
    assert game.state.elapsed_time == 0
    game.apply_move(4)
    game.tick()
    game.tick()
    assert game.state.elapsed_time == 2
    game.apply_move(5)
    game.apply_move(8)
    assert game.is_won
    game.tick()
    assert game.state.elapsed_time == 2


def test_reset_after_moves() -> None:
    game = _game(ONE_AWAY)
    game.apply_move(4)
    game.tick()
    game.apply_move(5)
    game.apply_move(8)
    assert game.is_won

    game.reset()
    state = game.state
    assert state.moves == 0
    assert state.elapsed_time == 0
    assert not state.is_solved
    assert state.phase is Phase.NOT_STARTED
    assert Solver.is_solvable(state.board)
    assert not state.board.is_solved()


def test_reset_uses_the_session_rng() -> None:
    a = GamePlay(3, random.Random(5))
    b = GamePlay(3, random.Random(5))
    a.reset()
    b.reset()
    assert a.state.board.tiles == b.state.board.tiles
