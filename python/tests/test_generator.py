"""Board generation — every board is a solvable, unsolved permutation."""

from __future__ import annotations

import logging
import random

import pytest

from backend.engine.gamegenerator.generator import GameGenerator
from backend.engine.gamesolver.solver import Solver
from backend.models.board import Board

_SAMPLES = 200


@pytest.mark.parametrize("seed", range(5))
def test_generated_3x3_boards_satisfy_invariants(seed: int) -> None:
    rng = random.Random(seed)
    for _ in range(_SAMPLES):
        board = GameGenerator.generate(3, rng)
        assert sorted(board.tiles) == list(range(9))
        assert Solver.inversions(board.tiles) % 2 == 0
        assert not board.is_solved()
        assert board.tiles != [1, 2, 3, 4, 5, 6, 7, 8, 0]


@pytest.mark.parametrize("size", [4, 5])
def test_generated_larger_boards_are_solvable(size: int) -> None:
    rng = random.Random(size)
    for _ in range(50):
        board = GameGenerator.generate(size, rng)
        assert sorted(board.tiles) == list(range(size * size))
        assert Solver.is_solvable(board)
        assert not board.is_solved()


def test_default_rng_produces_valid_board() -> None:
    board = GameGenerator.generate()
    assert board.size == 3
    assert Solver.is_solvable(board)
    assert not board.is_solved()


def test_generation_covers_many_boards() -> None:
    rng = random.Random(7)
    seen = {tuple(GameGenerator.generate(3, rng).tiles) for _ in range(300)}
    assert len(seen) > 250


def test_shuffle_returns_a_permutation() -> None:
    board = GameGenerator.shuffle(3, random.Random(1))
    assert sorted(board.tiles) == list(range(9))


def test_solved_is_goal() -> None:
    assert GameGenerator.solved(3).tiles == [1, 2, 3, 4, 5, 6, 7, 8, 0]


def test_fallback_is_solvable_and_unsolved() -> None:
    board = GameGenerator.fallback(3)
    assert board.tiles == [1, 2, 3, 4, 5, 6, 7, 0, 8]
    assert Solver.is_solvable(board)
    assert not board.is_solved()


class _AlwaysGoal(random.Random):
    """An RNG whose shuffle leaves the sequence untouched."""

    def shuffle(self, x) -> None:  # type: ignore[override]
        x[:] = [*range(1, len(x)), 0]


def test_retry_cap_falls_back_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="backend.engine.gamegenerator.generator"):
        board = GameGenerator.generate(3, _AlwaysGoal(), max_attempts=10)
    assert board.tiles == GameGenerator.fallback(3).tiles
    assert "using fallback" in caplog.text


def test_rejects_solved_boards_and_resamples() -> None:
    class _GoalThenOneMove(random.Random):
        calls = 0

        def shuffle(self, x) -> None:  # type: ignore[override]
            type(self).calls += 1
            if self.calls == 1:
                x[:] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
            else:
                x[:] = [1, 2, 3, 4, 5, 0, 7, 8, 6]

    board = GameGenerator.generate(3, _GoalThenOneMove())
    assert board.tiles == [1, 2, 3, 4, 5, 0, 7, 8, 6]
    assert _GoalThenOneMove.calls == 2


def test_invalid_size_raises() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(1)


def test_board_type() -> None:
    assert isinstance(GameGenerator.generate(3, random.Random(0)), Board)
