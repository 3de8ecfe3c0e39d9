"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver import Solver
from backend.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling full permutations.

    Each attempt is a uniform shuffle of every cell; boards that are
    unsolvable or already solved are rejected and resampled.  Roughly
    half of all permutations survive, so about two attempts are needed
    on average.
    """

    @staticmethod
    def solved(size: int = 3) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def fallback(size: int = 3) -> Board:
        """Return a fixed solvable board one slide away from the goal."""
        board = Board.goal(size)
        last = board.cell_count - 1
        board.swap(last, last - 1)
        return board

    @staticmethod
    def shuffle(size: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly shuffled board, solvable or not."""
        rng = rng or random
        tiles = list(range(size * size))
        rng.shuffle(tiles)
        return Board(size=size, tiles=tiles)

    @staticmethod
    def generate(
        size: int = 3,
        rng: random.Random | None = None,
        max_attempts: int | None = None,
    ) -> Board:
        """Return a random *solvable*, unsolved board of the given size.

        *max_attempts* caps the resampling loop; when it is exceeded the
        deterministic :meth:`fallback` board is returned instead.
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")

        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            board = GameGenerator.shuffle(size, rng)
            if Solver.is_solvable(board) and not board.is_solved():
                logger.debug(
                    "generated %dx%d board in %d attempt(s): %s",
                    size, size, attempts, board.tiles,
                )
                return board

        logger.warning(
            "no solvable %dx%d board after %d attempts, using fallback",
            size, size, attempts,
        )
        return GameGenerator.fallback(size)
