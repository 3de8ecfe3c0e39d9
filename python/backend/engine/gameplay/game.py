"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single sliding puzzle session."""

    def __init__(self, size: int = 3, rng: random.Random | None = None) -> None:
        self.size = size
        self._rng = rng
        board = GameGenerator.generate(size, rng)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj._rng = None
        obj.state = GameState(board)
        return obj

    # -- rules ----------------------------------------------------------------

    @staticmethod
    def is_adjacent(a: int, b: int, size: int = 3) -> bool:
        """True iff cells *a* and *b* share an edge on a ``size``-wide grid."""
        ra, ca = divmod(a, size)
        rb, cb = divmod(b, size)
        return abs(ra - rb) + abs(ca - cb) == 1

    @staticmethod
    def is_solved(board: Board) -> bool:
        return board.is_solved()

    # -- movement -------------------------------------------------------------

    def apply_move(self, index: int) -> bool:
        """Slide the tile at *index* into the adjacent empty cell.

        Returns True if the move was accepted.  Moves after the puzzle is
        solved, clicks on the empty cell, out-of-range indices and tiles
        not adjacent to the empty cell are ignored and return False.
        """
        state = self.state
        board = state.board

        if state.is_solved or not 0 <= index < board.cell_count:
            return False

        blank = board.blank_index
        if index == blank or not self.is_adjacent(index, blank, board.size):
            logger.debug("ignored move at %d (blank at %d)", index, blank)
            return False

        board.swap(index, blank)
        state.start()
        state.increment_moves()
        logger.debug("tile %d moved %d -> %d", board.tiles[blank], index, blank)

        if board.is_solved():
            state.finish()
            logger.debug("puzzle solved in %d moves", state.moves)
        return True

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        board = self.state.board
        br, bc = board.position(board.blank_index)

        # The offset points to the tile that will slide into the blank.
        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return False
        return self.apply_move(board.index_of(tr, tc))

    def movable_indices(self) -> list[int]:
        """Indices of tiles that can currently slide into the blank."""
        if self.state.is_solved:
            return []
        board = self.state.board
        blank = board.blank_index
        return [
            i for i in range(board.cell_count)
            if self.is_adjacent(i, blank, board.size)
        ]

    # -- session --------------------------------------------------------------

    def tick(self) -> None:
        self.state.tick()

    def reset(self) -> None:
        """Start over with a freshly generated board."""
        self.state = GameState(GameGenerator.generate(self.size, self._rng))

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
