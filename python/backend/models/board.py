"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints. 0 represents the
    empty cell. A cell index maps to ``(index // size, index % size)``.
    """

    size: int
    tiles: list[int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 0, 7, 8, 6])
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}, "
                f"got {flat}."
            )
        return cls(size=size, tiles=list(flat))

    @classmethod
    def goal(cls, size: int = 3) -> Board:
        """Return the solved board: ``1, 2, ..., n*n-1, 0``."""
        return cls(size=size, tiles=[*range(1, size * size), 0])

    # -- queries --------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    def position(self, index: int) -> tuple[int, int]:
        """Return ``(row, col)`` for a cell index."""
        return divmod(index, self.size)

    def index_of(self, row: int, col: int) -> int:
        return row * self.size + col

    def rows(self) -> list[list[int]]:
        """Return the tiles split into rows, for rendering."""
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = self.cell_count - 1
        for i in range(last):
            if self.tiles[i] != i + 1:
                return False
        return self.tiles[last] == 0

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        val = self.tiles[index]
        if val == 0:
            return index == self.cell_count - 1
        return val == index + 1

    # -- mutation -------------------------------------------------------------

    def swap(self, a: int, b: int) -> None:
        self.tiles[a], self.tiles[b] = self.tiles[b], self.tiles[a]

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.tiles[:])
