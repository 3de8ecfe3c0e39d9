"""Solvability checks for sliding puzzle boards."""

from __future__ import annotations

from backend.models.board import Board


class Solver:
    """Stateless solvability helpers — all methods are static."""

    @staticmethod
    def inversions(tiles: list[int]) -> int:
        """Count pairs ``(i, j)``, ``i < j``, both non-zero, with ``tiles[i] > tiles[j]``."""
        flat = [v for v in tiles if v != 0]
        count = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    count += 1
        return count

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state by legal slides.

        Odd widths need an even inversion count.  Even widths also count
        the blank's row from the bottom, since every vertical slide flips
        the inversion parity.
        """
        inversions = Solver.inversions(board.tiles)
        n = board.size
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = n - 1 - board.position(board.blank_index)[0]
        return (inversions + blank_row_from_bottom) % 2 == 0
