"""Running tic-tac-toe scores, kept in memory for the session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Mark(StrEnum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def other(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X


@dataclass
class Scoreboard:
    """Counts wins per mark and draws across rounds."""

    x: int = 0
    o: int = 0
    draws: int = 0

    def record_win(self, mark: Mark) -> None:
        if mark is Mark.X:
            self.x += 1
        else:
            self.o += 1

    def record_draw(self) -> None:
        self.draws += 1

    def wins(self, mark: Mark) -> int:
        return self.x if mark is Mark.X else self.o

    @property
    def rounds(self) -> int:
        return self.x + self.o + self.draws

    def clear(self) -> None:
        self.x = self.o = self.draws = 0
