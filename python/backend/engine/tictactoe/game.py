"""Two-player tic-tac-toe on a single device."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.models.scoreboard import Mark, Scoreboard

logger = logging.getLogger(__name__)

# Rows, columns, then diagonals.
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class Outcome:
    """Result of a finished round.  ``winner`` is None for a draw."""

    winner: Mark | None
    line: tuple[int, ...] = ()

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class TicTacToe:
    """One board plus a scoreboard that survives :meth:`reset`."""

    def __init__(self, scores: Scoreboard | None = None) -> None:
        self.scores = scores if scores is not None else Scoreboard()
        self.reset()

    @staticmethod
    def find_winner(cells: list[Mark | None]) -> Outcome | None:
        """Scan the win lines in order and return the first completed one."""
        for a, b, c in WIN_LINES:
            if cells[a] is not None and cells[a] == cells[b] == cells[c]:
                return Outcome(winner=cells[a], line=(a, b, c))
        return None

    def reset(self) -> None:
        self.cells: list[Mark | None] = [None] * 9
        self.turn: Mark = Mark.X
        self.outcome: Outcome | None = None

    def play(self, index: int) -> bool:
        """Place the current mark at *index*.  Returns True if accepted."""
        if self.outcome is not None or not 0 <= index < 9 or self.cells[index] is not None:
            return False

        self.cells[index] = self.turn
        outcome = self.find_winner(self.cells)
        if outcome is not None:
            self.outcome = outcome
            self.scores.record_win(self.turn)
            logger.debug("%s wins on line %s", self.turn, outcome.line)
        elif all(cell is not None for cell in self.cells):
            self.outcome = Outcome(winner=None)
            self.scores.record_draw()
            logger.debug("round drawn")
        else:
            self.turn = self.turn.other
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    @property
    def winning_line(self) -> tuple[int, ...]:
        return self.outcome.line if self.outcome is not None else ()
