"""Tracks the mutable state of a sliding puzzle session."""

from __future__ import annotations

from enum import StrEnum

from backend.models.board import Board


class Phase(StrEnum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    SOLVED = "solved"


class GameState:
    """Holds the current board, move counter, elapsed seconds and phase.

    Elapsed time is advanced by :meth:`tick`, which the frontend calls
    once per second.  It only counts while the session is ``PLAYING``.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.elapsed_time: int = 0
        self.phase: Phase = Phase.NOT_STARTED

    # -- time tracking --------------------------------------------------------

    def tick(self) -> None:
        if self.phase is Phase.PLAYING:
            self.elapsed_time += 1

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def start(self) -> None:
        if self.phase is Phase.NOT_STARTED:
            self.phase = Phase.PLAYING

    def finish(self) -> None:
        self.phase = Phase.SOLVED

    @property
    def is_playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def is_solved(self) -> bool:
        return self.phase is Phase.SOLVED
