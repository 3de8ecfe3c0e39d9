"""Puzzle session state — phases and the elapsed-time counter."""

from __future__ import annotations

from backend.engine.gamestate.state import GameState, Phase
from backend.models.board import Board


def _state() -> GameState:
    return GameState(Board.from_flat(3, [1, 2, 3, 4, 5, 0, 7, 8, 6]))


def test_new_state_is_not_started() -> None:
    state = _state()
    assert state.phase is Phase.NOT_STARTED
    assert state.moves == 0
    assert state.elapsed_time == 0
    assert not state.is_playing
    assert not state.is_solved


def test_tick_is_ignored_before_start() -> None:
    state = _state()
    state.tick()
    assert state.elapsed_time == 0


def test_start_is_idempotent() -> None:
    state = _state()
    state.start()
    state.tick()
    state.start()
    assert state.phase is Phase.PLAYING
    assert state.elapsed_time == 1


def test_start_does_not_leave_solved() -> None:
    state = _state()
    state.start()
    state.finish()
    state.start()
    assert state.is_solved


def test_tick_stops_once_solved() -> None:
    state = _state()
    state.start()
    for _ in range(3):
        state.tick()
    state.finish()
    state.tick()
    assert state.elapsed_time == 3


def test_increment_moves() -> None:
    state = _state()
    state.increment_moves()
    state.increment_moves()
    assert state.moves == 2
