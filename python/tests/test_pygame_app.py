"""Pygame frontend — puzzle sizes, size buttons and memory decks.

Runs headless through SDL's dummy video driver.
"""

from __future__ import annotations

import logging
import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from backend.models.cards import GARDEN_SYMBOLS, MATCH_SYMBOLS  # noqa: E402
from frontend.gui.pygame.app import WIN_H, WIN_W, PygameApp  # noqa: E402


@pytest.fixture
def make_app():
    def _make(size: int = 3, symbols: str = "match") -> PygameApp:
        return PygameApp(size, symbols)

    yield _make
    pygame.quit()


def _click(pos: tuple[int, int]) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


# -- puzzle sizes -------------------------------------------------------------


@pytest.mark.parametrize("size", range(3, 9))
def test_requested_size_opens_that_board(make_app, size: int) -> None:
    app = make_app(size)
    app._start_puzzle()
    assert app._puzzle is not None
    assert app._puzzle.size == size
    assert app._puzzle.state.board.cell_count == size * size
    app._draw_puzzle()


@pytest.mark.parametrize("requested, used", [(2, 3), (12, 8)])
def test_unavailable_size_is_clamped_with_warning(
    make_app, caplog: pytest.LogCaptureFixture, requested: int, used: int
) -> None:
    with caplog.at_level(logging.WARNING, logger="frontend.gui.pygame.app"):
        app = make_app(requested)
    assert app._sel_size == used
    assert "not offered" in caplog.text


def test_size_buttons_fit_the_window_without_overlap(make_app) -> None:
    app = make_app()
    rects = [btn.rect for btn in app._size_btns.values()]
    assert sorted(app._size_btns) == list(range(3, 9))
    window = pygame.Rect(0, 0, WIN_W, WIN_H)
    for i, rect in enumerate(rects):
        assert window.contains(rect)
        assert rect.collidelist(rects[i + 1:]) == -1
        assert not rect.colliderect(app._puzzle_btn.rect)


def test_clicking_largest_size_starts_an_8x8_board(make_app) -> None:
    app = make_app()
    app._ev_menu(_click(app._size_btns[8].rect.center))
    assert app._sel_size == 8
    app._ev_menu(_click(app._puzzle_btn.rect.center))
    assert app._puzzle is not None
    assert app._puzzle.size == 8


# -- memory decks -------------------------------------------------------------


@pytest.mark.parametrize(
    "symbols, deck", [("match", MATCH_SYMBOLS), ("garden", GARDEN_SYMBOLS)]
)
def test_memory_uses_chosen_symbol_set(make_app, symbols: str, deck: tuple[str, ...]) -> None:
    app = make_app(symbols=symbols)
    app._start_memory()
    assert app._memory is not None
    assert {card.symbol for card in app._memory.cards} == set(deck)
    app._draw_memory()


def test_screens_draw_pending_mismatch_and_rounds(make_app) -> None:
    app = make_app()
    app._start_memory()
    match = app._memory
    assert match is not None
    first = match.cards[0]
    other = next(c for c in match.cards if c.symbol != first.symbol)
    match.flip(first.id)
    match.flip(other.id)
    assert match.pending_mismatch
    app._draw_memory()

    for cell in (0, 3, 1, 4, 2):
        app._ttt.play(cell)
    app._ttt.reset()
    assert app._ttt.scores.rounds == 1
    app._draw_ttt()
