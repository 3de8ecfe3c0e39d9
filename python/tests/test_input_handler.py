"""Key decoding for the terminal frontends."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from frontend.cli.input_handler import cell_from_key, resolve, resolve_escape


def _reader(chars: str) -> Callable[[], str | None]:
    it = iter(chars)
    return lambda: next(it, None)


@pytest.mark.parametrize(
    "ch, action",
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("d", "right"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("r", "restart"),
        ("?", "help"),
        ("c", "clear"),
        (" ", "enter"),
        ("\r", "enter"),
        ("5", "5"),
        ("\x07", ""),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert resolve(ch) == action


@pytest.mark.parametrize(
    "pending, action",
    [
        ("[A", "up"),
        ("[B", "down"),
        ("[C", "right"),
        ("[D", "left"),
        ("[Z", ""),
        ("[", ""),
        ("", "quit"),
        ("x", "quit"),
    ],
)
def test_resolve_escape(pending: str, action: str) -> None:
    assert resolve_escape(_reader(pending)) == action


@pytest.mark.parametrize(
    "key, cells, expected",
    [
        ("1", 9, 0),
        ("9", 9, 8),
        ("0", 9, None),
        ("7", 6, None),
        ("up", 9, None),
        ("", 9, None),
    ],
)
def test_cell_from_key(key: str, cells: int, expected: int | None) -> None:
    assert cell_from_key(key, cells) == expected
