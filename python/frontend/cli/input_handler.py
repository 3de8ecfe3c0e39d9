"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, WASD, digits and special keys without requiring
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    "h": "help",
    "?": "help",
    "c": "clear",
    "C": "clear",
    " ": "enter",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def resolve_escape(read_next: Callable[[], str | None]) -> str:
    """Finish decoding a key that started with ESC.

    *read_next* returns the next pending character, or None when nothing
    follows (a bare Escape press).
    """
    ch2 = read_next()
    if ch2 != "[":
        return "quit"
    ch3 = read_next()
    if ch3 is None:
        return ""
    return _ARROW_MAP.get(ch3, "")


def cell_from_key(key: str, cells: int = 9) -> int | None:
    """Return the 0-based cell for a digit key ``"1"``..``"9"``, if any."""
    if len(key) == 1 and key.isdigit() and 1 <= int(key) <= min(cells, 9):
        return int(key) - 1
    return None


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "help"                         — h / ?
        "clear"                        — c (clear scores)
        "enter"                        — Enter / Return / Space
        "<char>"                       — unmapped printable char (digits)
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        return resolve_escape(_getch)

    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress with a timeout.

    Returns the normalised action string (same as ``get_key``) or
    ``None`` if no key was pressed within *timeout* seconds.

    Uses ``os.read`` (unbuffered) so that ``select`` accurately
    reflects pending bytes — required for multi-byte escape sequences
    (arrow keys).
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def _read_pending() -> str | None:
        ready, _, _ = select.select([fd], [], [], 0.1)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch == "\x1b":
            return resolve_escape(_read_pending)
        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
