"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for the sliding puzzle, memory match and
tic-tac-toe.
"""

from __future__ import annotations

import sys
import time

from backend.engine.gameplay import GamePlay
from backend.engine.memorymatch import FlipResult, MemoryMatch
from backend.engine.tictactoe import TicTacToe
from backend.models.board import Board, Direction
from backend.models.cards import SYMBOL_SETS
from backend.models.scoreboard import Mark
from frontend.cli.input_handler import cell_from_key, get_key, get_key_timeout


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_M = "\033[35;1m"    # bold magenta
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected size / cursor)

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_MISMATCH_REVEAL = 1.0  # seconds a mismatched pair stays visible


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _format_time(seconds: int) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}"


def _stats_line(game: GamePlay) -> str:
    """Return the formatted Moves + Time string (no newline)."""
    return (
        f"  Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{_format_time(game.state.elapsed_time)}{_R}"
    )


def _move_cursor(cursor: int, key: str, width: int, cells: int) -> int:
    r, c = divmod(cursor, width)
    rows = cells // width
    if key == "up":
        r = (r - 1) % rows
    elif key == "down":
        r = (r + 1) % rows
    elif key == "left":
        c = (c - 1) % width
    elif key == "right":
        c = (c + 1) % width
    return r * width + c


class _Clock:
    """Calls ``tick`` once per wall-clock second."""

    def __init__(self) -> None:
        self._last = time.monotonic()

    def restart(self) -> None:
        self._last = time.monotonic()

    def advance(self, game: GamePlay) -> bool:
        now = time.monotonic()
        ticked = False
        while now - self._last >= 1.0:
            game.tick()
            self._last += 1.0
            ticked = True
        return ticked


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, movable: list[int]) -> str:
    """Return an ANSI-coloured text representation of the puzzle."""
    width = len(str(board.cell_count - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            i = board.index_of(r, c)
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(i):
                cells.append(f"{_G} {val:>{width}} {_R}")
            elif i in movable:
                cells.append(f"{_C} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _render_cards(match: MemoryMatch, cursor: int) -> str:
    lines: list[str] = []
    width = 4
    for r in range(len(match.cards) // width):
        cells: list[str] = []
        for c in range(width):
            i = r * width + c
            if i in match.matched:
                face = f"{_G} {match.cards[i].symbol} {_R}"
            elif i in match.face_up:
                face = f"{_M} {match.cards[i].symbol} {_R}"
            else:
                face = f"{_DIM} ▒▒ {_R}"
            if i == cursor:
                face = f"{_BG_SEL}[{_R}{face}{_BG_SEL}]{_R}"
            else:
                face = f" {face} "
            cells.append(face)
        lines.append("  " + "".join(cells))
        lines.append("")
    return "\n".join(lines)


def _render_ttt(ttt: TicTacToe, cursor: int) -> str:
    sep = "  +---+---+---+"
    lines = [sep]
    line = ttt.winning_line
    for r in range(3):
        cells: list[str] = []
        for c in range(3):
            i = r * 3 + c
            mark = ttt.cells[i]
            if mark is None:
                txt = f"{_DIM}{i + 1}{_R}"
            elif i in line:
                txt = f"{_G}{mark}{_R}"
            else:
                txt = f"{_C if mark == 'X' else _M}{mark}{_R}"
            if i == cursor and not ttt.is_over:
                txt = f"{_BG_SEL}{mark or i + 1}{_R}"
            cells.append(f" {txt} ")
        lines.append("  |" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- menu screen --------------------------------------------------------------


def _show_menu(sel_size: int) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}        M I N D   G A M E S          {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()

    sizes_str = ""
    for s in range(3, 9):
        if s == sel_size:
            sizes_str += f"  {_BG_SEL} {s}×{s} {_R}"
        else:
            sizes_str += f"  {_DIM}{s}×{s}{_R}"
    print(f"    Puzzle size:{sizes_str}")
    print(f"    {_DIM}← → to change{_R}")
    print()

    print(f"    {_C}1{_R}  Sliding Puzzle")
    print(f"    {_Y}2{_R}  Memory Match")
    print(f"    {_M}3{_R}  Tic-Tac-Toe")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


# -- sliding puzzle -----------------------------------------------------------


def _show_puzzle(game: GamePlay) -> None:
    """Draw the full puzzle screen.

    The stats line (Moves + Time) is printed last, with no trailing
    newline, so ``_update_time`` can cheaply overwrite it in-place
    using ``\\r\\033[K``.
    """
    _clear()
    size = game.size
    print(f"  {_C}=== Sliding Puzzle ({size}×{size}) ==={_R}")
    print()
    print(_render_board(game.state.board, game.movable_indices()))
    print()
    keys = f"{_C}WASD{_R}/{_C}Arrows{_R}: slide  |  "
    if size == 3:
        keys += f"{_C}1-9{_R}: pick cell  |  "
    print(f"  {keys}{_C}R{_R}: new game  |  {_C}Q{_R}: back")
    if not game.state.is_playing:
        print(f"  {_DIM}Slide tiles next to the empty space into it.{_R}")
    sys.stdout.write(f"\n{_stats_line(game)}")
    sys.stdout.flush()


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats (last) line in-place."""
    sys.stdout.write(f"\r\033[K{_stats_line(game)}")
    sys.stdout.flush()


def _show_puzzle_win(game: GamePlay) -> None:
    _clear()
    size = game.size
    print(f"  {_G}=== Sliding Puzzle ({size}×{size}) ==={_R}")
    print()
    print(_render_board(game.state.board, []))
    print()
    print(f"  {_G}★ Puzzle Solved! ★{_R}")
    print()
    print(
        f"  {_Y}{game.state.moves}{_R} moves in "
        f"{_Y}{_format_time(game.state.elapsed_time)}{_R}"
    )
    print(f"\n  Press {_C}R{_R} to play again, {_C}Q{_R} to go back.")


def _play_puzzle(size: int) -> None:
    game = GamePlay(size)
    clock = _Clock()

    while True:
        while not game.is_won:
            _show_puzzle(game)

            # Wait for input; tick the clock while waiting.
            while True:
                key = get_key_timeout(0.25)
                if key is not None:
                    break
                if clock.advance(game):
                    _update_time(game)
            clock.advance(game)

            was_playing = game.state.is_playing
            cell = cell_from_key(key) if size == 3 else None
            if key in _DIRECTIONS:
                game.move(_DIRECTIONS[key])
            elif cell is not None:
                game.apply_move(cell)
            elif key == "restart":
                game.reset()
            elif key == "quit":
                return
            if game.state.is_playing and not was_playing:
                clock.restart()

        _show_puzzle_win(game)
        while True:
            key = get_key()
            if key in ("restart", "enter"):
                game.reset()
                break
            if key == "quit":
                return


# -- memory match -------------------------------------------------------------


def _show_memory(match: MemoryMatch, cursor: int) -> None:
    _clear()
    print(f"  {_Y}=== Memory Match ==={_R}")
    print()
    print(_render_cards(match, cursor))
    print(
        f"  Moves: {_Y}{match.moves}{_R}  |  "
        f"Pairs: {_Y}{match.pairs_found}/{len(match.symbols)}{_R}"
    )
    if match.pending_mismatch:
        print(f"  {_DIM}Not a pair, take another look...{_R}")
    print()
    if match.won:
        print(f"  {_G}★ You found every pair in {match.moves} moves! ★{_R}")
        print(f"\n  Press {_C}R{_R} to play again, {_C}Q{_R} to go back.")
    else:
        print(
            f"  {_C}Arrows{_R}: choose  |  {_C}Space{_R}: flip  |  "
            f"{_C}R{_R}: new game  |  {_C}Q{_R}: back"
        )


def _play_memory(symbols: str = "match") -> None:
    match = MemoryMatch(SYMBOL_SETS[symbols])
    cursor = 0
    reveal_until: float | None = None
    dirty = True

    while True:
        if dirty:
            _show_memory(match, cursor)
            dirty = False

        key = get_key_timeout(0.25)
        if reveal_until is not None and time.monotonic() >= reveal_until:
            match.settle()
            reveal_until = None
            dirty = True
        if key is None:
            continue
        dirty = True

        if key in _DIRECTIONS and not match.won:
            cursor = _move_cursor(cursor, key, 4, len(match.cards))
        elif key == "enter" and not match.won:
            if match.flip(cursor) is FlipResult.MISMATCH:
                reveal_until = time.monotonic() + _MISMATCH_REVEAL
        elif key == "restart":
            match.reset()
            cursor = 0
            reveal_until = None
        elif key == "quit":
            return


# -- tic-tac-toe --------------------------------------------------------------


def _show_ttt(ttt: TicTacToe, cursor: int) -> None:
    _clear()
    print(f"  {_M}=== Tic-Tac-Toe ==={_R}")
    print()
    print(_render_ttt(ttt, cursor))
    print()
    outcome = ttt.outcome
    if outcome is None:
        print(f"  Turn: {_BOLD}{ttt.turn}{_R}")
    elif outcome.is_draw:
        print(f"  {_Y}It's a draw!{_R}")
    else:
        print(f"  {_G}{outcome.winner} wins!{_R}")
    scores = ttt.scores
    print(
        f"  X: {_C}{scores.wins(Mark.X)}{_R}  |  O: {_M}{scores.wins(Mark.O)}{_R}  |  "
        f"Draws: {_Y}{scores.draws}{_R}  |  Rounds: {scores.rounds}"
    )
    print()
    print(
        f"  {_C}1-9{_R}/{_C}Arrows+Space{_R}: place  |  {_C}R{_R}: new round  |  "
        f"{_C}C{_R}: clear scores  |  {_C}Q{_R}: back"
    )


def _play_ttt() -> None:
    ttt = TicTacToe()
    cursor = 4

    while True:
        _show_ttt(ttt, cursor)
        key = get_key()

        cell = cell_from_key(key)
        if cell is not None:
            ttt.play(cell)
            cursor = cell
        elif key in _DIRECTIONS:
            cursor = _move_cursor(cursor, key, 3, 9)
        elif key == "enter":
            if ttt.is_over:
                ttt.reset()
            else:
                ttt.play(cursor)
        elif key == "restart":
            ttt.reset()
        elif key == "clear":
            ttt.scores.clear()
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------

_GAMES = {
    "puzzle": lambda size, symbols: _play_puzzle(size),
    "memory": lambda size, symbols: _play_memory(symbols),
    "tictactoe": lambda size, symbols: _play_ttt(),
}


def _menu_loop(size: int, symbols: str) -> None:
    sel_size = size

    while True:
        _show_menu(sel_size)
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key == "left":
            sel_size = max(3, sel_size - 1)
        elif key == "right":
            sel_size = min(8, sel_size + 1)
        elif key in ("1", "enter"):
            _play_puzzle(sel_size)
        elif key == "2":
            _play_memory(symbols)
        elif key == "3":
            _play_ttt()


# -- public entry point -------------------------------------------------------


def run(size: int = 3, game: str | None = None, symbols: str = "match") -> None:
    """Launch the vanilla CLI, straight into *game* or via the menu."""
    if game is not None:
        _GAMES[game](size, symbols)
        return
    _menu_loop(size, symbols)
