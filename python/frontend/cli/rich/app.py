"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.  Includes a built-in
menu for the sliding puzzle, memory match and tic-tac-toe.
"""

from __future__ import annotations

import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.memorymatch import FlipResult, MemoryMatch
from backend.engine.tictactoe import TicTacToe
from backend.models.board import Board, Direction
from backend.models.cards import SYMBOL_SETS
from backend.models.scoreboard import Mark
from frontend.cli.input_handler import cell_from_key, get_key, get_key_timeout

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_MISMATCH_REVEAL = 1.0


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: int) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _move_cursor(cursor: int, key: str, width: int, cells: int) -> int:
    r, c = divmod(cursor, width)
    rows = cells // width
    dr, dc = {"up": (-1, 0), "down": (1, 0), "left": (0, -1), "right": (0, 1)}[key]
    return ((r + dr) % rows) * width + (c + dc) % width


def _controls(*pairs: tuple[str, str]) -> Text:
    text = Text()
    for key, label in pairs:
        text.append(f"  {key}", style="bold cyan")
        text.append(f"  {label} ", style="dim")
    return text


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, movable: list[int]) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.cell_count - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            i = board.index_of(r, c)
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(i):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            elif i in movable:
                cells.append(f"[bold magenta]{val:>{width}}[/bold magenta]")
            else:
                cells.append(f"[white]{val:>{width}}[/white]")
        table.add_row(*cells)

    return table


def _render_cards(match: MemoryMatch, cursor: int) -> Table:
    table = Table(
        show_header=False,
        box=rich.box.ROUNDED,
        border_style="magenta",
        padding=(0, 1),
    )
    width = 4
    for _ in range(width):
        table.add_column(width=4, justify="center")

    for r in range(len(match.cards) // width):
        cells: list[Text] = []
        for c in range(width):
            i = r * width + c
            if match.is_visible(i):
                face = Text(match.cards[i].symbol)
                face.stylize("on #1e3a2f" if i in match.matched else "on #3b2a4a")
            else:
                face = Text("▒▒", style="dim")
            if i == cursor and not match.won:
                face.stylize("reverse")
            cells.append(face)
        table.add_row(*cells)
    return table


def _render_ttt(ttt: TicTacToe, cursor: int) -> Table:
    table = Table(
        show_header=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
        show_lines=True,
    )
    for _ in range(3):
        table.add_column(width=1, justify="center")

    line = ttt.winning_line
    for r in range(3):
        cells: list[Text] = []
        for c in range(3):
            i = r * 3 + c
            mark = ttt.cells[i]
            if mark is None:
                cell = Text(str(i + 1), style="dim")
            elif i in line:
                cell = Text(str(mark), style="bold green")
            else:
                cell = Text(str(mark), style="bold cyan" if mark == "X" else "bold magenta")
            if i == cursor and not ttt.is_over:
                cell.stylize("reverse")
            cells.append(cell)
        table.add_row(*cells)
    return table


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    """Draw the main menu."""
    console.clear()

    sizes = Text()
    for s in range(3, 9):
        if s > 3:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change puzzle size", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Sliding Puzzle    ")
    opts.append("2", style="bold yellow")
    opts.append("  Memory Match    ")
    opts.append("3", style="bold magenta")
    opts.append("  Tic-Tac-Toe    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]M I N D   G A M E S[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- sliding puzzle -----------------------------------------------------------


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


def _draw_puzzle(game: GamePlay) -> None:
    """Draw the puzzle screen with live stats."""
    console.clear()

    size = game.size
    pairs = [("↑↓←→/WASD", "slide")]
    if size == 3:
        pairs.append(("1-9", "pick cell"))
    pairs += [("R", "new game"), ("Q", "back")]

    panel = Panel(
        Align.center(_render_board(game.state.board, game.movable_indices())),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        subtitle="[dim]Arrange tiles in order[/dim]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if not game.state.is_playing:
        console.print(
            Align.center(
                Text("Slide tiles next to the empty space into it", style="dim")
            )
        )
    console.print(Align.center(_controls(*pairs)))
    # Save cursor position right before the stats line so _update_time()
    # can later restore to this exact spot and overwrite only this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats line using the saved cursor position.

    Uses raw ANSI codes (bypassing Rich) so only the single stats
    line is repainted — no flicker from a full redraw.
    """
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    clock = _format_time(game.state.elapsed_time)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{game.state.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{clock}{_RS}"
    )

    # Centre the visible text to match what Rich would produce.
    visible_len = len(f"Moves: {game.state.moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_puzzle_win(game: GamePlay) -> None:
    console.clear()

    size = game.size
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("Puzzle Solved!", style="bold green")
    congrats.append(" ★\n", style="bold yellow")

    summary = Text()
    summary.append(str(game.state.moves), style="bold yellow")
    summary.append(" moves in ", style="dim")
    summary.append(_format_time(game.state.elapsed_time), style="bold yellow")

    group = Group(
        Align.center(_render_board(game.state.board, [])),
        Align.center(congrats),
        Align.center(summary),
    )

    panel = Panel(
        group,
        title=f"[bold green]Sliding Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


def _play_puzzle(size: int) -> None:
    game = GamePlay(size)
    last_tick = time.monotonic()

    while True:
        while not game.is_won:
            _draw_puzzle(game)

            # Wait for input with a short timeout so the clock keeps ticking.
            while True:
                key = get_key_timeout(0.25)
                now = time.monotonic()
                if now - last_tick >= 1.0:
                    last_tick += 1.0
                    game.tick()
                    _update_time(game)
                if key is not None:
                    break

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
                last_tick = time.monotonic()

        _draw_puzzle_win(game)
        while True:
            key = get_key()
            if key in ("restart", "enter"):
                game.reset()
                break
            if key == "quit":
                return


# -- memory match -------------------------------------------------------------


def _draw_memory(match: MemoryMatch, cursor: int) -> None:
    console.clear()

    stats = Text()
    stats.append("Moves: ", style="dim")
    stats.append(str(match.moves), style="bold yellow")
    stats.append("    Pairs: ", style="dim")
    stats.append(f"{match.pairs_found}/{len(match.symbols)}", style="bold yellow")

    parts = [Align.center(_render_cards(match, cursor)), Text(""), Align.center(stats)]
    if match.pending_mismatch:
        parts.append(Align.center(Text("Not a pair, take another look...", style="dim")))
    if match.won:
        parts.append(
            Align.center(
                Text(f"\n★ You found every pair in {match.moves} moves! ★", style="bold green")
            )
        )

    panel = Panel(
        Group(*parts),
        title="[bold yellow]Memory Match[/bold yellow]",
        subtitle="[dim]Improve your memory and focus[/dim]",
        border_style="yellow",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(
            _controls(("↑↓←→", "choose"), ("Space", "flip"), ("R", "new game"), ("Q", "back"))
        )
    )


def _play_memory(symbols: str = "match") -> None:
    match = MemoryMatch(SYMBOL_SETS[symbols])
    cursor = 0
    reveal_until: float | None = None
    dirty = True

    while True:
        if dirty:
            _draw_memory(match, cursor)
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


def _draw_ttt(ttt: TicTacToe, cursor: int) -> None:
    console.clear()

    status = Text()
    outcome = ttt.outcome
    if outcome is None:
        status.append("Turn: ", style="dim")
        status.append(str(ttt.turn), style="bold cyan" if ttt.turn == "X" else "bold magenta")
    elif outcome.is_draw:
        status.append("It's a draw!", style="bold yellow")
    else:
        status.append(f"{outcome.winner} wins!", style="bold green")

    scores = Table(box=rich.box.SIMPLE, show_edge=False, header_style="dim")
    scores.add_column("X", justify="center", style="bold cyan")
    scores.add_column("O", justify="center", style="bold magenta")
    scores.add_column("Draws", justify="center", style="bold yellow")
    scores.add_column("Rounds", justify="center", style="dim")
    scores.add_row(
        str(ttt.scores.wins(Mark.X)),
        str(ttt.scores.wins(Mark.O)),
        str(ttt.scores.draws),
        str(ttt.scores.rounds),
    )

    panel = Panel(
        Group(
            Align.center(_render_ttt(ttt, cursor)),
            Text(""),
            Align.center(status),
            Align.center(scores),
        ),
        title="[bold magenta]Tic-Tac-Toe[/bold magenta]",
        border_style="magenta",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(
            _controls(
                ("1-9", "place"),
                ("↑↓←→+Space", "place"),
                ("R", "new round"),
                ("C", "clear scores"),
                ("Q", "back"),
            )
        )
    )


def _play_ttt() -> None:
    ttt = TicTacToe()
    cursor = 4

    while True:
        _draw_ttt(ttt, cursor)
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
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nTake care!\n", style="bold cyan"))
            )
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
    """Launch the Rich CLI, straight into *game* or via the menu."""
    if game is not None:
        _GAMES[game](size, symbols)
        return
    _menu_loop(size, symbols)
