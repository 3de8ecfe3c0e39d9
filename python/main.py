#!/usr/bin/env python3
"""Mind Games — sliding puzzle, memory match and tic-tac-toe.

Usage::

    python main.py                      # interactive menu
    python main.py -f rich -g puzzle    # Rich terminal, straight to the puzzle
    python main.py -f pygame -s 4       # Pygame GUI, 4×4 puzzle preselected
    python main.py --log-level DEBUG    # trace engine decisions
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logger = logging.getLogger("mindgames")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


class Game(StrEnum):
    puzzle = "puzzle"
    memory = "memory"
    tictactoe = "tictactoe"


class SymbolSet(StrEnum):
    match = "match"
    garden = "garden"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def configure_logging(level: LogLevel) -> None:
    """Route all log records through a single Rich handler on stderr."""
    logging.basicConfig(
        level=level.value,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


def _launch(
    frontend: Frontend, size: int, game: Optional[Game], symbols: SymbolSet
) -> None:
    logger.debug(
        "launching %s frontend (game=%s, size=%d, symbols=%s)",
        frontend, game, size, symbols,
    )
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, game=game.value if game else None, symbols=symbols.value)


def _menu_loop(size: int, symbols: SymbolSet) -> None:
    while True:
        print()
        print("  ====================================")
        print("          M I N D   G A M E S         ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Take care!\n")
            return

        frontend = {
            "1": Frontend.vanilla,
            "2": Frontend.rich,
            "3": Frontend.pygame,
            "4": Frontend.pyqt,
        }.get(choice)
        if frontend is None:
            print("  Unknown option.")
            continue
        _launch(frontend, size, None, symbols)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        envvar="MIND_GAMES_FRONTEND",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    game: Optional[Game] = typer.Option(
        None, "-g", "--game",
        help="Game to open directly. Omit for the frontend's menu.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=3, max=8,
        envvar="MIND_GAMES_PUZZLE_SIZE",
        help="Sliding puzzle grid size (3-8).",
    ),
    symbols: SymbolSet = typer.Option(
        SymbolSet.match, "--symbols",
        envvar="MIND_GAMES_SYMBOLS",
        help="Card symbols for memory match.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        envvar="MIND_GAMES_LOG_LEVEL",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Mind Games — small relaxing games for a calmer mind."""
    configure_logging(log_level)

    if frontend is None:
        if game is not None:
            frontend = Frontend.vanilla
        else:
            _menu_loop(size, symbols)
            return

    _launch(frontend, size, game, symbols)


if __name__ == "__main__":
    app()
