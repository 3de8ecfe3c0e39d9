"""PyQt6 GUI frontend — fully self-contained.

Includes the main menu, the sliding puzzle with its win screen, memory
match and tic-tac-toe.  No terminal interaction required.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import GamePlay
from backend.engine.memorymatch import FlipResult, MemoryMatch
from backend.engine.tictactoe import TicTacToe
from backend.models.board import Direction
from backend.models.cards import MATCH_SYMBOLS, SYMBOL_SETS
from backend.models.scoreboard import Mark

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_MAUVE = "#cba6f7"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_YELLOW_H = "#fcedcc"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_TICK_MS = 1000
_MISMATCH_MS = 1000


def _cell_css(bg: str, fg: str = _BASE, hover: str | None = None) -> str:
    css = (
        f"QPushButton{{background:{bg};color:{fg};"
        f"border:none;border-radius:8px;font-weight:bold;}}"
    )
    if hover:
        css += f"QPushButton:hover{{background:{hover};}}"
    return css


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    bold: bool = True,
    min_w: int = 0,
    min_h: int = 44,
    radius: int = 8,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


def _label(text: str, size: int, colour: str = _TEXT, bold: bool = False) -> QLabel:
    lbl = QLabel(text)
    lbl.setFont(QFont("Helvetica", size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    lbl.setStyleSheet(f"color:{colour};")
    lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return lbl


def _fmt(secs: int) -> str:
    m, s = divmod(int(secs), 60)
    return f"{m}:{s:02d}"


def _cell_grid(
    parent_layout: QVBoxLayout, cols: int, count: int, px: int, font_px: int, on_click
) -> list[QPushButton]:
    """Add a framed grid of square buttons; ``on_click(i)`` fires per cell."""
    frame = QFrame()
    frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
    grid = QGridLayout(frame)
    grid.setSpacing(6)
    grid.setContentsMargins(8, 8, 8, 8)
    parent_layout.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

    btns: list[QPushButton] = []
    for i in range(count):
        b = QPushButton()
        b.setFixedSize(px, px)
        b.setFont(QFont("Helvetica", font_px, QFont.Weight.Bold))
        b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        b.clicked.connect(lambda _, ii=i: on_click(ii))
        grid.addWidget(b, *divmod(i, cols))
        btns.append(b)
    return btns


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(QWidget):
    """Main menu with puzzle size selection and the three games."""

    def __init__(self, default_size: int = 3) -> None:
        super().__init__()
        self.setObjectName("page")
        self.selected_size = default_size

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        root.addWidget(_label("MIND  GAMES", 34, bold=True))
        root.addWidget(_label("Relax, focus, play", 15, _SUBTEXT))

        root.addSpacerItem(QSpacerItem(0, 20))
        root.addWidget(_label("Puzzle size", 12, _OVERLAY0))

        self._size_btns: dict[int, QPushButton] = {}
        for row_sizes in ([3, 4, 5, 6], [7, 8]):
            hbox = QHBoxLayout()
            hbox.setAlignment(Qt.AlignmentFlag.AlignCenter)
            hbox.setSpacing(10)
            for s in row_sizes:
                btn = _styled_btn(f"{s}×{s}", min_w=72, min_h=40, font_size=13)
                btn.clicked.connect(lambda _, sz=s: self._pick_size(sz))
                hbox.addWidget(btn)
                self._size_btns[s] = btn
            root.addLayout(hbox)

        root.addSpacerItem(QSpacerItem(0, 18))

        self.puzzle_btn = _styled_btn(
            "SLIDING PUZZLE", bg=_BLUE, hover=_LAVENDER, fg=_BASE,
            font_size=15, min_w=260, min_h=50,
        )
        self.memory_btn = _styled_btn(
            "MEMORY MATCH", bg=_MAUVE, hover=_PINK, fg=_BASE,
            font_size=15, min_w=260, min_h=50,
        )
        self.ttt_btn = _styled_btn(
            "TIC-TAC-TOE", bg=_YELLOW, hover=_YELLOW_H, fg=_BASE,
            font_size=15, min_w=260, min_h=50,
        )
        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=260, font_size=13
        )
        for btn in (self.puzzle_btn, self.memory_btn, self.ttt_btn, self.quit_btn):
            root.addWidget(btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._refresh_size_highlight()

    def _pick_size(self, s: int) -> None:
        self.selected_size = s
        self._refresh_size_highlight()

    def _refresh_size_highlight(self) -> None:
        for s, btn in self._size_btns.items():
            if s == self.selected_size:
                btn.setStyleSheet(
                    f"QPushButton {{ background:{_GREEN}; color:{_BASE};"
                    f" border:none; border-radius:8px; padding:6px 18px; font-weight:bold; }}"
                    f" QPushButton:hover {{ background:{_GREEN_H}; }}"
                )
            else:
                btn.setStyleSheet(
                    f"QPushButton {{ background:{_SURFACE0}; color:{_TEXT};"
                    f" border:none; border-radius:8px; padding:6px 18px; font-weight:bold; }}"
                    f" QPushButton:hover {{ background:{_SURFACE1}; }}"
                )


class _FooterMixin:
    """Adds the NEW GAME / MENU row shared by the game pages."""

    def _add_footer(self, root: QVBoxLayout, new_text: str = "NEW GAME") -> None:
        hbox = QHBoxLayout()
        hbox.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hbox.setSpacing(12)
        self.new_btn = _styled_btn(
            new_text, bg=_GREEN, hover=_GREEN_H, fg=_BASE, min_w=140, font_size=13
        )
        self.menu_btn = _styled_btn("MENU", min_w=140, font_size=13)
        hbox.addWidget(self.new_btn)
        hbox.addWidget(self.menu_btn)
        root.addLayout(hbox)


class _PuzzlePage(_FooterMixin, QWidget):
    """The sliding puzzle with clickable tiles and live stats."""

    def __init__(self, size: int) -> None:
        super().__init__()
        self.setObjectName("page")
        self._size = size
        self.game = GamePlay(size)

        tile_px = max(40, min(96, 400 // size))

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(16, 10, 16, 10)

        root.addWidget(_label(f"Sliding Puzzle  {size}×{size}", 17, bold=True))
        self._stats = _label("", 13, _PINK)
        root.addWidget(self._stats)

        self._btns = _cell_grid(
            root, size, size * size, tile_px, max(12, tile_px // 4), self.click
        )

        self._hint = _label(
            "Click tiles adjacent to the empty space to slide them", 11, _OVERLAY0
        )
        root.addWidget(self._hint)
        self._add_footer(root)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(_TICK_MS)

        self._sync()

    # -- helpers --

    def _sync(self) -> None:
        board = self.game.state.board
        movable = set(self.game.movable_indices())
        for i, b in enumerate(self._btns):
            v = board.tiles[i]
            if v == 0:
                b.setText("")
                b.setStyleSheet(_cell_css(_MANTLE))
            elif board.is_tile_correct(i):
                b.setText(str(v))
                b.setStyleSheet(_cell_css(_GREEN, hover=_GREEN_H))
            elif i in movable:
                b.setText(str(v))
                b.setStyleSheet(_cell_css(_BLUE, hover=_BLUE_H))
            else:
                b.setText(str(v))
                b.setStyleSheet(_cell_css(_SURFACE1, fg=_SUBTEXT))
        self._hint.setVisible(not self.game.state.is_playing and not self.won)
        self._refresh_stats()

    def _refresh_stats(self) -> None:
        self._stats.setText(
            f"Moves: {self.game.state.moves}    Time: {_fmt(self.game.state.elapsed_time)}"
        )

    def _tick(self) -> None:
        self.game.tick()
        self._refresh_stats()

    @property
    def won(self) -> bool:
        return self.game.is_won

    def click(self, index: int) -> None:
        if self.game.apply_move(index):
            self._sync()

    def move(self, d: Direction) -> None:
        if self.game.move(d):
            self._sync()

    def restart(self) -> None:
        self.game.reset()
        self._sync()


class _WinPage(QWidget):
    """Victory screen with stats and navigation buttons."""

    def __init__(self, size: int, moves: int, time_s: int) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(10)
        root.setContentsMargins(30, 30, 30, 30)

        root.addWidget(_label("★  S O L V E D  ★", 32, _GREEN, bold=True))
        root.addSpacerItem(QSpacerItem(0, 20))

        for txt, col in [
            (f"Grid:   {size}×{size}", _SUBTEXT),
            (f"Moves:  {moves}", _YELLOW),
            (f"Time:   {_fmt(time_s)}", _YELLOW),
        ]:
            root.addWidget(_label(txt, 20, col, bold=True))

        root.addSpacerItem(QSpacerItem(0, 24))

        self.again_btn = _styled_btn(
            "PLAY AGAIN", bg=_GREEN, hover=_GREEN_H, fg=_BASE,
            font_size=16, min_w=240, min_h=50,
        )
        root.addWidget(self.again_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 6))

        self.menu_btn = _styled_btn("M E N U", min_w=240, font_size=13)
        root.addWidget(self.menu_btn, alignment=Qt.AlignmentFlag.AlignCenter)


class _MemoryPage(_FooterMixin, QWidget):
    """Memory match: a 4-wide grid of face-down cards."""

    def __init__(self, symbols: tuple[str, ...] = MATCH_SYMBOLS) -> None:
        super().__init__()
        self.setObjectName("page")
        self.match = MemoryMatch(symbols)

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(16, 10, 16, 10)

        root.addWidget(_label("Memory Match", 17, _MAUVE, bold=True))
        self._stats = _label("", 13, _PINK)
        root.addWidget(self._stats)

        self._btns = _cell_grid(root, 4, len(self.match.cards), 84, 26, self.click)

        self._status = _label("", 14, _GREEN, bold=True)
        root.addWidget(self._status)
        self._add_footer(root)
        self.new_btn.clicked.connect(self.restart)

        self._settle_timer = QTimer(self)
        self._settle_timer.setSingleShot(True)
        self._settle_timer.timeout.connect(self._settle)

        self._sync()

    def _sync(self) -> None:
        match = self.match
        for i, b in enumerate(self._btns):
            if i in match.matched:
                b.setText(match.cards[i].symbol)
                b.setStyleSheet(_cell_css(_GREEN))
            elif i in match.face_up:
                b.setText(match.cards[i].symbol)
                b.setStyleSheet(_cell_css(_LAVENDER))
            else:
                b.setText("?")
                b.setStyleSheet(_cell_css(_MAUVE, hover=_PINK))
        self._stats.setText(
            f"Moves: {match.moves}    Pairs: {match.pairs_found}/{len(match.symbols)}"
        )
        if match.won:
            self._status.setText(f"★ All pairs found in {match.moves} moves ★")
        elif match.pending_mismatch:
            self._status.setText("Not a pair, take another look...")
        else:
            self._status.setText("")

    def click(self, index: int) -> None:
        result = self.match.flip(index)
        if result is FlipResult.MISMATCH:
            self._settle_timer.start(_MISMATCH_MS)
        if result is not FlipResult.IGNORED:
            self._sync()

    def _settle(self) -> None:
        self.match.settle()
        self._sync()

    def restart(self) -> None:
        self._settle_timer.stop()
        self.match.reset()
        self._sync()


class _TicTacToePage(_FooterMixin, QWidget):
    """Two-player tic-tac-toe with a running scoreboard."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")
        self.ttt = TicTacToe()

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(16, 10, 16, 10)

        root.addWidget(_label("Tic-Tac-Toe", 17, _YELLOW, bold=True))
        self._scores = _label("", 13, _PINK)
        root.addWidget(self._scores)

        self._btns = _cell_grid(root, 3, 9, 110, 40, self.click)

        self._status = _label("", 16, bold=True)
        root.addWidget(self._status)

        self.clear_btn = _styled_btn("CLEAR SCORES", fg=_SUBTEXT, min_w=160, font_size=12)
        self.clear_btn.clicked.connect(self.clear_scores)
        root.addWidget(self.clear_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._add_footer(root, "NEW ROUND")
        self.new_btn.clicked.connect(self.restart)

        self._sync()

    def _sync(self) -> None:
        ttt = self.ttt
        line = ttt.winning_line
        for i, b in enumerate(self._btns):
            mark = ttt.cells[i]
            b.setText("" if mark is None else str(mark))
            if i in line:
                b.setStyleSheet(_cell_css(_SURFACE1, fg=_GREEN))
            elif mark is None and not ttt.is_over:
                b.setStyleSheet(_cell_css(_SURFACE0, hover=_SURFACE1))
            else:
                b.setStyleSheet(_cell_css(_SURFACE0, fg=_BLUE if mark == "X" else _PINK))

        s = ttt.scores
        self._scores.setText(
            f"X: {s.wins(Mark.X)}    O: {s.wins(Mark.O)}    "
            f"Draws: {s.draws}    Rounds: {s.rounds}"
        )

        outcome = ttt.outcome
        if outcome is None:
            self._status.setText(f"{ttt.turn} to move")
            self._status.setStyleSheet(f"color:{_TEXT};")
        elif outcome.is_draw:
            self._status.setText("It's a draw!")
            self._status.setStyleSheet(f"color:{_YELLOW};")
        else:
            self._status.setText(f"{outcome.winner} wins!")
            self._status.setStyleSheet(f"color:{_GREEN};")

    def click(self, index: int) -> None:
        if self.ttt.play(index):
            self._sync()

    def restart(self) -> None:
        self.ttt.reset()
        self._sync()

    def clear_scores(self) -> None:
        self.ttt.scores.clear()
        self._sync()


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_MENU = 0
_IDX_PUZZLE = 1
_IDX_WIN = 2
_IDX_MEMORY = 3
_IDX_TTT = 4


class _MainWindow(QMainWindow):
    def __init__(self, default_size: int, symbols: str = "match") -> None:
        super().__init__()

        self.setWindowTitle("Mind Games")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(500, 640)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._menu = _MenuPage(default_size)
        self._menu.puzzle_btn.clicked.connect(self._on_puzzle)
        self._menu.memory_btn.clicked.connect(self._on_memory)
        self._menu.ttt_btn.clicked.connect(self._on_ttt)
        self._menu.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._menu)  # 0

        # placeholders (replaced dynamically)
        self._puzzle_page: _PuzzlePage | None = None
        self._stack.addWidget(QWidget())  # 1
        self._stack.addWidget(QWidget())  # 2

        self._memory_page = _MemoryPage(SYMBOL_SETS[symbols])
        self._memory_page.menu_btn.clicked.connect(self._show_menu)
        self._stack.addWidget(self._memory_page)  # 3

        # one tic-tac-toe page for the whole run so scores accumulate
        self._ttt_page = _TicTacToePage()
        self._ttt_page.menu_btn.clicked.connect(self._show_menu)
        self._stack.addWidget(self._ttt_page)  # 4

        self._stack.setCurrentIndex(_IDX_MENU)

        # periodic check for mouse-click wins
        self._poll_timer = QTimer(self)
        self._poll_timer.timeout.connect(self._poll_win)
        self._poll_timer.start(200)

    # -- navigation ---

    def _replace(self, idx: int, page: QWidget) -> None:
        old = self._stack.widget(idx)
        self._stack.removeWidget(old)
        old.deleteLater()
        self._stack.insertWidget(idx, page)
        self._stack.setCurrentIndex(idx)

    def _show_menu(self) -> None:
        self._stack.setCurrentIndex(_IDX_MENU)

    def _on_puzzle(self) -> None:
        page = _PuzzlePage(self._menu.selected_size)
        page.new_btn.clicked.connect(page.restart)
        page.menu_btn.clicked.connect(self._show_menu)
        self._puzzle_page = page
        self._replace(_IDX_PUZZLE, page)

    def _on_memory(self) -> None:
        self._memory_page.restart()
        self._stack.setCurrentIndex(_IDX_MEMORY)

    def _on_ttt(self) -> None:
        self._stack.setCurrentIndex(_IDX_TTT)

    def _show_win(self) -> None:
        pp = self._puzzle_page
        assert pp is not None
        state = pp.game.state
        page = _WinPage(pp.game.size, state.moves, state.elapsed_time)
        page.again_btn.clicked.connect(self._on_puzzle)
        page.menu_btn.clicked.connect(self._show_menu)
        self._replace(_IDX_WIN, page)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_MENU:
            if key in (Qt.Key.Key_Return, Qt.Key.Key_1):
                self._on_puzzle()
            elif key == Qt.Key.Key_2:
                self._on_memory()
            elif key == Qt.Key.Key_3:
                self._on_ttt()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_PUZZLE and self._puzzle_page is not None:
            pp = self._puzzle_page
            _dirs = {
                Qt.Key.Key_Up: Direction.UP,
                Qt.Key.Key_W: Direction.UP,
                Qt.Key.Key_Down: Direction.DOWN,
                Qt.Key.Key_S: Direction.DOWN,
                Qt.Key.Key_Left: Direction.LEFT,
                Qt.Key.Key_A: Direction.LEFT,
                Qt.Key.Key_Right: Direction.RIGHT,
                Qt.Key.Key_D: Direction.RIGHT,
            }
            if key in _dirs:
                pp.move(_dirs[key])
                self._poll_win()
            elif key == Qt.Key.Key_R:
                pp.restart()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        elif idx == _IDX_WIN:
            if key in (Qt.Key.Key_R, Qt.Key.Key_Return):
                self._on_puzzle()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        elif idx == _IDX_MEMORY:
            if key == Qt.Key.Key_R:
                self._memory_page.restart()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        elif idx == _IDX_TTT:
            if Qt.Key.Key_1.value <= key <= Qt.Key.Key_9.value:
                self._ttt_page.click(key - Qt.Key.Key_1.value)
            elif key == Qt.Key.Key_R:
                self._ttt_page.restart()
            elif key == Qt.Key.Key_C:
                self._ttt_page.clear_scores()
            elif key in (Qt.Key.Key_M, Qt.Key.Key_Escape):
                self._show_menu()

        else:
            super().keyPressEvent(event)

    # -- poll for win (mouse-based play) ---

    def _poll_win(self) -> None:
        pp = self._puzzle_page
        if (
            pp is not None
            and pp.won
            and self._stack.currentIndex() == _IDX_PUZZLE
        ):
            self._show_win()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 3, game: str | None = None, symbols: str = "match") -> None:
    """Launch the PyQt6 GUI, on the menu or straight into *game*."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(size, symbols)
    if game == "puzzle":
        window._on_puzzle()
    elif game == "memory":
        window._on_memory()
    elif game == "tictactoe":
        window._on_ttt()
    window.show()
    qapp.exec()
