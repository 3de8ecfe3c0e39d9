"""Pygame GUI frontend — fully self-contained.

Includes the main menu, the sliding puzzle with its win screen, memory
match and tic-tac-toe.  Everything is mouse driven; the puzzle also
accepts arrow keys.  No terminal interaction required.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

import pygame

from backend.engine.gameplay import GamePlay
from backend.engine.memorymatch import FlipResult, MemoryMatch
from backend.engine.tictactoe import TicTacToe
from backend.models.board import Direction
from backend.models.cards import SYMBOL_SETS
from backend.models.scoreboard import Mark

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_MAUVE = (203, 166, 247)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout and timing
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 640
TILE_GAP = 6
MARGIN = 20
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px
BOARD_TOP = 96

TICK_MS = 1000
MISMATCH_MS = 1000
EV_TICK = pygame.USEREVENT + 1
EV_SETTLE = pygame.USEREVENT + 2

_EMOJI_FONTS = "Segoe UI Emoji,Apple Color Emoji,Noto Color Emoji,Noto Emoji"


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    MENU = "menu"
    PUZZLE = "puzzle"
    WIN = "win"
    MEMORY = "memory"
    TICTACTOE = "tictactoe"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring and grid helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _blit_in(surf: pygame.Surface, rendered: pygame.Surface, rect: pygame.Rect) -> None:
    surf.blit(
        rendered,
        (
            rect.centerx - rendered.get_width() // 2,
            rect.centery - rendered.get_height() // 2,
        ),
    )


def _grid_rects(cols: int, rows: int, max_px: int = BOARD_MAX) -> list[pygame.Rect]:
    """Row-major cell rects for a centred grid starting at ``BOARD_TOP``."""
    cell = (max_px - (cols + 1) * TILE_GAP) // cols
    total_w = cols * cell + (cols + 1) * TILE_GAP
    ox = _cx(total_w) + TILE_GAP
    oy = BOARD_TOP + TILE_GAP
    return [
        pygame.Rect(ox + c * (cell + TILE_GAP), oy + r * (cell + TILE_GAP), cell, cell)
        for r in range(rows)
        for c in range(cols)
    ]


def _fmt(seconds: int) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}"


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    _SIZES = tuple(range(3, 9))
    _SIZES_PER_ROW = 4

    def __init__(self, default_size: int, symbols: str = "match") -> None:
        self._sel_size = min(max(default_size, self._SIZES[0]), self._SIZES[-1])
        if self._sel_size != default_size:
            logger.warning(
                "puzzle size %d is not offered, using %d", default_size, self._sel_size
            )
        self._symbols = SYMBOL_SETS[symbols]

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Mind Games")
        self._clock = pygame.time.Clock()
        pygame.time.set_timer(EV_TICK, TICK_MS)

        # Fonts
        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)
        self._f_mark = pygame.font.SysFont("Helvetica", 72, bold=True)
        self._f_emoji = pygame.font.SysFont(_EMOJI_FONTS, 40)

        self._screen = _Screen.MENU
        self._puzzle: GamePlay | None = None
        self._memory: MemoryMatch | None = None
        self._ttt = TicTacToe()

        self._build_menu_btns()
        self._build_game_btns()
        self._build_win_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        bw, bh, gap = 96, 40, 8
        per_row = self._SIZES_PER_ROW

        self._size_btns: dict[int, _Btn] = {}
        for i, s in enumerate(self._SIZES):
            row, col = divmod(i, per_row)
            in_row = min(per_row, len(self._SIZES) - row * per_row)
            sx = _cx(in_row * bw + (in_row - 1) * gap)
            self._size_btns[s] = _Btn(
                (sx + col * (bw + gap), 220 + row * (bh + gap), bw, bh),
                f"{s}×{s}",
                self._f_btn_sm,
            )

        bw_lg = 260
        self._puzzle_btn = _Btn(
            (_cx(bw_lg), 324, bw_lg, 50),
            "SLIDING PUZZLE",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._memory_btn = _Btn(
            (_cx(bw_lg), 386, bw_lg, 50),
            "MEMORY MATCH",
            self._f_btn,
            bg=COL_MAUVE,
            hover=COL_PINK,
            fg=COL_BASE,
        )
        self._ttt_btn = _Btn(
            (_cx(bw_lg), 448, bw_lg, 50),
            "TIC-TAC-TOE",
            self._f_btn,
            bg=COL_YELLOW,
            hover=(255, 240, 200),
            fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw_lg), 524, bw_lg, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )

        self._menu_all: list[_Btn] = [
            *self._size_btns.values(),
            self._puzzle_btn,
            self._memory_btn,
            self._ttt_btn,
            self._quit_btn,
        ]

    def _build_game_btns(self) -> None:
        """In-game action buttons along the bottom edge."""
        bw, gap, y = 140, 12, WIN_H - 64
        self._new_btn = _Btn(
            (_cx(2 * bw + gap), y, bw, 40), "NEW GAME (R)", self._f_btn_sm,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._menu_btn = _Btn(
            (_cx(2 * bw + gap) + bw + gap, y, bw, 40), "MENU (M)", self._f_btn_sm,
        )
        self._clear_btn = _Btn(
            (_cx(bw), y - 52, bw, 36), "CLEAR SCORES", self._f_btn_sm,
            bg=COL_SURFACE0, hover=COL_SURFACE1, fg=COL_SUBTEXT,
        )
        self._game_btns = [self._new_btn, self._menu_btn]

    def _build_win_btns(self) -> None:
        bw = 220
        self._win_again = _Btn(
            (_cx(bw), 420, bw, 50),
            "PLAY AGAIN",
            self._f_btn,
            bg=COL_GREEN,
            hover=(190, 240, 190),
            fg=COL_BASE,
        )
        self._win_menu = _Btn(
            (_cx(bw), 488, bw, 46), "M E N U", self._f_btn_sm
        )

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)

        _blit_center(
            self._surf,
            self._f_big.render("MIND  GAMES", True, COL_TEXT),
            80,
        )
        _blit_center(
            self._surf,
            self._f_body.render("Relax, focus, play", True, COL_SUBTEXT),
            132,
        )
        _blit_center(
            self._surf,
            self._f_small.render("Puzzle size", True, COL_OVERLAY0),
            196,
        )

        for s, btn in self._size_btns.items():
            btn.bg = COL_GREEN if s == self._sel_size else COL_SURFACE0
            btn.fg = COL_BASE if s == self._sel_size else COL_TEXT
            btn.draw(self._surf)

        self._puzzle_btn.draw(self._surf)
        self._memory_btn.draw(self._surf)
        self._ttt_btn.draw(self._surf)
        self._quit_btn.draw(self._surf)

    def _draw_header(self, title: str, stats: str, colour: tuple) -> None:
        _blit_center(self._surf, self._f_title.render(title, True, colour), 18)
        _blit_center(self._surf, self._f_body.render(stats, True, COL_PINK), 54)

    def _draw_puzzle(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._puzzle
        assert game is not None
        board = game.state.board
        sz = board.size
        rects = _grid_rects(sz, sz)
        f_tile = pygame.font.SysFont("Helvetica", max(14, rects[0].w // 3), bold=True)
        movable = set(game.movable_indices())

        self._draw_header(
            f"Sliding Puzzle  {sz}×{sz}",
            f"Moves: {game.state.moves}    Time: {_fmt(game.state.elapsed_time)}",
            COL_TEXT,
        )

        frame = rects[0].unionall(rects).inflate(2 * TILE_GAP, 2 * TILE_GAP)
        pygame.draw.rect(self._surf, COL_MANTLE, frame, border_radius=10)

        for i, rect in enumerate(rects):
            val = board.tiles[i]
            if val == 0:
                continue
            if board.is_tile_correct(i):
                col = COL_GREEN
            elif i in movable:
                col = COL_BLUE
            else:
                col = COL_SURFACE1
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            fg = COL_BASE if col != COL_SURFACE1 else COL_SUBTEXT
            _blit_in(self._surf, f_tile.render(str(val), True, fg), rect)

        if not game.state.is_playing:
            _blit_center(
                self._surf,
                self._f_small.render(
                    "Click tiles adjacent to the empty space to slide them",
                    True,
                    COL_OVERLAY0,
                ),
                frame.bottom + 14,
            )

        for btn in self._game_btns:
            btn.draw(self._surf)

    def _draw_win(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._puzzle
        assert game is not None

        _blit_center(
            self._surf,
            self._f_big.render("★  S O L V E D  ★", True, COL_GREEN),
            100,
        )

        info = [
            (f"Grid:   {game.size}×{game.size}", COL_SUBTEXT),
            (f"Moves:  {game.state.moves}", COL_YELLOW),
            (f"Time:   {_fmt(game.state.elapsed_time)}", COL_YELLOW),
        ]
        y = 200
        for txt, col in info:
            _blit_center(self._surf, self._f_title.render(txt, True, col), y)
            y += 44

        self._win_again.draw(self._surf)
        self._win_menu.draw(self._surf)

    def _draw_memory(self) -> None:
        self._surf.fill(COL_BASE)
        match = self._memory
        assert match is not None
        rects = _grid_rects(4, len(match.cards) // 4, max_px=BOARD_MAX - 40)

        self._draw_header(
            "Memory Match",
            f"Moves: {match.moves}    Pairs: {match.pairs_found}/{len(match.symbols)}",
            COL_MAUVE,
        )

        for i, rect in enumerate(rects):
            if i in match.matched:
                pygame.draw.rect(self._surf, COL_GREEN, rect, border_radius=8)
            elif i in match.face_up:
                pygame.draw.rect(self._surf, COL_LAVENDER, rect, border_radius=8)
            else:
                pygame.draw.rect(self._surf, COL_MAUVE, rect, border_radius=8)
                _blit_in(self._surf, self._f_title.render("?", True, COL_BASE), rect)
                continue
            glyph = self._f_emoji.render(match.cards[i].symbol, True, COL_BASE)
            _blit_in(self._surf, glyph, rect)

        if match.won:
            _blit_center(
                self._surf,
                self._f_title.render(
                    f"★ All pairs found in {match.moves} moves ★",
                    True,
                    COL_GREEN,
                ),
                rects[-1].bottom + 16,
            )
        elif match.pending_mismatch:
            _blit_center(
                self._surf,
                self._f_body.render("Not a pair, take another look...", True, COL_SUBTEXT),
                rects[-1].bottom + 16,
            )

        for btn in self._game_btns:
            btn.draw(self._surf)

    def _draw_ttt(self) -> None:
        self._surf.fill(COL_BASE)
        ttt = self._ttt
        rects = _grid_rects(3, 3, max_px=BOARD_MAX - 80)
        line = ttt.winning_line
        scores = ttt.scores

        self._draw_header(
            "Tic-Tac-Toe",
            f"X: {scores.wins(Mark.X)}    O: {scores.wins(Mark.O)}    "
            f"Draws: {scores.draws}    Rounds: {scores.rounds}",
            COL_YELLOW,
        )

        for i, rect in enumerate(rects):
            bg = COL_SURFACE1 if i in line else COL_SURFACE0
            pygame.draw.rect(self._surf, bg, rect, border_radius=8)
            mark = ttt.cells[i]
            if mark is None:
                continue
            if i in line:
                col = COL_GREEN
            else:
                col = COL_BLUE if mark == "X" else COL_PINK
            _blit_in(self._surf, self._f_mark.render(str(mark), True, col), rect)

        outcome = ttt.outcome
        if outcome is None:
            status, col = f"{ttt.turn} to move", COL_TEXT
        elif outcome.is_draw:
            status, col = "It's a draw!", COL_YELLOW
        else:
            status, col = f"{outcome.winner} wins!", COL_GREEN
        _blit_center(
            self._surf, self._f_title.render(status, True, col), rects[-1].bottom + 18
        )

        self._clear_btn.draw(self._surf)
        for btn in self._game_btns:
            btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for s, b in self._size_btns.items():
                if b.hit(ev.pos):
                    self._sel_size = s
                    return True
            if self._puzzle_btn.hit(ev.pos):
                self._start_puzzle()
            elif self._memory_btn.hit(ev.pos):
                self._start_memory()
            elif self._ttt_btn.hit(ev.pos):
                self._screen = _Screen.TICTACTOE
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_RETURN, pygame.K_1):
                self._start_puzzle()
            elif ev.key == pygame.K_2:
                self._start_memory()
            elif ev.key == pygame.K_3:
                self._screen = _Screen.TICTACTOE
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_common(
        self, ev: pygame.event.Event, restart: Callable[[], None]
    ) -> bool:
        """Shared button / key handling.  Returns True if consumed."""
        if ev.type == pygame.MOUSEMOTION:
            for btn in (*self._game_btns, self._clear_btn):
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._new_btn.hit(ev.pos):
                restart()
                return True
            if self._menu_btn.hit(ev.pos):
                self._screen = _Screen.MENU
                return True
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                restart()
                return True
            if ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
                return True
        return False

    def _ev_puzzle(self, ev: pygame.event.Event) -> bool:
        game = self._puzzle
        assert game is not None
        if ev.type == EV_TICK:
            game.tick()
        elif self._ev_common(ev, game.reset):
            return True
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            sz = game.size
            for i, rect in enumerate(_grid_rects(sz, sz)):
                if rect.collidepoint(ev.pos):
                    game.apply_move(i)
                    break
        elif ev.type == pygame.KEYDOWN:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key in _dirs:
                game.move(_dirs[ev.key])
        if game.is_won:
            self._screen = _Screen.WIN
        return True

    def _ev_win(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._win_again.motion(ev.pos)
            self._win_menu.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._win_again.hit(ev.pos):
                self._start_puzzle()
            elif self._win_menu.hit(ev.pos):
                self._screen = _Screen.MENU
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._start_puzzle()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    def _ev_memory(self, ev: pygame.event.Event) -> bool:
        match = self._memory
        assert match is not None
        if ev.type == EV_SETTLE:
            match.settle()
        elif self._ev_common(ev, self._restart_memory):
            return True
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            rects = _grid_rects(4, len(match.cards) // 4, max_px=BOARD_MAX - 40)
            for i, rect in enumerate(rects):
                if rect.collidepoint(ev.pos):
                    if match.flip(i) is FlipResult.MISMATCH:
                        pygame.time.set_timer(EV_SETTLE, MISMATCH_MS, loops=1)
                    break
        return True

    def _ev_ttt(self, ev: pygame.event.Event) -> bool:
        ttt = self._ttt
        if self._ev_common(ev, ttt.reset):
            return True
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._clear_btn.hit(ev.pos):
                ttt.scores.clear()
                return True
            for i, rect in enumerate(_grid_rects(3, 3, max_px=BOARD_MAX - 80)):
                if rect.collidepoint(ev.pos):
                    ttt.play(i)
                    break
        elif ev.type == pygame.KEYDOWN and pygame.K_1 <= ev.key <= pygame.K_9:
            ttt.play(ev.key - pygame.K_1)
        return True

    # ── game state ──────────────────────────────────────────────────────────

    def _start_puzzle(self) -> None:
        self._puzzle = GamePlay(self._sel_size)
        self._screen = _Screen.PUZZLE

    def _start_memory(self) -> None:
        self._memory = MemoryMatch(self._symbols)
        self._screen = _Screen.MEMORY

    def _restart_memory(self) -> None:
        pygame.time.set_timer(EV_SETTLE, 0)
        assert self._memory is not None
        self._memory.reset()

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PUZZLE: self._ev_puzzle,
            _Screen.WIN: self._ev_win,
            _Screen.MEMORY: self._ev_memory,
            _Screen.TICTACTOE: self._ev_ttt,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PUZZLE: self._draw_puzzle,
            _Screen.WIN: self._draw_win,
            _Screen.MEMORY: self._draw_memory,
            _Screen.TICTACTOE: self._draw_ttt,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            drawer = _draw.get(self._screen)
            if drawer:
                drawer()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 3, game: str | None = None, symbols: str = "match") -> None:
    """Launch the Pygame GUI, on the menu or straight into *game*."""
    app = PygameApp(size, symbols)
    if game == "puzzle":
        app._start_puzzle()
    elif game == "memory":
        app._start_memory()
    elif game == "tictactoe":
        app._screen = _Screen.TICTACTOE
    app.run_loop()
