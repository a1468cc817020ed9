"""Pygame GUI frontend — mouse-driven, self-contained.

Clicking a tile in the empty cell's row or column slides every tile in
between.  Hovering highlights the tiles a click would move, each shift
the engine reports is animated, and the completion message appears
after the final animation has had time to finish.
"""

from __future__ import annotations

import enum
import random

import pygame

from backend.engine.gameplay import PuzzleEngine, create_engine
from backend.engine.gamestate import GameClock
from backend.models.grid import EMPTY
from backend.models.shift import Shift

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
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout and timing
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 640
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN
SLIDE_MS = 150
COMPLETION_DELAY_MS = 1200


class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"


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


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    _PRESETS: tuple[int, ...] = (3, 4, 5, 6)

    def __init__(self, default_size: int, rng: random.Random | None = None) -> None:
        self._rng = rng
        self._sizes = sorted({*self._PRESETS, default_size})
        self._sel_size = default_size

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Sliding Tiles")
        self._frame_clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.MENU
        self._engine: PuzzleEngine | None = None
        self._clock = GameClock()
        self._hover: tuple[int, int] | None = None
        self._f_tile: pygame.font.Font | None = None
        # tile id -> (start tick, from cell, to cell)
        self._anims: dict[int, tuple[int, tuple[int, int], tuple[int, int]]] = {}
        self._solved_at: int | None = None

        self._build_menu_btns()
        self._build_game_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        bw, bh, gap = 64, 46, 8
        total_w = len(self._sizes) * bw + (len(self._sizes) - 1) * gap
        sx = _cx(total_w)

        self._size_btns: dict[int, _Btn] = {}
        for i, s in enumerate(self._sizes):
            self._size_btns[s] = _Btn(
                (sx + i * (bw + gap), 250, bw, bh), f"{s}×{s}", self._f_btn_sm
            )

        bw_lg = 220
        self._play_btn = _Btn(
            (_cx(bw_lg), 330, bw_lg, 50),
            "P L A Y",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw_lg), 394, bw_lg, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )
        self._menu_all = [*self._size_btns.values(), self._play_btn, self._quit_btn]

    def _build_game_btns(self) -> None:
        bw, gap = 130, 10
        sx = _cx(3 * bw + 2 * gap)
        self._shuffle_btn = _Btn(
            (sx, 0, bw, 36), "SHUFFLE (X)", self._f_btn_sm,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._reset_btn = _Btn(
            (sx + bw + gap, 0, bw, 36), "RESET (R)", self._f_btn_sm,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._menu_btn = _Btn(
            (sx + 2 * (bw + gap), 0, bw, 36), "MENU (Esc)", self._f_btn_sm,
        )
        self._game_btns = [self._shuffle_btn, self._reset_btn, self._menu_btn]

    # ── geometry ────────────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int, int]:
        """Return (tile_px, origin_x, origin_y, total_px) for the current board."""
        assert self._engine is not None
        sz = self._engine.size
        tile_px = (BOARD_MAX - (sz + 1) * TILE_GAP) // sz
        total = sz * tile_px + (sz + 1) * TILE_GAP
        return tile_px, _cx(total) + TILE_GAP, BOARD_TOP + TILE_GAP, total

    @staticmethod
    def _cell_origin(x: float, y: float, tpx: int, ox: int, oy: int) -> tuple[int, int]:
        return (round(ox + x * (tpx + TILE_GAP)), round(oy + y * (tpx + TILE_GAP)))

    def _cell_at(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        """Map a pixel position to the logical grid cell under it."""
        assert self._engine is not None
        tpx, ox, oy, _ = self._tile_layout()
        for y in range(self._engine.size):
            for x in range(self._engine.size):
                left, top = self._cell_origin(x, y, tpx, ox, oy)
                if pygame.Rect(left, top, tpx, tpx).collidepoint(pos):
                    return (x, y)
        return None

    # ── engine wiring ───────────────────────────────────────────────────────

    def _new_engine(self) -> None:
        self._engine = create_engine(self._sel_size, self._rng)
        self._engine.on_shift(self._on_shift)
        self._engine.on_solved(self._on_solved)
        self._clock.reset()
        self._anims.clear()
        self._solved_at = None
        self._hover = None
        tpx, _, _, _ = self._tile_layout()
        self._f_tile = pygame.font.SysFont("Helvetica", max(14, tpx // 3), bold=True)

    def _on_shift(self, shift: Shift) -> None:
        engine = self._engine
        assert engine is not None
        if engine.is_shuffling:
            return
        tile = engine.grid.at(shift.to_x, shift.to_y)
        self._anims[tile] = (pygame.time.get_ticks(), shift.source, shift.target)

    def _on_solved(self) -> None:
        self._clock.stop()
        self._solved_at = pygame.time.get_ticks()

    def _shuffle(self) -> None:
        assert self._engine is not None
        self._engine.shuffle()
        self._anims.clear()
        self._solved_at = None
        self._clock.start()

    def _reset(self) -> None:
        assert self._engine is not None
        self._engine.reset()
        self._anims.clear()
        self._solved_at = None
        self._clock.reset()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(
            self._surf, self._f_big.render("SLIDING  TILES", True, COL_TEXT), 80
        )
        _blit_center(
            self._surf, self._f_body.render("Select board size", True, COL_SUBTEXT), 210
        )
        for s, btn in self._size_btns.items():
            btn.bg = COL_GREEN if s == self._sel_size else COL_SURFACE0
            btn.fg = COL_BASE if s == self._sel_size else COL_TEXT
            btn.draw(self._surf)
        self._play_btn.draw(self._surf)
        self._quit_btn.draw(self._surf)

    def _tile_position(
        self, tile: int, x: int, y: int, now: int
    ) -> tuple[float, float]:
        anim = self._anims.get(tile)
        if anim is None:
            return (x, y)
        start, (fx, fy), (tx, ty) = anim
        t = (now - start) / SLIDE_MS
        if t >= 1:
            del self._anims[tile]
            return (x, y)
        return (fx + (tx - fx) * t, fy + (ty - fy) * t)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        engine = self._engine
        f_tile = self._f_tile
        assert engine is not None and f_tile is not None
        grid = engine.grid
        sz = engine.size
        tpx, ox, oy, total = self._tile_layout()
        now = pygame.time.get_ticks()

        _blit_center(
            self._surf,
            self._f_title.render(f"Sliding Tiles  {sz}×{sz}", True, COL_TEXT),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Moves: {engine.moves}    {self._clock.formatted()}", True, COL_PINK
            ),
            44,
        )

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(total), BOARD_TOP, total, total),
            border_radius=10,
        )

        highlight = set(engine.movable_cells(*self._hover)) if self._hover else set()
        for y in range(sz):
            for x in range(sz):
                tile = grid.at(x, y)
                if tile == EMPTY:
                    continue
                px, py = self._tile_position(tile, x, y, now)
                rect = pygame.Rect(*self._cell_origin(px, py, tpx, ox, oy), tpx, tpx)
                if (x, y) in highlight:
                    col = COL_YELLOW
                elif grid.is_tile_correct(x, y):
                    col = COL_GREEN
                else:
                    col = COL_BLUE
                pygame.draw.rect(self._surf, col, rect, border_radius=6)
                lbl = f_tile.render(str(tile), True, COL_BASE)
                self._surf.blit(
                    lbl,
                    (
                        rect.centerx - lbl.get_width() // 2,
                        rect.centery - lbl.get_height() // 2,
                    ),
                )

        btn_y = BOARD_TOP + total + 10
        for btn in self._game_btns:
            btn.rect.y = btn_y
            btn.draw(self._surf)

        if self._solved_at is not None and now - self._solved_at >= COMPLETION_DELAY_MS:
            self._draw_completion()

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tile to slide     X  shuffle     R  reset     Esc  menu",
                True,
                COL_OVERLAY0,
            ),
            btn_y + 48,
        )

    def _draw_completion(self) -> None:
        veil = pygame.Surface((WIN_W, 150), pygame.SRCALPHA)
        veil.fill((17, 17, 27, 220))
        top = BOARD_TOP + BOARD_MAX // 2 - 75
        self._surf.blit(veil, (0, top))
        _blit_center(
            self._surf,
            self._f_title.render("Congratulations! You've solved the puzzle!", True, COL_GREEN),
            top + 40,
        )
        _blit_center(
            self._surf,
            self._f_body.render("To play again, press shuffle.", True, COL_SUBTEXT),
            top + 84,
        )

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
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        engine = self._engine
        assert engine is not None
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._game_btns:
                btn.motion(ev.pos)
            self._hover = self._cell_at(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._shuffle_btn.hit(ev.pos):
                self._shuffle()
            elif self._reset_btn.hit(ev.pos):
                self._reset()
            elif self._menu_btn.hit(ev.pos):
                self._screen = _Screen.MENU
            else:
                cell = self._cell_at(ev.pos)
                if cell is not None:
                    engine.click_cell(*cell)
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_x:
                self._shuffle()
            elif ev.key == pygame.K_r:
                self._reset()
            elif ev.key == pygame.K_ESCAPE:
                self._screen = _Screen.MENU
        return True

    def _start_game(self) -> None:
        self._new_engine()
        self._screen = _Screen.PLAYING

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            _draw[self._screen]()
            pygame.display.flip()
            self._frame_clock.tick(60)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 4, rng: random.Random | None = None) -> None:
    """Launch the Pygame GUI (opens to the size menu)."""
    app = PygameApp(size, rng)
    app.run_loop()
