"""
Rendering helpers for Blockfall.

Everything here reads a ``Snapshot``; nothing writes back into the game.

- Pre-render block cell Surfaces per colour index (solid + translucent ghost).
- Pre-render static background (grid + panel frame) when the cell size changes.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all settled blocks; rebuild it only when the grid changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from blockfall_config import CONFIG, COLS, ROWS
from blockfall_game import Snapshot, Grid

# Next-piece box in preview cells; the widest shape (I, 4) gets a one-cell border
PREVIEW_COLS, PREVIEW_ROWS = 6, 5
MARGIN = 16
PANEL_MIN_W = 220

@dataclass(frozen=True)
class Dims:
    """Pixel geometry: board on the left, info panel on the right."""
    cell: int
    preview_cell: int
    board_x: int
    board_y: int
    board_w: int
    board_h: int
    panel_x: int
    panel_y: int
    panel_w: int
    total_w: int
    total_h: int

    @classmethod
    def for_cell(cls, cell: int) -> "Dims":
        preview_cell = max(14, int(cell * 0.75))
        board_w, board_h = COLS * cell, ROWS * cell
        panel_w = max(PANEL_MIN_W, PREVIEW_COLS * preview_cell + 24)
        panel_x = MARGIN + board_w + MARGIN
        return cls(
            cell=cell, preview_cell=preview_cell,
            board_x=MARGIN, board_y=MARGIN, board_w=board_w, board_h=board_h,
            panel_x=panel_x, panel_y=MARGIN, panel_w=panel_w,
            total_w=panel_x + panel_w + MARGIN, total_h=MARGIN + board_h + MARGIN,
        )

def compute_dims() -> Dims:
    return Dims.for_cell(int(CONFIG["CELL_SIZE"]))

# Colours per cell value (index 0 is empty)
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (58,166,162),
    2: (143,209,79),
    3: (255,170,51),
    4: (163,108,255),
    5: (255,216,74),
    6: (240,108,155),
    7: (59,130,246),
}

BG = (6,20,35)
GHOST_ALPHA = 90
FLASH_MS = 160

def lighten(col: Tuple[int,int,int], percent: int) -> Tuple[int,int,int]:
    amt = round(2.55 * percent)
    return tuple(min(255, max(0, c + amt)) for c in col)

@dataclass
class HudCache:
    score: int = -1
    high: int = -1
    level: int = -1
    interval: int = -1
    next_shape: Optional[Grid] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    interval_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self.cell_surf = self._make_cells(dims.cell)
        self.preview_surf = self._make_cells(dims.preview_cell)
        self.ghost_surf = self._make_ghosts()
        self.hud = HudCache()
        # Board surface cache (only settled blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_grid: Optional[Grid] = None
        self.flash_ms = 0

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,20,26))
        pygame.draw.rect(self.bg, BG, (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (22,40,58)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        # Panel frame
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (14,30,40), panel_rect)
        pygame.draw.rect(self.bg, (40,80,90), panel_rect, 1)
        # Next preview frame
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 170
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6,
                            d.preview_cell*PREVIEW_COLS+12, d.preview_cell*PREVIEW_ROWS+12)
        pygame.draw.rect(self.bg, (10,20,26), frame)
        pygame.draw.rect(self.bg, (40,80,90), frame, 1)

    # ---------- Small cell sprites ----------
    @staticmethod
    def _make_cells(c: int) -> Dict[int, pygame.Surface]:
        cells = {}
        for v, col in COLORS.items():
            s = pygame.Surface((c-2, c-2), pygame.SRCALPHA)
            pygame.draw.rect(s, col, (0,0,c-2,c-2), border_radius=4)
            pygame.draw.rect(s, lighten(col, 30), (0,0,c-2,(c-2)//2), border_top_left_radius=4,
                             border_top_right_radius=4)
            pygame.draw.rect(s, (0,0,0), (0,0,c-2,c-2), 1, border_radius=4)
            cells[v] = s
        return cells

    def _make_ghosts(self) -> Dict[int, pygame.Surface]:
        ghosts = {}
        for v, s in self.cell_surf.items():
            g = s.copy()
            g.set_alpha(GHOST_ALPHA)
            ghosts[v] = g
        return ghosts

    # ---------- Background blit ----------
    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid: Grid):
        """Rebuilds the "settled blocks" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(ROWS):
            for x in range(COLS):
                v = grid[y][x]
                if v:
                    self.board_surface.blit(self.cell_surf[v], (x*c + 1, y*c + 1))
        self._board_grid = grid

    def blit_board_surface(self, screen: pygame.Surface, grid: Grid):
        if grid != self._board_grid:
            self.rebuild_board_surface(grid)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))

    # ---------- Per-cell helpers for moving/ghost piece ----------
    def draw_cell(self, screen: pygame.Surface, v: int, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell_surf[v], (rx, ry))

    def draw_ghost_cell(self, screen: pygame.Surface, v: int, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.ghost_surf[v], (rx, ry))

    def draw_shape(self, screen: pygame.Surface, shape: Grid, x: int, y: int, ghost: bool = False):
        draw = self.draw_ghost_cell if ghost else self.draw_cell
        for r, row in enumerate(shape):
            for c, v in enumerate(row):
                if v and y + r >= 0:
                    draw(screen, v, x + c, y + r)

    # ---------- Line-clear flash ----------
    def start_flash(self):
        self.flash_ms = FLASH_MS

    def draw_flash(self, screen: pygame.Surface, dt: int):
        if self.flash_ms <= 0:
            return
        self.flash_ms -= dt
        d = self.dims
        s = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        s.fill((58,166,162,24))
        screen.blit(s, (d.board_x, d.board_y))

    # ---------- Whole frame ----------
    def draw_frame(self, screen: pygame.Surface, snap: Snapshot):
        self.redraw_static(screen)
        self.blit_board_surface(screen, snap.grid)
        if snap.shape is not None and snap.started:
            if snap.show_ghost and snap.ghost_y is not None:
                self.draw_shape(screen, snap.shape, snap.x, snap.ghost_y, ghost=True)
            self.draw_shape(screen, snap.shape, snap.x, snap.y)
        self.draw_panel_hud(screen, snap)

    # ---------- HUD / Panel ----------
    def _render_preview(self, shape: Grid) -> pygame.Surface:
        pc = self.dims.preview_cell
        s = pygame.Surface((pc*PREVIEW_COLS, pc*PREVIEW_ROWS), pygame.SRCALPHA)
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(self.preview_surf[v], ((x + 1)*pc + 1, (y + 1)*pc + 1))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        col = (200,225,230)
        if self.hud.title is None:
            self.hud.title = f.render("Blockfall", True, (143,209,79))
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, col)
        if snap.high_score != self.hud.high:
            self.hud.high = snap.high_score
            self.hud.high_s = f.render(f"High score: {snap.high_score}", True, col)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Speed: {snap.level}", True, col)
        if snap.interval != self.hud.interval:
            self.hud.interval = snap.interval
            self.hud.interval_s = f.render(f"Drop: {snap.interval} ms", True, (165,190,200))
        if snap.next_shape != self.hud.next_shape:
            self.hud.next_shape = snap.next_shape
            self.hud.next_label = self._render_preview(snap.next_shape)
        x = d.panel_x + 12
        screen.blit(self.hud.title, (x, d.panel_y + 12))
        screen.blit(self.hud.score_s, (x, d.panel_y + 44))
        screen.blit(self.hud.high_s, (x, d.panel_y + 68))
        screen.blit(self.hud.level_s, (x, d.panel_y + 92))
        screen.blit(self.hud.interval_s, (x, d.panel_y + 116))
        screen.blit(f.render("Next:", True, col), (x, d.panel_y + 146))
        screen.blit(self.hud.next_label, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, col),
                f.render("←/→ Move", True, (165,190,200)),
                f.render("↓ Soft drop", True, (165,190,200)),
                f.render("↑/Q Rotate", True, (165,190,200)),
                f.render("Space Hard drop", True, (165,190,200)),
                f.render("P Pause • R Restart", True, (165,190,200)),
                f.render("G Ghost • F1 Speed", True, (165,190,200)),
                f.render("M Menu", True, (165,190,200)),
            ]
        y = self.pv_y + d.preview_cell*PREVIEW_ROWS + 24
        for surf in self.hud.controls:
            screen.blit(surf, (x, y)); y += 20
