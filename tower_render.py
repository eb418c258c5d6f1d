"""
Rendering of a Session snapshot.

- Pre-render block cell Surfaces per kind (solid + translucent ghost) and blit them.
- Pre-render the static background (board well + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tower_layout import Dims
from tower_piece import COLS, ROWS, PieceKind, shape_of
from tower_session import Snapshot
from tower_input import TOUCH_BUTTONS

BG = (18,18,24)
GRID = (40,40,55)
EMPTY_CELL = (30,30,44)
GHOST_ALPHA = 96
TEXT = (255,255,255)

# Colors per kind, indexed like PieceKind
COLORS: Dict[PieceKind, Tuple[int,int,int]] = {
    PieceKind.I: (0,255,255),
    PieceKind.O: (255,255,0),
    PieceKind.T: (160,0,240),
    PieceKind.S: (0,200,0),
    PieceKind.Z: (220,0,0),
    PieceKind.J: (0,80,220),
    PieceKind.L: (255,140,0),
}

TOUCH_LABELS = {0: "Left", 1: "Right", 2: "Rotate", 3: "Drop"}

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_kind: Optional[PieceKind] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds pre-rendered assets and draws one snapshot per frame."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        pygame.draw.rect(self.bg, GRID, (d.board_x-2, d.board_y-2, d.board_w+4, d.board_h+4))
        for y in range(ROWS):
            for x in range(COLS):
                pygame.draw.rect(self.bg, EMPTY_CELL, self.cell_rect(x, y))
        self.pv_cell = max(10, int(d.cell*0.7))
        self.pv_x = d.panel_x + 8
        self.pv_y = d.panel_y + 28
        if d.touch_h:
            self._make_touch_strip()

    def _make_touch_strip(self):
        d = self.dims
        y = d.total_h - d.touch_h
        btn_w = d.total_w // len(TOUCH_BUTTONS)
        fill = pygame.Surface((btn_w-2, d.touch_h-2), pygame.SRCALPHA)
        fill.fill((255,255,255,20))
        for i in range(len(TOUCH_BUTTONS)):
            self.bg.blit(fill, (i*btn_w, y))
            lbl = self.font.render(TOUCH_LABELS[i], True, (255,255,255))
            self.bg.blit(lbl, lbl.get_rect(center=(i*btn_w + btn_w//2, y + d.touch_h//2)))

    def _make_cells(self):
        self.cell_surf: Dict[PieceKind, pygame.Surface] = {}
        self.ghost_surf: Dict[PieceKind, pygame.Surface] = {}
        c = self.dims.cell
        for k, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[k] = s
            g = pygame.Surface((c-2, c-2), pygame.SRCALPHA)
            g.fill((*col, GHOST_ALPHA))
            self.ghost_surf[k] = g

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x + bx*d.cell + 1, d.board_y + by*d.cell + 1, d.cell-2, d.cell-2)

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.board):
            for x, v in enumerate(row):
                if v:
                    screen.blit(self.cell_surf[PieceKind(v-1)], self.cell_rect(x, y))
        if snap.active_kind is not None:
            for x, y in snap.ghost_cells:
                if y >= 0: screen.blit(self.ghost_surf[snap.active_kind], self.cell_rect(x, y))
            for x, y in snap.active_cells:
                if 0 <= y < ROWS and 0 <= x < COLS:
                    screen.blit(self.cell_surf[snap.active_kind], self.cell_rect(x, y))
        self.draw_panel_hud(screen, snap)
        if snap.game_over:
            self.draw_game_over(screen)

    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.next_kind != self.hud.next_kind:
            self.hud.next_kind = snap.next_kind
            s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
            block = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
            block.fill(COLORS[snap.next_kind])
            for x, y in shape_of(snap.next_kind, 0):
                s.blit(block, (x*self.pv_cell + 1, y*self.pv_cell + 1))
            self.hud.next_s = s
        screen.blit(f.render("Next", True, TEXT), (d.panel_x, d.panel_y))
        screen.blit(self.hud.next_s, (self.pv_x, self.pv_y))
        y = self.pv_y + self.pv_cell*4 + 16
        for surf in (self.hud.score_s, self.hud.lines_s, self.hud.level_s):
            screen.blit(surf, (d.panel_x, y)); y += 20
        if not d.touch_h:
            y += 10
            for line in ("Controls:", "←/→ Move", "↓ Soft Drop", "Z/X or ↑ Rotate", "Space Hard Drop"):
                screen.blit(f.render(line, True, TEXT), (d.panel_x, y)); y += 16

    def draw_game_over(self, screen: pygame.Surface):
        w, h = screen.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill((0,0,0,160))
        screen.blit(shade, (0,0))
        msg = self.font.render("Game Over", True, TEXT)
        hint = self.font.render("Tap or Space/Enter to restart", True, TEXT)
        screen.blit(msg, msg.get_rect(center=(w//2, h//2 - 10)))
        screen.blit(hint, hint.get_rect(center=(w//2, h//2 + 12)))
