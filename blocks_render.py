
"""
Rendering for the falling-block game.

The renderer only reads engine snapshots. It never touches the engine.

- Cell sprites are pre-rendered per color and per size, then blitted.
- The static background (grid, panel frame, preview frame) is built once
  per Dims.
- HUD text surfaces are cached and re-rendered only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from blocks_engine import Mode, Snapshot
from blocks_geometry import COLORS, Shape, height, width
from blocks_layout import Dims

BG = (10, 13, 34)
GRID = (40, 50, 90)
TEXT = (200, 210, 240)
HINT = (165, 175, 215)


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    next_key: Optional[Tuple[str, str]] = None
    next_preview: Optional[pygame.Surface] = None
    banners: Dict[Mode, pygame.Surface] = field(default_factory=dict)
    controls: Optional[List[pygame.Surface]] = None


class Renderer:
    """Holds pre-rendered assets and draws a Snapshot onto a surface."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font,
                 rows: int, cols: int):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.rows, self.cols = rows, cols
        self._make_static()
        self.cell_surf = self._make_cells(dims.cell)
        self.preview_surf = self._make_cells(dims.preview_cell)
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(self.cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21, 25, 53), panel_rect)
        pygame.draw.rect(self.bg, (50, 60, 100), panel_rect, 1)
        pc = d.preview_cell
        frame = pygame.Rect(d.preview_x - 6, d.preview_y - 6, pc * 4 + 12, pc * 4 + 12)
        pygame.draw.rect(self.bg, (15, 18, 40), frame)
        pygame.draw.rect(self.bg, (55, 65, 110), frame, 1)

    # ---------- Cell sprites with a dark outline ----------
    @staticmethod
    def _make_cells(size: int) -> Dict[str, pygame.Surface]:
        cells = {}
        for name in COLORS:
            s = pygame.Surface((size - 1, size - 1))
            s.fill(pygame.Color(name))
            pygame.draw.rect(s, (0, 0, 0), s.get_rect(), 1)
            cells[name] = s
        return cells

    def cell_pos(self, bx: int, by: int) -> Tuple[int, int]:
        return self.dims.board_x + bx * self.dims.cell, self.dims.board_y + by * self.dims.cell

    def draw_cell(self, screen: pygame.Surface, color: str, bx: int, by: int):
        screen.blit(self.cell_surf[color], self.cell_pos(bx, by))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0, 0))
        for y, row in enumerate(snap.board):
            for x, color in enumerate(row):
                if color:
                    self.draw_cell(screen, color, x, y)
        if snap.active is not None and snap.mode is not Mode.GAME_OVER:
            for x, y in snap.active.cells():
                if y >= 0:
                    self.draw_cell(screen, snap.active.color, x, y)
        self.draw_panel_hud(screen, snap)
        self.draw_banner(screen, snap.mode)

    # ---------- Next preview ----------
    def render_preview(self, shape: Shape, color: str) -> pygame.Surface:
        pc = self.dims.preview_cell
        s = pygame.Surface((pc * 4, pc * 4), pygame.SRCALPHA)
        offx = (4 - width(shape)) // 2
        offy = (4 - height(shape)) // 2
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(self.preview_surf[color], ((x + offx) * pc, (y + offy) * pc))
        return s

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Blockfall", True, (197, 202, 233))
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        if self.hud.next_s is None:
            self.hud.next_s = f.render("Next:", True, TEXT)
        screen.blit(self.hud.next_s, (d.panel_x + 12, d.panel_y + 124))
        if snap.next is not None:
            key = (snap.next.t, snap.next.color)
            if key != self.hud.next_key:
                self.hud.next_key = key
                self.hud.next_preview = self.render_preview(snap.next.shape, snap.next.color)
            screen.blit(self.hud.next_preview, (d.preview_x, d.preview_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, HINT),
                f.render("↓ Soft drop", True, HINT),
                f.render("↑ Rotate", True, HINT),
                f.render("Space Hard drop", True, HINT),
                f.render("Enter Start", True, HINT),
                f.render("P Pause • R Restart", True, HINT),
            ]
        y = d.panel_y + 250
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_banner(self, screen: pygame.Surface, mode: Mode):
        text = {
            Mode.READY: "Press Enter to start",
            Mode.PAUSED: "PAUSED (P to resume)",
            Mode.GAME_OVER: "GAME OVER (R to restart)",
        }.get(mode)
        if text is None:
            return
        d = self.dims
        msg = self.hud.banners.get(mode)
        if msg is None:
            msg = self.hud.banners[mode] = self.big_font.render(text, True, (255, 230, 230))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)
