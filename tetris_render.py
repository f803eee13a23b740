"""
Rendering helpers for the Tetris project.

- Pre-render the static background (grid lines + panel frames) once per Dims.
- Cache one block Surface per color name and blit it.
- Every draw() clears and redraws the whole frame from the GameState it is
  given; the state is only read.
"""
from __future__ import annotations
import pygame
from typing import Dict
from tetris_config import GRID_WIDTH, GRID_HEIGHT
from tetris_layout import Dims
from tetris_overlay import GameOverOverlay
from tetris_piece import Piece
from tetris_state import GameState

BG = (10,13,34)
GRID_LINE = (40,50,90)
TEXT = (200,210,240)

class RenderAssets:
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.board_rect = pygame.Rect(dims.board_x, dims.board_y, dims.board_w, dims.board_h)
        self.preview_rect = pygame.Rect(dims.panel_x + 12, dims.panel_y + 140, dims.preview_w, dims.preview_h)
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.overlay = GameOverOverlay(font)
        self._make_static()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(GRID_WIDTH+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID_LINE, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(GRID_HEIGHT+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID_LINE, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        pygame.draw.rect(self.bg, (15,18,40), self.preview_rect)
        pygame.draw.rect(self.bg, (55,65,110), self.preview_rect, 1)

    # ---------- Block sprites ----------
    def block(self, color: str, size: int) -> pygame.Surface:
        key = f"{color}:{size}"
        s = self.cell_surf.get(key)
        if s is None:
            s = pygame.Surface((size-2, size-2))
            s.fill(pygame.Color(color))
            self.cell_surf[key] = s
        return s

    def draw_cell(self, screen: pygame.Surface, color: str, bx: int, by: int):
        c = self.dims.cell
        screen.blit(self.block(color, c), (self.dims.board_x + bx*c + 1, self.dims.board_y + by*c + 1))

    # ---------- Pieces ----------
    def draw_grid(self, screen: pygame.Surface, state: GameState):
        for y, row in enumerate(state.grid):
            for x, cell in enumerate(row):
                if cell.value:
                    self.draw_cell(screen, cell.color, x, y)

    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        for by, bx in piece.cells():
            if by >= 0:
                self.draw_cell(screen, piece.color, bx, by)

    def draw_preview(self, screen: pygame.Surface, piece: Piece):
        r = self.preview_rect
        pc = max(8, min(self.dims.cell, r.height // max(1, piece.height)))
        offx = r.x + (r.width - piece.width*pc) // 2
        offy = r.y + (r.height - piece.height*pc) // 2
        for y, row in enumerate(piece.shape):
            for x, v in enumerate(row):
                if v:
                    screen.blit(self.block(piece.color, pc), (offx + x*pc + 1, offy + y*pc + 1))

    # ---------- HUD ----------
    def draw_hud(self, screen: pygame.Surface, state: GameState, best: int):
        d = self.dims
        x = d.panel_x + 12
        for i, txt in enumerate((f"Score: {state.score}", f"Level: {state.level}", f"Best: {best}")):
            screen.blit(self.font.render(txt, True, TEXT), (x, d.panel_y + 12 + i*24))
        screen.blit(self.font.render("Next:", True, TEXT), (x, d.panel_y + 116))
        y = self.preview_rect.bottom + 24
        for txt in ("A/D Move", "S Soft drop", "W Rotate", "R Restart"):
            screen.blit(self.font.render(txt, True, (165,175,215)), (x, y)); y += 20

    def draw(self, screen: pygame.Surface, state: GameState, best: int):
        screen.blit(self.bg, (0,0))
        self.draw_grid(screen, state)
        self.draw_piece(screen, state.current_tetromino)
        self.draw_preview(screen, state.next_tetromino)
        self.draw_hud(screen, state, best)
        self.overlay.draw(screen, self.board_rect, state.game_over)
