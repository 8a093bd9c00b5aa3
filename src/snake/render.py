# render.py
from typing import Optional, Sequence, Tuple
import logging
import os

import pygame # type: ignore

from .config import (
    CELL_SIZE, BG, FOOD, HEAD, BODY, TEXT,
    FONT_PATHS, HUD_FONT_SIZE, INFO_FONT_SIZE,
)
from .game import GameSession

logger = logging.getLogger(__name__)

# ---------- Fonts ----------
def load_font(size: int, paths: Sequence[str] = FONT_PATHS) -> pygame.font.Font:
    """First font file that exists and loads, else pygame's built-in font."""
    for path in paths:
        if not os.path.isfile(path):
            continue
        try:
            return pygame.font.Font(path, size)
        except (OSError, pygame.error) as exc:
            logger.warning("Failed to load font %s: %s", path, exc)
    return pygame.font.Font(None, size)

# ---------- Drawing ----------
def cell_rect(gx: int, gy: int) -> pygame.Rect:
    # 1 px gap between cells
    return pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE - 1, CELL_SIZE - 1)

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy))

def draw_board(screen: pygame.Surface, session: GameSession) -> None:
    screen.fill(BG)
    if session.food is not None:
        draw_cell(screen, session.food[0], session.food[1], FOOD)
    for i, (x, y) in enumerate(session.snake):
        draw_cell(screen, x, y, HEAD if i == 0 else BODY)

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    txt = font.render(f"Score: {session.score}  High: {session.highscore}", True, TEXT)
    screen.blit(txt, (6, 6))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font) -> None:
    info = font.render("Game Over! Press R to restart", True, TEXT)
    screen.blit(info, (8, screen.get_height() // 2 - 30))

def draw_frame(
    screen: pygame.Surface,
    session: GameSession,
    hud_font: Optional[pygame.font.Font] = None,
    info_font: Optional[pygame.font.Font] = None,
) -> None:
    """Everything for one frame; text is skipped when no font is given."""
    draw_board(screen, session)
    if hud_font is not None:
        draw_hud(screen, hud_font, session)
    if session.is_over and info_font is not None:
        draw_game_over(screen, info_font)

def load_fonts() -> Tuple[pygame.font.Font, pygame.font.Font]:
    return load_font(HUD_FONT_SIZE), load_font(INFO_FONT_SIZE)
