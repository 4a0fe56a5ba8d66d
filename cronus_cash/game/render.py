# cronus_cash/game/render.py
from __future__ import annotations
from typing import Dict
import pygame
from .config import (
    COLOR_BG, COLOR_BG_GAME_OVER, COLOR_WALL, COLOR_PLAT, COLOR_PLAYER,
    COLOR_COIN, COLOR_ORB, COLOR_ORB_RING, COLOR_HUD, COLOR_TITLE, COLOR_SUBTLE,
)
from .world import FrameView, GameState

FONT_NAME = "jetbrainsmono"
FONT_SIZES = {"hud": 24, "title": 48, "score": 32, "hint": 20}


def load_fonts() -> Dict[str, pygame.font.Font]:
    if not pygame.font.get_init():
        pygame.font.init()
    return {k: pygame.font.SysFont(FONT_NAME, size) for k, size in FONT_SIZES.items()}


def _blit_centered(surf: pygame.Surface, font: pygame.font.Font, text: str, color, cy: int):
    img = font.render(text, True, color)
    surf.blit(img, (surf.get_width() // 2 - img.get_width() // 2, cy))


def draw_world(surf: pygame.Surface, view: FrameView, fonts: Dict[str, pygame.font.Font] | None = None):
    """Draw one frame. Without fonts only shapes are drawn (headless rgb renders)."""
    if view.state is GameState.GAME_OVER:
        surf.fill(COLOR_BG_GAME_OVER)
        if fonts:
            cy = surf.get_height() // 2
            _blit_centered(surf, fonts["title"], "GOOD JOB!", COLOR_TITLE, cy - 80)
            _blit_centered(surf, fonts["score"], f"Coins: {view.coins}", (250, 250, 250), cy - 20)
            _blit_centered(surf, fonts["hint"], "Press R to restart", COLOR_SUBTLE, cy + 40)
        return

    surf.fill(COLOR_BG)
    for wall in view.walls:
        pygame.draw.rect(surf, COLOR_WALL, wall.to_rect())
    for box in view.platforms:
        pygame.draw.rect(surf, COLOR_PLAT, box.to_rect())

    pygame.draw.circle(surf, COLOR_COIN, view.coin_pos, view.coin_radius)
    if view.orb_pos is not None:
        pygame.draw.circle(surf, COLOR_ORB, view.orb_pos, view.orb_radius)
        # glow ring
        pygame.draw.circle(surf, COLOR_ORB_RING, view.orb_pos, view.orb_radius + 4, width=1)

    pygame.draw.circle(surf, COLOR_PLAYER, view.player_pos, view.player_radius)

    if fonts:
        surf.blit(fonts["hud"].render(f"Coins: {view.coins}", True, COLOR_HUD), (16, 16))
        clock_img = fonts["hud"].render(view.clock_text, True, COLOR_HUD)
        surf.blit(clock_img, (surf.get_width() - clock_img.get_width() - 16, 16))
