# cronus_cash/game/spawn.py
from __future__ import annotations
import random
from typing import Iterable, List, Optional
import pygame
from .level import Box, circle_rect_overlap


def spawn_area(width: float, height: float, radius: float) -> Box:
    """Region of valid centers so a circle of `radius` stays inside width x height."""
    return Box(radius, radius, max(0.0, width - 2 * radius), max(0.0, height - 2 * radius))


def sample_spawn(
    rng: random.Random,
    radius: float,
    area: Box,
    obstacles: Iterable[Box],
    avoid: pygame.Vector2,
    min_distance: float,
    attempts: int,
) -> Optional[pygame.Vector2]:
    """
    Rejection sampling with a hard attempt budget.
    A draw is kept if its circle touches no obstacle and it lies at least
    `min_distance` from `avoid`. Returns None when the budget runs out.
    """
    blockers: List[Box] = list(obstacles)
    for _ in range(max(0, int(attempts))):
        p = pygame.Vector2(
            rng.uniform(area.left, area.right),
            rng.uniform(area.top, area.bottom),
        )
        if any(circle_rect_overlap(p.x, p.y, radius, ob) for ob in blockers):
            continue
        if p.distance_to(avoid) < min_distance:
            continue
        return p
    return None
