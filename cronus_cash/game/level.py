# cronus_cash/game/level.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import pygame
from .config import PLATFORM_LAYOUT, WALL_THICKNESS


@dataclass
class Box:
    """Float rectangle (top-left + size). pygame.Rect truncates to ints, so the sim keeps its own."""
    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.w * 0.5, self.y + self.h * 0.5)

    def to_rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y), round(self.w), round(self.h))


def circle_rect_overlap(cx: float, cy: float, radius: float, box: Box) -> bool:
    """Circle ↔ rect via closest point. Touching counts as overlap."""
    nx = min(max(cx, box.left), box.right)
    ny = min(max(cy, box.top), box.bottom)
    dx = cx - nx
    dy = cy - ny
    return dx * dx + dy * dy <= radius * radius


def circles_overlap(a: pygame.Vector2, ra: float, b: pygame.Vector2, rb: float) -> bool:
    return a.distance_to(b) <= ra + rb


@dataclass
class MovingPlatform:
    """
    Rectangle oscillating on one axis between [min_axis, max_axis].
    The moving coordinate is the rect's x (horizontal) or y (vertical).
    """
    box: Box
    min_axis: float
    max_axis: float
    velocity: pygame.Vector2
    horizontal: bool = True
    # displacement produced by the last update (used to carry a standing player)
    last_dx: float = 0.0
    last_dy: float = 0.0

    @property
    def axis_value(self) -> float:
        return self.box.x if self.horizontal else self.box.y

    @property
    def axis_velocity(self) -> float:
        return self.velocity.x if self.horizontal else self.velocity.y

    def update(self, dt: float):
        """Advance along the axis; clamp to the bound and flip velocity sign there."""
        start_x, start_y = self.box.x, self.box.y
        if self.horizontal:
            self.box.x += self.velocity.x * dt
            if self.box.x < self.min_axis:
                self.box.x = self.min_axis
                self.velocity.x = -self.velocity.x
            elif self.box.x > self.max_axis:
                self.box.x = self.max_axis
                self.velocity.x = -self.velocity.x
        else:
            self.box.y += self.velocity.y * dt
            if self.box.y < self.min_axis:
                self.box.y = self.min_axis
                self.velocity.y = -self.velocity.y
            elif self.box.y > self.max_axis:
                self.box.y = self.max_axis
                self.velocity.y = -self.velocity.y
        self.last_dx = self.box.x - start_x
        self.last_dy = self.box.y - start_y


def build_platforms(layout=PLATFORM_LAYOUT) -> List[MovingPlatform]:
    """Fresh platforms from a layout table of (rect, min, max, velocity, horizontal)."""
    platforms: List[MovingPlatform] = []
    for (x, y, w, h), lo, hi, (vx, vy), horizontal in layout:
        platforms.append(MovingPlatform(
            box=Box(x, y, w, h),
            min_axis=lo,
            max_axis=hi,
            velocity=pygame.Vector2(vx, vy),
            horizontal=horizontal,
        ))
    return platforms


def walls_for(width: float, height: float, thickness: float = WALL_THICKNESS) -> Tuple[Box, Box]:
    """Left/right screen-edge walls for the current canvas. Sizes never go negative."""
    width = max(0.0, float(width))
    height = max(0.0, float(height))
    left = Box(0.0, 0.0, thickness, height)
    right = Box(max(0.0, width - thickness), 0.0, thickness, height)
    return left, right


def ground_line(height: float, radius: float) -> float:
    """y of the player's center when resting on the floor."""
    return max(radius, float(height) - radius)
