# cronus_cash/game/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from .config import (
    PLAYER_RADIUS, PLAYER_START, GRAVITY, MOVE_SPEED, COYOTE_TIME
)


@dataclass
class Player:
    """
    Circle player, center-based coordinates.
    - vx is the wall-jump impulse only; directional input moves x directly.
    - vx is never decayed, it is zeroed by landings and wall/side pushes.
    """
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = PLAYER_RADIUS
    jump_count: int = 0
    coyote_timer: float = 0.0
    jump_buffer_timer: float = 0.0

    # contacts resolved for the current frame
    on_ground: bool = False
    on_wall: bool = False
    touching_left_wall: bool = False
    touching_right_wall: bool = False

    @classmethod
    def spawn(cls) -> "Player":
        x, y = PLAYER_START
        return cls(x=x, y=y)

    @property
    def pos(self) -> pygame.Vector2:
        return pygame.Vector2(self.x, self.y)

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    def update_physics(self, dt: float, input_axis: int):
        """Integrate input motion, carried impulse and gravity. No clamping here."""
        self.x += input_axis * MOVE_SPEED * dt
        self.x += self.vx * dt

        self.vy += GRAVITY * dt
        self.y += self.vy * dt

    def land(self, surface_y: float):
        """Rest on a surface whose top is surface_y."""
        self.y = surface_y - self.radius
        self.vy = 0.0
        self.vx = 0.0
        self.jump_count = 0
        self.on_ground = True
        self.coyote_timer = COYOTE_TIME
