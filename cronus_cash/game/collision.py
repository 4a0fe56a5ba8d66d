# cronus_cash/game/collision.py
"""
Per-frame contact resolution for the player circle.

Call order inside a frame matters and is owned by the world:
  resolve_ground -> resolve_platforms -> detect_walls -> (jump)
  -> (pickups) -> correct_wall_penetration -> clamp_horizontal
"""
from __future__ import annotations
from typing import Iterable, Tuple
from .config import LANDING_TOLERANCE
from .level import Box, MovingPlatform, circle_rect_overlap, ground_line
from .player import Player


def resolve_ground(player: Player, height: float, dt: float) -> bool:
    """Snap to the floor if the player reached it; otherwise coyote time runs down."""
    player.on_ground = False
    floor_y = ground_line(height, player.radius)
    if player.y >= floor_y:
        player.land(floor_y + player.radius)
        return True
    player.coyote_timer = max(0.0, player.coyote_timer - dt)
    return False


def resolve_platforms(player: Player, prev_y: float, platforms: Iterable[MovingPlatform]):
    """
    Landing (crossed the top edge downward this frame) or side push, per platform,
    in list order. Each correction is applied before the next platform is tested.
    """
    for plat in platforms:
        box = plat.box
        if not circle_rect_overlap(player.x, player.y, player.radius, box):
            continue

        was_above = prev_y + player.radius <= box.top + LANDING_TOLERANCE
        reaches_top = player.y + player.radius >= box.top
        if was_above and reaches_top:
            player.land(box.top)
            # ride along (position only)
            player.x += plat.last_dx
        elif player.x < box.left:
            player.x = box.left - player.radius
            player.vx = 0.0
        elif player.x > box.right:
            player.x = box.right + player.radius
            player.vx = 0.0
        else:
            # inside the horizontal span without a clean landing: pop on top
            player.land(box.top)


def detect_walls(player: Player, walls: Tuple[Box, Box]) -> bool:
    """Read-only wall contact flags. on_wall needs the player off the ground."""
    left, right = walls
    player.touching_left_wall = circle_rect_overlap(player.x, player.y, player.radius, left)
    player.touching_right_wall = circle_rect_overlap(player.x, player.y, player.radius, right)
    player.on_wall = (player.touching_left_wall or player.touching_right_wall) and not player.on_ground
    return player.on_wall


def correct_wall_penetration(player: Player, walls: Tuple[Box, Box]):
    """Push out of any wall still overlapped, along its inward normal."""
    left, right = walls
    if circle_rect_overlap(player.x, player.y, player.radius, left):
        player.x = left.right + player.radius
        player.vx = 0.0
    if circle_rect_overlap(player.x, player.y, player.radius, right):
        player.x = right.left - player.radius
        player.vx = 0.0


def clamp_horizontal(player: Player, width: float):
    hi = max(player.radius, float(width) - player.radius)
    player.x = min(max(player.x, player.radius), hi)
