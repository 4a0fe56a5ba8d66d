# cronus_cash/game/jump.py
from __future__ import annotations
from typing import Tuple
from .config import (
    JUMP_SPEED, JUMP_BUFFER_TIME, MAX_JUMPS, WALL_JUMP_IMPULSE, WALL_JUMP_NUDGE
)
from .level import Box
from .player import Player


def buffer_jump_input(player: Player, pressed: bool, dt: float):
    """A press arms the buffer; otherwise it drains."""
    if pressed:
        player.jump_buffer_timer = JUMP_BUFFER_TIME
    else:
        player.jump_buffer_timer = max(0.0, player.jump_buffer_timer - dt)


def can_jump(player: Player) -> bool:
    return (player.jump_count < MAX_JUMPS) or player.on_wall or (player.coyote_timer > 0.0)


def try_jump(player: Player, walls: Tuple[Box, Box]) -> bool:
    """
    Consume a buffered press if eligible. Returns True if a jump happened.
    A wall-jump always counts as the first jump, so one air jump remains.
    """
    if player.jump_buffer_timer <= 0.0 or not can_jump(player):
        return False

    player.vy = -JUMP_SPEED
    if player.on_wall:
        player.jump_count = 1
        left, right = walls
        if player.touching_left_wall:
            player.vx = WALL_JUMP_IMPULSE
            player.x = left.right + player.radius + WALL_JUMP_NUDGE
        elif player.touching_right_wall:
            player.vx = -WALL_JUMP_IMPULSE
            player.x = right.left - player.radius - WALL_JUMP_NUDGE
    else:
        player.jump_count += 1

    # both grace windows are spent
    player.jump_buffer_timer = 0.0
    player.coyote_timer = 0.0
    return True
