# cronus_cash/env/observations.py
from __future__ import annotations
from typing import List
import numpy as np

from cronus_cash.game.config import (
    TIME_LIMIT_S, MAX_JUMPS, WALL_JUMP_IMPULSE, JUMP_SPEED
)
from cronus_cash.game.world import World

OBS_SIZE = 13
# vy is normalized by this; a full-height fall stays a little under it
VY_SCALE = 2.0 * JUMP_SPEED


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def _norm_pos(v: float, extent: float) -> float:
    return _clamp(v / max(1.0, extent), 0.0, 1.0)


def _norm_delta(d: float, extent: float) -> float:
    return _clamp(d / max(1.0, extent), -1.0, 1.0)


def observation_bounds():
    """(low, high) arrays matching build_observation's layout."""
    low = np.array([0.0, 0.0, -1.0, -1.0, 0.0, 0.0, 0.0, 0.0, -1.0, -1.0, 0.0, -1.0, -1.0], dtype=np.float32)
    high = np.array([1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)
    return low, high


def build_observation(world: World) -> np.ndarray:
    """
    Returns a fixed (13,) float32 vector:
      [ x_norm, y_norm, vx_norm, vy_norm,
        on_ground, on_wall, jumps_left_norm, time_norm,
        coin_dx, coin_dy,
        orb_active, orb_dx, orb_dy ]
    - positions in [0,1] of the canvas, deltas (target - player) in [-1,1]
    - orb deltas are 0.0 while no orb is active
    """
    p = world.player
    w, h = world.width, world.height

    feats: List[float] = [
        _norm_pos(p.x, w),
        _norm_pos(p.y, h),
        _clamp(p.vx / WALL_JUMP_IMPULSE, -1.0, 1.0),
        _clamp(p.vy / VY_SCALE, -1.0, 1.0),
        1.0 if p.on_ground else 0.0,
        1.0 if p.on_wall else 0.0,
        _clamp((MAX_JUMPS - p.jump_count) / MAX_JUMPS, 0.0, 1.0),
        _clamp(world.time_remaining / TIME_LIMIT_S, 0.0, 1.0),
        _norm_delta(world.coin.pos.x - p.x, w),
        _norm_delta(world.coin.pos.y - p.y, h),
    ]

    if world.orb.active:
        feats.extend([1.0, _norm_delta(world.orb.pos.x - p.x, w), _norm_delta(world.orb.pos.y - p.y, h)])
    else:
        feats.extend([0.0, 0.0, 0.0])

    return np.asarray(feats, dtype=np.float32)
