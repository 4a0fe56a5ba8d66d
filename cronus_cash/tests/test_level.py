"""Geometry helpers, moving platforms and screen walls."""

from __future__ import annotations
import random

import pygame

from cronus_cash.game.level import (
    Box, MovingPlatform, build_platforms, circle_rect_overlap, circles_overlap,
    ground_line, walls_for,
)
from cronus_cash.game.config import PLATFORM_LAYOUT, WALL_THICKNESS


def make_platform(horizontal=True, lo=200.0, hi=600.0, speed=80.0) -> MovingPlatform:
    vel = pygame.Vector2(speed, 0.0) if horizontal else pygame.Vector2(0.0, speed)
    start = (lo + hi) / 2
    box = Box(start, 300.0, 100.0, 16.0) if horizontal else Box(300.0, start, 100.0, 16.0)
    return MovingPlatform(box=box, min_axis=lo, max_axis=hi, velocity=vel, horizontal=horizontal)


# ---------------------------------------------------------------------------
# Overlap tests
# ---------------------------------------------------------------------------

def test_circle_touching_rect_edge_counts_as_overlap():
    box = Box(0.0, 0.0, 10.0, 10.0)
    assert circle_rect_overlap(5.0, -5.0, 5.0, box)
    assert not circle_rect_overlap(5.0, -5.01, 5.0, box)


def test_circle_near_corner_uses_true_distance():
    box = Box(0.0, 0.0, 10.0, 10.0)
    # 4,4 away from the corner -> ~5.66 > 5
    assert not circle_rect_overlap(14.0, 14.0, 5.0, box)
    assert circle_rect_overlap(13.0, 13.0, 5.0, box)


def test_circle_center_inside_rect():
    assert circle_rect_overlap(5.0, 5.0, 1.0, Box(0.0, 0.0, 10.0, 10.0))


def test_circles_overlap_touching():
    assert circles_overlap(pygame.Vector2(0, 0), 3.0, pygame.Vector2(5, 0), 2.0)
    assert not circles_overlap(pygame.Vector2(0, 0), 3.0, pygame.Vector2(5.1, 0), 2.0)


# ---------------------------------------------------------------------------
# Moving platforms
# ---------------------------------------------------------------------------

def _run_oscillator(plat: MovingPlatform, steps: int, seed: int):
    rng = random.Random(seed)
    for _ in range(steps):
        before_v = plat.axis_velocity
        plat.update(rng.uniform(0.0, 0.5))
        v = plat.axis_velocity
        a = plat.axis_value
        assert plat.min_axis <= a <= plat.max_axis
        if (v > 0) != (before_v > 0):
            # the only way the sign flips is by hitting a bound
            assert a in (plat.min_axis, plat.max_axis)
            assert abs(v) == abs(before_v)


def test_horizontal_platform_stays_in_bounds_and_flips_at_bounds():
    _run_oscillator(make_platform(horizontal=True), steps=5000, seed=1)


def test_vertical_platform_stays_in_bounds_and_flips_at_bounds():
    _run_oscillator(make_platform(horizontal=False, lo=380.0, hi=520.0, speed=40.0), steps=5000, seed=2)


def test_platform_flip_at_max_bound():
    plat = make_platform(horizontal=True, lo=200.0, hi=600.0, speed=80.0)
    plat.box.x = 595.0
    plat.update(0.125)  # would reach 605
    assert plat.box.x == 600.0
    assert plat.velocity.x == -80.0
    assert plat.last_dx == 5.0
    plat.update(0.125)
    assert plat.box.x == 590.0


def test_platform_flip_at_min_bound_vertical():
    plat = make_platform(horizontal=False, lo=380.0, hi=520.0, speed=-40.0)
    plat.box.y = 381.0
    plat.update(0.5)
    assert plat.box.y == 380.0
    assert plat.velocity.y == 40.0
    assert plat.last_dy == -1.0
    assert plat.last_dx == 0.0


def test_platform_reaching_bound_exactly_does_not_flip():
    plat = make_platform(horizontal=True, lo=200.0, hi=600.0, speed=80.0)
    plat.box.x = 590.0
    plat.update(0.125)
    assert plat.box.x == 600.0
    assert plat.velocity.x == 80.0


def test_zero_dt_update_is_noop():
    plat = make_platform()
    x = plat.box.x
    plat.update(0.0)
    assert plat.box.x == x and plat.last_dx == 0.0


def test_build_platforms_is_fresh_each_time():
    a = build_platforms()
    b = build_platforms()
    assert len(a) == len(PLATFORM_LAYOUT)
    a[0].update(1.0)
    assert a[0].box.x != b[0].box.x
    assert [p.horizontal for p in a] == [True, True, False, True]


# ---------------------------------------------------------------------------
# Walls / ground
# ---------------------------------------------------------------------------

def test_walls_follow_canvas():
    left, right = walls_for(800, 600)
    assert (left.x, left.y, left.w, left.h) == (0.0, 0.0, WALL_THICKNESS, 600.0)
    assert (right.x, right.w, right.h) == (800.0 - WALL_THICKNESS, WALL_THICKNESS, 600.0)
    left, right = walls_for(400, 300)
    assert right.x == 400.0 - WALL_THICKNESS and right.h == 300.0


def test_degenerate_canvas_never_gives_negative_sizes():
    for w, h in [(0, 0), (10, 5), (-50, -50)]:
        for wall in walls_for(w, h):
            assert wall.w >= 0 and wall.h >= 0 and wall.x >= 0


def test_ground_line_clamped():
    assert ground_line(600, 20) == 580
    assert ground_line(10, 20) == 20


def test_box_to_rect_rounds():
    r = Box(10.4, 20.6, 30.5, 16.0).to_rect()
    assert isinstance(r, pygame.Rect)
    assert (r.x, r.y, r.h) == (10, 21, 16)
