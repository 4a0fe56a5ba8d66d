"""Bounded rejection sampling used for coin and time-orb placement."""

from __future__ import annotations
import random

import pygame

from cronus_cash.game.level import Box, circle_rect_overlap
from cronus_cash.game.spawn import sample_spawn, spawn_area


class CountingRandom(random.Random):
    def __init__(self, seed=None):
        super().__init__(seed)
        self.uniform_calls = 0

    def uniform(self, a, b):
        self.uniform_calls += 1
        return super().uniform(a, b)


def random_layout(rng: random.Random, width: float, height: float):
    obstacles = [Box(0.0, 0.0, 20.0, height), Box(width - 20.0, 0.0, 20.0, height)]
    for _ in range(rng.randint(0, 8)):
        w = rng.uniform(10.0, width * 0.5)
        h = rng.uniform(4.0, height * 0.3)
        obstacles.append(Box(rng.uniform(0.0, width - w), rng.uniform(0.0, height - h), w, h))
    return obstacles


def test_sampled_positions_never_overlap_obstacles():
    rng = random.Random(2024)
    accepted = 0
    for trial in range(1000):
        width = rng.uniform(200.0, 1200.0)
        height = rng.uniform(200.0, 900.0)
        radius = rng.choice([8.0, 10.0])
        obstacles = random_layout(rng, width, height)
        avoid = pygame.Vector2(rng.uniform(0, width), rng.uniform(0, height))
        min_distance = 20.0 + radius + rng.choice([20.0, 30.0])
        area = spawn_area(width, height, radius)

        p = sample_spawn(rng, radius, area, obstacles, avoid, min_distance, attempts=200)
        if p is None:
            continue
        accepted += 1
        assert not any(circle_rect_overlap(p.x, p.y, radius, ob) for ob in obstacles), f"trial {trial}"
        assert p.distance_to(avoid) >= min_distance
        assert area.left <= p.x <= area.right
        assert area.top <= p.y <= area.bottom
    # plenty of free space in almost every layout
    assert accepted > 900


def test_returns_first_valid_draw():
    # nothing to avoid: the very first draw is accepted
    rng = CountingRandom(5)
    p = sample_spawn(rng, 8.0, Box(0.0, 0.0, 100.0, 100.0), [], pygame.Vector2(-1000, -1000), 10.0, attempts=500)
    assert p is not None
    assert rng.uniform_calls == 2


def test_exhaustion_returns_none_after_budget():
    rng = CountingRandom(7)
    everything = [Box(-100.0, -100.0, 10_000.0, 10_000.0)]
    p = sample_spawn(rng, 8.0, Box(0.0, 0.0, 800.0, 600.0), everything, pygame.Vector2(0, 0), 10.0, attempts=200)
    assert p is None
    assert rng.uniform_calls == 2 * 200


def test_exclusion_distance_alone_can_exhaust():
    # area is a single point right on top of the player
    rng = random.Random(1)
    area = Box(50.0, 50.0, 0.0, 0.0)
    assert sample_spawn(rng, 8.0, area, [], pygame.Vector2(50, 50), 48.0, attempts=50) is None


def test_zero_attempts_never_draws():
    rng = CountingRandom(3)
    assert sample_spawn(rng, 8.0, Box(0.0, 0.0, 10.0, 10.0), [], pygame.Vector2(), 0.0, attempts=0) is None
    assert rng.uniform_calls == 0


def test_same_seed_same_position():
    obstacles = [Box(100.0, 100.0, 300.0, 20.0)]
    a = sample_spawn(random.Random(11), 8.0, spawn_area(800, 550, 8), obstacles, pygame.Vector2(100, 100), 48.0, 500)
    b = sample_spawn(random.Random(11), 8.0, spawn_area(800, 550, 8), obstacles, pygame.Vector2(100, 100), 48.0, 500)
    assert a == b


def test_spawn_area_keeps_circle_inside_and_never_inverts():
    area = spawn_area(800, 600, 10)
    assert (area.left, area.top, area.right, area.bottom) == (10, 10, 790, 590)
    tiny = spawn_area(5, 5, 10)
    assert tiny.w == 0 and tiny.h == 0
