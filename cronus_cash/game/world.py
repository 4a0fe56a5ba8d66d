# cronus_cash/game/world.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import pygame
from .config import (
    WIDTH, HEIGHT, PLATFORM_LAYOUT, TIME_LIMIT_S,
    COIN_RADIUS, COIN_SPAWN_ATTEMPTS, COIN_PLAYER_MARGIN, COIN_FLOOR_CLEARANCE,
    ORB_RADIUS, ORB_INTERVAL_S, ORB_SPAWN_ODDS, ORB_SPAWN_ATTEMPTS,
    ORB_PLAYER_MARGIN, ORB_TIME_BONUS_S,
)
from .collision import (
    resolve_ground, resolve_platforms, detect_walls,
    correct_wall_penetration, clamp_horizontal,
)
from .jump import buffer_jump_input, try_jump
from .level import Box, MovingPlatform, build_platforms, circles_overlap, walls_for
from .player import Player
from .spawn import sample_spawn, spawn_area

logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Controls:
    """Discrete per-frame input from the host: held keys and this-frame presses."""
    left: bool = False
    right: bool = False
    jump_pressed: bool = False
    restart_pressed: bool = False

    @property
    def axis(self) -> int:
        return int(self.right) - int(self.left)


@dataclass
class Collectible:
    pos: pygame.Vector2 = field(default_factory=pygame.Vector2)
    radius: float = COIN_RADIUS


@dataclass
class TimeOrb:
    pos: pygame.Vector2 = field(default_factory=pygame.Vector2)
    radius: float = ORB_RADIUS
    active: bool = False
    spawn_timer: float = ORB_INTERVAL_S


@dataclass(frozen=True)
class FrameView:
    """Read-only snapshot handed to the presentation layer."""
    state: GameState
    width: float
    height: float
    player_pos: pygame.Vector2
    player_radius: float
    walls: Tuple[Box, Box]
    platforms: List[Box]
    coin_pos: pygame.Vector2
    coin_radius: float
    orb_pos: Optional[pygame.Vector2]
    orb_radius: float
    coins: int
    time_remaining: float

    @property
    def clock_text(self) -> str:
        return format_clock(self.time_remaining)


def format_clock(seconds: float) -> str:
    """mm:ss, truncating partial seconds."""
    total = int(max(0.0, seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


class World:
    """
    Owns the whole session: player, platforms, pickups, clock and state.
    The host calls tick() once per frame and draws the returned FrameView.
    """
    def __init__(self,
                 width: float = WIDTH,
                 height: float = HEIGHT,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None,
                 layout=PLATFORM_LAYOUT):
        self.rng = rng if rng is not None else random.Random(seed)
        self.resize(width, height)
        self.platforms: List[MovingPlatform] = build_platforms(layout)
        self.player = Player.spawn()
        clamp_horizontal(self.player, self.width)
        self.coin = Collectible()
        self.orb = TimeOrb()
        self.coins = 0
        self.time_remaining = TIME_LIMIT_S
        self.state = GameState.PLAYING
        self.respawn_coin()

    # -------------------- Derived geometry --------------------

    @property
    def walls(self) -> Tuple[Box, Box]:
        # always from the current canvas, never cached
        return walls_for(self.width, self.height)

    def obstacles(self) -> List[Box]:
        return list(self.walls) + [p.box for p in self.platforms]

    def resize(self, width: float, height: float):
        self.width = max(0.0, float(width))
        self.height = max(0.0, float(height))

    # -------------------- Frame --------------------

    def tick(self, dt: float, controls: Optional[Controls] = None,
             size: Optional[Tuple[float, float]] = None) -> FrameView:
        """Advance one frame. dt <= 0 leaves a Playing session untouched."""
        if size is not None:
            self.resize(*size)
        controls = controls or Controls()
        handler = {
            GameState.PLAYING: self._tick_playing,
            GameState.GAME_OVER: self._tick_game_over,
        }[self.state]
        handler(max(0.0, float(dt)), controls)
        if self.state is GameState.PLAYING:
            # a resize or restart can leave the player outside the canvas
            clamp_horizontal(self.player, self.width)
        return self.view()

    def _tick_playing(self, dt: float, controls: Controls):
        if dt <= 0.0:
            return

        self._advance_clock(dt)
        if self.state is GameState.GAME_OVER:
            return
        self._advance_orb_timer(dt)

        walls = self.walls
        for plat in self.platforms:
            plat.update(dt)

        player = self.player
        prev_y = player.y
        buffer_jump_input(player, controls.jump_pressed, dt)
        player.update_physics(dt, controls.axis)

        resolve_ground(player, self.height, dt)
        resolve_platforms(player, prev_y, self.platforms)
        detect_walls(player, walls)
        try_jump(player, walls)

        self._collect_pickups()

        correct_wall_penetration(player, walls)
        clamp_horizontal(player, self.width)

    def _tick_game_over(self, dt: float, controls: Controls):
        if controls.restart_pressed:
            self.restart()

    # -------------------- Session transitions --------------------

    def _advance_clock(self, dt: float):
        self.time_remaining -= dt
        if self.time_remaining <= 0.0:
            self.time_remaining = 0.0
            self._enter_game_over()

    def _enter_game_over(self):
        self.state = GameState.GAME_OVER
        logger.info("Time up: session over with %d coins", self.coins)

    def restart(self):
        """Back to a fresh Playing session. Platforms keep their current phase."""
        self.player = Player.spawn()
        clamp_horizontal(self.player, self.width)
        self.coins = 0
        self.time_remaining = TIME_LIMIT_S
        self.respawn_coin()
        self.orb.active = False
        self.orb.spawn_timer = ORB_INTERVAL_S
        self.state = GameState.PLAYING
        logger.info("Session restarted")

    # -------------------- Pickups --------------------

    def respawn_coin(self):
        usable_h = max(0.0, self.height - COIN_FLOOR_CLEARANCE)
        area = spawn_area(self.width, usable_h, self.coin.radius)
        pos = sample_spawn(
            self.rng, self.coin.radius, area, self.obstacles(),
            avoid=self.player.pos,
            min_distance=self.player.radius + self.coin.radius + COIN_PLAYER_MARGIN,
            attempts=COIN_SPAWN_ATTEMPTS,
        )
        if pos is None:
            pos = pygame.Vector2(self.width * 0.5, usable_h * 0.5)
            logger.debug("Coin sampler exhausted, falling back to %s", pos)
        self.coin.pos = pos
        logger.debug("Coin at (%.1f, %.1f)", pos.x, pos.y)

    def _advance_orb_timer(self, dt: float):
        orb = self.orb
        orb.spawn_timer -= dt
        if orb.spawn_timer > 0.0:
            return
        orb.spawn_timer = ORB_INTERVAL_S
        if orb.active:
            return
        if self.rng.randint(0, ORB_SPAWN_ODDS - 1) != 0:
            return
        pos = sample_spawn(
            self.rng, orb.radius, spawn_area(self.width, self.height, orb.radius),
            self.obstacles(),
            avoid=self.player.pos,
            min_distance=self.player.radius + orb.radius + ORB_PLAYER_MARGIN,
            attempts=ORB_SPAWN_ATTEMPTS,
        )
        if pos is None:
            logger.debug("Orb sampler exhausted, skipping this cycle")
            return
        orb.pos = pos
        orb.active = True
        logger.debug("Time orb at (%.1f, %.1f)", pos.x, pos.y)

    def _collect_pickups(self):
        player = self.player
        if circles_overlap(player.pos, player.radius, self.coin.pos, self.coin.radius):
            self.coins += 1
            self.respawn_coin()

        orb = self.orb
        if orb.active and circles_overlap(player.pos, player.radius, orb.pos, orb.radius):
            self.time_remaining = min(TIME_LIMIT_S, self.time_remaining + ORB_TIME_BONUS_S)
            orb.active = False
            orb.spawn_timer = ORB_INTERVAL_S
            logger.debug("Time orb collected, %.1fs left", self.time_remaining)

    # -------------------- Output --------------------

    def view(self) -> FrameView:
        return FrameView(
            state=self.state,
            width=self.width,
            height=self.height,
            player_pos=self.player.pos,
            player_radius=self.player.radius,
            walls=self.walls,
            platforms=[Box(p.box.x, p.box.y, p.box.w, p.box.h) for p in self.platforms],
            coin_pos=pygame.Vector2(self.coin.pos),
            coin_radius=self.coin.radius,
            orb_pos=pygame.Vector2(self.orb.pos) if self.orb.active else None,
            orb_radius=self.orb.radius,
            coins=self.coins,
            time_remaining=self.time_remaining,
        )
