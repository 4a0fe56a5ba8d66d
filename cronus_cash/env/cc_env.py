# cronus_cash/env/cc_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from cronus_cash.game.config import WIDTH, HEIGHT, FPS
from cronus_cash.game.render import draw_world, load_fonts
from cronus_cash.game.world import World, Controls, GameState
from cronus_cash.env.observations import OBS_SIZE, build_observation, observation_bounds

# move component of the action
MOVE_NONE, MOVE_LEFT, MOVE_RIGHT = 0, 1, 2
ORB_REWARD = 0.5


class CronusCashEnv(gym.Env):
    """
    Cronus Cash Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Action: MultiDiscrete([3, 2]) = (move none/left/right, jump no/yes).
    - Observation: shape (13,), float32.
    - Episode ends when the session clock runs out.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 max_decisions: Optional[int] = None):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unknown render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        # Internal sim timing
        self.sim_fps = FPS
        self.dt = 1.0 / self.sim_fps

        # Optional truncation on top of the session clock
        self.max_decisions = max_decisions

        # --- Gym spaces ---
        self.action_space = gym.spaces.MultiDiscrete([3, 2])
        low, high = observation_bounds()
        assert low.shape == (OBS_SIZE,)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.world: Optional[World] = None
        self.timestep: int = 0                   # number of *decision* steps elapsed
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.fonts = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # A given seed drives the world RNG directly; None keeps sessions random.
        self.current_seed = int(seed) if seed is not None else None
        self.world = World(width=WIDTH, height=HEIGHT, seed=self.current_seed)
        self.timestep = 0

        obs = build_observation(self.world)
        info = self._info()
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action):
        assert self.world is not None, "Call reset() before step()"
        assert self.action_space.contains(np.asarray(action, dtype=np.int64)), f"Invalid action {action}"
        move, jump = int(action[0]), int(action[1])

        coins_before = self.world.coins
        orb_was_active = self.world.orb.active

        for i in range(self.frame_skip):
            controls = Controls(
                left=(move == MOVE_LEFT),
                right=(move == MOVE_RIGHT),
                jump_pressed=(jump == 1 and i == 0),  # a press is an edge, first sub-step only
            )
            self.world.tick(self.dt, controls)
            if self.world.state is GameState.GAME_OVER:
                break

        reward = float(self.world.coins - coins_before)
        if orb_was_active and not self.world.orb.active:
            reward += ORB_REWARD

        self.timestep += 1
        terminated = self.world.state is GameState.GAME_OVER
        truncated = self.max_decisions is not None and self.timestep >= self.max_decisions

        obs = build_observation(self.world)
        info = self._info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _info(self) -> Dict[str, Any]:
        assert self.world is not None
        return {
            "seed": self.current_seed,
            "timestep": self.timestep,
            "coins": self.world.coins,
            "time_remaining": self.world.time_remaining,
            "on_ground": self.world.player.on_ground,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.world is None:
            return None

        if self.render_mode == "human":
            if self.screen is None:
                pygame.init()
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Cronus Cash — Gym Env")
                self.clock = pygame.time.Clock()
                self.fonts = load_fonts()
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()
            draw_world(self.screen, self.world.view(), self.fonts)
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        # rgb_array: off-screen surface, shapes only
        surf = pygame.Surface((WIDTH, HEIGHT))
        draw_world(surf, self.world.view())
        arr = pygame.surfarray.array3d(surf)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.fonts = None
