from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from unictris.game import GameConfig, GameEngine, Intent
from unictris.visualization.palette import color_for_value


class EnvAction(IntEnum):
    NOOP = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3
    ROTATE = 4
    HARD_DROP = 5


ACTION_TO_INTENT: Dict[EnvAction, Intent] = {
    EnvAction.LEFT: Intent.LEFT,
    EnvAction.RIGHT: Intent.RIGHT,
    EnvAction.DOWN: Intent.DOWN,
    EnvAction.ROTATE: Intent.ROTATE,
    EnvAction.HARD_DROP: Intent.HARD_DROP,
}


class UnictrisEnv(gym.Env):
    """Single-agent wrapper around ``GameEngine``.

    Each step applies one action, then advances ``frames_per_step`` engine
    ticks so gravity keeps pulling the piece down between decisions.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 frames_per_step: int = 5,
                 max_episode_steps: int = 5000,
                 lines_weight: float = 1.0,
                 step_reward: float = 0.0,
                 terminal_penalty: float = -1.0) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.game = GameEngine(self.config)
        self.render_mode = render_mode

        self.frames_per_step = int(frames_per_step)
        self.max_episode_steps = int(max_episode_steps)
        self.lines_weight = float(lines_weight)
        self.step_reward = float(step_reward)
        self.terminal_penalty = float(terminal_penalty)

        h, w = self.config.height, self.config.width
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=7, shape=(h, w), dtype=np.int8),
                # kind, orientation, x, y
                "piece": spaces.Box(low=0, high=max(h, w), shape=(4,), dtype=np.int16),
            }
        )
        self.action_space = spaces.Discrete(len(EnvAction))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        tet = self.game.tetromino
        piece = np.zeros((4,), dtype=np.int16)
        if tet is not None:
            piece[:] = (int(tet.kind), tet.orientation, tet.x, tet.y)
        return {"board": self.game.get_state(), "piece": piece}

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = EnvAction(int(action))
        score_before = self.game.score

        intent = ACTION_TO_INTENT.get(action)
        if intent is not None:
            self.game.apply(intent)
        for _ in range(self.frames_per_step):
            if not self.game.tick():
                break

        self._steps += 1
        terminated = bool(self.game.game_over)
        truncated = not terminated and self._steps >= self.max_episode_steps

        lines = self.game.score - score_before
        reward = self.lines_weight * lines + self.step_reward
        if terminated:
            reward += self.terminal_penalty

        info = self._get_info()
        info["lines_cleared"] = lines
        return self._get_obs(), float(reward), terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        board = self.game.get_state()
        cell = 12
        h, w = board.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(board[y, x]))
        return img

    def close(self) -> None:
        pass
