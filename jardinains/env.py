import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from .difficulty import Difficulty
from .entities import FIELD_HEIGHT, FIELD_WIDTH
from .input_adapter import InputEvent
from .render import Renderer
from .session import DEFAULT_TICK_MS, GameState, create_session

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 1000 // DEFAULT_TICK_MS}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: Use ← and → to move the paddle. Press space to launch the ball."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "Jardinains: knock out every gnome-topped brick with the ball before your lives run out."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    # --- Rewards ---
    REWARD_LIFE_LOST = -10.0
    REWARD_WIN = 100.0
    REWARD_LOSE = -100.0

    # Episode length cap; a ball stuck in the paddle never ends the game
    MAX_STEPS = 10000

    # Movement actions
    MOVE_LEFT = 3
    MOVE_RIGHT = 4

    def __init__(self, difficulty="Medium", render_mode="rgb_array"):
        super().__init__()
        # Reject bad presets here rather than at the first reset()
        self.difficulty = Difficulty.parse(difficulty)
        self.render_mode = render_mode

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(FIELD_HEIGHT, FIELD_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        self.screen = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT))
        self.renderer = Renderer(self.screen)

        # State variables are initialized in reset()
        self.session = None
        self.last_movement = 0
        self.steps = 0

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.session = create_session(self.difficulty, rng=self.np_random)
        self.last_movement = 0
        self.steps = 0

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.session.finished:
            return self._get_observation(), 0.0, True, False, self._get_info()

        movement, space_pressed = action[0], action[1] == 1
        self._apply_movement(movement)
        if space_pressed:
            self.session.apply_input(InputEvent.LAUNCH_PRESSED)

        score_before = self.session.score
        lives_before = self.session.lives
        state = self.session.advance()
        self.steps += 1

        reward = float(self.session.score - score_before)
        if self.session.lives < lives_before:
            reward += self.REWARD_LIFE_LOST

        terminated = self.session.finished
        truncated = not terminated and self.steps >= self.MAX_STEPS
        if state is GameState.WON:
            reward += self.REWARD_WIN
        elif state is GameState.LOST:
            reward += self.REWARD_LOSE

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info()
        )

    def _apply_movement(self, movement):
        # Key presses only on change, releases for whatever was held.
        if movement == self.last_movement:
            return
        if self.last_movement == self.MOVE_LEFT:
            self.session.apply_input(InputEvent.LEFT_UP)
        elif self.last_movement == self.MOVE_RIGHT:
            self.session.apply_input(InputEvent.RIGHT_UP)

        if movement == self.MOVE_LEFT:
            self.session.apply_input(InputEvent.LEFT_DOWN)
        elif movement == self.MOVE_RIGHT:
            self.session.apply_input(InputEvent.RIGHT_DOWN)
        self.last_movement = movement

    def _get_observation(self):
        self.renderer.draw(self.session.snapshot())
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.session.score,
            "lives": self.session.lives,
            "ticks": self.session.ticks,
            "steps": self.steps,
            "bricks_left": len(self.session.bricks),
            "state": self.session.state.value,
        }

    def render(self):
        return self._get_observation()

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Call this after construction to verify the env contract.
        '''
        print("Running implementation validation...")
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        obs, info = self.reset(seed=0)
        assert obs.shape == (FIELD_HEIGHT, FIELD_WIDTH, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)
        assert info["state"] == GameState.IDLE.value

        obs, reward, term, trunc, info = self.step(self.action_space.sample())
        assert obs.shape == (FIELD_HEIGHT, FIELD_WIDTH, 3)
        assert isinstance(reward, float)
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        print("✓ Implementation validated successfully")
