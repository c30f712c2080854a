import math
import numpy as np
import gymnasium as gym
from gymnasium import spaces

# Import our separated modules
from .settings import *
from .controller import RunController
from .physics import Box2DEngine
from .state import Controls
from .visualizer import RocketVisualizer

# How many asteroids the agent can see (nearest first)
VISIBLE_ASTEROIDS = 5
ROCKET_FEATURES = 7
ASTEROID_FEATURES = 3

SURVIVAL_REWARD = 1.0
CRASH_REWARD = -100.0


class RocketDodge(gym.Env):
    metadata = {'render_modes': ['human', 'rgb_array'], 'render_fps': FPS}

    def __init__(self, render_mode=None, difficulty=None, settings=None, engine_factory=Box2DEngine):
        self.render_mode = render_mode
        self.difficulty = difficulty
        self.base_settings = settings if settings is not None else SimulationSettings()
        self.engine_factory = engine_factory
        self.engine = None
        self.controller = None
        self.controls = Controls()
        self.final_score = None

        # Initialize Visualizer
        self.visualizer = RocketVisualizer(self)

        # Observation Space: rocket (7) + nearest asteroids (5 x 3)
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf,
            shape=(ROCKET_FEATURES + VISIBLE_ASTEROIDS * ASTEROID_FEATURES,),
            dtype=np.float32,
        )

        # Action Space: arrow keys (up, down, left, right)
        self.action_space = spaces.MultiBinary(4)

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self._destroy()

        # 1. Fresh engine and controller, sharing the env's seeded RNG
        self.engine = self.engine_factory()
        self.controller = RunController(self.engine, self.np_random, settings=self.base_settings)
        if self.difficulty is not None:
            self.controller.set_difficulty(self.difficulty)
        self.controller.on_game_over(self._on_game_over)

        self.controls = Controls()
        self.final_score = None

        # 2. Start the run (clears asteroids, resets rocket and score).
        # options={"autostart": False} leaves it idle for the start screen.
        if (options or {}).get("autostart", True):
            self.controller.start()

        return self._observe(), self._info()

    def step(self, action):
        # 1. Key state for this frame
        self.controls = Controls.from_action(action)

        # 2. One frame of simulation (timers, tick, collisions)
        self.final_score = None
        self.controller.pump(FRAME_TIME, self.controls)

        # 3. Reward: survive as long as possible
        terminated = self.final_score is not None
        reward = CRASH_REWARD if terminated else SURVIVAL_REWARD

        if self.render_mode == "human":
            self.render()

        return self._observe(), reward, terminated, False, self._info()

    def render(self):
        # Delegate rendering to the Visualizer class
        return self.visualizer.render(self.render_mode)

    def close(self):
        self.visualizer.close()
        self._destroy()

    def _on_game_over(self, score):
        self.final_score = score

    def _destroy(self):
        if not self.engine: return
        self.engine.close()
        self.engine = None
        self.controller = None

    def _info(self):
        return {
            "score": self.controller.score,
            "phase": self.controller.phase.value,
            "final_score": self.final_score,
        }

    def _observe(self):
        rocket = self.controller.rocket
        settings = self.controller.settings

        state = [
            rocket.x / VIEWPORT_W,
            rocket.y / VIEWPORT_H,
            math.sin(rocket.heading),
            math.cos(rocket.heading),
            rocket.speed / settings.max_speed,
            rocket.fuel_consumption / settings.max_fuel_consumption,
            rocket.fuel / settings.fuel_mass,
        ]

        # Nearest asteroids, relative to the rocket; empty slots stay zero
        nearest = sorted(
            self.controller.field,
            key=lambda o: math.hypot(o.x - rocket.x, o.y - rocket.y),
        )[:VISIBLE_ASTEROIDS]
        for obstacle in nearest:
            state += [
                (obstacle.x - rocket.x) / VIEWPORT_W,
                (obstacle.y - rocket.y) / VIEWPORT_H,
                obstacle.velocity_y / ASTEROID_SPEED_RANGE[1],
            ]
        state += [0.0] * (ASTEROID_FEATURES * (VISIBLE_ASTEROIDS - len(nearest)))

        return np.array(state, dtype=np.float32)
