import logging
import math
from collections import deque
from dataclasses import replace
from enum import Enum

from .kinematics import integrate
from .obstacles import ObstacleField
from .propulsion import burn
from .settings import (
    ASTEROID_SPAWN_INTERVAL,
    DIFFICULTY_LEVELS,
    ROCKET_HEIGHT,
    ROCKET_WIDTH,
    SCORE_INTERVAL,
    VIEWPORT_H,
    VIEWPORT_W,
    SimulationSettings,
)
from .state import Controls, RocketState
from .timers import Scheduler

logger = logging.getLogger(__name__)


def level_for_time_step(time_step):
    """Name of the difficulty level using ``time_step``, or None for a custom step."""
    for level, step in DIFFICULTY_LEVELS.items():
        if math.isclose(step, time_step):
            return level
    return None


class RunPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class RunController:
    """Start/stop/continue/game-over state machine for one rocket.

    The controller owns the rocket state, the asteroid field, the score and
    both timers. The engine is injected: it creates and moves bodies and
    reports rocket/asteroid overlaps through ``notify_collision``, which only
    queues the event. Queued events are handled in ``process_events`` before
    the next tick runs.

    A driver calls ``pump`` once per frame; the commands (``start``,
    ``stop``, ``resume``, ``set_difficulty``) can be called between frames.
    Commands that do not apply to the current phase are ignored.
    """

    def __init__(self, engine, rng, settings=None, scheduler=None,
                 width=VIEWPORT_W, height=VIEWPORT_H):
        self.settings = settings if settings is not None else SimulationSettings()
        self.engine = engine
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.width = width
        self.height = height

        self.phase = RunPhase.IDLE
        self.score = 0
        self.last_score = None
        self.rocket = RocketState.launch(self.settings)
        self.field = ObstacleField(engine, rng, width, height)

        self._events = deque()
        self._spawn_timer = None
        self._score_timer = None
        self._game_over_listeners = []
        self._difficulty = level_for_time_step(self.settings.time_step)

        self.engine.set_overlap_listener(self.notify_collision)
        self.rocket_body = self.engine.create_rocket(
            self.rocket.x, self.rocket.y, ROCKET_WIDTH, ROCKET_HEIGHT
        )

    # --- Observables ---

    @property
    def pose(self):
        return self.rocket.pose

    @property
    def running(self):
        return self.phase is RunPhase.RUNNING

    @property
    def difficulty(self):
        return self._difficulty

    def on_game_over(self, listener):
        """Register ``listener(final_score)`` for the end-of-run notification."""
        self._game_over_listeners.append(listener)

    # --- Commands ---

    def start(self):
        self._stop_timers()
        self._events.clear()
        self.field.clear()
        self._reset_rocket()
        self.score = 0
        self._start_timers()
        self.phase = RunPhase.RUNNING
        logger.info("Run started (difficulty=%s, dt=%.2fs)",
                    self.difficulty, self.settings.time_step)

    def stop(self):
        if self.phase is not RunPhase.RUNNING:
            logger.debug("Stop ignored in phase %s", self.phase.value)
            return
        self.phase = RunPhase.PAUSED
        self.field.freeze()
        self._stop_timers()
        logger.info("Run paused at score %d", self.score)

    def resume(self):
        if self.phase is not RunPhase.PAUSED:
            logger.debug("Continue ignored in phase %s", self.phase.value)
            return
        self.field.resume()
        self._start_timers()
        self.phase = RunPhase.RUNNING
        logger.info("Run resumed at score %d", self.score)

    def set_difficulty(self, level):
        if level not in DIFFICULTY_LEVELS:
            logger.warning("Unknown difficulty %r, keeping %s", level, self.difficulty)
            return
        self.settings = replace(self.settings, time_step=DIFFICULTY_LEVELS[level])
        self._difficulty = level
        logger.info("Difficulty set to %s (dt=%.2fs)", level, self.settings.time_step)

    # --- Events ---

    def notify_collision(self, body=None):
        # Called from the engine's contact callback: queue only
        self._events.append(body)

    def process_events(self):
        while self._events:
            self._events.popleft()
            if self.phase is RunPhase.RUNNING:
                self._game_over()

    # --- Frame loop ---

    def pump(self, frame_time, controls=None):
        """Run one frame: pending events, timers, the tick, then new events."""
        self.process_events()
        self.scheduler.advance(frame_time)
        self.tick(controls if controls is not None else Controls(), frame_time)
        self.process_events()

    def tick(self, controls, frame_time):
        if self.phase is not RunPhase.RUNNING:
            return

        # 1. Propulsion, then kinematics
        rocket = burn(self.rocket, controls, self.settings)
        rocket, _ = integrate(rocket, controls, self.settings)
        self.rocket = self._keep_in_bounds(rocket)
        self.engine.move_body(self.rocket_body, self.rocket.x, self.rocket.y, self.rocket.heading)

        # 2. Asteroids fall in frame time, not simulated time
        self.field.advance(frame_time)
        self.field.reap()

        # 3. Overlap detection; hits arrive through notify_collision
        self.engine.step(frame_time)

    # --- Internals ---

    def _keep_in_bounds(self, rocket):
        half_w = ROCKET_WIDTH / 2
        half_h = ROCKET_HEIGHT / 2
        x = min(max(rocket.x, half_w), self.width - half_w)
        y = min(max(rocket.y, half_h), self.height - half_h)
        if x == rocket.x and y == rocket.y:
            return rocket
        return rocket.evolve(x=x, y=y)

    def _reset_rocket(self):
        self.rocket = RocketState.launch(self.settings)
        self.engine.move_body(self.rocket_body, self.rocket.x, self.rocket.y, self.rocket.heading)

    def _spawn(self):
        self.field.spawn()

    def _count(self):
        self.score += 1

    def _start_timers(self):
        if self._spawn_timer is None:
            self._spawn_timer = self.scheduler.every(ASTEROID_SPAWN_INTERVAL, self._spawn)
        if self._score_timer is None:
            self._score_timer = self.scheduler.every(SCORE_INTERVAL, self._count)

    def _stop_timers(self):
        if self._spawn_timer is not None:
            self._spawn_timer.cancel()
            self._spawn_timer = None
        if self._score_timer is not None:
            self._score_timer.cancel()
            self._score_timer = None

    def _game_over(self):
        self._stop_timers()
        final_score = self.score
        self.last_score = final_score
        logger.info("Collision with an asteroid. Game over, score %d", final_score)

        self.field.clear()
        self._reset_rocket()
        self.score = 0
        self._events.clear()
        self.phase = RunPhase.IDLE

        # Listeners see a finished reset and may start the next run
        for listener in self._game_over_listeners:
            listener(final_score)
