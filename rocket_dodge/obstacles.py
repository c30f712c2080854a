import logging
from dataclasses import dataclass
from typing import Any

from .settings import (
    ASTEROID_BASE_RADIUS,
    ASTEROID_HITBOX_SHRINK,
    ASTEROID_MARGIN,
    ASTEROID_RADIUS_PADDING,
    ASTEROID_SCALE_RANGE,
    ASTEROID_SPAWN_Y,
    ASTEROID_SPEED_RANGE,
)

logger = logging.getLogger(__name__)


def hitbox_radius(scale):
    return (ASTEROID_BASE_RADIUS * scale + ASTEROID_RADIUS_PADDING) * ASTEROID_HITBOX_SHRINK


@dataclass
class ObstacleBody:
    x: float
    y: float
    velocity_y: float
    scale: float
    radius: float
    body: Any = None   # engine handle


class ObstacleField:
    """Falling asteroids: spawned at the top, reaped below the bottom edge."""

    def __init__(self, engine, rng, width, height):
        self.engine = engine
        self.rng = rng
        self.width = width
        self.height = height
        self.obstacles = []

    def __len__(self):
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def _sample_speed(self):
        return float(self.rng.uniform(*ASTEROID_SPEED_RANGE))

    def spawn(self):
        x = float(self.rng.uniform(0.0, self.width - ASTEROID_MARGIN))
        scale = float(self.rng.uniform(*ASTEROID_SCALE_RANGE))
        obstacle = ObstacleBody(
            x=x,
            y=ASTEROID_SPAWN_Y,
            velocity_y=self._sample_speed(),
            scale=scale,
            radius=hitbox_radius(scale),
        )
        obstacle.body = self.engine.create_obstacle(obstacle.x, obstacle.y, obstacle.radius)
        self.obstacles.append(obstacle)
        logger.debug("Spawned asteroid at x=%.1f (v=%.1f, r=%.1f)",
                     obstacle.x, obstacle.velocity_y, obstacle.radius)
        return obstacle

    def advance(self, dt):
        for obstacle in self.obstacles:
            obstacle.y += obstacle.velocity_y * dt
            self.engine.move_body(obstacle.body, obstacle.x, obstacle.y)

    def reap(self):
        """Remove asteroids that fell past the bottom edge. Returns how many."""
        limit = self.height + ASTEROID_MARGIN
        gone = [o for o in self.obstacles if o.y > limit]
        for obstacle in gone:
            self.engine.remove_body(obstacle.body)
        if gone:
            self.obstacles = [o for o in self.obstacles if o.y <= limit]
        return len(gone)

    def clear(self):
        for obstacle in self.obstacles:
            self.engine.remove_body(obstacle.body)
        self.obstacles = []

    def freeze(self):
        for obstacle in self.obstacles:
            obstacle.velocity_y = 0.0

    def resume(self):
        # Each asteroid gets a fresh speed, like a new spawn
        for obstacle in self.obstacles:
            obstacle.velocity_y = self._sample_speed()
