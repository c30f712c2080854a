import numpy as np
import pytest

from rocket_dodge.controller import RunController
from rocket_dodge.settings import SimulationSettings


class FakeBody:
    def __init__(self, kind, x, y, size):
        self.kind = kind
        self.x = x
        self.y = y
        self.angle = 0.0
        self.size = size


class FakeEngine:
    """Records bodies; overlaps are raised by the test via ``overlap``."""

    def __init__(self):
        self.bodies = []
        self.removed = []
        self.steps = []
        self.rocket = None
        self._listener = None

    def set_overlap_listener(self, listener):
        self._listener = listener

    def create_rocket(self, x, y, width, height):
        self.rocket = FakeBody("rocket", x, y, (width, height))
        self.bodies.append(self.rocket)
        return self.rocket

    def create_obstacle(self, x, y, radius):
        body = FakeBody("asteroid", x, y, radius)
        self.bodies.append(body)
        return body

    def move_body(self, body, x, y, angle=0.0):
        body.x, body.y, body.angle = x, y, angle

    def remove_body(self, body):
        self.bodies.remove(body)
        self.removed.append(body)

    def step(self, dt):
        self.steps.append(dt)

    def overlap(self, body):
        self._listener(body)

    def close(self):
        self.bodies = []

    @property
    def asteroids(self):
        return [b for b in self.bodies if b.kind == "asteroid"]


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def settings():
    return SimulationSettings()


@pytest.fixture
def controller(engine, rng, settings):
    return RunController(engine, rng, settings=settings)
