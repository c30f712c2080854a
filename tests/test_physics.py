import numpy as np
import pytest

pytest.importorskip("Box2D")

from rocket_dodge.controller import RunController, RunPhase
from rocket_dodge.physics import Box2DEngine
from rocket_dodge.settings import FRAME_TIME, LAUNCH_PAD


@pytest.fixture
def box2d_engine():
    engine = Box2DEngine()
    yield engine
    engine.close()


def test_reports_rocket_overlap(box2d_engine):
    hits = []
    box2d_engine.set_overlap_listener(hits.append)
    box2d_engine.create_rocket(500.0, 475.0, 30.0, 60.0)
    asteroid = box2d_engine.create_obstacle(505.0, 470.0, 20.0)

    box2d_engine.step(FRAME_TIME)
    box2d_engine.step(FRAME_TIME)

    assert len(hits) == 1
    assert hits[0] == asteroid


def test_ignores_distant_and_asteroid_pairs(box2d_engine):
    hits = []
    box2d_engine.set_overlap_listener(hits.append)
    box2d_engine.create_rocket(500.0, 475.0, 30.0, 60.0)
    box2d_engine.create_obstacle(100.0, 100.0, 25.0)
    box2d_engine.create_obstacle(110.0, 100.0, 25.0)

    for _ in range(5):
        box2d_engine.step(FRAME_TIME)

    assert hits == []


def test_moved_asteroid_hits_rocket(box2d_engine):
    hits = []
    box2d_engine.set_overlap_listener(hits.append)
    box2d_engine.create_rocket(500.0, 475.0, 30.0, 60.0)
    asteroid = box2d_engine.create_obstacle(500.0, 100.0, 20.0)
    box2d_engine.step(FRAME_TIME)
    assert hits == []

    box2d_engine.move_body(asteroid, 500.0, 460.0)
    for _ in range(3):
        box2d_engine.step(FRAME_TIME)

    assert len(hits) == 1


def test_controller_game_over_with_box2d(box2d_engine):
    controller = RunController(box2d_engine, np.random.default_rng(7))
    scores = []
    controller.on_game_over(scores.append)
    controller.start()

    obstacle = controller.field.spawn()
    obstacle.velocity_y = 0.0
    obstacle.x, obstacle.y = LAUNCH_PAD
    box2d_engine.move_body(obstacle.body, obstacle.x, obstacle.y)

    for _ in range(5):
        controller.pump(FRAME_TIME)
        if controller.phase is RunPhase.IDLE:
            break

    assert scores == [0]
    assert len(controller.field) == 0
