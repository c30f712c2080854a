import pytest

from rocket_dodge.obstacles import ObstacleField, hitbox_radius
from rocket_dodge.settings import VIEWPORT_H, VIEWPORT_W


@pytest.fixture
def field(engine, rng):
    return ObstacleField(engine, rng, VIEWPORT_W, VIEWPORT_H)


def test_hitbox_radius():
    assert hitbox_radius(1.0) == pytest.approx((32.0 + 10.0) * 0.8)
    assert hitbox_radius(0.8) < hitbox_radius(1.1)


def test_spawn_samples_within_ranges(field, engine):
    for _ in range(200):
        field.spawn()

    assert len(field) == 200
    assert len(engine.asteroids) == 200
    for obstacle in field:
        assert 0.0 <= obstacle.x <= VIEWPORT_W - 50
        assert obstacle.y == -50.0
        assert 50.0 <= obstacle.velocity_y <= 120.0
        assert 0.8 <= obstacle.scale <= 1.1
        assert obstacle.radius == pytest.approx(hitbox_radius(obstacle.scale))
        assert obstacle.body.size == obstacle.radius


def test_advance_moves_down_and_syncs_body(field):
    obstacle = field.spawn()
    obstacle.velocity_y = 100.0

    field.advance(0.5)

    assert obstacle.y == pytest.approx(0.0)
    assert obstacle.body.y == pytest.approx(0.0)


def test_reap_removes_only_fallen(field, engine):
    fallen = field.spawn()
    fallen.y = VIEWPORT_H + 51
    edge = field.spawn()
    edge.y = VIEWPORT_H + 50

    assert field.reap() == 1
    assert list(field) == [edge]
    assert fallen.body in engine.removed


def test_clear_removes_all_bodies(field, engine):
    for _ in range(5):
        field.spawn()

    field.clear()

    assert len(field) == 0
    assert engine.asteroids == []


def test_freeze_and_resume(field):
    for _ in range(10):
        field.spawn()

    field.freeze()
    assert all(o.velocity_y == 0.0 for o in field)
    field.advance(1.0)
    assert all(o.y == -50.0 for o in field)

    field.resume()
    assert all(50.0 <= o.velocity_y <= 120.0 for o in field)
