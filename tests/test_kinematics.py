import math

import pytest

from rocket_dodge.kinematics import direction, integrate
from rocket_dodge.propulsion import burn
from rocket_dodge.state import Controls, RocketState


def test_direction_zero_heading_points_up():
    dx, dy = direction(0.0)
    assert dx == pytest.approx(0.0)
    assert dy == pytest.approx(-1.0)


def test_direction_quarter_turn_points_right():
    dx, dy = direction(math.pi / 2)
    assert dx == pytest.approx(1.0)
    assert dy == pytest.approx(0.0, abs=1e-12)


def test_rotation(settings):
    state = RocketState(fuel=100.0)

    right, _ = integrate(state, Controls(right=True), settings)
    left, _ = integrate(state, Controls(left=True), settings)
    both, _ = integrate(state, Controls(left=True, right=True), settings)

    assert right.heading == pytest.approx(0.05)
    assert left.heading == pytest.approx(-0.05)
    assert both.heading == pytest.approx(0.0)


def test_moves_along_heading(settings):
    state = RocketState(fuel=100.0, speed=100.0, x=500.0, y=475.0)
    new, (dx, dy) = integrate(state, Controls(), settings)

    assert dx == pytest.approx(0.0)
    assert dy == pytest.approx(-10.0)
    assert (new.x, new.y) == pytest.approx((500.0, 465.0))


def test_damping_then_acceleration(settings):
    state = RocketState(fuel=100.0, speed=50.0, acceleration=-20.0)
    new, _ = integrate(state, Controls(), settings)

    assert new.speed == pytest.approx(50.0 * 0.98 + 20.0 * 0.1)


def test_clamp_happens_before_acceleration(settings):
    state = RocketState(fuel=100.0, speed=350.0, acceleration=-100.0)
    new, (_, dy) = integrate(state, Controls(), settings)

    # Displacement uses the clamped speed...
    assert dy == pytest.approx(-30.0)
    # ...but the acceleration may push it past the limit until next tick
    assert new.speed == pytest.approx(300.0 * 0.98 + 10.0)
    assert new.speed > settings.max_speed


def test_negative_speed_clamped(settings):
    state = RocketState(fuel=100.0, speed=-400.0)
    _, (_, dy) = integrate(state, Controls(), settings)
    assert dy == pytest.approx(30.0)


def test_coasting_decays_monotonically(settings):
    state = RocketState(fuel=5000.0, speed=120.0)
    speeds = []

    for _ in range(200):
        state = burn(state, Controls(), settings)
        state, _ = integrate(state, Controls(), settings)
        speeds.append(abs(state.speed))

    assert all(b < a for a, b in zip(speeds, speeds[1:]))
    assert speeds[-1] < 120.0 * 0.98 ** 199
