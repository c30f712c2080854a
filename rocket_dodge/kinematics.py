import math


def direction(heading):
    # Heading 0 points up in screen coordinates (y grows downward)
    return math.sin(heading), -math.cos(heading)


def integrate(state, controls, settings):
    """Explicit Euler step of heading, position and speed.

    Returns the new state and the position delta. The speed clamp runs
    before this tick's acceleration, so the returned speed may overshoot
    ``max_speed`` until the next tick clamps it.
    """
    dt = settings.time_step
    heading = state.heading

    # 1. Rotation (both keys may be held)
    if controls.right:
        heading += settings.rotation_speed * dt
    if controls.left:
        heading -= settings.rotation_speed * dt

    # 2. Speed limit
    speed = max(-settings.max_speed, min(settings.max_speed, state.speed))

    # 3. Displacement: dx = v * dt
    dir_x, dir_y = direction(heading)
    dx = dir_x * speed * dt
    dy = dir_y * speed * dt

    # 4. Drag, then the propulsion acceleration
    speed *= settings.damping
    speed -= state.acceleration * dt

    new_state = state.evolve(
        heading=heading,
        speed=speed,
        x=state.x + dx,
        y=state.y + dy,
    )
    return new_state, (dx, dy)
