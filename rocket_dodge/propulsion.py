"""Variable-mass propulsion (Meshchersky's equation).

The burn rate is a signed mass flow: positive for the main engine, negative
for the retro engine. Thrust is ``F = u * mu`` and the resulting
acceleration is ``a = -F / m(t)``, where the mass is taken before this
tick's fuel is burned. The kinematics step subtracts ``a * dt`` from the
speed, so a forward burn speeds the rocket up along its heading.
"""


def total_mass(state, settings):
    return settings.dry_mass + state.fuel


def thrust(state, settings):
    return settings.exhaust_velocity * state.fuel_consumption


def throttle(rate, controls, settings):
    """Adjust the burn rate for one tick of key input."""
    step = settings.throttle_increment

    if controls.up:
        rate += step
    if controls.down:
        rate -= step

    # Hands off: relax toward zero without crossing it
    if not controls.up and not controls.down:
        if rate > 0:
            rate = max(0.0, rate - step)
        elif rate < 0:
            rate = min(0.0, rate + step)

    if settings.clamp_burn_rate:
        limit = settings.max_fuel_consumption
        rate = max(-limit, min(limit, rate))
    return rate


def burn(state, controls, settings):
    """Advance fuel, burn rate and acceleration by one tick."""
    if state.fuel <= 0:
        rate = 0.0
    else:
        rate = throttle(state.fuel_consumption, controls, settings)

    state = state.evolve(fuel_consumption=rate)
    acceleration = -(thrust(state, settings) / total_mass(state, settings))

    fuel = state.fuel - abs(rate) * settings.time_step
    if fuel <= 0:
        # Tank is dry: the engine cuts out from here on
        fuel = 0.0
        rate = 0.0

    return state.evolve(fuel=fuel, fuel_consumption=rate, acceleration=acceleration)
