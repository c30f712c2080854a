# Configuration Constants

from dataclasses import dataclass

# Screen / Rendering
FPS = 60
FRAME_TIME = 1.0 / FPS
VIEWPORT_W = 1000
VIEWPORT_H = 600
SCALE = 10.0   # world units (pixels) per Box2D metre

## Rocket Physics (Meshchersky model)
FUEL_MASS = 5000.0             # kg
DRY_MASS = 500.0               # kg, rocket without fuel
EXHAUST_VELOCITY = 2500.0      # m/s
MAX_FUEL_CONSUMPTION = 100.0   # kg/s
TIME_STEP = 0.1                # s of simulated time per tick
ROTATION_SPEED = 0.5           # rad/s
MAX_SPEED = 300.0              # m/s
DAMPING = 0.98                 # applied to speed every tick
THROTTLE_STEP = 0.002          # fraction of MAX_FUEL_CONSUMPTION per tick

# --- ROCKET BODY ---
LAUNCH_PAD = (500.0, 475.0)
ROCKET_WIDTH = 30.0    # hitbox, smaller than the sprite
ROCKET_HEIGHT = 60.0
NOSE_HEIGHT = 15.0

# Asteroids
ASTEROID_SPAWN_INTERVAL = 1.0          # s between spawns
ASTEROID_SPAWN_Y = -50.0               # starts above the visible area
ASTEROID_MARGIN = 50.0                 # spawn margin and reap margin
ASTEROID_SPEED_RANGE = (50.0, 120.0)
ASTEROID_SCALE_RANGE = (0.8, 1.1)
ASTEROID_BASE_RADIUS = 32.0            # half of the 64px sprite
ASTEROID_RADIUS_PADDING = 10.0
ASTEROID_HITBOX_SHRINK = 0.8           # forgiving hitbox

# Scoring
SCORE_INTERVAL = 1.0   # one point per second survived

# Difficulty: a larger time step makes the rocket harder to handle
DIFFICULTY_LEVELS = {
    "easy": 0.1,
    "medium": 0.3,
    "hard": 0.6,
}
DIFFICULTY_LABELS = {
    "easy": "Easy",
    "medium": "Medium",
    "hard": "Hard",
}

# Colors (R, G, B)
SKY_COLOR = (8, 10, 32)               # Deep space
ROCKET_COLOR = (235, 235, 235)
NOSE_COLOR = (200, 50, 50)
FIN_COLOR = (100, 100, 100)
OUTLINE_COLOR = (25, 25, 25)
FLAME_COLOR = (255, 120, 0)
ASTEROID_COLOR = (130, 110, 90)
ASTEROID_EDGE = (70, 60, 50)
HUD_TEXT_COLOR = (230, 230, 230)
FUEL_BAR_COLOR_FULL = (0, 255, 0)     # Green
FUEL_BAR_BORDER = (255, 255, 255)     # White


@dataclass
class SimulationSettings:
    """Operator-configurable parameters of one simulation.

    Only ``time_step`` changes during a run (difficulty switches); the
    controller swaps in a new instance when it does.
    """
    fuel_mass: float = FUEL_MASS
    dry_mass: float = DRY_MASS
    exhaust_velocity: float = EXHAUST_VELOCITY
    max_fuel_consumption: float = MAX_FUEL_CONSUMPTION
    time_step: float = TIME_STEP
    rotation_speed: float = ROTATION_SPEED
    max_speed: float = MAX_SPEED
    damping: float = DAMPING
    throttle_step: float = THROTTLE_STEP
    # False reproduces the unbounded burn-rate growth of the first release
    clamp_burn_rate: bool = True

    @property
    def throttle_increment(self):
        # kg/s added to (or removed from) the burn rate per tick
        return self.throttle_step * self.max_fuel_consumption
