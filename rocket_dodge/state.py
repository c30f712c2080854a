from dataclasses import dataclass, replace

from .settings import LAUNCH_PAD


@dataclass(frozen=True)
class Controls:
    """Key state sampled once per frame."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @classmethod
    def from_action(cls, action):
        # MultiBinary(4) action: [up, down, left, right]
        up, down, left, right = (bool(a) for a in action)
        return cls(up=up, down=down, left=left, right=right)


@dataclass(frozen=True)
class RocketState:
    fuel: float                     # kg remaining
    speed: float = 0.0              # m/s along the heading
    heading: float = 0.0            # rad, 0 points up the screen
    fuel_consumption: float = 0.0   # kg/s, negative is retro burn
    acceleration: float = 0.0       # m/s^2, recomputed every tick
    x: float = LAUNCH_PAD[0]
    y: float = LAUNCH_PAD[1]

    @classmethod
    def launch(cls, settings):
        """Full tank, at rest on the launch pad."""
        return cls(fuel=settings.fuel_mass)

    @property
    def pose(self):
        return self.x, self.y, self.heading

    def evolve(self, **changes):
        return replace(self, **changes)
