import Box2D
from Box2D.b2 import circleShape, contactListener, fixtureDef, polygonShape

from .settings import SCALE


class ContactDetector(contactListener):
    def __init__(self, engine):
        contactListener.__init__(self)
        self.engine = engine

    def BeginContact(self, contact):
        # Called when two shapes start to overlap.
        # Only rocket vs asteroid matters; asteroids may overlap each other.
        body_a = contact.fixtureA.body
        body_b = contact.fixtureB.body
        if self.engine.rocket == body_a:
            self.engine.report_overlap(body_b)
        elif self.engine.rocket == body_b:
            self.engine.report_overlap(body_a)


class Box2DEngine:
    """Body factory and overlap notifier backed by a zero-gravity Box2D world.

    Every fixture is a sensor and the simulation moves bodies itself, so the
    world never applies forces; it only reports overlaps. Positions are in
    world units (pixels) and converted to metres with ``SCALE``.
    """

    def __init__(self):
        self.world = Box2D.b2World(gravity=(0, 0))
        self.world.contactListener_keepref = ContactDetector(self)
        self.world.contactListener = self.world.contactListener_keepref
        self.rocket = None
        self._listener = None

    def set_overlap_listener(self, listener):
        self._listener = listener

    def report_overlap(self, body):
        if self._listener is not None:
            self._listener(body)

    def create_rocket(self, x, y, width, height):
        self.rocket = self.world.CreateKinematicBody(
            position=(x / SCALE, y / SCALE),
            angle=0.0,
            allowSleep=False,
            fixtures=fixtureDef(
                shape=polygonShape(box=(width / SCALE / 2, height / SCALE / 2)),
                isSensor=True,
            ),
        )
        return self.rocket

    def create_obstacle(self, x, y, radius):
        # Dynamic, because Box2D never pairs two kinematic bodies
        return self.world.CreateDynamicBody(
            position=(x / SCALE, y / SCALE),
            allowSleep=False,
            fixtures=fixtureDef(
                shape=circleShape(radius=radius / SCALE),
                density=1.0,
                isSensor=True,
            ),
        )

    def move_body(self, body, x, y, angle=0.0):
        body.position = (x / SCALE, y / SCALE)
        body.angle = angle

    def remove_body(self, body):
        self.world.DestroyBody(body)

    def step(self, dt):
        self.world.Step(dt, 6, 2)

    def close(self):
        self.world = None
        self.rocket = None
