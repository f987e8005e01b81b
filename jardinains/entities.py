"""
Paddle, ball and brick entities.

Entities are plain state holders. They know how to move themselves and how
big they are, nothing else; the session owns them and the collision resolver
mutates their velocities.
"""
import pygame

# --- Field geometry ---
FIELD_WIDTH = 800
FIELD_HEIGHT = 600


class Paddle:
    HEIGHT = 10
    SPEED = 5

    # Intent -> horizontal velocity
    LEFT = "left"
    RIGHT = "right"
    STOP = "stop"
    VELOCITIES = {LEFT: -SPEED, RIGHT: SPEED, STOP: 0}

    def __init__(self, x, y, width):
        self.x = x
        self.y = y
        self.width = width
        self.height = self.HEIGHT
        self.dx = 0

    def set_velocity(self, intent):
        self.dx = self.VELOCITIES[intent]

    def move(self, dt=1):
        self.x += int(self.dx * dt)
        self.x = max(0, min(self.x, FIELD_WIDTH - self.width))

    @property
    def centerx(self):
        return self.x + self.width // 2

    def bounds(self):
        return pygame.Rect(self.x, self.y, self.width, self.height)


class Ball:
    SIZE = 10

    def __init__(self, x, y, speed, rng):
        """Place a resting ball at (x, y).

        ``rng`` is any object with a ``random()`` method returning a float in
        [0, 1), e.g. ``numpy.random.Generator`` or ``random.Random``. It picks
        the sign of the horizontal velocity.
        """
        self.x = x
        self.y = y
        self.size = self.SIZE
        self.dx = speed * (1 if rng.random() > 0.5 else -1)
        self.dy = 0.0

    def move(self, dt=1):
        # Position stays integral; each step truncates toward zero.
        self.x = int(self.x + self.dx * dt)
        self.y = int(self.y + self.dy * dt)

    def bounds(self):
        return pygame.Rect(self.x, self.y, self.size, self.size)


class Brick:
    WIDTH = 60
    HEIGHT = 20

    def __init__(self, x, y):
        self._x = x
        self._y = y
        self.destroyed = False

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def destroy(self):
        self.destroyed = True

    def bounds(self):
        return pygame.Rect(self._x, self._y, self.WIDTH, self.HEIGHT)

    def __repr__(self):
        state = "destroyed" if self.destroyed else "intact"
        return f"Brick(x={self._x}, y={self._y}, {state})"
