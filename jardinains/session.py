"""
Game session: the state machine that owns every entity and advances the
world one tick at a time.

Host code talks to a session through three calls::

    session = create_session("Easy", seed=7)
    apply_input(session, InputEvent.LAUNCH_PRESSED)
    advance(session)
    snap = session.snapshot()

States go IDLE -> PLAYING -> (IDLE again after a lost life) -> WON | LOST.
WON and LOST are terminal; advancing a finished session does nothing.
"""
import logging
from collections import namedtuple
from enum import Enum

import numpy as np

from .collisions import resolve
from .difficulty import Difficulty
from .entities import Ball, Brick, Paddle
from .input_adapter import InputAdapter

logger = logging.getLogger(__name__)

DEFAULT_TICK_MS = 5


class GameState(Enum):
    IDLE = "Idle"
    PLAYING = "Playing"
    WON = "Won"
    LOST = "Lost"


Snapshot = namedtuple(
    "Snapshot", ["paddle", "ball", "bricks", "lives", "score", "state", "ticks"]
)


def _rect_tuple(rect):
    return (rect.x, rect.y, rect.width, rect.height)


class GameSession:
    # --- Layout ---
    PADDLE_START_X = 350
    PADDLE_Y = 550
    BRICK_ROWS = 5
    BRICK_COLS = 10
    BRICK_OFFSET_X = 50
    BRICK_OFFSET_Y = 50
    BRICK_STRIDE_X = 70
    BRICK_STRIDE_Y = 30

    def __init__(self, difficulty, rng=None):
        self.difficulty = Difficulty.parse(difficulty)
        preset = self.difficulty.preset
        self.ball_speed = preset.ball_speed
        self.paddle_width = preset.paddle_width
        self.lives = preset.lives
        self.rng = rng if rng is not None else np.random.default_rng()

        self.score = 0
        self.ticks = 0
        self.state = GameState.IDLE
        self.input = InputAdapter()

        self.paddle = Paddle(self.PADDLE_START_X, self.PADDLE_Y, self.paddle_width)
        self.ball = self._spawn_ball()
        self.bricks = self._create_bricks()
        self.initial_brick_count = len(self.bricks)

        logger.debug(
            "New %s session: speed=%s paddle=%s lives=%s",
            self.difficulty.value, self.ball_speed, self.paddle_width, self.lives,
        )

    def _create_bricks(self):
        bricks = []
        for row in range(self.BRICK_ROWS):
            for col in range(self.BRICK_COLS):
                bricks.append(Brick(
                    col * self.BRICK_STRIDE_X + self.BRICK_OFFSET_X,
                    row * self.BRICK_STRIDE_Y + self.BRICK_OFFSET_Y,
                ))
        return bricks

    def _ball_rest_position(self):
        return (
            self.paddle.x + self.paddle_width // 2 - Ball.SIZE // 2,
            self.paddle.y - Ball.SIZE,
        )

    def _spawn_ball(self):
        x, y = self._ball_rest_position()
        return Ball(x, y, self.ball_speed, self.rng)

    # --- Derived flags ---
    @property
    def ball_launched(self):
        return self.state is GameState.PLAYING

    @property
    def in_game(self):
        return self.state is not GameState.LOST

    @property
    def finished(self):
        return self.state in (GameState.WON, GameState.LOST)

    # --- Host interface ---
    def apply_input(self, event):
        """Buffer an input event; it takes effect on the next ``advance``."""
        self.input.push(event)

    def advance(self, dt=1):
        """Advance the world by one tick and return the resulting state.

        ``dt`` is a whole number of reference steps taken at once. Positions
        are integral, so fractional steps are rejected rather than rounded.
        """
        if isinstance(dt, bool) or not isinstance(dt, int) or dt < 1:
            raise ValueError(f"dt must be a positive whole number of ticks, got {dt!r}")
        intent, launch = self.input.consume()
        if self.finished:
            return self.state

        if intent is not None:
            self.paddle.set_velocity(intent)
        if launch and self.state is GameState.IDLE:
            self._launch()

        self.paddle.move(dt)
        if self.state is GameState.IDLE:
            self.ball.x, self.ball.y = self._ball_rest_position()
        else:
            self._play_tick(dt)

        self.ticks += 1
        return self.state

    def _launch(self):
        self.ball.dy = -self.ball_speed
        self.state = GameState.PLAYING
        logger.debug("Ball launched at tick %d (dx=%s)", self.ticks, self.ball.dx)

    def _play_tick(self, dt):
        self.ball.move(dt)
        result = resolve(self.ball, self.paddle, self.bricks, self.rng)
        self.score += result.points
        if result.trick_bounce:
            logger.debug("Trick bounce at tick %d", self.ticks)

        if result.floor_hit:
            self._lose_life()

        self.bricks = result.bricks
        if not self.bricks:
            self.state = GameState.WON
            logger.info("Session won with score %d, %d lives left", self.score, self.lives)

    def _lose_life(self):
        self.lives -= 1
        if self.lives <= 0:
            self.lives = 0
            self.state = GameState.LOST
            logger.info("Session lost with score %d", self.score)
        else:
            self.state = GameState.IDLE
            self.ball = self._spawn_ball()
            logger.debug("Life lost, %d remaining", self.lives)

    def snapshot(self):
        """Read-only view of the session for rendering."""
        return Snapshot(
            paddle=_rect_tuple(self.paddle.bounds()),
            ball=_rect_tuple(self.ball.bounds()),
            bricks=tuple(_rect_tuple(b.bounds()) for b in self.bricks if not b.destroyed),
            lives=self.lives,
            score=self.score,
            state=self.state,
            ticks=self.ticks,
        )


def create_session(difficulty, rng=None, seed=None):
    """Start a new session.

    Randomness comes from ``rng`` if given, otherwise from a numpy Generator
    seeded with ``seed``. Raises ValueError for an unknown difficulty.
    """
    if rng is None:
        rng = np.random.default_rng(seed)
    return GameSession(difficulty, rng=rng)


def advance(session, dt=1):
    return session.advance(dt)


def apply_input(session, event):
    session.apply_input(event)
