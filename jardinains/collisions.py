"""
Collision resolution for one tick of play.

Checks always run in the same order: paddle, bricks, walls, floor, cleanup.
They are not exclusive, so a ball can bounce off the paddle and a wall in the
same tick. Overlap only flips velocity signs; the ball is never pushed back
out of whatever it hit.
"""
from collections import namedtuple

from .entities import FIELD_HEIGHT

RIGHT_WALL_X = 780
SCORE_PER_BRICK = 10
TRICK_BOUNCE_CHANCE = 0.2

CollisionResult = namedtuple("CollisionResult", ["bricks", "points", "floor_hit", "trick_bounce"])


def bounce_off_paddle(ball, paddle):
    if ball.bounds().colliderect(paddle.bounds()):
        ball.dy = -ball.dy
        return True
    return False


def bounce_off_bricks(ball, bricks, rng):
    """Destroy the first intact brick the ball overlaps.

    Returns ``(brick, trick_bounce)``; ``brick`` is None when nothing was hit.
    At most one brick is destroyed per call.
    """
    ball_rect = ball.bounds()
    for brick in bricks:
        if not brick.destroyed and ball_rect.colliderect(brick.bounds()):
            ball.dy = -ball.dy
            brick.destroy()
            trick = rng.random() < TRICK_BOUNCE_CHANCE
            if trick:
                ball.dx = -ball.dx
            return brick, trick
    return None, False


def bounce_off_walls(ball):
    if ball.x <= 0 or ball.x >= RIGHT_WALL_X:
        ball.dx = -ball.dx
    if ball.y <= 0:
        ball.dy = -ball.dy


def fell_through_floor(ball):
    return ball.y >= FIELD_HEIGHT


def remove_destroyed(bricks):
    return [b for b in bricks if not b.destroyed]


def resolve(ball, paddle, bricks, rng):
    """Run every collision check once, in order.

    Mutates ball velocity and brick ``destroyed`` flags. The floor check only
    reports; losing a life is up to the caller. Returns a CollisionResult with
    the surviving bricks and the points earned.
    """
    bounce_off_paddle(ball, paddle)
    hit, trick = bounce_off_bricks(ball, bricks, rng)
    bounce_off_walls(ball)
    floor_hit = fell_through_floor(ball)
    points = SCORE_PER_BRICK if hit is not None else 0
    return CollisionResult(remove_destroyed(bricks), points, floor_hit, trick)
