from .session import GameState

DEAD_ZONE = 5


def policy(env):
    # Strategy: launch as soon as the ball rests on the paddle, then keep the paddle's
    # center under the ball's center. A small dead zone stops the paddle jittering
    # back and forth when it is already lined up.
    session = env.session
    if session.state is GameState.IDLE:
        return [0, 1, 0]  # Launch

    ball_center = session.ball.x + session.ball.size // 2
    offset = ball_center - session.paddle.centerx

    if offset < -DEAD_ZONE:
        return [3, 0, 0]  # Move left
    elif offset > DEAD_ZONE:
        return [4, 0, 0]  # Move right
    else:
        return [0, 0, 0]  # Hold still
