# tests/test_entities.py
import unittest
from jardinains.entities import Ball, Brick, Paddle
from support import ScriptedRandom



class TestPaddle(unittest.TestCase):
    def test_velocity_intents(self):
        paddle = Paddle(350, 550, 100)
        paddle.set_velocity(Paddle.LEFT)
        self.assertEqual(paddle.dx, -5)
        paddle.set_velocity(Paddle.RIGHT)
        self.assertEqual(paddle.dx, 5)
        paddle.set_velocity(Paddle.STOP)
        self.assertEqual(paddle.dx, 0)

    def test_move(self):
        paddle = Paddle(350, 550, 100)
        paddle.set_velocity(Paddle.RIGHT)
        paddle.move()
        self.assertEqual(paddle.x, 355)
        self.assertEqual(paddle.y, 550)

    def test_move_is_clamped_to_field(self):
        paddle = Paddle(2, 550, 100)
        paddle.set_velocity(Paddle.LEFT)
        paddle.move()
        self.assertEqual(paddle.x, 0)

        paddle = Paddle(698, 550, 100)
        paddle.set_velocity(Paddle.RIGHT)
        paddle.move()
        self.assertEqual(paddle.x, 700)

    def test_bounds(self):
        rect = Paddle(350, 550, 80).bounds()
        self.assertEqual((rect.x, rect.y, rect.width, rect.height), (350, 550, 80, 10))


class TestBall(unittest.TestCase):
    def test_random_sign_of_dx(self):
        self.assertEqual(Ball(0, 0, 3, ScriptedRandom(default=0.9)).dx, 3)
        self.assertEqual(Ball(0, 0, 3, ScriptedRandom(default=0.1)).dx, -3)
        # Exactly 0.5 goes left.
        self.assertEqual(Ball(0, 0, 3, ScriptedRandom(default=0.5)).dx, -3)

    def test_starts_at_rest_vertically(self):
        ball = Ball(395, 540, 2, ScriptedRandom(default=0.9))
        self.assertEqual(ball.dy, 0)
        rect = ball.bounds()
        self.assertEqual((rect.x, rect.y, rect.width, rect.height), (395, 540, 10, 10))

    def test_move_truncates_toward_zero(self):
        ball = Ball(10, 10, 1.5, ScriptedRandom(default=0.9))
        ball.dy = -1.5
        ball.move()
        self.assertEqual((ball.x, ball.y), (11, 8))

        ball = Ball(1, 5, 1.5, ScriptedRandom(default=0.1))
        ball.move()
        self.assertEqual(ball.x, 0)


class TestBrick(unittest.TestCase):
    def test_bounds_and_destroy(self):
        brick = Brick(50, 80)
        rect = brick.bounds()
        self.assertEqual((rect.x, rect.y, rect.width, rect.height), (50, 80, 60, 20))
        self.assertFalse(brick.destroyed)
        brick.destroy()
        brick.destroy()
        self.assertTrue(brick.destroyed)

    def test_position_is_read_only(self):
        brick = Brick(50, 80)
        with self.assertRaises(AttributeError):
            brick.x = 10


if __name__ == "__main__":
    unittest.main()
