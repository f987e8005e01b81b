"""
Keyboard events -> paddle and launch intent.

Events are buffered between ticks and applied all at once when the session
consumes them, so nothing changes halfway through a tick.

Releasing either arrow key stops the paddle, even if the other arrow is still
held.
"""
from enum import Enum

from .entities import Paddle


class InputEvent(Enum):
    LEFT_DOWN = "left_down"
    LEFT_UP = "left_up"
    RIGHT_DOWN = "right_down"
    RIGHT_UP = "right_up"
    LAUNCH_PRESSED = "launch_pressed"


_PADDLE_INTENTS = {
    InputEvent.LEFT_DOWN: Paddle.LEFT,
    InputEvent.RIGHT_DOWN: Paddle.RIGHT,
    InputEvent.LEFT_UP: Paddle.STOP,
    InputEvent.RIGHT_UP: Paddle.STOP,
}


class InputAdapter:
    def __init__(self):
        self.paddle_intent = None
        self.launch_requested = False

    def push(self, event):
        if not isinstance(event, InputEvent):
            raise ValueError(f"Not an input event: {event!r}")
        if event is InputEvent.LAUNCH_PRESSED:
            self.launch_requested = True
        else:
            # Last directional event before the tick wins.
            self.paddle_intent = _PADDLE_INTENTS[event]

    def consume(self):
        """Return ``(paddle_intent, launch_requested)`` and clear the buffer.

        ``paddle_intent`` is None when no directional event arrived.
        """
        intent, launch = self.paddle_intent, self.launch_requested
        self.paddle_intent = None
        self.launch_requested = False
        return intent, launch
