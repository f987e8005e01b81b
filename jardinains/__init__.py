from .difficulty import Difficulty
from .input_adapter import InputEvent
from .session import GameSession, GameState, Snapshot, advance, apply_input, create_session

__all__ = [
    "Difficulty",
    "GameSession",
    "GameState",
    "InputEvent",
    "Snapshot",
    "advance",
    "apply_input",
    "create_session",
]
