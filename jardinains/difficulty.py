from enum import Enum
from collections import namedtuple


Preset = namedtuple("Preset", ["ball_speed", "paddle_width", "lives"])


class Difficulty(Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @property
    def preset(self):
        return PRESETS[self]

    @classmethod
    def parse(cls, value):
        """Return the Difficulty named by ``value``.

        Accepts a member or a case-insensitive name ("easy", "Hard", ...).
        Anything else raises ValueError instead of falling back to Medium.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        names = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown difficulty {value!r}; expected one of: {names}")


PRESETS = {
    Difficulty.EASY: Preset(ball_speed=2, paddle_width=100, lives=5),
    Difficulty.MEDIUM: Preset(ball_speed=3, paddle_width=80, lives=3),
    Difficulty.HARD: Preset(ball_speed=4, paddle_width=60, lives=2),
}
