# tests/support.py
class ScriptedRandom:
    """Returns the scripted values in order, then ``default`` forever."""

    def __init__(self, values=(), default=0.9):
        self.values = list(values)
        self.default = default

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.default
