class ScriptedRng:
    """Stands in for random.Random: randrange() hands out fixed values in order."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        value = self.values.pop(0)
        assert 0 <= value < n
        return value
