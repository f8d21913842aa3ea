import pytest


class ScriptedSolve:
    """solve_lp fake returning the scripted statuses, then the last one forever."""

    def __init__(self, statuses, events=None):
        self.statuses = list(statuses)
        self.calls = 0
        self.events = events

    def __call__(self):
        idx = min(self.calls, len(self.statuses) - 1)
        self.calls += 1
        if self.events is not None:
            self.events.append("solve")
        return self.statuses[idx]


class ScriptedOracle:
    """try_add_violated fake returning True ``k`` times, then False."""

    def __init__(self, k, events=None):
        self.k = k
        self.calls = 0
        self.events = events

    def __call__(self):
        self.calls += 1
        if self.events is not None:
            self.events.append("oracle")
        return self.calls <= self.k


class ScriptedRandom:
    """randint stand-in returning fixed offsets and recording the requested bounds."""

    def __init__(self, *values):
        self.values = list(values)
        self.bounds = []

    def randint(self, a, b):
        self.bounds.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def scripted_solve():
    return ScriptedSolve


@pytest.fixture
def scripted_oracle():
    return ScriptedOracle


@pytest.fixture
def scripted_random():
    return ScriptedRandom
