import pytest

from vpet.storage import PetStore


class ScriptedRandom:
    """Stand-in for the random module that replays fixed draws."""

    def __init__(self, rolls=(), choices=()):
        self.rolls = list(rolls)
        self.choices = list(choices)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(("randrange", stop))
        return self.rolls.pop(0)

    def choice(self, seq):
        self.calls.append(("choice", len(seq)))
        return seq[self.choices.pop(0)]


@pytest.fixture
def store(tmp_path):
    return PetStore(tmp_path / "saves")


@pytest.fixture
def no_sleep():
    calls = []
    return calls.append, calls
