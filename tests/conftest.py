import random

import pytest


class ScriptedRng:
    """random() replays the given draws first; choice() is seeded."""

    def __init__(self, draws, seed=0):
        self.draws = list(draws)
        self._fallback = random.Random(seed)

    def random(self):
        if self.draws:
            return self.draws.pop(0)
        return self._fallback.random()

    def choice(self, seq):
        return self._fallback.choice(seq)


@pytest.fixture
def scripted_rng():
    return ScriptedRng
