import os
import random

import pytest

# Settings are read at import time, so these must be in place before stylefit loads
os.environ.setdefault("API_KEY", "test-key")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("RATE_LIMIT_BURST", "10000")
os.environ.setdefault("RATE_LIMIT_PER_MIN", "100000")


class ScriptedRandom(random.Random):
    """Random source that hands out queued values from random() first."""

    def __init__(self, values, seed: int = 0) -> None:
        super().__init__(seed)
        self._values = list(values)

    def random(self):
        if self._values:
            return self._values.pop(0)
        return super().random()

    def getrandbits(self, k):
        # Integer draws (randint) stay on the seeded generator
        return super().getrandbits(k)


@pytest.fixture
def scripted():
    return ScriptedRandom
