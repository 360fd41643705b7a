import random

from ..config import settings


_default: random.Random | None = None


def default_rng() -> random.Random:
    """Process-wide random source, seeded from RANDOM_SEED when set."""
    global _default
    if _default is None:
        _default = random.Random(settings.random_seed)
    return _default


def chance(rng: random.Random, probability: float) -> bool:
    return rng.random() < probability
