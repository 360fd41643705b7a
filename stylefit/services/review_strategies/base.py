import math
import random
from typing import Protocol, Sequence

from ...schemas.analysis import ReviewSummary


class ReviewStrategy(Protocol):
    name: str

    def summarize(self, review_texts: Sequence[str], rng: random.Random) -> ReviewSummary:
        ...


def draw_rating(rng: random.Random, low: float, high: float) -> float:
    # Truncated to one decimal so the upper bound is never reported
    return math.floor((low + rng.random() * (high - low)) * 10) / 10
