import random
from typing import Sequence

from ...schemas.analysis import ReviewSummary
from ..randomness import chance
from .base import draw_rating


class SimulatedStrategy:
    """Stand-in summary for products with no review text to read."""

    name = "simulated"

    def summarize(self, review_texts: Sequence[str], rng: random.Random) -> ReviewSummary:
        return ReviewSummary(
            average_rating=draw_rating(rng, 3.0, 5.0),
            total_reviews=rng.randint(100, 1099),
            sentiment="positive" if chance(rng, 0.7) else "mixed",
        )
