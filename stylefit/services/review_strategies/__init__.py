import random
from typing import Sequence

from ...schemas.analysis import ReviewSummary
from .base import ReviewStrategy
from .keyword import KeywordHeuristicStrategy
from .simulated import SimulatedStrategy


def select_strategy(review_texts: Sequence[str]) -> ReviewStrategy:
    if review_texts:
        return KeywordHeuristicStrategy()
    return SimulatedStrategy()


def summarize_reviews(review_texts: Sequence[str], rng: random.Random) -> ReviewSummary:
    return select_strategy(review_texts).summarize(list(review_texts), rng)
