import math
import random
from typing import List, Optional

from ..schemas.analysis import (
    AnalysisResult,
    ArmAnalysis,
    ArmFitSummary,
    BodyType,
    ProductRecord,
    ReviewSummary,
    SizeRecommendation,
)
from ..schemas.profile import UserProfile
from .arm_fit import is_long_arm
from .randomness import chance, default_rng
from .review_strategies import summarize_reviews
from .sizing import size_for_profile


BASE_SCORE = 70
MIN_SCORE = 60
MAX_SCORE = 100

BODY_TYPE_BONUS = 10
MUSCULAR_SWING = 5
SLENDER_BONUS = 8
LONG_ARM_PENALTY = 5
STYLE_BONUS = 5
COLOR_BONUS = 8
COLOR_MATCH_PROBABILITY = 0.7

CONFIDENCE_FACTOR = 0.85
SLEEVE_FACTOR = 0.9
ARM_SUMMARY_TIPS = 2

DEFAULT_CONS = ["Consider sizing carefully", "Check return policy"]


def _clamp(x: float, low: float, high: float) -> float:
    return max(low, min(high, x))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class SuitabilityScorer:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else default_rng()

    def score(
        self,
        profile: UserProfile,
        body_type: BodyType,
        arm_analysis: Optional[ArmAnalysis],
        product: ProductRecord,
    ) -> AnalysisResult:
        measurements = profile.measurements
        preferences = profile.preferences

        score = float(BASE_SCORE)
        pros: List[str] = ["Compatible with your style preferences"]
        cons: List[str] = []

        if body_type != "unknown":
            score += BODY_TYPE_BONUS
            pros.append(f"Suitable for {body_type} body type")

        arm_type = arm_analysis.arm_type if arm_analysis else None
        if arm_type == "muscular":
            if chance(self.rng, 0.5):
                score += MUSCULAR_SWING
                pros.append("Good fit for muscular build")
            else:
                score -= MUSCULAR_SWING
                cons.append("May be restrictive around arms")
        elif arm_type == "slender":
            score += SLENDER_BONUS
            pros.append("Excellent fit for slender arms")

        arm_length = measurements.value("arm_length")
        if arm_length:
            if is_long_arm(arm_length, measurements.unit):
                score -= LONG_ARM_PENALTY
                cons.append("Sleeves may be too short for your arm length")
            else:
                pros.append("Sleeve length should be appropriate")

        if preferences.style:
            score += STYLE_BONUS
            pros.append(f"Matches your {preferences.style} style preference")

        if preferences.colors:
            if chance(self.rng, COLOR_MATCH_PROBABILITY):
                score += COLOR_BONUS
                pros.append("Available in your preferred colors")
            else:
                cons.append("Limited color options in your preferences")

        final = _round_half_up(_clamp(score, MIN_SCORE, MAX_SCORE))

        arm_summary = None
        if arm_analysis is not None:
            arm_summary = ArmFitSummary(
                arm_type=arm_analysis.arm_type,
                sleeve_compatibility=_round_half_up(final * SLEEVE_FACTOR),
                recommendations=list(arm_analysis.recommendations[:ARM_SUMMARY_TIPS]),
            )

        return AnalysisResult(
            suitability_score=final,
            pros=pros,
            cons=cons or list(DEFAULT_CONS),
            review_summary=summarize_reviews(product.review_texts, self.rng),
            size_recommendation=SizeRecommendation(
                size=size_for_profile(measurements),
                fit_note="Size up for comfort" if arm_type == "muscular" else "True to size",
                confidence=_round_half_up(final * CONFIDENCE_FACTOR),
            ),
            arm_fit_summary=arm_summary,
            product_record=product,
            error=product.error,
        )


def failed_result(message: str, product: Optional[ProductRecord] = None) -> AnalysisResult:
    return AnalysisResult(
        suitability_score=0,
        pros=[],
        cons=["Analysis failed"],
        review_summary=ReviewSummary(average_rating="N/A", total_reviews=0, sentiment="unknown"),
        size_recommendation=SizeRecommendation(size="N/A", fit_note="Unable to determine", confidence=0),
        product_record=product,
        error=message,
    )
