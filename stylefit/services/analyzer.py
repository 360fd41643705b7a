import random
from typing import Optional

import structlog

from ..schemas.analysis import AnalysisResult, ProductRecord
from ..schemas.profile import UserProfile
from .arm_fit import arm_fit_for_profile
from .body_type import body_type_for_profile
from .scoring import SuitabilityScorer, failed_result


logger = structlog.get_logger("stylefit")

FAILURE_MESSAGE = "Unable to analyze the clothing item. Please try again."


class GarmentAnalyzer:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.scorer = SuitabilityScorer(rng)

    def analyze(self, profile: UserProfile, product: ProductRecord) -> AnalysisResult:
        # Work on a private copy so edits made after the request started cannot leak in
        snapshot = profile.model_copy(deep=True)
        try:
            body_type = body_type_for_profile(snapshot.measurements)
            arm_analysis = arm_fit_for_profile(snapshot.measurements)
            result = self.scorer.score(snapshot, body_type, arm_analysis, product)
        except Exception as e:
            logger.error("analysis_failed", provenance=product.provenance, error=str(e),
                         error_type=type(e).__name__, exc_info=True)
            return failed_result(FAILURE_MESSAGE, product)

        logger.info("analysis_completed",
                    provenance=product.provenance,
                    body_type=body_type,
                    arm_type=arm_analysis.arm_type if arm_analysis else None,
                    score=result.suitability_score,
                    sentiment=result.review_summary.sentiment,
                    product_error=product.error)
        return result
