from typing import Any, Dict, List, Optional

from ..schemas.analysis import ArmAnalysis, BodyType, RecommendationSet


STYLE_GUIDE: Dict[str, Dict[str, Any]] = {
    "hourglass": {
        "tops": ["Fitted blazers", "Wrap tops", "V-neck sweaters"],
        "bottoms": ["High-waisted jeans", "A-line skirts", "Tailored pants"],
        "tip": "Emphasize your waist with belts and fitted clothing",
    },
    "inverted-triangle": {
        "tops": ["Scoop necks", "Boat necks", "Soft fabrics"],
        "bottoms": ["Bootcut jeans", "Wide-leg pants", "Patterned bottoms"],
        "tip": "Balance broad shoulders with fuller bottoms",
    },
    "pear": {
        "tops": ["Boat necks", "Off-shoulder", "Bright colored tops"],
        "bottoms": ["Straight-leg jeans", "Dark wash denim", "A-line skirts"],
        "tip": "Draw attention upward with statement tops",
    },
    "apple": {
        "tops": ["V-necks", "Empire waist", "Tunic tops"],
        "bottoms": ["Bootcut jeans", "Straight pants", "A-line skirts"],
        "tip": "Create vertical lines and avoid clingy fabrics around midsection",
    },
    "rectangle": {
        "tops": ["Peplum tops", "Ruffled blouses", "Layered looks"],
        "bottoms": ["Skinny jeans", "Pencil skirts", "High-waisted pants"],
        "tip": "Create curves with strategic layering and fitted pieces",
    },
}

FALLBACK_GUIDE: Dict[str, Any] = {
    "tops": [],
    "bottoms": [],
    "tip": "Complete your measurements for personalized recommendations",
}


class Recommender:
    def __init__(self, guide: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        self.guide = guide if guide is not None else STYLE_GUIDE

    def recommend(self, body_type: BodyType, arm_analysis: Optional[ArmAnalysis] = None) -> RecommendationSet:
        entry = self.guide.get(body_type, FALLBACK_GUIDE)

        arm_type: Optional[str] = None
        arm_tips: Optional[List[str]] = None
        if arm_analysis is not None:
            arm_type = arm_analysis.arm_type
            arm_tips = list(arm_analysis.recommendations)

        # Copies so callers can never reach the shared table
        return RecommendationSet(
            body_type=body_type,
            tops=list(entry["tops"]),
            bottoms=list(entry["bottoms"]),
            tip=entry["tip"],
            arm_type=arm_type,
            arm_tips=arm_tips,
        )
