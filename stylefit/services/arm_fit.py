from typing import Dict, List, Optional

from ..schemas.analysis import ArmAnalysis, ArmType
from ..schemas.profile import MeasurementProfile
from .units import LengthUnit


# (long-arm above, short-arm below) per unit; the cm pair is the inch pair converted
ARM_LENGTH_THRESHOLDS: Dict[str, tuple[float, float]] = {
    "inches": (25.0, 22.0),
    "cm": (63.5, 55.9),
}

MUSCULAR_BICEP_RATIO = 0.4
SLENDER_BICEP_RATIO = 0.25

BUILD_ADVICE: Dict[str, List[str]] = {
    "muscular": [
        "Choose shirts with structured shoulders",
        "Avoid overly tight sleeves around biceps",
        "Consider tailored fits for better arm comfort",
    ],
    "slender": [
        "Fitted sleeves will complement your arm shape",
        "Layering can add visual bulk to arms",
        "Structured jackets enhance shoulder line",
    ],
}

LONG_ARM_ADVICE = [
    "Look for shirts with longer sleeves or size up",
    "Consider brands that offer tall sizes",
]
SHORT_ARM_ADVICE = [
    "Regular sleeve lengths should fit well",
    "Avoid oversized sleeves that may bunch up",
]


def is_long_arm(arm_length: float, unit: LengthUnit) -> bool:
    return arm_length > ARM_LENGTH_THRESHOLDS[unit][0]


def is_short_arm(arm_length: float, unit: LengthUnit) -> bool:
    return arm_length < ARM_LENGTH_THRESHOLDS[unit][1]


def classify_arm_build(bicep: float, shoulders: Optional[float]) -> ArmType:
    if not shoulders:
        return "proportional"
    if bicep > shoulders * MUSCULAR_BICEP_RATIO:
        return "muscular"
    if bicep < shoulders * SLENDER_BICEP_RATIO:
        return "slender"
    return "proportional"


def analyze_arm_fit(
    arm_length: Optional[float],
    bicep: Optional[float],
    forearm: Optional[float],
    shoulders: Optional[float],
    unit: LengthUnit,
) -> Optional[ArmAnalysis]:
    if arm_length is None or bicep is None or forearm is None:
        return None

    arm_type = classify_arm_build(bicep, shoulders)
    recommendations: List[str] = list(BUILD_ADVICE.get(arm_type, []))

    if is_long_arm(arm_length, unit):
        recommendations.extend(LONG_ARM_ADVICE)
    elif is_short_arm(arm_length, unit):
        recommendations.extend(SHORT_ARM_ADVICE)

    return ArmAnalysis(arm_type=arm_type, recommendations=recommendations)


def arm_fit_for_profile(profile: MeasurementProfile) -> Optional[ArmAnalysis]:
    return analyze_arm_fit(
        profile.value("arm_length"),
        profile.value("bicep"),
        profile.value("forearm"),
        profile.value("shoulders"),
        profile.unit,
    )
