from typing import Dict, List, Optional, Tuple

from ..schemas.profile import MeasurementProfile
from .units import LengthUnit


SIZE_ORDER: List[str] = ["S", "M", "L", "XL"]

# Chest upper bounds (exclusive) for S, M, L; anything larger is XL
CHEST_BOUNDS: Dict[str, Tuple[float, float, float]] = {
    "inches": (36.0, 40.0, 44.0),
    "cm": (91.0, 102.0, 112.0),
}

DEFAULT_SIZE = "M"


def recommended_size(chest: Optional[float], unit: LengthUnit, height: Optional[float] = None) -> str:
    """Letter size from chest alone.

    ``height`` is accepted so callers can pass the full profile, but it has no
    effect on the result.
    """
    if chest is None:
        return DEFAULT_SIZE
    for size, bound in zip(SIZE_ORDER, CHEST_BOUNDS[unit]):
        if chest < bound:
            return size
    return SIZE_ORDER[-1]


def size_for_profile(profile: MeasurementProfile) -> str:
    return recommended_size(profile.value("chest"), profile.unit, profile.value("height"))
