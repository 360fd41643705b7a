from typing import Optional

from ..schemas.analysis import BodyType
from ..schemas.profile import MeasurementProfile


def classify_body_type(chest: Optional[float], waist: Optional[float], hips: Optional[float]) -> BodyType:
    """Classify a chest/waist/hip triple, first matching rule wins.

    All three values must share a unit; the thresholds are absolute
    differences and are applied as-is in either unit.
    """
    if chest is None or waist is None or hips is None:
        return "unknown"

    if abs(chest - hips) <= 2 and waist < chest - 4:
        return "hourglass"
    if chest > hips + 2 and chest > waist + 4:
        return "inverted-triangle"
    if hips > chest + 2 and hips > waist + 4:
        return "pear"
    if waist >= chest - 2 and waist >= hips - 2:
        return "apple"
    return "rectangle"


def body_type_for_profile(profile: MeasurementProfile) -> BodyType:
    return classify_body_type(profile.value("chest"), profile.value("waist"), profile.value("hips"))
