import re
from typing import Literal

LengthUnit = Literal["inches", "cm"]
WeightUnit = Literal["lbs", "kg"]

CM_PER_INCH = 2.54
KG_PER_LB = 0.453592

# Leading decimal number, the way a form field is read ("38in" -> 38)
_NUMBER_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_measurement(value: str | float | int | None) -> float | None:
    """Read a user-entered measurement. Empty or unparseable input is unknown (None)."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_RE.match(value)
    if not match:
        return None
    return float(match.group(0))


def weight_unit_for(length_unit: LengthUnit) -> WeightUnit:
    return "lbs" if length_unit == "inches" else "kg"


def _format(value: float) -> str:
    return f"{value:.1f}"


def convert_length(value: str, from_unit: LengthUnit, to_unit: LengthUnit) -> str:
    if not value:
        return ""
    num = parse_measurement(value)
    if num is None:
        return ""
    if from_unit == "inches" and to_unit == "cm":
        return _format(num * CM_PER_INCH)
    if from_unit == "cm" and to_unit == "inches":
        return _format(num / CM_PER_INCH)
    return value


def convert_weight(value: str, from_unit: WeightUnit, to_unit: WeightUnit) -> str:
    if not value:
        return ""
    num = parse_measurement(value)
    if num is None:
        return ""
    if from_unit == "lbs" and to_unit == "kg":
        return _format(num * KG_PER_LB)
    if from_unit == "kg" and to_unit == "lbs":
        return _format(num / KG_PER_LB)
    return value
