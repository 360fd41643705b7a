from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..services.units import (
    LengthUnit,
    WeightUnit,
    convert_length,
    convert_weight,
    parse_measurement,
    weight_unit_for,
)


Style = Literal["casual", "formal", "sporty", "bohemian", "minimalist", "vintage"]
Color = Literal["black", "white", "navy", "gray", "beige", "red", "blue", "green"]
Budget = Literal["low", "medium", "high", "luxury"]
FitPreference = Literal["slim", "regular", "loose", "oversized"]

STYLE_OPTIONS: List[str] = ["casual", "formal", "sporty", "bohemian", "minimalist", "vintage"]
COLOR_OPTIONS: List[str] = ["black", "white", "navy", "gray", "beige", "red", "blue", "green"]
BUDGET_OPTIONS: List[str] = ["low", "medium", "high", "luxury"]
FIT_OPTIONS: List[str] = ["slim", "regular", "loose", "oversized"]

# snake_case attribute -> form field name
MEASUREMENT_FIELDS: Dict[str, str] = {
    "chest": "chest",
    "waist": "waist",
    "hips": "hips",
    "height": "height",
    "weight": "weight",
    "shoulders": "shoulders",
    "inseam": "inseam",
    "arm_length": "armLength",
    "bicep": "bicep",
    "forearm": "forearm",
    "wrist": "wrist",
}


class MeasurementProfile(BaseModel):
    """Body measurements as entered by the user.

    Values stay strings so that what the user typed survives a round trip.
    Length fields share ``unit``; weight uses the paired weight unit.
    """

    model_config = ConfigDict(populate_by_name=True)

    unit: LengthUnit = "inches"
    chest: str = ""
    waist: str = ""
    hips: str = ""
    height: str = ""
    weight: str = ""
    shoulders: str = ""
    inseam: str = ""
    arm_length: str = Field("", alias="armLength")
    bicep: str = ""
    forearm: str = ""
    wrist: str = ""

    @field_validator(*MEASUREMENT_FIELDS.keys(), mode="before")
    @classmethod
    def _coerce_to_str(cls, v):
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def weight_unit(self) -> WeightUnit:
        return weight_unit_for(self.unit)

    def value(self, field: str) -> Optional[float]:
        """Numeric value of a measurement, or None when unknown."""
        return parse_measurement(getattr(self, field))

    def labels(self) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for attr, name in MEASUREMENT_FIELDS.items():
            unit = self.weight_unit if attr == "weight" else self.unit
            title = "Arm Length" if attr == "arm_length" else attr.capitalize()
            out[name] = f"{title} ({unit})"
        return out

    def with_values(self, updates: Dict[str, str]) -> "MeasurementProfile":
        """Return a copy with some fields replaced. Keys may be either naming style."""
        lookup = {name: attr for attr, name in MEASUREMENT_FIELDS.items()}
        changes: Dict[str, str] = {}
        for key, val in updates.items():
            attr = key if key in MEASUREMENT_FIELDS else lookup.get(key)
            if attr is None:
                raise KeyError(key)
            changes[attr] = "" if val is None else str(val)
        return self.model_copy(update=changes)

    def converted_to(self, unit: LengthUnit) -> "MeasurementProfile":
        if unit == self.unit:
            return self.model_copy()
        changes: Dict[str, str] = {"unit": unit}
        for attr in MEASUREMENT_FIELDS:
            raw = getattr(self, attr)
            if attr == "weight":
                changes[attr] = convert_weight(raw, self.weight_unit, weight_unit_for(unit))
            else:
                changes[attr] = convert_length(raw, self.unit, unit)
        return self.model_copy(update=changes)


class StylePreferences(BaseModel):
    style: Style = "casual"
    colors: List[Color] = Field(default_factory=list)
    budget: Budget = "medium"
    fit: FitPreference = "regular"

    @field_validator("colors")
    @classmethod
    def _unique_colors(cls, v: List[str]) -> List[str]:
        seen: List[str] = []
        for c in v:
            if c not in seen:
                seen.append(c)
        return seen

    def toggle_color(self, color: Color) -> "StylePreferences":
        if color in self.colors:
            colors = [c for c in self.colors if c != color]
        else:
            colors = [*self.colors, color]
        return self.model_copy(update={"colors": colors})


class UserProfile(BaseModel):
    measurements: MeasurementProfile = Field(default_factory=MeasurementProfile)
    preferences: StylePreferences = Field(default_factory=StylePreferences)


class UnitUpdate(BaseModel):
    unit: LengthUnit


class PreferencesUpdate(BaseModel):
    style: Optional[Style] = None
    colors: Optional[List[Color]] = None
    budget: Optional[Budget] = None
    fit: Optional[FitPreference] = None
