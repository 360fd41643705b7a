import pytest
from stylefit.schemas.profile import MeasurementProfile
from stylefit.services.units import convert_length, convert_weight, parse_measurement, weight_unit_for


def test_convert_length_inches_to_cm():
    assert convert_length("10", "inches", "cm") == "25.4"
    assert convert_length("38", "inches", "cm") == "96.5"


def test_convert_length_cm_to_inches():
    assert convert_length("25.4", "cm", "inches") == "10.0"


def test_convert_weight_both_ways():
    assert convert_weight("150", "lbs", "kg") == "68.0"
    assert convert_weight("70", "kg", "lbs") == "154.3"


@pytest.mark.parametrize("raw", ["", "abc", "   ", "-"])
def test_empty_or_unparseable_becomes_empty(raw):
    assert convert_length(raw, "inches", "cm") == ""
    assert convert_weight(raw, "lbs", "kg") == ""


def test_same_unit_keeps_value():
    assert convert_length("38", "cm", "cm") == "38"
    assert convert_weight("61.25", "kg", "kg") == "61.25"


def test_leading_number_is_read():
    assert parse_measurement("38in") == 38.0
    assert parse_measurement(" 12.5 ") == 12.5
    assert parse_measurement("in38") is None
    assert parse_measurement("") is None


@pytest.mark.parametrize("value", ["10", "38.5", "24", "0.5", "61.7"])
def test_length_round_trip(value):
    back = convert_length(convert_length(value, "inches", "cm"), "cm", "inches")
    assert abs(float(back) - float(value)) <= 0.1


@pytest.mark.parametrize("value,units", [
    ("70", ("kg", "lbs")),
    ("55.5", ("kg", "lbs")),
    ("132.3", ("lbs", "kg")),
    ("176.4", ("lbs", "kg")),
])
def test_weight_round_trip(value, units):
    a, b = units
    back = convert_weight(convert_weight(value, a, b), b, a)
    assert abs(float(back) - float(value)) <= 0.1


def test_weight_unit_follows_length_unit():
    assert weight_unit_for("inches") == "lbs"
    assert weight_unit_for("cm") == "kg"


def test_profile_toggle_converts_every_field():
    profile = MeasurementProfile(unit="inches", chest="38", weight="150", waist="abc", armLength="24")
    converted = profile.converted_to("cm")

    assert converted.unit == "cm"
    assert converted.weight_unit == "kg"
    assert converted.chest == "96.5"
    assert converted.arm_length == "61.0"
    assert converted.weight == "68.0"
    # unparseable and empty fields come out empty
    assert converted.waist == ""
    assert converted.hips == ""
    # original untouched
    assert profile.chest == "38"


def test_profile_toggle_to_same_unit_is_noop():
    profile = MeasurementProfile(unit="cm", chest="96.5", waist="abc")
    same = profile.converted_to("cm")
    assert same == profile
