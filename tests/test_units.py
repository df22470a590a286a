"""
Tests for unit conversions between stored metric values and display units.
"""

import pytest

from domain.enums import UnitSystem
from domain import units


def test_weight_conversions():
    assert units.kg_to_lbs(100) == pytest.approx(220.462)
    assert units.lbs_to_kg(220.462) == pytest.approx(100)


def test_distance_conversions():
    assert units.miles_to_km(1) == pytest.approx(1.60934)
    assert units.km_to_miles(1.60934) == pytest.approx(1)


@pytest.mark.parametrize("system", [UnitSystem.IMPERIAL, "imperial"])
def test_imperial_display(system):
    assert units.to_user_weight(50, system) == pytest.approx(110.231)
    assert units.to_stored_weight(110.231, system) == pytest.approx(50)
    assert units.to_user_distance(10, system) == pytest.approx(6.21371, rel=1e-4)
    assert units.to_stored_distance(5, system) == pytest.approx(8.0467)
    assert units.weight_label(system) == "lbs"
    assert units.distance_label(system) == "mi"


def test_metric_display_is_identity():
    assert units.to_user_weight(72.5, UnitSystem.METRIC) == 72.5
    assert units.to_stored_distance(5, "metric") == 5
    assert units.weight_label("metric") == "kg"
    assert units.distance_label(UnitSystem.METRIC) == "km"


def test_missing_values_pass_through():
    assert units.to_user_weight(None, UnitSystem.IMPERIAL) is None
    assert units.to_stored_weight(None, UnitSystem.IMPERIAL) is None
    assert units.to_user_distance(None, UnitSystem.IMPERIAL) is None


def test_unknown_system_rejected():
    with pytest.raises(ValueError):
        units.weight_label("furlongs")


def test_explicit_unit_overrides_user_system():
    assert units.weight_to_kg(100, "kg", UnitSystem.IMPERIAL) == 100
    assert units.weight_to_kg(220.462, "lbs", UnitSystem.METRIC) == pytest.approx(100)
    assert units.weight_to_kg(220.462, None, UnitSystem.IMPERIAL) == pytest.approx(100)
    assert units.distance_to_km(5, "km", UnitSystem.IMPERIAL) == 5
    assert units.distance_to_km(1, "mi", UnitSystem.METRIC) == pytest.approx(1.60934)
    assert units.distance_to_km(None, "mi", UnitSystem.METRIC) is None
