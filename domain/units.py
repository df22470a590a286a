"""
Unit conversions. Values are stored metric (kg, km) and converted for display.
"""

from typing import Optional

from domain.enums import UnitSystem

LBS_PER_KG = 2.20462
KM_PER_MILE = 1.60934


def _system(system) -> UnitSystem:
    return system if isinstance(system, UnitSystem) else UnitSystem(system)


def kg_to_lbs(kg: float) -> float:
    return kg * LBS_PER_KG


def lbs_to_kg(lbs: float) -> float:
    return lbs / LBS_PER_KG


def km_to_miles(km: float) -> float:
    return km / KM_PER_MILE


def miles_to_km(miles: float) -> float:
    return miles * KM_PER_MILE


def to_user_weight(kg: Optional[float], system) -> Optional[float]:
    """Stored kg -> the user's display unit."""
    if kg is None:
        return None
    return kg_to_lbs(kg) if _system(system) == UnitSystem.IMPERIAL else kg


def to_stored_weight(value: Optional[float], system) -> Optional[float]:
    """User input in display units -> kg."""
    if value is None:
        return None
    return lbs_to_kg(value) if _system(system) == UnitSystem.IMPERIAL else value


def to_user_distance(km: Optional[float], system) -> Optional[float]:
    if km is None:
        return None
    return km_to_miles(km) if _system(system) == UnitSystem.IMPERIAL else km


def to_stored_distance(value: Optional[float], system) -> Optional[float]:
    if value is None:
        return None
    return miles_to_km(value) if _system(system) == UnitSystem.IMPERIAL else value


def weight_label(system) -> str:
    return "lbs" if _system(system) == UnitSystem.IMPERIAL else "kg"


def distance_label(system) -> str:
    return "mi" if _system(system) == UnitSystem.IMPERIAL else "km"


def weight_to_kg(value: Optional[float], unit: Optional[str], system) -> Optional[float]:
    """Interpret a weight given in an explicit unit, or else in the user's unit system."""
    if value is None:
        return None
    if unit == "kg":
        return value
    if unit == "lbs":
        return lbs_to_kg(value)
    return to_stored_weight(value, system)


def distance_to_km(value: Optional[float], unit: Optional[str], system) -> Optional[float]:
    if value is None:
        return None
    if unit == "km":
        return value
    if unit == "mi":
        return miles_to_km(value)
    return to_stored_distance(value, system)
