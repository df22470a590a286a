"""
Domain enums for RepScale application.
Contains all enumeration types used across the domain models.
"""

import enum
from datetime import date, timedelta
from typing import Optional


class GoalType(str, enum.Enum):
    """Body weight goal types"""

    CUTTING = "Cutting"
    BULKING = "Bulking"
    MAINTENANCE = "Maintenance"


class UnitSystem(str, enum.Enum):
    """Display unit system; storage is always metric"""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class EstimationMethod(int, enum.Enum):
    """How the daily rate of weight change is estimated"""

    TREND = 0
    AVERAGE_INTAKE = 1
    FIXED_TARGET = 2


class WorkoutCategory(str, enum.Enum):
    """Common workout split categories"""

    PUSH = "Push"
    PULL = "Pull"
    LEGS = "Legs"
    CARDIO = "Cardio"
    FULL_BODY = "Full Body"
    UPPER = "Upper"
    LOWER = "Lower"


class TimeRange(str, enum.Enum):
    """Look-back windows used by dashboard cards"""

    SEVEN_DAYS = "7 Days"
    THIRTY_DAYS = "30 Days"
    NINETY_DAYS = "90 Days"
    ONE_YEAR = "1 Year"
    ALL_TIME = "All Time"

    def start_date(self, today: date) -> Optional[date]:
        """First day included in the range, or None for all time."""
        days = {
            TimeRange.SEVEN_DAYS: 7,
            TimeRange.THIRTY_DAYS: 30,
            TimeRange.NINETY_DAYS: 90,
            TimeRange.ONE_YEAR: 365,
        }.get(self)
        if days is None:
            return None
        return today - timedelta(days=days)


class NutritionMetric(str, enum.Enum):
    CALORIES = "calories"
    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"

    @property
    def unit(self) -> str:
        return "kcal" if self is NutritionMetric.CALORIES else "g"


class VolumeMetric(str, enum.Enum):
    VOLUME_LOAD = "volume_load"
    TOTAL_REPS = "total_reps"
    TOTAL_SETS = "total_sets"


class VolumeFilter(str, enum.Enum):
    WORKOUT = "workout"
    EXERCISE = "exercise"


class HealthMetric(str, enum.Enum):
    """Health sample types accepted by the health bridge"""

    DIETARY_ENERGY = "dietary_energy"
    ACTIVE_ENERGY = "active_energy"
    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"


class LogMode(str, enum.Enum):
    """How calories are applied to an existing daily log"""

    ADD = "add"
    SET = "set"
