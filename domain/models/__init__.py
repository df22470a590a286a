"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
)
from domain.models.user import AppUser, UserProfile
from domain.models.tracking import DailyLog, WeightEntry, WeightPhoto, HealthSample
from domain.models.workout import (
    Workout,
    ExerciseEntry,
    ExerciseDefinition,
    WorkoutTemplate,
    TemplateExerciseEntry,
)
from domain.models.goal import GoalPeriod

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    # User models
    "AppUser",
    "UserProfile",
    # Tracking models
    "DailyLog",
    "WeightEntry",
    "WeightPhoto",
    "HealthSample",
    # Workout models
    "Workout",
    "ExerciseEntry",
    "ExerciseDefinition",
    "WorkoutTemplate",
    "TemplateExerciseEntry",
    # Goal models
    "GoalPeriod",
]
