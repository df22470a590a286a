"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository, UserProfileRepository
from repositories.daily_log_repository import DailyLogRepository
from repositories.weight_repository import WeightRepository
from repositories.workout_repository import (
    WorkoutRepository,
    ExerciseDefinitionRepository,
    WorkoutTemplateRepository,
)
from repositories.goal_period_repository import GoalPeriodRepository
from repositories.health_repository import HealthSampleRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "UserProfileRepository",
    "DailyLogRepository",
    "WeightRepository",
    "WorkoutRepository",
    "ExerciseDefinitionRepository",
    "WorkoutTemplateRepository",
    "GoalPeriodRepository",
    "HealthSampleRepository",
]
