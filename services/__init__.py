"""Services package - Business logic layer"""

from services.profile_service import ProfileService
from services.log_service import LogService
from services.weight_service import WeightService
from services.workout_service import WorkoutService
from services.goal_service import GoalService
from services.health_service import HealthService
from services.dashboard_service import DashboardService

# Note: projection, workout_stats and nutrition_stats hold pure functions, not classes

__all__ = [
    "ProfileService",
    "LogService",
    "WeightService",
    "WorkoutService",
    "GoalService",
    "HealthService",
    "DashboardService",
]
