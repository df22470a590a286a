"""API routes package"""

from . import (
    users,
    profiles,
    logs,
    weights,
    workouts,
    exercises,
    templates,
    goals,
    dashboard,
    health_sync,
    health,
)

__all__ = [
    "users",
    "profiles",
    "logs",
    "weights",
    "workouts",
    "exercises",
    "templates",
    "goals",
    "dashboard",
    "health_sync",
    "health",
]
