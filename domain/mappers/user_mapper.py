"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from typing import Optional
from domain.models import AppUser, UserProfile
from domain.schemas.profile_schemas import UserProfileResponse, UserProfileSettings


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def profile_to_settings(profile: UserProfile) -> UserProfileSettings:
        """
        Convert a UserProfile ORM row to the settings DTO.

        Comma-separated muscle columns are returned as lists.
        """
        return UserProfileSettings(
            unit_system=profile.unit_system,
            gender=profile.gender,
            is_dark_mode=profile.is_dark_mode,
            is_premium=profile.is_premium,
            daily_calorie_goal=profile.daily_calorie_goal,
            target_weight=profile.target_weight,
            goal_type=profile.goal_type,
            maintenance_calories=profile.maintenance_calories,
            maintenance_tolerance=profile.maintenance_tolerance,
            estimation_method=profile.estimation_method,
            is_calorie_counting_enabled=profile.is_calorie_counting_enabled,
            enable_calories_burned=profile.enable_calories_burned,
            enable_health_sync=profile.enable_health_sync,
            dashboard_layout=list(profile.dashboard_layout or []),
            workout_time_range=profile.workout_time_range,
            weight_history_time_range=profile.weight_history_time_range,
            strength_graph_time_range=profile.strength_graph_time_range,
            strength_graph_exercise=profile.strength_graph_exercise,
            strength_graph_reps=profile.strength_graph_reps,
            tracked_muscles=profile.tracked_muscle_list,
            custom_muscles=profile.custom_muscle_list,
            weekly_workout_goal=profile.weekly_workout_goal,
            onboarding_completed=profile.onboarding_completed,
            tutorial_progress=dict(profile.tutorial_progress or {}),
            updated_at=profile.updated_at,
        )

    @staticmethod
    def to_response(user: AppUser) -> UserProfileResponse:
        """
        Convert AppUser ORM model to UserProfileResponse DTO.

        Args:
            user: AppUser ORM instance with its profile loaded

        Returns:
            UserProfileResponse DTO with all user data
        """
        settings: Optional[UserProfileSettings] = None
        if user.profile:
            settings = UserMapper.profile_to_settings(user.profile)

        return UserProfileResponse(
            user_id=user.user_id,
            email=user.email,
            full_name=user.full_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
            profile=settings,
        )
