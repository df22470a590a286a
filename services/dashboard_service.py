"""
Dashboard orchestration.

Loads a user's records, hands them to the pure calculators in
``services.projection``, ``services.workout_stats`` and
``services.nutrition_stats``, and converts results to the user's units.
"""

from typing import List, Optional
from uuid import UUID
from datetime import date, timedelta
from sqlalchemy.orm import Session
import logging

from domain.models import UserProfile
from domain.enums import (
    NutritionMetric,
    TimeRange,
    VolumeFilter,
    VolumeMetric,
)
from domain.schemas.dashboard_schemas import (
    DashboardResponse,
    ProjectionPointResponse,
    WeightChangeResponse,
    WeeklyProgressResponse,
    RecoveryResponse,
    CategoryCountResponse,
    DailyValueResponse,
    SeriesResponse,
    MonthlyAverageResponse,
    NutritionHistoryResponse,
)
from domain.units import to_user_weight, weight_label
from repositories import DailyLogRepository, WeightRepository, WorkoutRepository
from services import projection, workout_stats, nutrition_stats
from services.profile_service import ProfileService
from app.config import settings as app_settings
from app.exceptions import ServiceValidationError

logger = logging.getLogger("repscale.dashboard")

VOLUME_LABELS = {
    VolumeMetric.VOLUME_LOAD: "Volume Load",
    VolumeMetric.TOTAL_REPS: "Total Reps",
    VolumeMetric.TOTAL_SETS: "Total Sets",
}


def _round(value: Optional[float], digits: int = 2) -> Optional[float]:
    return None if value is None else round(value, digits)


class DashboardService:
    """Read-only dashboard metrics"""

    @staticmethod
    def build_settings(profile: UserProfile) -> projection.DashboardSettings:
        return projection.DashboardSettings(
            daily_goal=profile.daily_calorie_goal,
            target_weight=profile.target_weight,
            goal_type=profile.goal_type,
            maintenance_calories=profile.maintenance_calories,
            estimation_method=profile.estimation_method,
            enable_calories_burned=profile.enable_calories_burned,
            is_calorie_counting_enabled=profile.is_calorie_counting_enabled,
            kcal_per_kg=app_settings.kcal_per_kg,
            trend_window_days=app_settings.trend_window_days,
            intake_window_days=app_settings.intake_window_days,
            projection_days=app_settings.projection_days,
        )

    @staticmethod
    def get_summary(
        db: Session, user_id: UUID, today: Optional[date] = None
    ) -> DashboardResponse:
        """Goal projection card: maintenance estimate, days to goal, series"""
        today = today or date.today()
        profile = ProfileService.get_profile(db, user_id)
        dash = DashboardService.build_settings(profile)
        units = profile.unit_system

        window = max(dash.trend_window_days, dash.intake_window_days) + 1
        logs = DailyLogRepository(db).get_by_user_id(
            user_id, start_date=today - timedelta(days=window), end_date=today
        )
        weights = WeightRepository(db).get_by_user_id(user_id)

        metrics = projection.compute_metrics(logs, weights, dash, today)
        current = weights[0].weight if weights else None

        calories_left = None
        if profile.is_calorie_counting_enabled:
            calories_left = nutrition_stats.calories_left(
                logs,
                profile.daily_calorie_goal,
                today,
                include_burned=profile.enable_calories_burned,
            )

        logger.info(
            f"dashboard_computed user_id={user_id} method={int(dash.effective_method)} "
            f"days_remaining={metrics.days_remaining}"
        )
        return DashboardResponse(
            goal_type=profile.goal_type,
            effective_method=dash.effective_method,
            display_unit=weight_label(units),
            current_weight=_round(
                to_user_weight(current, units) if current is not None else None
            ),
            target_weight=round(to_user_weight(profile.target_weight, units), 2),
            estimated_maintenance=metrics.estimated_maintenance,
            daily_rate=_round(
                to_user_weight(metrics.kg_per_day, units)
                if metrics.kg_per_day is not None
                else None,
                4,
            ),
            days_remaining=metrics.days_remaining,
            logic_description=metrics.logic_description,
            progress_warning=metrics.progress_warning,
            calories_left_today=calories_left,
            projection_points=[
                ProjectionPointResponse(
                    day=p.day,
                    weight=round(to_user_weight(p.weight, units), 2),
                    method=p.method,
                )
                for p in metrics.projection_points
            ],
            weight_changes=[
                WeightChangeResponse(
                    period=c.period,
                    value=_round(
                        to_user_weight(c.value, units) if c.value is not None else None
                    ),
                )
                for c in metrics.weight_changes
            ],
        )

    @staticmethod
    def get_weekly_progress(
        db: Session, user_id: UUID, today: Optional[date] = None
    ) -> WeeklyProgressResponse:
        today = today or date.today()
        profile = ProfileService.get_profile(db, user_id)
        since = workout_stats.start_of_week(today)
        workouts = WorkoutRepository(db).get_by_user_id(user_id, since=since)
        progress = workout_stats.weekly_progress(
            workouts, profile.weekly_workout_goal, today
        )
        return WeeklyProgressResponse.model_validate(progress)

    @staticmethod
    def get_recovery(
        db: Session, user_id: UUID, today: Optional[date] = None
    ) -> List[RecoveryResponse]:
        """Days since each tracked muscle was last trained"""
        today = today or date.today()
        profile = ProfileService.get_profile(db, user_id)
        workouts = WorkoutRepository(db).get_by_user_id(user_id)
        statuses = workout_stats.recovery_status(
            workouts, profile.tracked_muscle_list, today
        )
        return [RecoveryResponse.model_validate(s) for s in statuses]

    @staticmethod
    def get_category_distribution(
        db: Session,
        user_id: UUID,
        time_range: Optional[TimeRange] = None,
        today: Optional[date] = None,
    ) -> List[CategoryCountResponse]:
        today = today or date.today()
        profile = ProfileService.get_profile(db, user_id)
        time_range = TimeRange(time_range or profile.workout_time_range)
        workouts = WorkoutRepository(db).get_by_user_id(user_id)
        counts = workout_stats.category_distribution(workouts, time_range, today)
        return [CategoryCountResponse.model_validate(c) for c in counts]

    @staticmethod
    def get_strength_history(
        db: Session,
        user_id: UUID,
        exercise: Optional[str] = None,
        reps: Optional[int] = None,
        time_range: Optional[TimeRange] = None,
        today: Optional[date] = None,
    ) -> SeriesResponse:
        """Heaviest set per day; defaults come from the profile's graph settings"""
        today = today or date.today()
        profile = ProfileService.get_profile(db, user_id)
        exercise = exercise or profile.strength_graph_exercise
        reps = reps or profile.strength_graph_reps
        time_range = TimeRange(time_range or profile.strength_graph_time_range)
        if not 1 <= reps <= workout_stats.HIGH_REP_BUCKET:
            raise ServiceValidationError(
                f"reps must be between 1 and {workout_stats.HIGH_REP_BUCKET}"
            )

        workouts = WorkoutRepository(db).get_by_user_id(user_id)
        points = workout_stats.strength_history(
            workouts, exercise, reps, profile.unit_system, time_range, today
        )
        rep_label = "20+" if reps == workout_stats.HIGH_REP_BUCKET else str(reps)
        return SeriesResponse(
            label=f"{exercise} ({rep_label} reps)",
            unit=weight_label(profile.unit_system),
            points=[DailyValueResponse.model_validate(p) for p in points],
        )

    @staticmethod
    def get_volume_history(
        db: Session,
        user_id: UUID,
        metric: VolumeMetric,
        filter_type: VolumeFilter,
        selection: str,
        time_range: Optional[TimeRange] = None,
        today: Optional[date] = None,
    ) -> SeriesResponse:
        today = today or date.today()
        profile = ProfileService.get_profile(db, user_id)
        time_range = TimeRange(time_range or profile.workout_time_range)
        workouts = WorkoutRepository(db).get_by_user_id(user_id)
        points = workout_stats.volume_history(
            workouts, metric, filter_type, selection, profile.unit_system, time_range, today
        )
        unit = weight_label(profile.unit_system) if metric == VolumeMetric.VOLUME_LOAD else ""
        return SeriesResponse(
            label=f"{selection} {VOLUME_LABELS[metric]}",
            unit=unit,
            points=[DailyValueResponse.model_validate(p) for p in points],
        )

    @staticmethod
    def get_nutrition_history(
        db: Session, user_id: UUID, metric: NutritionMetric
    ) -> NutritionHistoryResponse:
        ProfileService.get_user(db, user_id)
        logs = DailyLogRepository(db).get_by_user_id(user_id, newest_first=False)
        months = nutrition_stats.monthly_averages(logs, metric)
        return NutritionHistoryResponse(
            metric=metric,
            unit=metric.unit,
            months=[MonthlyAverageResponse.model_validate(m) for m in months],
        )

    @staticmethod
    def get_logged_exercises(db: Session, user_id: UUID) -> List[str]:
        """Names of every exercise the user has logged, for graph pickers"""
        ProfileService.get_user(db, user_id)
        workouts = WorkoutRepository(db).get_by_user_id(user_id)
        return workout_stats.exercise_names(workouts)
