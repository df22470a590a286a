from typing import List, Optional
from uuid import UUID
from datetime import date, datetime
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from domain.models import AppUser, UserProfile, GoalPeriod, WeightEntry
from domain.models.user import DEFAULT_DASHBOARD_LAYOUT
from domain.schemas.profile_schemas import (
    UserCreate,
    ProfileUpdateRequest,
    GoalSettingsUpdate,
    OnboardingRequest,
    TutorialState,
    RecommendationRequest,
    RecommendationResponse,
)
from domain.tutorial import TUTORIAL_SECTIONS, total_steps
from domain.enums import TimeRange
from domain.units import to_stored_weight
from repositories import (
    UserRepository,
    UserProfileRepository,
    WeightRepository,
    GoalPeriodRepository,
)
from services.projection import recommended_daily_goal
from app.config import settings
from app.exceptions import ServiceValidationError, NotFoundError

logger = logging.getLogger("repscale.profile")


class ProfileService:
    """Business logic for users, their settings profile and goal configuration"""

    @staticmethod
    def create_user(db: Session, payload: UserCreate) -> AppUser:
        """Create a user with a default profile and an opening goal period"""
        user = UserRepository(db).create_user(payload.email, payload.full_name)
        ProfileService._open_period(db, user.user_id, user.profile, start=date.today())
        db.commit()
        db.refresh(user)
        logger.info(f"user_created user_id={user.user_id}")
        return user

    @staticmethod
    def get_all_users(db: Session, skip: int = 0, limit: int = 100) -> List[AppUser]:
        """One page of users; at most `limit` rows per call"""
        return UserRepository(db).get_all(skip=skip, limit=limit)

    @staticmethod
    def get_user(db: Session, user_id: UUID) -> AppUser:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError(f"User {user_id} not found")
        return user

    @staticmethod
    def get_profile(db: Session, user_id: UUID) -> UserProfile:
        """Settings row for an existing user; created with defaults if missing"""
        ProfileService.get_user(db, user_id)
        return UserProfileRepository(db).get_or_create(user_id)

    @staticmethod
    def delete_user(db: Session, user_id: UUID) -> None:
        if not UserRepository(db).delete_user(user_id):
            raise NotFoundError(f"User {user_id} not found")
        logger.info(f"user_deleted user_id={user_id}")

    @staticmethod
    def update_profile(
        db: Session, user_id: UUID, payload: ProfileUpdateRequest
    ) -> AppUser:
        """Apply a partial settings update"""
        user = ProfileService.get_user(db, user_id)
        profile = ProfileService.get_profile(db, user_id)
        changes = payload.model_dump(exclude_unset=True)

        if "full_name" in changes:
            user.full_name = changes.pop("full_name")

        if "tracked_muscles" in changes:
            profile.tracked_muscles = ",".join(changes.pop("tracked_muscles") or [])

        if "dashboard_layout" in changes:
            layout = changes.pop("dashboard_layout") or []
            unknown = [card for card in layout if card not in DEFAULT_DASHBOARD_LAYOUT]
            if unknown:
                raise ServiceValidationError(
                    f"Unknown dashboard cards: {', '.join(unknown)}",
                    details={"allowed": DEFAULT_DASHBOARD_LAYOUT},
                )
            profile.dashboard_layout = layout

        for field, value in changes.items():
            if value is None:
                continue
            if isinstance(value, TimeRange):
                value = value.value
            setattr(profile, field, value)

        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"profile_update_failed user_id={user_id} error={str(e)}")
            raise ServiceValidationError("Database integrity error during profile update")

        db.refresh(user)
        logger.info(f"profile_updated user_id={user_id} fields={sorted(payload.model_fields_set)}")
        return user

    @staticmethod
    def update_goal_settings(
        db: Session, user_id: UUID, payload: GoalSettingsUpdate
    ) -> UserProfile:
        """
        Update goal configuration.

        A change of goal type closes the open GoalPeriod (end date today,
        end weight the latest weigh-in) and opens a new one.
        """
        profile = ProfileService.get_profile(db, user_id)
        previous_goal = profile.goal_type

        profile.goal_type = payload.goal_type
        profile.target_weight = to_stored_weight(payload.target_weight, profile.unit_system)
        profile.maintenance_calories = payload.maintenance_calories
        profile.daily_calorie_goal = payload.daily_calorie_goal
        profile.estimation_method = int(payload.estimation_method)
        if payload.maintenance_tolerance is not None:
            profile.maintenance_tolerance = payload.maintenance_tolerance

        periods = GoalPeriodRepository(db)
        open_period = periods.get_open(user_id)

        if previous_goal != payload.goal_type or open_period is None:
            today = date.today()
            latest = WeightRepository(db).get_latest(user_id)
            if open_period is not None:
                open_period.end_date = today
                open_period.end_weight = latest.weight if latest else None
            ProfileService._open_period(db, user_id, profile, start=today)
            logger.info(
                f"goal_phase_changed user_id={user_id} "
                f"from={previous_goal.value if previous_goal else None} to={payload.goal_type.value}"
            )
        else:
            open_period.daily_calorie_goal = profile.daily_calorie_goal
            open_period.maintenance_calories = profile.maintenance_calories

        db.commit()
        db.refresh(profile)
        logger.info(
            f"goal_settings_updated user_id={user_id} goal={profile.goal_type.value} "
            f"method={profile.estimation_method}"
        )
        return profile

    @staticmethod
    def _open_period(
        db: Session, user_id: UUID, profile: UserProfile, start: date
    ) -> GoalPeriod:
        latest = WeightRepository(db).get_latest(user_id)
        period = GoalPeriod(
            user_id=user_id,
            goal_type=profile.goal_type,
            start_date=start,
            start_weight=latest.weight if latest else None,
            daily_calorie_goal=profile.daily_calorie_goal,
            maintenance_calories=profile.maintenance_calories,
        )
        db.add(period)
        db.flush()
        return period

    @staticmethod
    def add_custom_muscle(db: Session, user_id: UUID, name: str) -> UserProfile:
        profile = ProfileService.get_profile(db, user_id)
        if not profile.add_custom_muscle(name):
            raise ServiceValidationError(f"Muscle '{name.strip()}' already exists")
        db.commit()
        db.refresh(profile)
        logger.info(f"custom_muscle_added user_id={user_id} name={name.strip()}")
        return profile

    @staticmethod
    def complete_onboarding(
        db: Session, user_id: UUID, payload: OnboardingRequest
    ) -> AppUser:
        """Store the initial setup, record the first weigh-in and finish onboarding"""
        user = ProfileService.get_user(db, user_id)
        profile = ProfileService.get_profile(db, user_id)

        profile.unit_system = payload.unit_system
        profile.gender = payload.gender
        profile.goal_type = payload.goal_type
        profile.target_weight = to_stored_weight(payload.target_weight, payload.unit_system)
        profile.maintenance_calories = payload.maintenance_calories
        profile.daily_calorie_goal = payload.daily_calorie_goal
        profile.is_calorie_counting_enabled = payload.is_calorie_counting_enabled
        profile.enable_health_sync = payload.enable_health_sync

        if payload.current_weight is not None:
            db.add(
                WeightEntry(
                    user_id=user_id,
                    recorded_at=datetime.now(),
                    weight=to_stored_weight(payload.current_weight, payload.unit_system),
                )
            )
            db.flush()

        periods = GoalPeriodRepository(db)
        open_period = periods.get_open(user_id)
        if open_period is not None:
            db.delete(open_period)
            db.flush()
        ProfileService._open_period(db, user_id, profile, start=date.today())

        profile.onboarding_completed = True
        db.commit()
        db.refresh(user)
        logger.info(f"onboarding_completed user_id={user_id} goal={payload.goal_type.value}")
        return user

    @staticmethod
    def _tutorial_state(section: str, step: int) -> TutorialState:
        total = total_steps(section)
        completed = step >= total
        title, description = (None, None)
        if not completed:
            title, description = TUTORIAL_SECTIONS[section][step]
        return TutorialState(
            section=section,
            step=min(step, total),
            total_steps=total,
            completed=completed,
            title=title,
            description=description,
        )

    @staticmethod
    def _check_section(section: str) -> None:
        if section not in TUTORIAL_SECTIONS:
            raise NotFoundError(
                f"Unknown tutorial section '{section}'",
                details={"sections": list(TUTORIAL_SECTIONS)},
            )

    @staticmethod
    def get_tutorial(db: Session, user_id: UUID, section: str) -> TutorialState:
        ProfileService._check_section(section)
        profile = ProfileService.get_profile(db, user_id)
        step = (profile.tutorial_progress or {}).get(section, 0)
        return ProfileService._tutorial_state(section, step)

    @staticmethod
    def advance_tutorial(db: Session, user_id: UUID, section: str) -> TutorialState:
        """Move to the next step; moving past the last step marks the section seen"""
        ProfileService._check_section(section)
        profile = ProfileService.get_profile(db, user_id)
        progress = dict(profile.tutorial_progress or {})
        step = min(progress.get(section, 0) + 1, total_steps(section))
        progress[section] = step
        # reassign so the JSON column is flagged dirty
        profile.tutorial_progress = progress
        db.commit()
        logger.info(f"tutorial_advanced user_id={user_id} section={section} step={step}")
        return ProfileService._tutorial_state(section, step)

    @staticmethod
    def skip_tutorial(db: Session, user_id: UUID, section: str) -> TutorialState:
        ProfileService._check_section(section)
        profile = ProfileService.get_profile(db, user_id)
        progress = dict(profile.tutorial_progress or {})
        progress[section] = total_steps(section)
        profile.tutorial_progress = progress
        db.commit()
        logger.info(f"tutorial_skipped user_id={user_id} section={section}")
        return ProfileService._tutorial_state(section, progress[section])

    @staticmethod
    def recommend_goal(
        db: Session,
        user_id: UUID,
        payload: RecommendationRequest,
        today: Optional[date] = None,
    ) -> RecommendationResponse:
        """Daily calorie goal that reaches the target weight by the target date"""
        profile = ProfileService.get_profile(db, user_id)
        latest = WeightRepository(db).get_latest(user_id)
        current = latest.weight if latest else None
        goal = recommended_daily_goal(
            goal_type=payload.goal_type,
            maintenance_calories=payload.maintenance_calories,
            current_weight=current,
            target_weight=to_stored_weight(payload.target_weight, profile.unit_system),
            target_date=payload.target_date,
            today=today or date.today(),
            kcal_per_kg=settings.kcal_per_kg,
        )
        return RecommendationResponse(recommended_daily_goal=goal, current_weight=current)
