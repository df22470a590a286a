"""
User-related database models.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Uuid,
    Enum as SQLEnum,
    Integer,
    Float,
    Boolean,
    JSON,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import GoalType, UnitSystem, Gender

DEFAULT_TRACKED_MUSCLES = "Chest,Back,Legs,Shoulders,Abs,Cardio,Biceps,Triceps"

DEFAULT_DASHBOARD_LAYOUT = [
    "projection",
    "weight_change",
    "weekly_goal",
    "nutrition_history",
    "workout_distribution",
    "strength",
    "volume",
]


class AppUser(Base):
    """User account model"""

    __tablename__ = "app_user"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False)
    full_name = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    profile = relationship(
        "UserProfile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    daily_logs = relationship(
        "DailyLog", back_populates="user", cascade="all, delete-orphan"
    )
    weight_entries = relationship(
        "WeightEntry", back_populates="user", cascade="all, delete-orphan"
    )
    workouts = relationship(
        "Workout", back_populates="user", cascade="all, delete-orphan"
    )
    exercise_definitions = relationship(
        "ExerciseDefinition", back_populates="user", cascade="all, delete-orphan"
    )
    workout_templates = relationship(
        "WorkoutTemplate", back_populates="user", cascade="all, delete-orphan"
    )
    goal_periods = relationship(
        "GoalPeriod", back_populates="user", cascade="all, delete-orphan"
    )
    health_samples = relationship(
        "HealthSample", back_populates="user", cascade="all, delete-orphan"
    )


class UserProfile(Base):
    """Per-user settings: goals, units, feature flags and dashboard preferences"""

    __tablename__ = "user_profile"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        primary_key=True,
    )
    is_premium = Column(Boolean, nullable=False, default=False)

    # Core profile
    unit_system = Column(
        SQLEnum(UnitSystem), nullable=False, default=UnitSystem.METRIC
    )
    gender = Column(SQLEnum(Gender), nullable=False, default=Gender.MALE)
    is_dark_mode = Column(Boolean, nullable=False, default=True)

    # Goals & strategy
    daily_calorie_goal = Column(Integer, nullable=False, default=2000)
    target_weight = Column(Float, nullable=False, default=70.0)  # kg
    goal_type = Column(SQLEnum(GoalType), nullable=False, default=GoalType.CUTTING)
    maintenance_calories = Column(Integer, nullable=False, default=2500)
    maintenance_tolerance = Column(Float, nullable=False, default=2.0)
    estimation_method = Column(Integer, nullable=False, default=0)

    # Feature flags
    is_calorie_counting_enabled = Column(Boolean, nullable=False, default=True)
    enable_calories_burned = Column(Boolean, nullable=False, default=True)
    enable_health_sync = Column(Boolean, nullable=False, default=True)

    # Dashboard customization
    dashboard_layout = Column(JSON, nullable=False, default=lambda: list(DEFAULT_DASHBOARD_LAYOUT))
    workout_time_range = Column(Text, nullable=False, default="30 Days")
    weight_history_time_range = Column(Text, nullable=False, default="30 Days")
    strength_graph_time_range = Column(Text, nullable=False, default="90 Days")
    strength_graph_exercise = Column(Text, nullable=False, default="Barbell Bench Press")
    strength_graph_reps = Column(Integer, nullable=False, default=5)

    # Workout preferences
    tracked_muscles = Column(Text, nullable=False, default=DEFAULT_TRACKED_MUSCLES)
    custom_muscles = Column(Text, nullable=False, default="")
    weekly_workout_goal = Column(Integer, nullable=False, default=3)

    # Onboarding
    onboarding_completed = Column(Boolean, nullable=False, default=False)
    tutorial_progress = Column(JSON, nullable=False, default=dict)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("AppUser", back_populates="profile")

    @property
    def tracked_muscle_list(self) -> list[str]:
        return [m for m in (self.tracked_muscles or "").split(",") if m]

    @property
    def custom_muscle_list(self) -> list[str]:
        return [m for m in (self.custom_muscles or "").split(",") if m]

    def add_custom_muscle(self, name: str) -> bool:
        """Add a user-defined muscle unless an equal one (ignoring case) exists."""
        trimmed = (name or "").strip()
        if not trimmed:
            return False
        current = self.custom_muscle_list
        if any(m.lower() == trimmed.lower() for m in current):
            return False
        current.append(trimmed)
        self.custom_muscles = ",".join(current)
        return True
