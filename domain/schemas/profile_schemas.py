from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List, Dict
from datetime import datetime, date
from uuid import UUID

from domain.enums import GoalType, UnitSystem, Gender, EstimationMethod, TimeRange


class UserCreate(BaseModel):
    email: EmailStr
    full_name: Optional[str] = None


class UserProfileSettings(BaseModel):
    """Settings bag returned for a user; weights are in kg"""

    unit_system: UnitSystem
    gender: Gender
    is_dark_mode: bool
    is_premium: bool
    daily_calorie_goal: int
    target_weight: float
    goal_type: GoalType
    maintenance_calories: int
    maintenance_tolerance: float
    estimation_method: EstimationMethod
    is_calorie_counting_enabled: bool
    enable_calories_burned: bool
    enable_health_sync: bool
    dashboard_layout: List[str]
    workout_time_range: TimeRange
    weight_history_time_range: TimeRange
    strength_graph_time_range: TimeRange
    strength_graph_exercise: str
    strength_graph_reps: int
    tracked_muscles: List[str]
    custom_muscles: List[str]
    weekly_workout_goal: int
    onboarding_completed: bool
    tutorial_progress: Dict[str, int]
    updated_at: Optional[datetime] = None


class UserProfileResponse(BaseModel):
    user_id: UUID
    email: str
    full_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    profile: Optional[UserProfileSettings] = None


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; omitted fields are left unchanged"""

    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    unit_system: Optional[UnitSystem] = None
    gender: Optional[Gender] = None
    is_dark_mode: Optional[bool] = None
    is_calorie_counting_enabled: Optional[bool] = None
    enable_calories_burned: Optional[bool] = None
    enable_health_sync: Optional[bool] = None
    dashboard_layout: Optional[List[str]] = None
    workout_time_range: Optional[TimeRange] = None
    weight_history_time_range: Optional[TimeRange] = None
    strength_graph_time_range: Optional[TimeRange] = None
    strength_graph_exercise: Optional[str] = Field(None, min_length=1)
    strength_graph_reps: Optional[int] = Field(None, ge=1, le=21)
    tracked_muscles: Optional[List[str]] = None
    weekly_workout_goal: Optional[int] = Field(None, ge=1, le=14)

    @field_validator("tracked_muscles")
    @classmethod
    def strip_muscles(cls, v):
        if v is None:
            return v
        return [m.strip() for m in v if m and m.strip()]


class GoalSettingsUpdate(BaseModel):
    """Goal configuration; target_weight is in the user's display unit"""

    goal_type: GoalType
    target_weight: float = Field(..., gt=0)
    maintenance_calories: int = Field(..., ge=800, le=10000)
    daily_calorie_goal: int = Field(..., ge=500, le=10000)
    estimation_method: EstimationMethod = EstimationMethod.TREND
    maintenance_tolerance: Optional[float] = Field(None, ge=0, le=20)


class CustomMuscleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class OnboardingRequest(BaseModel):
    """Initial setup collected by the onboarding flow"""

    unit_system: UnitSystem = UnitSystem.METRIC
    gender: Gender = Gender.MALE
    goal_type: GoalType = GoalType.CUTTING
    current_weight: Optional[float] = Field(None, gt=0)
    target_weight: float = Field(..., gt=0)
    maintenance_calories: int = Field(2500, ge=800, le=10000)
    daily_calorie_goal: int = Field(2000, ge=500, le=10000)
    is_calorie_counting_enabled: bool = True
    enable_health_sync: bool = True


class TutorialState(BaseModel):
    section: str
    step: int
    total_steps: int
    completed: bool
    title: Optional[str] = None
    description: Optional[str] = None


class RecommendationRequest(BaseModel):
    goal_type: GoalType
    maintenance_calories: int = Field(..., ge=800, le=10000)
    target_weight: float = Field(..., gt=0)
    target_date: date


class RecommendationResponse(BaseModel):
    recommended_daily_goal: Optional[int] = None
    current_weight: Optional[float] = None
