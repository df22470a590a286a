"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.profile_schemas import (
    UserCreate,
    UserProfileSettings,
    UserProfileResponse,
    ProfileUpdateRequest,
    GoalSettingsUpdate,
    CustomMuscleCreate,
    OnboardingRequest,
    TutorialState,
    RecommendationRequest,
    RecommendationResponse,
)
from domain.schemas.log_schemas import (
    DailyLogCreate,
    ManualOverridesUpdate,
    DailyLogResponse,
)
from domain.schemas.weight_schemas import (
    WeightPhotoCreate,
    WeightEntryCreate,
    WeightEntryUpdate,
    WeightPhotoResponse,
    WeightEntryResponse,
)
from domain.schemas.workout_schemas import (
    ExerciseEntryCreate,
    ExerciseEntryResponse,
    WorkoutCreate,
    WorkoutResponse,
    ExerciseDefinitionCreate,
    ExerciseDefinitionResponse,
    WorkoutTemplateCreate,
    WorkoutTemplateResponse,
    TemplateStartRequest,
)
from domain.schemas.goal_schemas import GoalPeriodResponse, PhaseStatsResponse
from domain.schemas.dashboard_schemas import (
    DashboardResponse,
    ProjectionPointResponse,
    WeightChangeResponse,
    WeeklyProgressResponse,
    RecoveryResponse,
    CategoryCountResponse,
    DailyValueResponse,
    SeriesResponse,
    NutritionHistoryResponse,
    MonthlyAverageResponse,
)
from domain.schemas.health_schemas import (
    HealthSampleCreate,
    HealthSyncRequest,
    HealthSyncResponse,
    HealthTotalsResponse,
    HealthApplyRequest,
)

__all__ = [
    # Profile schemas
    "UserCreate",
    "UserProfileSettings",
    "UserProfileResponse",
    "ProfileUpdateRequest",
    "GoalSettingsUpdate",
    "CustomMuscleCreate",
    "OnboardingRequest",
    "TutorialState",
    "RecommendationRequest",
    "RecommendationResponse",
    # Log schemas
    "DailyLogCreate",
    "ManualOverridesUpdate",
    "DailyLogResponse",
    # Weight schemas
    "WeightPhotoCreate",
    "WeightEntryCreate",
    "WeightEntryUpdate",
    "WeightPhotoResponse",
    "WeightEntryResponse",
    # Workout schemas
    "ExerciseEntryCreate",
    "ExerciseEntryResponse",
    "WorkoutCreate",
    "WorkoutResponse",
    "ExerciseDefinitionCreate",
    "ExerciseDefinitionResponse",
    "WorkoutTemplateCreate",
    "WorkoutTemplateResponse",
    "TemplateStartRequest",
    # Goal schemas
    "GoalPeriodResponse",
    "PhaseStatsResponse",
    # Dashboard schemas
    "DashboardResponse",
    "ProjectionPointResponse",
    "WeightChangeResponse",
    "WeeklyProgressResponse",
    "RecoveryResponse",
    "CategoryCountResponse",
    "DailyValueResponse",
    "SeriesResponse",
    "NutritionHistoryResponse",
    "MonthlyAverageResponse",
    # Health schemas
    "HealthSampleCreate",
    "HealthSyncRequest",
    "HealthSyncResponse",
    "HealthTotalsResponse",
    "HealthApplyRequest",
]
