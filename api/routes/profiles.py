"""Settings profile routes (preferences, goals, onboarding, tutorial)"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db
from domain.schemas.profile_schemas import (
    UserProfileResponse,
    UserProfileSettings,
    ProfileUpdateRequest,
    GoalSettingsUpdate,
    CustomMuscleCreate,
    OnboardingRequest,
    TutorialState,
    RecommendationRequest,
    RecommendationResponse,
)
from services.profile_service import ProfileService
from domain.mappers import UserMapper

router = APIRouter(prefix="/users/{user_id}/profile", tags=["Profiles"])
logger = logging.getLogger("repscale.api.profiles")


@router.get("", response_model=UserProfileSettings)
def get_profile(user_id: UUID, db: Session = Depends(get_db)):
    profile = ProfileService.get_profile(db, user_id)
    return UserMapper.profile_to_settings(profile)


@router.patch("", response_model=UserProfileResponse)
def update_profile(
    user_id: UUID,
    profile_data: ProfileUpdateRequest,
    db: Session = Depends(get_db),
):
    """Partially update display, feature and dashboard preferences."""
    user = ProfileService.update_profile(db, user_id, profile_data)
    return UserMapper.to_response(user)


@router.put("/goals", response_model=UserProfileSettings)
def update_goal_settings(
    user_id: UUID,
    goal_data: GoalSettingsUpdate,
    db: Session = Depends(get_db),
):
    """
    Update goal configuration.

    Changing the goal type closes the current goal phase and starts a new one.
    """
    profile = ProfileService.update_goal_settings(db, user_id, goal_data)
    return UserMapper.profile_to_settings(profile)


@router.post(
    "/goal-recommendation",
    response_model=RecommendationResponse,
)
def recommend_goal(
    user_id: UUID,
    request: RecommendationRequest,
    db: Session = Depends(get_db),
):
    """Suggest a daily calorie goal that reaches the target weight by the target date"""
    return ProfileService.recommend_goal(db, user_id, request)


@router.post(
    "/custom-muscles",
    response_model=UserProfileSettings,
    status_code=status.HTTP_201_CREATED,
)
def add_custom_muscle(
    user_id: UUID, muscle: CustomMuscleCreate, db: Session = Depends(get_db)
):
    profile = ProfileService.add_custom_muscle(db, user_id, muscle.name)
    return UserMapper.profile_to_settings(profile)


@router.post("/onboarding", response_model=UserProfileResponse)
def complete_onboarding(
    user_id: UUID, request: OnboardingRequest, db: Session = Depends(get_db)
):
    user = ProfileService.complete_onboarding(db, user_id, request)
    return UserMapper.to_response(user)


@router.get("/tutorial/{section}", response_model=TutorialState)
def get_tutorial(user_id: UUID, section: str, db: Session = Depends(get_db)):
    return ProfileService.get_tutorial(db, user_id, section)


@router.post("/tutorial/{section}/advance", response_model=TutorialState)
def advance_tutorial(user_id: UUID, section: str, db: Session = Depends(get_db)):
    return ProfileService.advance_tutorial(db, user_id, section)


@router.post("/tutorial/{section}/skip", response_model=TutorialState)
def skip_tutorial(user_id: UUID, section: str, db: Session = Depends(get_db)):
    return ProfileService.skip_tutorial(db, user_id, section)
