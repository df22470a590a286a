"""Dashboard metric routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List, Optional

from api.dependencies import get_db
from domain.enums import NutritionMetric, TimeRange, VolumeFilter, VolumeMetric
from domain.schemas.dashboard_schemas import (
    DashboardResponse,
    WeeklyProgressResponse,
    RecoveryResponse,
    CategoryCountResponse,
    SeriesResponse,
    NutritionHistoryResponse,
)
from services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])
logger = logging.getLogger("repscale.api.dashboard")


@router.get("/{user_id}", response_model=DashboardResponse)
def get_dashboard(user_id: UUID, db: Session = Depends(get_db)):
    """Maintenance estimate, days to goal and weight projections"""
    return DashboardService.get_summary(db, user_id)


@router.get("/{user_id}/weekly-progress", response_model=WeeklyProgressResponse)
def get_weekly_progress(user_id: UUID, db: Session = Depends(get_db)):
    return DashboardService.get_weekly_progress(db, user_id)


@router.get("/{user_id}/recovery", response_model=List[RecoveryResponse])
def get_recovery(user_id: UUID, db: Session = Depends(get_db)):
    return DashboardService.get_recovery(db, user_id)


@router.get(
    "/{user_id}/workout-distribution", response_model=List[CategoryCountResponse]
)
def get_workout_distribution(
    user_id: UUID,
    time_range: Optional[TimeRange] = Query(None),
    db: Session = Depends(get_db),
):
    return DashboardService.get_category_distribution(db, user_id, time_range)


@router.get("/{user_id}/strength", response_model=SeriesResponse)
def get_strength_history(
    user_id: UUID,
    exercise: Optional[str] = Query(None),
    reps: Optional[int] = Query(None, ge=1, le=21, description="21 means 20 or more"),
    time_range: Optional[TimeRange] = Query(None),
    db: Session = Depends(get_db),
):
    return DashboardService.get_strength_history(
        db, user_id, exercise, reps, time_range
    )


@router.get("/{user_id}/volume", response_model=SeriesResponse)
def get_volume_history(
    user_id: UUID,
    selection: str = Query(..., min_length=1, description="Category or exercise name"),
    metric: VolumeMetric = Query(VolumeMetric.VOLUME_LOAD),
    filter_type: VolumeFilter = Query(VolumeFilter.WORKOUT),
    time_range: Optional[TimeRange] = Query(None),
    db: Session = Depends(get_db),
):
    return DashboardService.get_volume_history(
        db, user_id, metric, filter_type, selection, time_range
    )


@router.get("/{user_id}/nutrition-history", response_model=NutritionHistoryResponse)
def get_nutrition_history(
    user_id: UUID,
    metric: NutritionMetric = Query(NutritionMetric.CALORIES),
    db: Session = Depends(get_db),
):
    return DashboardService.get_nutrition_history(db, user_id, metric)


@router.get("/{user_id}/exercises", response_model=List[str])
def get_logged_exercises(user_id: UUID, db: Session = Depends(get_db)):
    return DashboardService.get_logged_exercises(db, user_id)
