"""Health data bridge routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from datetime import datetime

from api.dependencies import get_db
from domain.schemas.health_schemas import (
    HealthSyncRequest,
    HealthSyncResponse,
    HealthTotalsResponse,
    HealthApplyRequest,
)
from domain.schemas.log_schemas import DailyLogResponse
from services.health_service import HealthService

router = APIRouter(prefix="/health-sync", tags=["Health Sync"])
logger = logging.getLogger("repscale.api.health_sync")


@router.post(
    "/samples",
    response_model=HealthSyncResponse,
    status_code=status.HTTP_201_CREATED,
)
def push_samples(request: HealthSyncRequest, db: Session = Depends(get_db)):
    """Store readings pushed by a device"""
    stored = HealthService.store_samples(db, request.user_id, request)
    return HealthSyncResponse(
        success=True, message=f"Stored {stored} samples", stored=stored
    )


@router.get("/{user_id}/totals", response_model=HealthTotalsResponse)
def get_totals(
    user_id: UUID,
    start: datetime = Query(...),
    end: datetime = Query(...),
    db: Session = Depends(get_db),
):
    return HealthService.get_totals(db, user_id, start, end)


@router.post("/{user_id}/apply", response_model=DailyLogResponse)
def apply_to_log(
    user_id: UUID, request: HealthApplyRequest, db: Session = Depends(get_db)
):
    """Fold a day's synced totals into its daily log, keeping manual additions"""
    return HealthService.apply_to_log(db, user_id, request.log_date)
