"""Daily nutrition log routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from datetime import date
from typing import List, Optional

from api.dependencies import get_db
from api.responses import DeleteResponse
from domain.schemas.log_schemas import (
    DailyLogCreate,
    DailyLogResponse,
    ManualOverridesUpdate,
)
from services.log_service import LogService

router = APIRouter(prefix="/logs", tags=["Logs"])
logger = logging.getLogger("repscale.api.logs")


@router.post(
    "/{user_id}",
    response_model=DailyLogResponse,
    status_code=status.HTTP_201_CREATED,
)
def log_food(user_id: UUID, entry: DailyLogCreate, db: Session = Depends(get_db)):
    """
    Add calories and macros to a day.

    mode=add adds to the day's calories, mode=set replaces them.
    """
    return LogService.log_food(db, user_id, entry)


@router.get("/{user_id}", response_model=List[DailyLogResponse])
def list_logs(
    user_id: UUID,
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    return LogService.list_logs(db, user_id, start_date, end_date)


@router.get("/{user_id}/{log_date}", response_model=DailyLogResponse)
def get_log(user_id: UUID, log_date: date, db: Session = Depends(get_db)):
    return LogService.get_log(db, user_id, log_date)


@router.patch("/{user_id}/{log_date}/overrides", response_model=DailyLogResponse)
def update_overrides(
    user_id: UUID,
    log_date: date,
    overrides: ManualOverridesUpdate,
    db: Session = Depends(get_db),
):
    """Set manual additions that stay on top of synced health data"""
    return LogService.update_overrides(db, user_id, log_date, overrides)


@router.delete("/{user_id}/{log_date}", response_model=DeleteResponse)
def delete_log(user_id: UUID, log_date: date, db: Session = Depends(get_db)):
    LogService.delete_log(db, user_id, log_date)
    return DeleteResponse(deleted=log_date.isoformat())
