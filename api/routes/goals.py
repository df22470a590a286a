"""Goal phase routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db
from domain.schemas.goal_schemas import GoalPeriodResponse, PhaseStatsResponse
from services.goal_service import GoalService

router = APIRouter(prefix="/goals", tags=["Goals"])
logger = logging.getLogger("repscale.api.goals")


@router.get("/{user_id}/periods", response_model=List[GoalPeriodResponse])
def list_periods(user_id: UUID, db: Session = Depends(get_db)):
    return GoalService.list_periods(db, user_id)


@router.get("/{user_id}/phase-stats", response_model=List[PhaseStatsResponse])
def phase_stats(user_id: UUID, db: Session = Depends(get_db)):
    """Duration and weight change of every cutting, bulking and maintenance phase"""
    return GoalService.phase_stats(db, user_id)
