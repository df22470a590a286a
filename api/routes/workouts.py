"""Workout routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from datetime import date
from typing import List, Optional

from api.dependencies import get_db
from api.responses import DeleteResponse
from domain.schemas.workout_schemas import WorkoutCreate, WorkoutResponse
from domain.mappers import WorkoutMapper
from services.workout_service import WorkoutService

router = APIRouter(prefix="/workouts", tags=["Workouts"])
logger = logging.getLogger("repscale.api.workouts")


@router.post(
    "/{user_id}", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED
)
def create_workout(
    user_id: UUID, workout: WorkoutCreate, db: Session = Depends(get_db)
):
    """Record a workout; set weight and distance are read in the user's units unless a unit is given"""
    created = WorkoutService.create_workout(db, user_id, workout)
    return WorkoutMapper.to_response(created, WorkoutService.unit_system_for(db, user_id))


@router.get("/{user_id}", response_model=List[WorkoutResponse])
def list_workouts(
    user_id: UUID,
    since: Optional[date] = Query(None, description="Only workouts on or after this day"),
    db: Session = Depends(get_db),
):
    workouts = WorkoutService.list_workouts(db, user_id, since)
    unit_system = WorkoutService.unit_system_for(db, user_id)
    return [WorkoutMapper.to_response(w, unit_system) for w in workouts]


@router.get("/{user_id}/{workout_id}", response_model=WorkoutResponse)
def get_workout(user_id: UUID, workout_id: UUID, db: Session = Depends(get_db)):
    workout = WorkoutService.get_workout(db, user_id, workout_id)
    return WorkoutMapper.to_response(workout, WorkoutService.unit_system_for(db, user_id))


@router.delete("/{user_id}/{workout_id}", response_model=DeleteResponse)
def delete_workout(user_id: UUID, workout_id: UUID, db: Session = Depends(get_db)):
    WorkoutService.delete_workout(db, user_id, workout_id)
    return DeleteResponse(deleted=str(workout_id))
