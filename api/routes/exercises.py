"""Exercise library routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db
from api.responses import DeleteResponse
from domain.schemas.workout_schemas import (
    ExerciseDefinitionCreate,
    ExerciseDefinitionResponse,
)
from services.workout_service import WorkoutService

router = APIRouter(prefix="/exercises", tags=["Exercises"])
logger = logging.getLogger("repscale.api.exercises")


@router.get("/{user_id}", response_model=List[ExerciseDefinitionResponse])
def list_exercises(user_id: UUID, db: Session = Depends(get_db)):
    return WorkoutService.list_exercises(db, user_id)


@router.post(
    "/{user_id}",
    response_model=ExerciseDefinitionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_exercise(
    user_id: UUID, exercise: ExerciseDefinitionCreate, db: Session = Depends(get_db)
):
    """Add an exercise to the library; names are unique per user"""
    return WorkoutService.create_exercise(db, user_id, exercise)


@router.delete("/{user_id}/{definition_id}", response_model=DeleteResponse)
def delete_exercise(
    user_id: UUID, definition_id: UUID, db: Session = Depends(get_db)
):
    WorkoutService.delete_exercise(db, user_id, definition_id)
    return DeleteResponse(deleted=str(definition_id))


@router.post("/{user_id}/defaults", response_model=List[ExerciseDefinitionResponse])
def seed_default_exercises(user_id: UUID, db: Session = Depends(get_db)):
    """Add the starter exercise library; existing names are kept"""
    WorkoutService.seed_default_exercises(db, user_id)
    return WorkoutService.list_exercises(db, user_id)
