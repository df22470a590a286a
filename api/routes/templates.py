"""Workout template routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db
from api.responses import DeleteResponse
from domain.schemas.workout_schemas import (
    WorkoutTemplateCreate,
    WorkoutTemplateResponse,
    TemplateStartRequest,
    WorkoutResponse,
)
from domain.mappers import WorkoutMapper
from services.workout_service import WorkoutService

router = APIRouter(prefix="/templates", tags=["Templates"])
logger = logging.getLogger("repscale.api.templates")


@router.post(
    "/{user_id}",
    response_model=WorkoutTemplateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_template(
    user_id: UUID, template: WorkoutTemplateCreate, db: Session = Depends(get_db)
):
    created = WorkoutService.create_template(db, user_id, template)
    return WorkoutMapper.template_to_response(
        created, WorkoutService.unit_system_for(db, user_id)
    )


@router.get("/{user_id}", response_model=List[WorkoutTemplateResponse])
def list_templates(user_id: UUID, db: Session = Depends(get_db)):
    templates = WorkoutService.list_templates(db, user_id)
    unit_system = WorkoutService.unit_system_for(db, user_id)
    return [WorkoutMapper.template_to_response(t, unit_system) for t in templates]


@router.get("/{user_id}/{template_id}", response_model=WorkoutTemplateResponse)
def get_template(user_id: UUID, template_id: UUID, db: Session = Depends(get_db)):
    template = WorkoutService.get_template(db, user_id, template_id)
    return WorkoutMapper.template_to_response(
        template, WorkoutService.unit_system_for(db, user_id)
    )


@router.delete("/{user_id}/{template_id}", response_model=DeleteResponse)
def delete_template(user_id: UUID, template_id: UUID, db: Session = Depends(get_db)):
    WorkoutService.delete_template(db, user_id, template_id)
    return DeleteResponse(deleted=str(template_id))


@router.post(
    "/{user_id}/{template_id}/start",
    response_model=WorkoutResponse,
    status_code=status.HTTP_201_CREATED,
)
def start_from_template(
    user_id: UUID,
    template_id: UUID,
    request: TemplateStartRequest,
    db: Session = Depends(get_db),
):
    """Create a workout pre-filled from a template"""
    workout = WorkoutService.start_from_template(db, user_id, template_id, request)
    return WorkoutMapper.to_response(workout, WorkoutService.unit_system_for(db, user_id))
