"""Weigh-in and progress photo routes"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List, Optional

from api.dependencies import get_db
from api.responses import DeleteResponse
from domain.enums import TimeRange
from domain.schemas.weight_schemas import (
    WeightEntryCreate,
    WeightEntryUpdate,
    WeightEntryResponse,
    WeightPhotoCreate,
)
from domain.mappers import WeightMapper
from services.weight_service import WeightService

router = APIRouter(prefix="/weights", tags=["Weights"])
logger = logging.getLogger("repscale.api.weights")


@router.post(
    "/{user_id}",
    response_model=WeightEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_weight(
    user_id: UUID, entry: WeightEntryCreate, db: Session = Depends(get_db)
):
    """Log a weigh-in; weight is read in `unit`, else the user's unit system"""
    created = WeightService.create_entry(db, user_id, entry)
    return WeightMapper.to_response(created, WeightService.unit_system_for(db, user_id))


@router.get("/{user_id}", response_model=List[WeightEntryResponse])
def list_weights(
    user_id: UUID,
    time_range: Optional[TimeRange] = Query(None),
    db: Session = Depends(get_db),
):
    entries = WeightService.list_entries(db, user_id, time_range)
    unit_system = WeightService.unit_system_for(db, user_id)
    return [WeightMapper.to_response(e, unit_system) for e in entries]


@router.get("/{user_id}/{weight_id}", response_model=WeightEntryResponse)
def get_weight(user_id: UUID, weight_id: UUID, db: Session = Depends(get_db)):
    entry = WeightService.get_entry(db, user_id, weight_id)
    return WeightMapper.to_response(entry, WeightService.unit_system_for(db, user_id))


@router.patch("/{user_id}/{weight_id}", response_model=WeightEntryResponse)
def update_weight(
    user_id: UUID,
    weight_id: UUID,
    update: WeightEntryUpdate,
    db: Session = Depends(get_db),
):
    entry = WeightService.update_entry(db, user_id, weight_id, update)
    return WeightMapper.to_response(entry, WeightService.unit_system_for(db, user_id))


@router.delete("/{user_id}/{weight_id}", response_model=DeleteResponse)
def delete_weight(user_id: UUID, weight_id: UUID, db: Session = Depends(get_db)):
    WeightService.delete_entry(db, user_id, weight_id)
    return DeleteResponse(deleted=str(weight_id))


@router.post(
    "/{user_id}/{weight_id}/photos",
    response_model=WeightEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_photo(
    user_id: UUID,
    weight_id: UUID,
    photo: WeightPhotoCreate,
    db: Session = Depends(get_db),
):
    entry = WeightService.add_photo(db, user_id, weight_id, photo)
    return WeightMapper.to_response(entry, WeightService.unit_system_for(db, user_id))


@router.get("/{user_id}/{weight_id}/photos/{photo_id}")
def get_photo(
    user_id: UUID, weight_id: UUID, photo_id: UUID, db: Session = Depends(get_db)
):
    """Raw image bytes"""
    photo = WeightService.get_photo(db, user_id, weight_id, photo_id)
    return Response(content=photo.image_data, media_type=photo.content_type)


@router.delete(
    "/{user_id}/{weight_id}/photos/{photo_id}", response_model=DeleteResponse
)
def delete_photo(
    user_id: UUID, weight_id: UUID, photo_id: UUID, db: Session = Depends(get_db)
):
    WeightService.delete_photo(db, user_id, weight_id, photo_id)
    return DeleteResponse(deleted=str(photo_id))
