from typing import List, Optional
from uuid import UUID
from datetime import date, datetime, time
from sqlalchemy.orm import Session
import logging

from domain.models import WeightEntry, WeightPhoto
from domain.enums import TimeRange, UnitSystem
from domain.schemas.weight_schemas import (
    WeightEntryCreate,
    WeightEntryUpdate,
    WeightPhotoCreate,
)
from domain.units import weight_to_kg
from repositories import WeightRepository
from services.profile_service import ProfileService
from app.exceptions import NotFoundError

logger = logging.getLogger("repscale.weights")


class WeightService:
    """Business logic for weigh-ins and progress photos"""

    @staticmethod
    def create_entry(db: Session, user_id: UUID, payload: WeightEntryCreate) -> WeightEntry:
        profile = ProfileService.get_profile(db, user_id)
        entry = WeightEntry(
            user_id=user_id,
            recorded_at=payload.recorded_at,
            weight=weight_to_kg(payload.weight, payload.unit, profile.unit_system),
            note=payload.note,
        )
        for photo in payload.photos:
            entry.photos.append(
                WeightPhoto(content_type=photo.content_type, image_data=photo.decoded())
            )

        entry = WeightRepository(db).create(entry)
        logger.info(
            f"weight_logged user_id={user_id} weight_kg={entry.weight:.2f} "
            f"photos={len(payload.photos)}"
        )
        return entry

    @staticmethod
    def list_entries(
        db: Session, user_id: UUID, time_range: Optional[TimeRange] = None
    ) -> List[WeightEntry]:
        ProfileService.get_user(db, user_id)
        since = None
        if time_range is not None:
            start = TimeRange(time_range).start_date(date.today())
            since = datetime.combine(start, time.min) if start else None
        return WeightRepository(db).get_by_user_id(user_id, since=since, with_photos=True)

    @staticmethod
    def get_entry(db: Session, user_id: UUID, weight_id: UUID) -> WeightEntry:
        entry = WeightRepository(db).get_for_user(user_id, weight_id)
        if not entry:
            raise NotFoundError(f"Weight entry {weight_id} not found")
        return entry

    @staticmethod
    def update_entry(
        db: Session, user_id: UUID, weight_id: UUID, payload: WeightEntryUpdate
    ) -> WeightEntry:
        entry = WeightService.get_entry(db, user_id, weight_id)
        if payload.weight is not None:
            unit_system = ProfileService.get_profile(db, user_id).unit_system
            entry.weight = weight_to_kg(payload.weight, payload.unit, unit_system)
        if payload.recorded_at is not None:
            entry.recorded_at = payload.recorded_at
        if "note" in payload.model_fields_set:
            entry.note = payload.note

        entry = WeightRepository(db).update(entry)
        logger.info(f"weight_updated user_id={user_id} weight_id={weight_id}")
        return entry

    @staticmethod
    def delete_entry(db: Session, user_id: UUID, weight_id: UUID) -> None:
        entry = WeightService.get_entry(db, user_id, weight_id)
        db.delete(entry)
        db.commit()
        logger.info(f"weight_deleted user_id={user_id} weight_id={weight_id}")

    @staticmethod
    def add_photo(
        db: Session, user_id: UUID, weight_id: UUID, payload: WeightPhotoCreate
    ) -> WeightEntry:
        entry = WeightService.get_entry(db, user_id, weight_id)
        entry.photos.append(
            WeightPhoto(content_type=payload.content_type, image_data=payload.decoded())
        )
        entry = WeightRepository(db).update(entry)
        logger.info(f"weight_photo_added user_id={user_id} weight_id={weight_id}")
        return entry

    @staticmethod
    def get_photo(db: Session, user_id: UUID, weight_id: UUID, photo_id: UUID) -> WeightPhoto:
        WeightService.get_entry(db, user_id, weight_id)
        photo = WeightRepository(db).get_photo(weight_id, photo_id)
        if not photo:
            raise NotFoundError(f"Photo {photo_id} not found")
        return photo

    @staticmethod
    def delete_photo(db: Session, user_id: UUID, weight_id: UUID, photo_id: UUID) -> None:
        photo = WeightService.get_photo(db, user_id, weight_id, photo_id)
        db.delete(photo)
        db.commit()
        logger.info(f"weight_photo_deleted user_id={user_id} photo_id={photo_id}")

    @staticmethod
    def unit_system_for(db: Session, user_id: UUID) -> UnitSystem:
        return ProfileService.get_profile(db, user_id).unit_system
