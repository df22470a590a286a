"""
Weight Repository - Data access layer for weigh-ins and progress photos
"""

from typing import List, Optional
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import WeightEntry, WeightPhoto


class WeightRepository(BaseRepository[WeightEntry]):
    """Weigh-ins are stored in kg and always read newest first"""

    def __init__(self, db: Session):
        super().__init__(db, WeightEntry)

    def get_for_user(self, user_id: UUID, weight_id: UUID) -> Optional[WeightEntry]:
        return self.owned_by(user_id).filter(WeightEntry.weight_id == weight_id).first()

    def get_by_user_id(
        self,
        user_id: UUID,
        since: Optional[datetime] = None,
        with_photos: bool = False,
    ) -> List[WeightEntry]:
        query = self.owned_by(user_id)
        if since:
            query = query.filter(WeightEntry.recorded_at >= since)
        if with_photos:
            query = query.options(selectinload(WeightEntry.photos))
        return query.order_by(WeightEntry.recorded_at.desc()).all()

    def get_latest(self, user_id: UUID) -> Optional[WeightEntry]:
        return self.owned_by(user_id).order_by(WeightEntry.recorded_at.desc()).first()

    def get_photo(self, weight_id: UUID, photo_id: UUID) -> Optional[WeightPhoto]:
        return (
            self.db.query(WeightPhoto)
            .filter(WeightPhoto.photo_id == photo_id, WeightPhoto.weight_id == weight_id)
            .first()
        )
