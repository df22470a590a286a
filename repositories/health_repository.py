"""
Health Sample Repository - Data access layer for synced device readings
"""

from typing import Dict, List
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy import func

from repositories.base import BaseRepository
from domain.models import HealthSample
from domain.enums import HealthMetric


class HealthSampleRepository(BaseRepository[HealthSample]):
    """Repository for health sample data access"""

    def __init__(self, db: Session):
        super().__init__(db, HealthSample)

    def add_many(self, samples: List[HealthSample]) -> int:
        """Stage samples in the current transaction; caller commits"""
        self.db.add_all(samples)
        self.db.flush()
        return len(samples)

    def sum_by_metric(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> Dict[HealthMetric, float]:
        """Sum of each metric for samples recorded in [start, end)"""
        rows = (
            self.db.query(HealthSample.metric, func.sum(HealthSample.value))
            .filter(
                HealthSample.user_id == user_id,
                HealthSample.recorded_at >= start,
                HealthSample.recorded_at < end,
            )
            .group_by(HealthSample.metric)
            .all()
        )
        return {metric: float(total or 0.0) for metric, total in rows}
