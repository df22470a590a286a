"""
Daily Log Repository - Data access layer for nutrition logs
"""

from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import DailyLog


class DailyLogRepository(BaseRepository[DailyLog]):
    """One row per user and calendar day"""

    def __init__(self, db: Session):
        super().__init__(db, DailyLog)

    def get_by_date(self, user_id: UUID, log_date: date) -> Optional[DailyLog]:
        return self.owned_by(user_id).filter(DailyLog.log_date == log_date).first()

    def get_by_user_id(
        self,
        user_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        newest_first: bool = True,
    ) -> List[DailyLog]:
        """Logs for a user within an optional inclusive date range"""
        query = self.owned_by(user_id)
        if start_date:
            query = query.filter(DailyLog.log_date >= start_date)
        if end_date:
            query = query.filter(DailyLog.log_date <= end_date)

        order = DailyLog.log_date.desc() if newest_first else DailyLog.log_date.asc()
        return query.order_by(order).all()
