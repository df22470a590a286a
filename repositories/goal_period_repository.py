"""
Goal Period Repository - Data access layer for goal phase history
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import GoalPeriod


class GoalPeriodRepository(BaseRepository[GoalPeriod]):
    """Cutting, bulking and maintenance phases of a user"""

    def __init__(self, db: Session):
        super().__init__(db, GoalPeriod)

    def get_open(self, user_id: UUID) -> Optional[GoalPeriod]:
        """The period still in progress, if any"""
        return (
            self.owned_by(user_id)
            .filter(GoalPeriod.end_date.is_(None))
            .order_by(GoalPeriod.start_date.desc())
            .first()
        )

    def get_by_user_id(self, user_id: UUID) -> List[GoalPeriod]:
        """All periods, newest first"""
        return (
            self.owned_by(user_id)
            .order_by(GoalPeriod.start_date.desc(), GoalPeriod.created_at.desc())
            .all()
        )
