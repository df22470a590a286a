"""
Goal phase history.
"""

from sqlalchemy import (
    Column,
    TIMESTAMP,
    ForeignKey,
    Uuid,
    Integer,
    Float,
    Date,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import GoalType


class GoalPeriod(Base):
    """A cutting, bulking or maintenance phase; end_date is NULL while open"""

    __tablename__ = "goal_period"

    period_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    goal_type = Column(SQLEnum(GoalType), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    start_weight = Column(Float)
    end_weight = Column(Float)
    daily_calorie_goal = Column(Integer)
    maintenance_calories = Column(Integer)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="goal_periods")

    @property
    def is_open(self) -> bool:
        return self.end_date is None
