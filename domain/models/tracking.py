"""
Nutrition, body weight and health sample models.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Uuid,
    Integer,
    Float,
    Date,
    LargeBinary,
    Enum as SQLEnum,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import GoalType, HealthMetric


class DailyLog(Base):
    """One day's nutrition and energy totals"""

    __tablename__ = "daily_log"

    log_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    log_date = Column(Date, nullable=False)
    calories_consumed = Column(Integer, nullable=False, default=0)
    calories_burned = Column(Integer, nullable=False, default=0)
    protein = Column(Integer)
    carbs = Column(Integer)
    fat = Column(Integer)

    # Manual additions on top of health data
    manual_calories = Column(Integer, nullable=False, default=0)
    manual_protein = Column(Integer, nullable=False, default=0)
    manual_carbs = Column(Integer, nullable=False, default=0)
    manual_fat = Column(Integer, nullable=False, default=0)

    goal_type = Column(SQLEnum(GoalType))
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("AppUser", back_populates="daily_logs")

    __table_args__ = (
        UniqueConstraint("user_id", "log_date", name="uq_daily_log_user_date"),
    )

    @property
    def net_calories(self) -> int:
        return (self.calories_consumed or 0) - (self.calories_burned or 0)


class WeightEntry(Base):
    """A single weigh-in (kg)"""

    __tablename__ = "weight_entry"

    weight_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    recorded_at = Column(TIMESTAMP(timezone=False), nullable=False)
    weight = Column(Float, nullable=False)
    note = Column(Text)

    user = relationship("AppUser", back_populates="weight_entries")
    photos = relationship(
        "WeightPhoto",
        back_populates="weight_entry",
        cascade="all, delete-orphan",
        order_by="WeightPhoto.created_at",
    )

    __table_args__ = (CheckConstraint("weight > 0", name="ck_weight_positive"),)


class WeightPhoto(Base):
    """Progress photo attached to a weigh-in"""

    __tablename__ = "weight_photo"

    photo_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    weight_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("weight_entry.weight_id", ondelete="CASCADE"),
        nullable=False,
    )
    content_type = Column(Text, nullable=False, default="image/jpeg")
    image_data = Column(LargeBinary, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    weight_entry = relationship("WeightEntry", back_populates="photos")


class HealthSample(Base):
    """A device health reading pushed to the health bridge"""

    __tablename__ = "health_sample"

    sample_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    metric = Column(SQLEnum(HealthMetric), nullable=False)
    value = Column(Float, nullable=False)
    recorded_at = Column(TIMESTAMP(timezone=False), nullable=False)
    source = Column(Text)

    user = relationship("AppUser", back_populates="health_samples")

    __table_args__ = (CheckConstraint("value >= 0", name="ck_health_value_nonneg"),)
