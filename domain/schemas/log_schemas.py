from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from uuid import UUID

from domain.enums import GoalType, LogMode


class DailyLogCreate(BaseModel):
    """Schema for logging food on a day"""

    log_date: date = Field(default_factory=date.today)
    calories: int = Field(0, ge=0, le=50000, description="Calories to add or set")
    protein: Optional[int] = Field(None, ge=0, le=2000)
    carbs: Optional[int] = Field(None, ge=0, le=5000)
    fat: Optional[int] = Field(None, ge=0, le=2000)
    mode: LogMode = Field(
        LogMode.ADD, description="'add' adds calories to the day, 'set' overwrites"
    )


class ManualOverridesUpdate(BaseModel):
    """Manual additions applied on top of synced health data"""

    manual_calories: Optional[int] = Field(None, ge=0)
    manual_protein: Optional[int] = Field(None, ge=0)
    manual_carbs: Optional[int] = Field(None, ge=0)
    manual_fat: Optional[int] = Field(None, ge=0)


class DailyLogResponse(BaseModel):
    log_id: UUID
    user_id: UUID
    log_date: date
    calories_consumed: int
    calories_burned: int
    net_calories: int
    protein: Optional[int] = None
    carbs: Optional[int] = None
    fat: Optional[int] = None
    manual_calories: int = 0
    manual_protein: int = 0
    manual_carbs: int = 0
    manual_fat: int = 0
    goal_type: Optional[GoalType] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
