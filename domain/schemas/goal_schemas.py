from pydantic import BaseModel
from typing import Optional
from datetime import date
from uuid import UUID

from domain.enums import GoalType


class GoalPeriodResponse(BaseModel):
    period_id: UUID
    goal_type: GoalType
    start_date: date
    end_date: Optional[date] = None
    start_weight: Optional[float] = None
    end_weight: Optional[float] = None
    daily_calorie_goal: Optional[int] = None
    maintenance_calories: Optional[int] = None

    model_config = {"from_attributes": True}


class PhaseStatsResponse(BaseModel):
    """Summary of a goal phase; weights in the user's display unit"""

    period_id: UUID
    goal_type: GoalType
    start_date: date
    end_date: Optional[date] = None
    is_current: bool
    duration_days: int
    start_weight: Optional[float] = None
    end_weight: Optional[float] = None
    weight_change: Optional[float] = None
    display_unit: str
