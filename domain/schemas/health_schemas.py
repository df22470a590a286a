from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime, date
from uuid import UUID

from domain.enums import HealthMetric


class HealthSampleCreate(BaseModel):
    """A single reading pushed from a device or another app"""

    metric: HealthMetric
    value: float = Field(..., ge=0)
    recorded_at: datetime = Field(default_factory=datetime.now)
    source: Optional[str] = Field(None, max_length=120)


class HealthSyncRequest(BaseModel):
    user_id: UUID
    samples: List[HealthSampleCreate] = Field(..., min_length=1, max_length=5000)


class HealthSyncResponse(BaseModel):
    success: bool
    message: str
    stored: int


class HealthTotalsResponse(BaseModel):
    """Summed health values for a date range"""

    start: datetime
    end: datetime
    consumed: float = 0
    burned: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


class HealthApplyRequest(BaseModel):
    log_date: date = Field(default_factory=date.today)
