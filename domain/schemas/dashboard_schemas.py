from pydantic import BaseModel
from typing import Optional, List
from datetime import date

from domain.enums import EstimationMethod, GoalType, NutritionMetric


class ProjectionPointResponse(BaseModel):
    day: date
    weight: float
    method: str

    model_config = {"from_attributes": True}


class WeightChangeResponse(BaseModel):
    period: str
    value: Optional[float] = None

    model_config = {"from_attributes": True}


class DashboardResponse(BaseModel):
    """Goal projection card data; weights in the user's display unit"""

    goal_type: GoalType
    effective_method: EstimationMethod
    display_unit: str
    current_weight: Optional[float] = None
    target_weight: float
    estimated_maintenance: Optional[int] = None
    daily_rate: Optional[float] = None
    days_remaining: Optional[int] = None
    logic_description: str
    progress_warning: str
    calories_left_today: Optional[int] = None
    projection_points: List[ProjectionPointResponse] = []
    weight_changes: List[WeightChangeResponse] = []


class WeeklyProgressResponse(BaseModel):
    completed_count: int
    total_goal: int
    percentage: float
    active_weekdays: List[int]

    model_config = {"from_attributes": True}


class RecoveryResponse(BaseModel):
    muscle: str
    days_since: Optional[int] = None

    model_config = {"from_attributes": True}


class CategoryCountResponse(BaseModel):
    category: str
    count: int

    model_config = {"from_attributes": True}


class DailyValueResponse(BaseModel):
    day: date
    value: float

    model_config = {"from_attributes": True}


class SeriesResponse(BaseModel):
    label: str
    unit: str
    points: List[DailyValueResponse]


class MonthlyAverageResponse(BaseModel):
    month: date
    value: float

    model_config = {"from_attributes": True}


class NutritionHistoryResponse(BaseModel):
    metric: NutritionMetric
    unit: str
    months: List[MonthlyAverageResponse]


