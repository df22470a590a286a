from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List
from datetime import date, datetime
from uuid import UUID


def _clean_muscles(v):
    return [m.strip() for m in (v or []) if m and m.strip()]


class ExerciseEntryCreate(BaseModel):
    """One set; strength sets carry reps/weight, cardio carries duration/distance"""

    name: str = Field(..., min_length=1, max_length=120)
    reps: Optional[int] = Field(None, ge=0, le=1000)
    weight: Optional[float] = Field(None, ge=0, le=2000)
    duration: Optional[float] = Field(None, ge=0, description="minutes")
    distance: Optional[float] = Field(None, ge=0)
    is_cardio: bool = False
    note: str = ""
    weight_unit: Optional[str] = Field(
        None,
        pattern=r"^(kg|lbs)$",
        description="Unit of `weight`; defaults to the user's unit system",
    )
    distance_unit: Optional[str] = Field(
        None,
        pattern=r"^(km|mi)$",
        description="Unit of `distance`; defaults to the user's unit system",
    )

    @model_validator(mode="after")
    def check_kind(self):
        if self.is_cardio and (self.reps or self.weight):
            raise ValueError("cardio entries take duration/distance, not reps/weight")
        return self


class ExerciseEntryResponse(BaseModel):
    """Stored values are kg and km; display_* follow the user's unit system"""

    entry_id: UUID
    position: int
    name: str
    reps: Optional[int] = None
    weight: Optional[float] = None
    duration: Optional[float] = None
    distance: Optional[float] = None
    is_cardio: bool
    note: str = ""
    display_weight: Optional[float] = None
    display_distance: Optional[float] = None
    weight_unit: str = "kg"
    distance_unit: str = "km"

    model_config = {"from_attributes": True}


class WorkoutCreate(BaseModel):
    workout_date: date = Field(default_factory=date.today)
    category: str = Field(..., min_length=1, max_length=60)
    muscle_groups: List[str] = Field(default_factory=list)
    note: str = ""
    exercises: List[ExerciseEntryCreate] = Field(default_factory=list)

    @field_validator("muscle_groups")
    @classmethod
    def clean_muscles(cls, v):
        return _clean_muscles(v)


class WorkoutResponse(BaseModel):
    workout_id: UUID
    user_id: UUID
    workout_date: date
    category: str
    muscle_groups: List[str]
    note: str = ""
    exercises: List[ExerciseEntryResponse] = []
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ExerciseDefinitionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    muscle_groups: List[str] = Field(default_factory=list)
    is_cardio: bool = False

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        return v.strip()

    @field_validator("muscle_groups")
    @classmethod
    def clean_muscles(cls, v):
        return _clean_muscles(v)


class ExerciseDefinitionResponse(BaseModel):
    definition_id: UUID
    name: str
    muscle_groups: List[str]
    is_cardio: bool

    model_config = {"from_attributes": True}


class WorkoutTemplateCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    category: str = Field(..., min_length=1, max_length=60)
    muscle_groups: List[str] = Field(default_factory=list)
    exercises: List[ExerciseEntryCreate] = Field(default_factory=list)

    @field_validator("muscle_groups")
    @classmethod
    def clean_muscles(cls, v):
        return _clean_muscles(v)


class WorkoutTemplateResponse(BaseModel):
    template_id: UUID
    name: str
    category: str
    muscle_groups: List[str]
    exercises: List[ExerciseEntryResponse] = []

    model_config = {"from_attributes": True}


class TemplateStartRequest(BaseModel):
    workout_date: date = Field(default_factory=date.today)
    note: str = ""
