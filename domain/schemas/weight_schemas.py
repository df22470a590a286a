from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID
import base64
import binascii


class WeightPhotoCreate(BaseModel):
    content_type: str = Field("image/jpeg", pattern=r"^image/[a-z0-9.+-]+$")
    data: str = Field(..., description="Base64 encoded image bytes")

    @field_validator("data")
    @classmethod
    def validate_base64(cls, v):
        try:
            base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("data must be valid base64") from e
        return v

    def decoded(self) -> bytes:
        return base64.b64decode(self.data)


class WeightEntryCreate(BaseModel):
    """Schema for logging a weigh-in"""

    weight: float = Field(..., gt=0, le=1000)
    unit: Optional[str] = Field(
        None,
        pattern=r"^(kg|lbs)$",
        description="Unit of `weight`; defaults to the user's unit system",
    )
    recorded_at: datetime = Field(default_factory=datetime.now)
    note: Optional[str] = Field(None, max_length=500)
    photos: List[WeightPhotoCreate] = Field(default_factory=list)


class WeightEntryUpdate(BaseModel):
    weight: Optional[float] = Field(None, gt=0, le=1000)
    unit: Optional[str] = Field(None, pattern=r"^(kg|lbs)$")
    recorded_at: Optional[datetime] = None
    note: Optional[str] = Field(None, max_length=500)


class WeightPhotoResponse(BaseModel):
    photo_id: UUID
    content_type: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class WeightEntryResponse(BaseModel):
    weight_id: UUID
    user_id: UUID
    recorded_at: datetime
    weight: float = Field(..., description="Stored weight in kg")
    display_weight: float
    display_unit: str
    note: Optional[str] = None
    photos: List[WeightPhotoResponse] = []
