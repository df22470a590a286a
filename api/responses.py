"""
Shared API response models.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    database: Optional[str] = Field(None, description="Database connectivity")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


class DeleteResponse(BaseModel):
    """Acknowledgement for delete endpoints"""

    status: str = "ok"
    deleted: str
