"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    RepScaleError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
)

__all__ = [
    "settings",
    "RepScaleError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
]
