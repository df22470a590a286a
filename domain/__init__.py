"""
Domain layer for RepScale: ORM models, request/response schemas, enums,
unit conversions and static reference data (tutorials, exercise library).
"""

from domain import enums, models, schemas, units

__all__ = ["enums", "models", "schemas", "units"]
