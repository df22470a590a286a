"""
Health data bridge.

Device readings are pushed to the API and stored as HealthSample rows;
this module sums them for a time window the way a health store would
answer a statistics query.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Tuple

from sqlalchemy.orm import Session

from domain.enums import HealthMetric
from domain.models import UserProfile
from repositories import HealthSampleRepository
from app.exceptions import UnauthorizedError


@dataclass
class HealthTotals:
    consumed: float = 0.0
    burned: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """[start, end) covering one calendar day"""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def ensure_authorized(profile: UserProfile) -> None:
    if not profile.enable_health_sync:
        raise UnauthorizedError(
            "Health data access is not authorized",
            details={"user_id": str(profile.user_id)},
        )


def fetch_totals(
    db: Session, profile: UserProfile, start: datetime, end: datetime
) -> HealthTotals:
    """Summed energy and macros for samples recorded in [start, end)"""
    ensure_authorized(profile)
    sums = HealthSampleRepository(db).sum_by_metric(profile.user_id, start, end)
    return HealthTotals(
        consumed=sums.get(HealthMetric.DIETARY_ENERGY, 0.0),
        burned=sums.get(HealthMetric.ACTIVE_ENERGY, 0.0),
        protein=sums.get(HealthMetric.PROTEIN, 0.0),
        carbs=sums.get(HealthMetric.CARBS, 0.0),
        fat=sums.get(HealthMetric.FAT, 0.0),
    )
