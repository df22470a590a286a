from datetime import date, datetime
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from adapters import health_adapter
from domain.models import DailyLog, HealthSample
from domain.schemas.health_schemas import HealthSyncRequest, HealthTotalsResponse
from repositories import HealthSampleRepository
from services.log_service import LogService
from services.profile_service import ProfileService
from app.exceptions import ServiceValidationError

logger = logging.getLogger("repscale.health")


class HealthService:
    """Stores pushed health samples and folds their totals into daily logs"""

    @staticmethod
    def store_samples(db: Session, user_id: UUID, payload: HealthSyncRequest) -> int:
        profile = ProfileService.get_profile(db, user_id)
        health_adapter.ensure_authorized(profile)

        samples = [
            HealthSample(
                user_id=user_id,
                metric=s.metric,
                value=s.value,
                recorded_at=s.recorded_at,
                source=s.source,
            )
            for s in payload.samples
        ]
        stored = HealthSampleRepository(db).add_many(samples)
        db.commit()
        logger.info(f"health_samples_stored user_id={user_id} count={stored}")
        return stored

    @staticmethod
    def get_totals(
        db: Session, user_id: UUID, start: datetime, end: datetime
    ) -> HealthTotalsResponse:
        if end <= start:
            raise ServiceValidationError("end must be after start")
        profile = ProfileService.get_profile(db, user_id)
        totals = health_adapter.fetch_totals(db, profile, start, end)
        return HealthTotalsResponse(
            start=start,
            end=end,
            consumed=totals.consumed,
            burned=totals.burned,
            protein=totals.protein,
            carbs=totals.carbs,
            fat=totals.fat,
        )

    @staticmethod
    def apply_to_log(db: Session, user_id: UUID, log_date: date) -> DailyLog:
        """
        Sync one day's health totals into its log.

        Each synced value replaces the stored one only when it is positive,
        with the day's manual additions added back on top. Calories burned
        are only written when the user tracks them.
        """
        profile = ProfileService.get_profile(db, user_id)
        start, end = health_adapter.day_bounds(log_date)
        totals = health_adapter.fetch_totals(db, profile, start, end)

        log = LogService.get_or_create_log(db, user_id, log_date)
        if totals.consumed > 0:
            log.calories_consumed = int(totals.consumed) + (log.manual_calories or 0)
        if profile.enable_calories_burned:
            log.calories_burned = int(totals.burned)
        if totals.protein > 0:
            log.protein = int(totals.protein) + (log.manual_protein or 0)
        if totals.carbs > 0:
            log.carbs = int(totals.carbs) + (log.manual_carbs or 0)
        if totals.fat > 0:
            log.fat = int(totals.fat) + (log.manual_fat or 0)

        db.commit()
        db.refresh(log)
        logger.info(
            f"health_applied user_id={user_id} date={log_date} "
            f"consumed={log.calories_consumed} burned={log.calories_burned}"
        )
        return log
