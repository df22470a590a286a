from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from domain.models import DailyLog
from domain.enums import LogMode
from domain.schemas.log_schemas import DailyLogCreate, ManualOverridesUpdate
from repositories import DailyLogRepository
from services.profile_service import ProfileService
from app.exceptions import ServiceValidationError, NotFoundError

logger = logging.getLogger("repscale.logs")

MACROS = ("protein", "carbs", "fat")


class LogService:
    """Business logic for daily nutrition logs"""

    @staticmethod
    def get_or_create_log(db: Session, user_id: UUID, log_date: date) -> DailyLog:
        """
        Return the log for a day, creating it if needed.

        A new log snapshots the user's current goal type.
        """
        repo = DailyLogRepository(db)
        log = repo.get_by_date(user_id, log_date)
        if log is None:
            profile = ProfileService.get_profile(db, user_id)
            log = DailyLog(
                user_id=user_id,
                log_date=log_date,
                calories_consumed=0,
                calories_burned=0,
                manual_calories=0,
                manual_protein=0,
                manual_carbs=0,
                manual_fat=0,
                goal_type=profile.goal_type,
            )
            db.add(log)
            db.flush()
            logger.info(f"daily_log_created user_id={user_id} date={log_date}")
        return log

    @staticmethod
    def log_food(db: Session, user_id: UUID, payload: DailyLogCreate) -> DailyLog:
        """
        Add or set calories for a day.

        In add mode calories are added to the day's total, in set mode they
        replace it. Macros that are provided overwrite the stored value.
        """
        ProfileService.get_user(db, user_id)
        try:
            log = LogService.get_or_create_log(db, user_id, payload.log_date)

            if payload.mode == LogMode.ADD:
                log.calories_consumed = (log.calories_consumed or 0) + payload.calories
            else:
                log.calories_consumed = payload.calories

            for macro in MACROS:
                value = getattr(payload, macro)
                if value is not None:
                    setattr(log, macro, value)

            db.commit()
            db.refresh(log)
        except IntegrityError as e:
            db.rollback()
            logger.error(f"daily_log_save_failed user_id={user_id} error={str(e)}")
            raise ServiceValidationError("Database integrity error while saving log")

        logger.info(
            f"daily_log_saved user_id={user_id} date={log.log_date} "
            f"mode={payload.mode.value} consumed={log.calories_consumed}"
        )
        return log

    @staticmethod
    def list_logs(
        db: Session,
        user_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[DailyLog]:
        ProfileService.get_user(db, user_id)
        if start_date and end_date and start_date > end_date:
            raise ServiceValidationError("start_date must not be after end_date")
        return DailyLogRepository(db).get_by_user_id(user_id, start_date, end_date)

    @staticmethod
    def get_log(db: Session, user_id: UUID, log_date: date) -> DailyLog:
        log = DailyLogRepository(db).get_by_date(user_id, log_date)
        if not log:
            raise NotFoundError(f"No log for {log_date}")
        return log

    @staticmethod
    def update_overrides(
        db: Session, user_id: UUID, log_date: date, payload: ManualOverridesUpdate
    ) -> DailyLog:
        """
        Store manual additions for a day.

        The displayed totals move by the change in each manual value, so the
        synced baseline underneath is unchanged.
        """
        log = LogService.get_log(db, user_id, log_date)

        delta = payload.manual_calories
        if delta is not None:
            log.calories_consumed = max(
                0, (log.calories_consumed or 0) + delta - (log.manual_calories or 0)
            )
            log.manual_calories = delta

        for macro in MACROS:
            new_manual = getattr(payload, f"manual_{macro}")
            if new_manual is None:
                continue
            old_manual = getattr(log, f"manual_{macro}") or 0
            current = getattr(log, macro) or 0
            setattr(log, macro, max(0, current + new_manual - old_manual))
            setattr(log, f"manual_{macro}", new_manual)

        db.commit()
        db.refresh(log)
        logger.info(
            f"manual_overrides_updated user_id={user_id} date={log_date} "
            f"calories={log.manual_calories}"
        )
        return log

    @staticmethod
    def delete_log(db: Session, user_id: UUID, log_date: date) -> None:
        log = LogService.get_log(db, user_id, log_date)
        db.delete(log)
        db.commit()
        logger.info(f"daily_log_deleted user_id={user_id} date={log_date}")
