from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session
import logging

from domain.models import GoalPeriod
from domain.schemas.goal_schemas import PhaseStatsResponse
from domain.units import to_user_weight, weight_label
from repositories import GoalPeriodRepository, WeightRepository
from services.profile_service import ProfileService

logger = logging.getLogger("repscale.goals")


def _display(value: Optional[float], unit_system) -> Optional[float]:
    if value is None:
        return None
    return round(to_user_weight(value, unit_system), 2)


class GoalService:
    """Goal phase history and per-phase statistics"""

    @staticmethod
    def list_periods(db: Session, user_id: UUID) -> List[GoalPeriod]:
        ProfileService.get_user(db, user_id)
        return GoalPeriodRepository(db).get_by_user_id(user_id)

    @staticmethod
    def phase_stats(
        db: Session, user_id: UUID, today: Optional[date] = None
    ) -> List[PhaseStatsResponse]:
        """
        Duration and weight change for every phase, newest first.

        The open phase runs until today and ends at the latest weigh-in.
        """
        today = today or date.today()
        profile = ProfileService.get_profile(db, user_id)
        unit_system = profile.unit_system
        latest = WeightRepository(db).get_latest(user_id)

        stats = []
        for period in GoalPeriodRepository(db).get_by_user_id(user_id):
            end_day = period.end_date or today
            end_weight = period.end_weight
            if period.is_open:
                end_weight = latest.weight if latest else None

            change = None
            if period.start_weight is not None and end_weight is not None:
                change = end_weight - period.start_weight

            stats.append(
                PhaseStatsResponse(
                    period_id=period.period_id,
                    goal_type=period.goal_type,
                    start_date=period.start_date,
                    end_date=period.end_date,
                    is_current=period.is_open,
                    duration_days=max((end_day - period.start_date).days, 0),
                    start_weight=_display(period.start_weight, unit_system),
                    end_weight=_display(end_weight, unit_system),
                    weight_change=_display(change, unit_system),
                    display_unit=weight_label(unit_system),
                )
            )

        logger.info(f"phase_stats_computed user_id={user_id} phases={len(stats)}")
        return stats
