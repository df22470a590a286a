"""
Workout Repository - Data access layer for workouts, the exercise library
and workout templates
"""

from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import func

from repositories.base import BaseRepository
from domain.models import (
    Workout,
    ExerciseDefinition,
    WorkoutTemplate,
)


class WorkoutRepository(BaseRepository[Workout]):
    """Workouts are loaded together with their ordered exercise entries"""

    def __init__(self, db: Session):
        super().__init__(db, Workout)

    def get_for_user(self, user_id: UUID, workout_id: UUID) -> Optional[Workout]:
        return (
            self.owned_by(user_id)
            .options(selectinload(Workout.exercises))
            .filter(Workout.workout_id == workout_id)
            .first()
        )

    def get_by_user_id(
        self, user_id: UUID, since: Optional[date] = None
    ) -> List[Workout]:
        """Newest first"""
        query = self.owned_by(user_id).options(selectinload(Workout.exercises))
        if since:
            query = query.filter(Workout.workout_date >= since)
        return query.order_by(Workout.workout_date.desc(), Workout.created_at.desc()).all()


class ExerciseDefinitionRepository(BaseRepository[ExerciseDefinition]):
    """Per-user exercise library"""

    def __init__(self, db: Session):
        super().__init__(db, ExerciseDefinition)

    def get_by_name(self, user_id: UUID, name: str) -> Optional[ExerciseDefinition]:
        """Case-insensitive lookup by exercise name"""
        return (
            self.owned_by(user_id)
            .filter(func.lower(ExerciseDefinition.name) == name.strip().lower())
            .first()
        )

    def get_by_user_id(self, user_id: UUID) -> List[ExerciseDefinition]:
        return self.owned_by(user_id).order_by(ExerciseDefinition.name.asc()).all()


class WorkoutTemplateRepository(BaseRepository[WorkoutTemplate]):
    def __init__(self, db: Session):
        super().__init__(db, WorkoutTemplate)

    def get_for_user(self, user_id: UUID, template_id: UUID) -> Optional[WorkoutTemplate]:
        return (
            self.owned_by(user_id)
            .options(selectinload(WorkoutTemplate.exercises))
            .filter(WorkoutTemplate.template_id == template_id)
            .first()
        )

    def get_by_user_id(self, user_id: UUID) -> List[WorkoutTemplate]:
        return (
            self.owned_by(user_id)
            .options(selectinload(WorkoutTemplate.exercises))
            .order_by(WorkoutTemplate.name.asc())
            .all()
        )
