from typing import List, Optional, Sequence
from uuid import UUID
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from domain.models import (
    Workout,
    ExerciseEntry,
    ExerciseDefinition,
    WorkoutTemplate,
    TemplateExerciseEntry,
)
from domain.schemas.workout_schemas import (
    WorkoutCreate,
    ExerciseEntryCreate,
    ExerciseDefinitionCreate,
    WorkoutTemplateCreate,
    TemplateStartRequest,
)
from domain.enums import UnitSystem
from domain.exercise_library import DEFAULT_EXERCISES
from domain.units import distance_to_km, weight_to_kg
from repositories import (
    WorkoutRepository,
    ExerciseDefinitionRepository,
    WorkoutTemplateRepository,
)
from services.profile_service import ProfileService
from app.exceptions import ConflictError, NotFoundError

logger = logging.getLogger("repscale.workouts")


def _entry_kwargs(position: int, entry, unit_system=None) -> dict:
    """Column values for one set; with a unit system the input is converted to kg/km"""
    weight, distance = entry.weight, entry.distance
    if unit_system is not None:
        weight = weight_to_kg(weight, entry.weight_unit, unit_system)
        distance = distance_to_km(distance, entry.distance_unit, unit_system)
    return {
        "position": position,
        "name": entry.name.strip(),
        "reps": entry.reps,
        "weight": weight,
        "duration": entry.duration,
        "distance": distance,
        "is_cardio": entry.is_cardio,
        "note": entry.note or "",
    }


class WorkoutService:
    """Business logic for workouts, the exercise library and templates"""

    # ---------- workouts ----------

    @staticmethod
    def _muscles_from_library(
        db: Session, user_id: UUID, exercises: Sequence[ExerciseEntryCreate]
    ) -> List[str]:
        """Muscle groups of the logged exercises, in first-seen order"""
        library = ExerciseDefinitionRepository(db)
        muscles: List[str] = []
        for entry in exercises:
            definition = library.get_by_name(user_id, entry.name)
            for muscle in (definition.muscle_groups if definition else []):
                if muscle not in muscles:
                    muscles.append(muscle)
        return muscles

    @staticmethod
    def create_workout(db: Session, user_id: UUID, payload: WorkoutCreate) -> Workout:
        """
        Record a workout with its exercises in the order given.

        When no muscle groups are supplied they are taken from the exercise
        library entries of the logged exercises.
        """
        user = ProfileService.get_user(db, user_id)
        muscles = payload.muscle_groups or WorkoutService._muscles_from_library(
            db, user_id, payload.exercises
        )
        workout = Workout(
            user_id=user_id,
            workout_date=payload.workout_date,
            category=payload.category.strip(),
            muscle_groups=muscles,
            note=payload.note,
            exercises=[
                ExerciseEntry(**_entry_kwargs(i, e, user.profile.unit_system))
                for i, e in enumerate(payload.exercises)
            ],
        )
        workout = WorkoutRepository(db).create(workout)
        logger.info(
            f"workout_created user_id={user_id} workout_id={workout.workout_id} "
            f"category={workout.category} exercises={len(workout.exercises)}"
        )
        return workout

    @staticmethod
    def list_workouts(
        db: Session, user_id: UUID, since: Optional[date] = None
    ) -> List[Workout]:
        ProfileService.get_user(db, user_id)
        return WorkoutRepository(db).get_by_user_id(user_id, since=since)

    @staticmethod
    def get_workout(db: Session, user_id: UUID, workout_id: UUID) -> Workout:
        workout = WorkoutRepository(db).get_for_user(user_id, workout_id)
        if not workout:
            raise NotFoundError(f"Workout {workout_id} not found")
        return workout

    @staticmethod
    def delete_workout(db: Session, user_id: UUID, workout_id: UUID) -> None:
        workout = WorkoutService.get_workout(db, user_id, workout_id)
        db.delete(workout)
        db.commit()
        logger.info(f"workout_deleted user_id={user_id} workout_id={workout_id}")

    # ---------- exercise library ----------

    @staticmethod
    def list_exercises(db: Session, user_id: UUID) -> List[ExerciseDefinition]:
        ProfileService.get_user(db, user_id)
        return ExerciseDefinitionRepository(db).get_by_user_id(user_id)

    @staticmethod
    def create_exercise(
        db: Session, user_id: UUID, payload: ExerciseDefinitionCreate
    ) -> ExerciseDefinition:
        ProfileService.get_user(db, user_id)
        repo = ExerciseDefinitionRepository(db)
        if repo.get_by_name(user_id, payload.name):
            raise ConflictError(f"Exercise '{payload.name}' already exists")

        definition = ExerciseDefinition(
            user_id=user_id,
            name=payload.name,
            muscle_groups=payload.muscle_groups,
            is_cardio=payload.is_cardio,
        )
        try:
            definition = repo.create(definition)
        except IntegrityError:
            db.rollback()
            raise ConflictError(f"Exercise '{payload.name}' already exists")

        logger.info(f"exercise_created user_id={user_id} name={definition.name}")
        return definition

    @staticmethod
    def seed_default_exercises(db: Session, user_id: UUID) -> int:
        """Add the starter library, skipping names the user already has"""
        ProfileService.get_user(db, user_id)
        repo = ExerciseDefinitionRepository(db)
        added = 0
        for name, muscles, is_cardio in DEFAULT_EXERCISES:
            if repo.get_by_name(user_id, name):
                continue
            db.add(
                ExerciseDefinition(
                    user_id=user_id,
                    name=name,
                    muscle_groups=list(muscles),
                    is_cardio=is_cardio,
                )
            )
            added += 1
        db.commit()
        logger.info(f"exercise_library_seeded user_id={user_id} added={added}")
        return added

    @staticmethod
    def delete_exercise(db: Session, user_id: UUID, definition_id: UUID) -> None:
        repo = ExerciseDefinitionRepository(db)
        definition = repo.get_by_id(definition_id)
        if not definition or definition.user_id != user_id:
            raise NotFoundError(f"Exercise {definition_id} not found")
        repo.delete(definition_id)
        logger.info(f"exercise_deleted user_id={user_id} definition_id={definition_id}")

    # ---------- templates ----------

    @staticmethod
    def create_template(
        db: Session, user_id: UUID, payload: WorkoutTemplateCreate
    ) -> WorkoutTemplate:
        user = ProfileService.get_user(db, user_id)
        template = WorkoutTemplate(
            user_id=user_id,
            name=payload.name.strip(),
            category=payload.category.strip(),
            muscle_groups=payload.muscle_groups,
            exercises=[
                TemplateExerciseEntry(**_entry_kwargs(i, e, user.profile.unit_system))
                for i, e in enumerate(payload.exercises)
            ],
        )
        template = WorkoutTemplateRepository(db).create(template)
        logger.info(f"template_created user_id={user_id} template_id={template.template_id}")
        return template

    @staticmethod
    def list_templates(db: Session, user_id: UUID) -> List[WorkoutTemplate]:
        ProfileService.get_user(db, user_id)
        return WorkoutTemplateRepository(db).get_by_user_id(user_id)

    @staticmethod
    def get_template(db: Session, user_id: UUID, template_id: UUID) -> WorkoutTemplate:
        template = WorkoutTemplateRepository(db).get_for_user(user_id, template_id)
        if not template:
            raise NotFoundError(f"Template {template_id} not found")
        return template

    @staticmethod
    def delete_template(db: Session, user_id: UUID, template_id: UUID) -> None:
        template = WorkoutService.get_template(db, user_id, template_id)
        db.delete(template)
        db.commit()
        logger.info(f"template_deleted user_id={user_id} template_id={template_id}")

    @staticmethod
    def start_from_template(
        db: Session, user_id: UUID, template_id: UUID, payload: TemplateStartRequest
    ) -> Workout:
        """Create a workout that copies the template's category, muscles and sets"""
        template = WorkoutService.get_template(db, user_id, template_id)
        workout = Workout(
            user_id=user_id,
            workout_date=payload.workout_date,
            category=template.category,
            muscle_groups=list(template.muscle_groups or []),
            note=payload.note,
            exercises=[
                ExerciseEntry(**_entry_kwargs(i, e))
                for i, e in enumerate(template.exercises)
            ],
        )
        workout = WorkoutRepository(db).create(workout)
        logger.info(
            f"workout_started_from_template user_id={user_id} "
            f"template_id={template_id} workout_id={workout.workout_id}"
        )
        return workout

    @staticmethod
    def unit_system_for(db: Session, user_id: UUID) -> UnitSystem:
        return ProfileService.get_profile(db, user_id).unit_system
