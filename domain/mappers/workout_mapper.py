"""
Workout and template mappers.
Adds display values in the user's units next to the stored kg/km.
"""

from domain.models import Workout, WorkoutTemplate
from domain.enums import UnitSystem
from domain.schemas.workout_schemas import (
    ExerciseEntryResponse,
    WorkoutResponse,
    WorkoutTemplateResponse,
)
from domain.units import distance_label, to_user_distance, to_user_weight, weight_label


def _rounded(value):
    return None if value is None else round(value, 2)


class WorkoutMapper:
    """Mapper for workout and template transformations."""

    @staticmethod
    def entry_to_response(entry, unit_system=UnitSystem.METRIC) -> ExerciseEntryResponse:
        return ExerciseEntryResponse(
            entry_id=entry.entry_id,
            position=entry.position,
            name=entry.name,
            reps=entry.reps,
            weight=entry.weight,
            duration=entry.duration,
            distance=entry.distance,
            is_cardio=entry.is_cardio,
            note=entry.note or "",
            display_weight=_rounded(to_user_weight(entry.weight, unit_system)),
            display_distance=_rounded(to_user_distance(entry.distance, unit_system)),
            weight_unit=weight_label(unit_system),
            distance_unit=distance_label(unit_system),
        )

    @staticmethod
    def to_response(workout: Workout, unit_system=UnitSystem.METRIC) -> WorkoutResponse:
        return WorkoutResponse(
            workout_id=workout.workout_id,
            user_id=workout.user_id,
            workout_date=workout.workout_date,
            category=workout.category,
            muscle_groups=list(workout.muscle_groups or []),
            note=workout.note or "",
            exercises=[
                WorkoutMapper.entry_to_response(e, unit_system) for e in workout.exercises
            ],
            created_at=workout.created_at,
        )

    @staticmethod
    def template_to_response(
        template: WorkoutTemplate, unit_system=UnitSystem.METRIC
    ) -> WorkoutTemplateResponse:
        return WorkoutTemplateResponse(
            template_id=template.template_id,
            name=template.name,
            category=template.category,
            muscle_groups=list(template.muscle_groups or []),
            exercises=[
                WorkoutMapper.entry_to_response(e, unit_system) for e in template.exercises
            ],
        )
