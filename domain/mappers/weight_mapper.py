"""
Weight entry mappers.
Converts stored kg values to the user's display unit.
"""

from domain.models import WeightEntry
from domain.enums import UnitSystem
from domain.schemas.weight_schemas import WeightEntryResponse, WeightPhotoResponse
from domain.units import to_user_weight, weight_label


class WeightMapper:
    """Mapper for weigh-in transformations."""

    @staticmethod
    def to_response(entry: WeightEntry, unit_system=UnitSystem.METRIC) -> WeightEntryResponse:
        return WeightEntryResponse(
            weight_id=entry.weight_id,
            user_id=entry.user_id,
            recorded_at=entry.recorded_at,
            weight=entry.weight,
            display_weight=round(to_user_weight(entry.weight, unit_system), 2),
            display_unit=weight_label(unit_system),
            note=entry.note,
            photos=[WeightPhotoResponse.model_validate(p) for p in entry.photos],
        )
