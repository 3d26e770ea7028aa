"""ORM-backed POS store."""

from typing import Optional

from apps.core.data import ModelDataService
from apps.pos.domain import Pos
from apps.pos.models import Pos as PosModel


def to_pos(instance: PosModel) -> Pos:
    return Pos(
        id=instance.id,
        name=instance.name,
        description=instance.description,
        type=instance.type,
        campus=instance.campus,
        street=instance.street,
        house_number=instance.house_number,
        postal_code=instance.postal_code,
        city=instance.city,
        created_at=instance.created_at,
        updated_at=instance.updated_at,
    )


class PosDataService(ModelDataService[Pos]):
    model = PosModel
    entity_name = 'POS'

    def to_domain(self, instance):
        return to_pos(instance)

    def to_fields(self, entity):
        return {
            'name': entity.name,
            'description': entity.description,
            'type': entity.type,
            'campus': entity.campus,
            'street': entity.street,
            'house_number': entity.house_number,
            'postal_code': entity.postal_code,
            'city': entity.city,
        }

    def filter(self, *, campus: Optional[str] = None) -> list[Pos]:
        """Get all points of sale, optionally only those on one campus."""
        queryset = self.get_queryset()

        if campus is not None:
            queryset = queryset.filter(campus=campus)

        return [self.to_domain(instance) for instance in queryset]
