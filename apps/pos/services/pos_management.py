"""POS CRUD service wiring."""

from typing import Optional

from django.db import transaction

from apps.core.crud import CrudService

from ..domain import Pos
from .data_service import PosDataService


def get_pos_service() -> CrudService:
    """Return the CRUD service for points of sale backed by the database."""
    return CrudService(PosDataService(), entity_name='POS')


@transaction.atomic
def list_pos(campus: Optional[str] = None) -> list[Pos]:
    """Return all points of sale, or those on the given campus."""
    return PosDataService().filter(campus=campus)
