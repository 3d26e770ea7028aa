"""User CRUD service wiring."""

from apps.core.crud import CrudService

from .data_service import UserDataService


def get_user_service() -> CrudService:
    """Return the CRUD service for users backed by the database."""
    return CrudService(UserDataService(), entity_name='User')
