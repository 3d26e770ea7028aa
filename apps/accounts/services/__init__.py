"""Services for accounts business logic."""

from .data_service import UserDataService, to_user
from .user_registration import register_user
from .user_management import get_user_service

__all__ = [
    'UserDataService',
    'to_user',
    'register_user',
    'get_user_service',
]
