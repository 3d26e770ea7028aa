"""POS services - lookup and CRUD for points of sale."""

from .data_service import PosDataService, to_pos
from .pos_management import get_pos_service, list_pos

__all__ = [
    'PosDataService',
    'to_pos',
    'get_pos_service',
    'list_pos',
]
