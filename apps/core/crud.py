"""Generic CRUD interface and service."""

import logging
from typing import Callable, ContextManager, Generic, Optional, Protocol, TypeVar

from django.db import transaction

T = TypeVar('T')
ID = TypeVar('ID')

logger = logging.getLogger(__name__)


class CrudDataService(Protocol[T, ID]):
    """Data access operations every entity store provides."""

    def clear(self) -> None: ...

    def get_all(self) -> list[T]: ...

    def get_by_id(self, entity_id: ID) -> T: ...

    def find_by_id(self, entity_id: ID) -> Optional[T]: ...

    def upsert(self, entity: T) -> T: ...

    def delete(self, entity_id: ID) -> None: ...


class CrudService(Generic[T, ID]):
    """
    CRUD operations on top of a data service.

    Every operation runs in its own unit of work. `atomic` defaults to
    Django's `transaction.atomic` and can be replaced (e.g. with
    `contextlib.nullcontext` when no database is involved).
    """

    def __init__(
        self,
        data_service: CrudDataService[T, ID],
        *,
        entity_name: str,
        atomic: Callable[[], ContextManager] = transaction.atomic,
    ):
        self.data_service = data_service
        self.entity_name = entity_name
        self._atomic = atomic

    def clear(self) -> None:
        logger.warning("Clearing all %s data...", self.entity_name)
        with self._atomic():
            self.data_service.clear()

    def get_all(self) -> list[T]:
        with self._atomic():
            return self.data_service.get_all()

    def get_by_id(self, entity_id: ID) -> T:
        with self._atomic():
            return self.data_service.get_by_id(entity_id)

    def upsert(self, entity: T) -> T:
        """
        Create the entity when it has no ID, otherwise update it.

        Raises:
            NotFoundError: If an entity with the given ID does not exist
            DuplicationError: If a unique field clashes with another entity
        """
        with self._atomic():
            if entity.id is None:
                logger.info("Creating new %s...", self.entity_name)
            else:
                logger.info("Updating %s with ID '%s'...", self.entity_name, entity.id)
                self.data_service.get_by_id(entity.id)
            return self.data_service.upsert(entity)

    def delete(self, entity_id: ID) -> None:
        logger.info("Deleting %s with ID '%s'...", self.entity_name, entity_id)
        with self._atomic():
            self.data_service.delete(entity_id)
