"""Django ORM implementation of the CRUD data service interface."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from django.db import IntegrityError, models, transaction

from .exceptions import DuplicationError, NotFoundError

T = TypeVar('T')


class ModelDataService(ABC, Generic[T]):
    """
    Stores domain values in a Django model.

    Subclasses set `model` and `entity_name` and provide the two mappings
    `to_domain` (model instance -> value) and `to_fields` (value -> model
    field dict). `after_save` can persist related rows.
    """

    model: type[models.Model]
    entity_name: str

    def get_queryset(self):
        return self.model.objects.all()

    @abstractmethod
    def to_domain(self, instance) -> T:
        """Map a model instance to its domain value."""

    @abstractmethod
    def to_fields(self, entity: T) -> dict:
        """Map a domain value to model field values."""

    def after_save(self, instance, entity: T) -> None:
        pass

    def clear(self) -> None:
        self.model.objects.all().delete()

    def get_all(self) -> list[T]:
        return [self.to_domain(instance) for instance in self.get_queryset()]

    def find_by_id(self, entity_id) -> Optional[T]:
        if entity_id is None:
            return None
        instance = self.get_queryset().filter(pk=entity_id).first()
        if instance is None:
            return None
        return self.to_domain(instance)

    def get_by_id(self, entity_id) -> T:
        entity = self.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    def upsert(self, entity: T) -> T:
        """Insert or update the entity and return the stored value."""
        fields = self.to_fields(entity)

        if entity.id is None:
            instance = self.model(**fields)
        else:
            instance = self.model.objects.filter(pk=entity.id).first()
            if instance is None:
                raise NotFoundError(self.entity_name, entity.id)
            for name, value in fields.items():
                setattr(instance, name, value)

        # Savepoint keeps the outer transaction usable after a constraint error
        try:
            with transaction.atomic():
                instance.save()
                self.after_save(instance, entity)
        except IntegrityError as e:
            raise DuplicationError(
                f"{self.entity_name} conflicts with an existing entry: {e}"
            ) from e

        return self.get_by_id(instance.pk)

    def delete(self, entity_id) -> None:
        deleted, _ = self.model.objects.filter(pk=entity_id).delete()
        if not deleted:
            raise NotFoundError(self.entity_name, entity_id)
