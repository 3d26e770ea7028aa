"""Domain exceptions shared by all apps."""


class DomainError(Exception):
    """Base exception for all domain errors."""
    pass


class ValidationError(DomainError):
    """A business rule was violated."""
    pass


class NotFoundError(DomainError):
    """Entity does not exist."""

    def __init__(self, entity_name, entity_id):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} with ID '{entity_id}' does not exist.")


class DuplicationError(DomainError):
    """Entity conflicts with an existing one on a unique field."""
    pass
