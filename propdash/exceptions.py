"""Custom exception hierarchy for propdash."""


class PropDashError(Exception):
    """Base exception for all propdash errors."""


class EntityNotFoundError(PropDashError):
    """Raised when an update targets a record that does not exist."""

    def __init__(self, entity_kind: str, entity_id: str) -> None:
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        super().__init__(f"{entity_kind} with id {entity_id} not found")


class InvalidQueryError(PropDashError, ValueError):
    """Raised when query options cannot be applied to a collection."""


class ConfigurationError(PropDashError):
    """Raised when configuration is invalid or missing."""
