"""Repository layer exceptions."""

from typing import Any


class RepositoryError(Exception):
    """Base exception for all repository errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DuplicateEntityError(RepositoryError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str) -> None:
        message = f"{entity_type} with {field}='{value}' already exists"
        details = {
            "entity_type": entity_type,
            "field": field,
            "value": value,
        }
        super().__init__(message, details)
        self.entity_type = entity_type
        self.field = field
        self.value = value


class TransactionError(RepositoryError):
    """Raised when a transaction operation fails."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        details: dict[str, Any] = {}
        if original_error:
            details["original_error"] = str(original_error)
            details["error_type"] = type(original_error).__name__

        super().__init__(message, details)
        self.original_error = original_error
