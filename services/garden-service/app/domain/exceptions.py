"""
Custom exceptions for the plant catalog domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.). Every exception is
tagged with an ``ErrorKind`` so transport adapters can map errors
without inspecting the concrete class.
"""

from enum import Enum
from typing import Optional

# Fixed user-facing messages
INVALID_PLANT_MESSAGE = "Invalid plant!"
EMPTY_CATALOG_NUMBER_MESSAGE = "Catalog number cannot be empty."
EMPTY_FOOD_TYPE_MESSAGE = "Food type cannot be empty."
NO_PLANT_FOUND_MESSAGE = "No plant found."
NO_PLANT_FOR_FOOD_TYPE_MESSAGE = "No plant found with the given food type."


class ErrorKind(str, Enum):
    """Categories of plant catalog errors."""

    ARGUMENT = "argument"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"


class PlantCatalogException(Exception):
    """Base exception for all plant catalog errors."""

    kind: ErrorKind = ErrorKind.STORAGE

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentException(PlantCatalogException):
    """Raised when a caller passes a blank identifier or search key."""

    kind = ErrorKind.ARGUMENT

    def __init__(self, argument: str, message: str):
        super().__init__(message=message, details={"argument": argument})


class PlantValidationException(PlantCatalogException):
    """Raised when a plant fails field-level validation."""

    kind = ErrorKind.VALIDATION

    def __init__(self, errors: Optional[dict] = None):
        super().__init__(message=INVALID_PLANT_MESSAGE, details={"errors": errors or {}})


class PlantNotFoundException(PlantCatalogException):
    """Raised when a query yields no plants."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = NO_PLANT_FOUND_MESSAGE, query: Optional[str] = None):
        super().__init__(message=message, details={"query": query} if query else {})

    @classmethod
    def for_catalog_number(cls, catalog_number: str) -> "PlantNotFoundException":
        """Build the not-found error for a single catalog number lookup."""
        return cls(
            message=f"No plant found with catalog number: {catalog_number}",
            query=catalog_number,
        )


class DuplicatePlantException(PlantCatalogException):
    """Raised when a catalog number is already in use."""

    kind = ErrorKind.CONFLICT

    def __init__(self, catalog_number: str):
        super().__init__(
            message=f"Plant with catalog number {catalog_number} already exists.",
            details={"catalog_number": catalog_number},
        )


class RepositoryException(PlantCatalogException):
    """Raised when a database operation fails."""

    kind = ErrorKind.STORAGE

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Repository {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )
