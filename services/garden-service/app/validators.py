"""
Input validation for the plant catalog.

Provides explicit field validation functions returning a structured
result, plus Pydantic request/response models for the HTTP API.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

from .domain.entities import Plant

# Validation patterns
CATALOG_NUMBER_PATTERN = re.compile(r"^[A-Z0-9]{12}$")

# Field limits
TEXT_FIELD_MAX_LENGTH = 255
MIN_QUANTITY = 1
MAX_QUANTITY = 2**31 - 1


@dataclass
class ValidationResult:
    """
    Outcome of validating a plant.

    Attributes:
        errors: Mapping of field name to the reason it was rejected
    """

    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field_name: str, reason: str) -> None:
        self.errors[field_name] = reason


def is_blank(value: Optional[str]) -> bool:
    """
    Check whether a string is None, empty or only whitespace.

    Args:
        value: String to check

    Returns:
        True if the value carries no content
    """
    return value is None or not str(value).strip()


def is_valid_catalog_number(catalog_number: Optional[str]) -> bool:
    """
    Validate catalog number format.

    A catalog number is exactly 12 upper-case letters or digits,
    e.g. ``1234ABCD9876``.

    Args:
        catalog_number: Catalog number to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(catalog_number, str):
        return False
    return bool(CATALOG_NUMBER_PATTERN.match(catalog_number))


def _check_text_field(result: ValidationResult, field_name: str, value: Any) -> None:
    if not isinstance(value, str) or is_blank(value):
        result.add_error(field_name, "must not be empty")
    elif len(value) > TEXT_FIELD_MAX_LENGTH:
        result.add_error(field_name, f"must be at most {TEXT_FIELD_MAX_LENGTH} characters")


def validate_plant(plant: Optional[Plant]) -> ValidationResult:
    """
    Validate every field of a plant.

    Args:
        plant: Plant to validate (None is reported as invalid)

    Returns:
        ValidationResult listing every rejected field
    """
    result = ValidationResult()

    if plant is None:
        result.add_error("plant", "must not be null")
        return result

    if is_blank(plant.catalog_number):
        result.add_error("catalog_number", "must not be empty")
    elif not is_valid_catalog_number(plant.catalog_number):
        result.add_error(
            "catalog_number", "must be exactly 12 upper-case letters or digits"
        )

    _check_text_field(result, "name", plant.name)
    _check_text_field(result, "plant_type", plant.plant_type)
    _check_text_field(result, "food_type", plant.food_type)

    # bool is a subclass of int and is not a quantity
    if not isinstance(plant.quantity, int) or isinstance(plant.quantity, bool):
        result.add_error("quantity", "must be an integer")
    elif not MIN_QUANTITY <= plant.quantity <= MAX_QUANTITY:
        result.add_error("quantity", f"must be between {MIN_QUANTITY} and {MAX_QUANTITY}")

    if not isinstance(plant.is_edible, bool):
        result.add_error("is_edible", "must be a boolean")

    return result


class PlantFields(BaseModel):
    """
    Fields shared by plant request models.

    Only shape is checked here, without type coercion. Business validation
    happens in the manager so that HTTP and programmatic callers get the
    same errors.
    """

    name: Optional[str] = Field(default=None, description="Plant name")
    plant_type: Optional[str] = Field(default=None, description="Botanical description")
    food_type: Optional[str] = Field(default=None, description="Food category")
    quantity: StrictInt = Field(default=0, description="Units in stock")
    is_edible: StrictBool = Field(default=False, description="Whether the plant is edible")


class PlantCreate(PlantFields):
    """Request model for adding a plant."""

    catalog_number: Optional[str] = Field(
        default=None,
        description="12 upper-case letters or digits, e.g. 1234ABCD9876",
    )

    @field_validator("catalog_number")
    @classmethod
    def strip_catalog_number(cls, v: Optional[str]) -> Optional[str]:
        """Strip surrounding whitespace from the catalog number."""
        return v.strip() if isinstance(v, str) else v

    def to_entity(self) -> Plant:
        return Plant(**self.model_dump())


class PlantUpdate(PlantFields):
    """Request model for updating a plant addressed by catalog number."""

    def to_entity(self, catalog_number: str) -> Plant:
        return Plant(catalog_number=catalog_number, **self.model_dump())


class PlantResponse(BaseModel):
    """Response model for a catalog plant."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    catalog_number: str
    name: str
    plant_type: str
    food_type: str
    quantity: int
    is_edible: bool
