"""
Domain entities for the plant catalog.

Core business objects representing catalog plants.
These entities are framework-agnostic and contain no persistence logic.
"""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass
class Plant:
    """
    Aggregate root for a catalog plant.

    Instances are mutable: callers build a plant, hand it to the manager,
    and receive the store-assigned ``id`` back on the same object.
    All fields default to empty so that partially filled plants can be
    constructed and rejected by validation instead of by the constructor.

    Attributes:
        catalog_number: Unique business key (12 upper-case letters/digits)
        name: Display name of the plant
        plant_type: Free-text botanical description
        food_type: Category label used for group search
        quantity: Number of units in stock
        is_edible: Whether the plant is edible
        id: Primary key assigned by the store, None until persisted
    """

    catalog_number: Optional[str] = None
    name: Optional[str] = None
    plant_type: Optional[str] = None
    food_type: Optional[str] = None
    quantity: int = 0
    is_edible: bool = False
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned a primary key."""
        return self.id is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return asdict(self)
