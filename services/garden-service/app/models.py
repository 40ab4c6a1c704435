"""
Database models for the garden service.

This module defines the SQLAlchemy ORM model backing the plant catalog.
"""

from typing import Any

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base: Any = declarative_base()

# Column limits
CATALOG_NUMBER_LENGTH = 12
TEXT_FIELD_MAX_LENGTH = 255


class PlantRecord(Base):
    """
    Persistent row for a catalog plant.

    Attributes:
        id: Primary key identifier
        catalog_number: Unique business key (12 characters)
        name: Plant name
        plant_type: Botanical description
        food_type: Category label used for group search
        quantity: Units in stock
        is_edible: Whether the plant is edible
        created_at: Timestamp of row creation
        updated_at: Timestamp of last row update
    """

    __tablename__ = "plants"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    catalog_number = Column(
        String(CATALOG_NUMBER_LENGTH), unique=True, index=True, nullable=False
    )
    name = Column(String(TEXT_FIELD_MAX_LENGTH), nullable=False)
    plant_type = Column(String(TEXT_FIELD_MAX_LENGTH), nullable=False)
    food_type = Column(String(TEXT_FIELD_MAX_LENGTH), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    is_edible = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<PlantRecord id={self.id} catalog_number={self.catalog_number!r}>"
