"""
SQLAlchemy implementation of the plant repository.

Implements persistent storage for the plant catalog on any database
SQLAlchemy supports (SQLite locally, PostgreSQL in production).
"""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..domain.entities import Plant
from ..domain.exceptions import DuplicatePlantException, RepositoryException
from ..models import PlantRecord
from .plant_repository import IPlantRepository

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation on PostgreSQL
UNIQUE_VIOLATION_PGCODE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell a unique constraint failure apart from other integrity errors."""
    if getattr(error.orig, "pgcode", None) == UNIQUE_VIOLATION_PGCODE:
        return True
    return "unique" in str(error.orig).lower()


class SqlAlchemyPlantRepository(IPlantRepository):
    """SQLAlchemy implementation for plant persistence."""

    def __init__(self, db: Session):
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    async def add(self, plant: Plant) -> Plant:
        """Insert a new plant row and copy the assigned id back."""
        record = PlantRecord(
            catalog_number=plant.catalog_number,
            name=plant.name,
            plant_type=plant.plant_type,
            food_type=plant.food_type,
            quantity=plant.quantity,
            is_edible=plant.is_edible,
        )
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                logger.warning("Duplicate catalog number %s: %s", plant.catalog_number, e)
                raise DuplicatePlantException(plant.catalog_number)
            logger.error("Integrity error adding plant %s: %s", plant.catalog_number, e)
            raise RepositoryException("add", str(e.orig))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error adding plant %s: %s", plant.catalog_number, e)
            raise RepositoryException("add", str(e))

        plant.id = record.id
        return plant

    async def find_by_catalog_number(self, catalog_number: str) -> Optional[Plant]:
        """Find plant by catalog number."""
        try:
            record = self._query_by_catalog_number(catalog_number)
        except SQLAlchemyError as e:
            logger.error("Error finding plant %s: %s", catalog_number, e)
            raise RepositoryException("find", str(e))
        return self._map_to_entity(record) if record else None

    async def find_all(self) -> List[Plant]:
        """Get every plant ordered by id."""
        try:
            records = self.db.query(PlantRecord).order_by(PlantRecord.id).all()
        except SQLAlchemyError as e:
            logger.error("Error listing plants: %s", e)
            raise RepositoryException("find_all", str(e))
        return [self._map_to_entity(record) for record in records]

    async def find_by_food_type(self, food_type: str) -> List[Plant]:
        """Get plants whose food type matches exactly."""
        try:
            records = (
                self.db.query(PlantRecord)
                .filter(PlantRecord.food_type == food_type)
                .order_by(PlantRecord.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error searching plants by food type %s: %s", food_type, e)
            raise RepositoryException("find_by_food_type", str(e))
        return [self._map_to_entity(record) for record in records]

    async def update(self, plant: Plant) -> Optional[Plant]:
        """Overwrite the row addressed by id, or by catalog number when id is unset."""
        try:
            if plant.id is not None:
                record = self.db.get(PlantRecord, plant.id)
            else:
                record = self._query_by_catalog_number(plant.catalog_number)

            if record is None:
                return None

            record.catalog_number = plant.catalog_number
            record.name = plant.name
            record.plant_type = plant.plant_type
            record.food_type = plant.food_type
            record.quantity = plant.quantity
            record.is_edible = plant.is_edible

            self.db.commit()
            self.db.refresh(record)
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                logger.warning("Duplicate catalog number %s: %s", plant.catalog_number, e)
                raise DuplicatePlantException(plant.catalog_number)
            logger.error("Integrity error updating plant %s: %s", plant.catalog_number, e)
            raise RepositoryException("update", str(e.orig))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error updating plant %s: %s", plant.catalog_number, e)
            raise RepositoryException("update", str(e))

        plant.id = record.id
        return plant

    async def delete(self, catalog_number: str) -> bool:
        """Delete the plant with the given catalog number."""
        try:
            deleted = (
                self.db.query(PlantRecord)
                .filter(PlantRecord.catalog_number == catalog_number)
                .delete()
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error deleting plant %s: %s", catalog_number, e)
            raise RepositoryException("delete", str(e))
        return deleted > 0

    async def count(self) -> int:
        """Count stored plants."""
        try:
            return self.db.query(func.count(PlantRecord.id)).scalar() or 0
        except SQLAlchemyError as e:
            logger.error("Error counting plants: %s", e)
            raise RepositoryException("count", str(e))

    def _query_by_catalog_number(self, catalog_number: str) -> Optional[PlantRecord]:
        return (
            self.db.query(PlantRecord)
            .filter(PlantRecord.catalog_number == catalog_number)
            .first()
        )

    @staticmethod
    def _map_to_entity(record: PlantRecord) -> Plant:
        """Map database model to domain entity."""
        return Plant(
            id=record.id,
            catalog_number=record.catalog_number,
            name=record.name,
            plant_type=record.plant_type,
            food_type=record.food_type,
            quantity=record.quantity,
            is_edible=record.is_edible,
        )
