"""
Plant catalog business logic.

Validates caller input, applies existence rules and translates absent
or malformed data into domain exceptions before delegating persistence
to the repository.
"""

from typing import List, Optional

import structlog

from ..domain.entities import Plant
from ..domain.exceptions import (
    EMPTY_CATALOG_NUMBER_MESSAGE,
    EMPTY_FOOD_TYPE_MESSAGE,
    NO_PLANT_FOR_FOOD_TYPE_MESSAGE,
    NO_PLANT_FOUND_MESSAGE,
    InvalidArgumentException,
    PlantCatalogException,
    PlantNotFoundException,
    PlantValidationException,
)
from ..metrics import record_operation, record_result_count
from ..repositories.plant_repository import IPlantRepository
from ..validators import is_blank, validate_plant

logger = structlog.get_logger(__name__)


class PlantsManager:
    """
    Plant catalog manager.

    Every operation either returns a result or raises a
    ``PlantCatalogException`` subclass; nothing is retried.
    """

    def __init__(self, repository: IPlantRepository):
        """
        Initialize manager.

        Args:
            repository: Plant repository used for persistence
        """
        self.repository = repository

    async def add(self, plant: Plant) -> Plant:
        """
        Add a plant to the catalog.

        Args:
            plant: Plant to add; its ``id`` is set on success

        Returns:
            The persisted plant

        Raises:
            PlantValidationException: If the plant fails validation
            DuplicatePlantException: If the catalog number is already used
        """
        self._ensure_valid(plant, "add")

        try:
            saved = await self.repository.add(plant)
        except PlantCatalogException as e:
            record_operation("add", e.kind.value)
            raise

        record_operation("add", "success")
        logger.info("Plant added", catalog_number=saved.catalog_number, plant_id=saved.id)
        return saved

    async def delete(self, catalog_number: Optional[str]) -> None:
        """
        Remove a plant from the catalog.

        Args:
            catalog_number: Catalog number of the plant to remove

        Raises:
            InvalidArgumentException: If the catalog number is blank
            PlantNotFoundException: If no plant has that catalog number
        """
        self._ensure_catalog_number(catalog_number, "delete")

        deleted = await self.repository.delete(catalog_number)
        if not deleted:
            record_operation("delete", "not_found")
            raise PlantNotFoundException.for_catalog_number(catalog_number)

        record_operation("delete", "success")
        logger.info("Plant deleted", catalog_number=catalog_number)

    async def get_all(self) -> List[Plant]:
        """
        Get every plant in the catalog.

        Returns:
            Non-empty list of plants ordered by id

        Raises:
            PlantNotFoundException: If the catalog is empty
        """
        plants = await self.repository.find_all()
        record_result_count("get_all", len(plants))

        if not plants:
            record_operation("get_all", "not_found")
            raise PlantNotFoundException(NO_PLANT_FOUND_MESSAGE)

        record_operation("get_all", "success")
        return plants

    async def search_by_food_type(self, food_type: Optional[str]) -> List[Plant]:
        """
        Get plants in a food category.

        Args:
            food_type: Exact food type to match

        Returns:
            Non-empty list of matching plants

        Raises:
            InvalidArgumentException: If the food type is blank
            PlantNotFoundException: If no plant has that food type
        """
        if is_blank(food_type):
            record_operation("search_by_food_type", "argument")
            raise InvalidArgumentException("food_type", EMPTY_FOOD_TYPE_MESSAGE)

        plants = await self.repository.find_by_food_type(food_type)
        record_result_count("search_by_food_type", len(plants))

        if not plants:
            record_operation("search_by_food_type", "not_found")
            raise PlantNotFoundException(NO_PLANT_FOR_FOOD_TYPE_MESSAGE, query=food_type)

        record_operation("search_by_food_type", "success")
        logger.debug("Food type search", food_type=food_type, results=len(plants))
        return plants

    async def get_specific(self, catalog_number: Optional[str]) -> Plant:
        """
        Get a single plant by catalog number.

        Args:
            catalog_number: Catalog number to look up

        Returns:
            The matching plant

        Raises:
            InvalidArgumentException: If the catalog number is blank
            PlantNotFoundException: If no plant has that catalog number
        """
        self._ensure_catalog_number(catalog_number, "get_specific")

        plant = await self.repository.find_by_catalog_number(catalog_number)
        if plant is None:
            record_operation("get_specific", "not_found")
            raise PlantNotFoundException.for_catalog_number(catalog_number)

        record_operation("get_specific", "success")
        return plant

    async def update(self, plant: Optional[Plant]) -> Plant:
        """
        Persist changes to an existing plant.

        The stored row is addressed by ``plant.id``, or by catalog number
        when the plant has not been loaded from the store.

        Args:
            plant: Plant carrying the new values

        Returns:
            The updated plant

        Raises:
            PlantValidationException: If the plant is None or invalid
            PlantNotFoundException: If the plant is not in the catalog
            DuplicatePlantException: If the new catalog number is already used
        """
        self._ensure_valid(plant, "update")

        try:
            updated = await self.repository.update(plant)
        except PlantCatalogException as e:
            record_operation("update", e.kind.value)
            raise

        if updated is None:
            record_operation("update", "not_found")
            raise PlantNotFoundException.for_catalog_number(plant.catalog_number)

        record_operation("update", "success")
        logger.info("Plant updated", catalog_number=updated.catalog_number, plant_id=updated.id)
        return updated

    def _ensure_valid(self, plant: Optional[Plant], operation: str) -> None:
        result = validate_plant(plant)
        if not result.is_valid:
            record_operation(operation, "validation")
            logger.info("Plant rejected", operation=operation, errors=result.errors)
            raise PlantValidationException(result.errors)

    def _ensure_catalog_number(self, catalog_number: Optional[str], operation: str) -> None:
        if is_blank(catalog_number):
            record_operation(operation, "argument")
            raise InvalidArgumentException("catalog_number", EMPTY_CATALOG_NUMBER_MESSAGE)
