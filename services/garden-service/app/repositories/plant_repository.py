"""
Plant repository interface (Abstract Base Class).

Defines the contract for plant persistence and retrieval
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.entities import Plant


class IPlantRepository(ABC):
    """
    Abstract repository interface for plant catalog operations.

    Implementations perform raw CRUD only; business rules such as
    validation and not-found handling belong to the manager.
    """

    @abstractmethod
    async def add(self, plant: Plant) -> Plant:
        """
        Persist a new plant.

        Args:
            plant: Plant to store

        Returns:
            The same plant with its store-assigned id set
        """
        pass

    @abstractmethod
    async def find_by_catalog_number(self, catalog_number: str) -> Optional[Plant]:
        """
        Find a plant by catalog number.

        Args:
            catalog_number: Unique business key

        Returns:
            Plant if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Plant]:
        """
        Get every plant in the catalog.

        Returns:
            List of plants ordered by id (empty if none)
        """
        pass

    @abstractmethod
    async def find_by_food_type(self, food_type: str) -> List[Plant]:
        """
        Get plants in a food category.

        Args:
            food_type: Exact food type to match

        Returns:
            List of matching plants ordered by id (empty if none)
        """
        pass

    @abstractmethod
    async def update(self, plant: Plant) -> Optional[Plant]:
        """
        Overwrite a stored plant with new field values.

        The target row is located by ``plant.id`` when set, otherwise by
        ``plant.catalog_number``.

        Args:
            plant: Plant carrying the new values

        Returns:
            The updated plant, or None if no row matched
        """
        pass

    @abstractmethod
    async def delete(self, catalog_number: str) -> bool:
        """
        Remove a plant by catalog number.

        Args:
            catalog_number: Unique business key

        Returns:
            True if a row was removed, False if none matched
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Count stored plants.

        Returns:
            Number of rows in the catalog
        """
        pass
