"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from .database import get_db
from .repositories.sqlalchemy_repository import SqlAlchemyPlantRepository
from .services.plants_manager import PlantsManager


async def get_plants_manager(db: Session = Depends(get_db)) -> PlantsManager:
    """
    Build a plants manager bound to the request's database session.

    Used by all routers that need catalog access.
    """
    return PlantsManager(SqlAlchemyPlantRepository(db))
