"""
Plant catalog router.

Thin HTTP adapter over ``PlantsManager``; domain exceptions are turned
into responses by the application-level exception handler.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from ..dependencies import get_plants_manager
from ..services.plants_manager import PlantsManager
from ..validators import PlantCreate, PlantResponse, PlantUpdate

router = APIRouter(prefix="/api/v1/plants", tags=["plants"])


@router.post(
    "",
    response_model=PlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add plant",
)
async def add_plant(
    payload: PlantCreate,
    manager: PlantsManager = Depends(get_plants_manager),
):
    """Add a plant to the catalog."""
    plant = await manager.add(payload.to_entity())
    return PlantResponse.model_validate(plant)


@router.get("", response_model=List[PlantResponse], summary="List plants")
async def list_plants(manager: PlantsManager = Depends(get_plants_manager)):
    """Get every plant in the catalog (404 when empty)."""
    plants = await manager.get_all()
    return [PlantResponse.model_validate(plant) for plant in plants]


@router.get("/search", response_model=List[PlantResponse], summary="Search by food type")
async def search_plants(
    food_type: str = Query("", description="Exact food type to match"),
    manager: PlantsManager = Depends(get_plants_manager),
):
    """Get plants in a food category."""
    plants = await manager.search_by_food_type(food_type)
    return [PlantResponse.model_validate(plant) for plant in plants]


@router.get("/{catalog_number}", response_model=PlantResponse, summary="Get plant")
async def get_plant(
    catalog_number: str,
    manager: PlantsManager = Depends(get_plants_manager),
):
    """Get a single plant by catalog number."""
    plant = await manager.get_specific(catalog_number)
    return PlantResponse.model_validate(plant)


@router.put("/{catalog_number}", response_model=PlantResponse, summary="Update plant")
async def update_plant(
    catalog_number: str,
    payload: PlantUpdate,
    manager: PlantsManager = Depends(get_plants_manager),
):
    """Replace the fields of the plant with the given catalog number."""
    plant = await manager.update(payload.to_entity(catalog_number))
    return PlantResponse.model_validate(plant)


@router.delete(
    "/{catalog_number}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete plant",
)
async def delete_plant(
    catalog_number: str,
    manager: PlantsManager = Depends(get_plants_manager),
):
    """Remove a plant from the catalog."""
    await manager.delete(catalog_number)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
