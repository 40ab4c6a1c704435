"""HTTP routers for the garden service."""

from . import health_router, plants_router

__all__ = ["health_router", "plants_router"]
