"""API routers for the ShoreSquad backend."""

from fastapi import APIRouter

from .events import router as events_router
from .health import router as health_router
from .weather import router as weather_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(weather_router)
api_router.include_router(events_router)

__all__ = ["api_router"]
