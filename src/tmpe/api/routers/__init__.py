"""API routers package."""

from fastapi import APIRouter

from src.tmpe.api.routers.global_config import router as global_config_router
from src.tmpe.api.routers.simulation import router as simulation_router

api_router = APIRouter()

# Global config inspection and maintenance router
api_router.include_router(global_config_router)

# Host frame clock router
api_router.include_router(simulation_router)
