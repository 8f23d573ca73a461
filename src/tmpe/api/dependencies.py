"""Centralized FastAPI dependency providers.

Routers receive the config service through ``Depends`` instead of reaching
for a module-level global, so tests can override it with a service bound to
a temporary directory.
"""

from typing import Annotated

from fastapi import Depends

from src.tmpe.domain.global_config import GlobalConfig
from src.tmpe.services.global_config_service import (
    GlobalConfigService,
    get_global_config_service,
)
from src.tmpe.utils.frame_clock import FrameCounter, get_frame_counter


def get_config_service() -> GlobalConfigService:
    """Dependency provider for the process-wide GlobalConfigService."""
    return get_global_config_service()


def get_frame_clock() -> FrameCounter:
    """Dependency provider for the process-wide frame counter."""
    return get_frame_counter()


async def get_live_config(
    service: Annotated[GlobalConfigService, Depends(get_config_service)],
) -> GlobalConfig:
    """Dependency provider for the current live GlobalConfig."""
    return service.instance()


ConfigServiceDep = Annotated[GlobalConfigService, Depends(get_config_service)]
LiveConfigDep = Annotated[GlobalConfig, Depends(get_live_config)]
FrameCounterDep = Annotated[FrameCounter, Depends(get_frame_clock)]

