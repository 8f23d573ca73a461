"""API endpoints for inspecting and maintaining the global config.

Handlers are ``async def`` so they run on the event loop thread; the
config service does no locking of its own.
"""

import logging

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from src.tmpe.api.dependencies import ConfigServiceDep, LiveConfigDep
from src.tmpe.domain.global_config import GlobalConfig
from src.tmpe.services.global_config_service import LifecycleState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/global-config", tags=["global-config"])


class GlobalConfigStatus(BaseModel):
    """Response model for the config service state."""

    state: LifecycleState = Field(description="Current lifecycle state")
    config_path: str = Field(description="Path of the primary config file")
    modified_time_ns: int | None = Field(
        default=None,
        description="Cached modification time of the config file in nanoseconds",
    )
    diagnostic_polling_enabled: bool = Field(
        description="Whether external edits are picked up automatically"
    )


@router.get("", response_model=GlobalConfig)
async def get_global_config(config: LiveConfigDep) -> GlobalConfig:
    """Get the live global config.

    Returns:
        The current GlobalConfig, keyed by its XML element names
    """
    return config


@router.get("/status", response_model=GlobalConfigStatus)
async def get_global_config_status(service: ConfigServiceDep) -> GlobalConfigStatus:
    """Get the lifecycle state of the config service.

    Returns:
        GlobalConfigStatus describing the loaded file
    """
    return GlobalConfigStatus(
        state=service.state,
        config_path=str(service.config_path),
        modified_time_ns=service.modified_time,
        diagnostic_polling_enabled=service.diagnostic_polling_enabled,
    )


@router.post("/reload", response_model=GlobalConfig)
async def reload_global_config(
    service: ConfigServiceDep,
    check_version: bool = Query(
        default=True,
        description="Back up and reset files older than the current schema",
    ),
) -> GlobalConfig:
    """Reload the global config from disk.

    Args:
        check_version: Run the schema version check

    Returns:
        The GlobalConfig now live
    """
    service.reload(check_version=check_version)
    logger.info("Global config reloaded via API (check_version=%s)", check_version)
    return service.instance()


@router.post("/reset", response_model=GlobalConfig)
async def reset_global_config(service: ConfigServiceDep) -> GlobalConfig:
    """Overwrite the global config with defaults.

    Returns:
        The default GlobalConfig now live
    """
    service.reset()
    logger.info("Global config reset via API")
    return service.instance()
