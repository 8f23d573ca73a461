"""FastAPI application entry point for the TMPE global config service."""

import logging
from contextlib import asynccontextmanager

# Configure logging before importing modules
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

from fastapi import FastAPI  # noqa: E402

from src.tmpe.api.routers import api_router  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load the global config once at startup."""
    from src.tmpe.services.global_config_service import get_global_config_service

    _logger = logging.getLogger(__name__)

    service = get_global_config_service()
    config = service.init()
    app.state.global_config_service = service

    _logger.info(
        "Global config live from %s (version %d, diagnostic polling %s)",
        service.config_path,
        config.version,
        "on" if service.diagnostic_polling_enabled else "off",
    )

    yield


app = FastAPI(
    title="TMPE Global Config",
    description="Versioned, file-backed tuning configuration for the traffic simulation",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
