"""Centralized application settings via pydantic-settings.

Loads configuration from environment variables with the TMPE_ prefix.
Defaults suit running the simulation from its working directory with
diagnostic polling switched off.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from src.tmpe.utils.frame_clock import DEFAULT_EPOCH_SHIFT


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Examples:
        Enable hot-reloading of external edits::

            TMPE_DIAGNOSTIC_POLLING_ENABLED=true uv run fastapi dev src/tmpe/main.py

        Keep the config file somewhere else::

            TMPE_CONFIG_DIR=/srv/tmpe uv run fastapi dev src/tmpe/main.py
    """

    # Config file location
    config_dir: Path = Path(".")
    config_filename: str = "TMPE_GlobalConfig.xml"

    # Freshness polling for out-of-process edits
    diagnostic_polling_enabled: bool = False
    freshness_epoch_shift: int = Field(default=DEFAULT_EPOCH_SHIFT, ge=0)

    # None = try backup names without limit
    backup_slot_limit: int | None = Field(default=None, ge=1)

    model_config = {"env_prefix": "TMPE_"}

    @property
    def config_path(self) -> Path:
        """Full path of the primary config file."""
        return self.config_dir / self.config_filename


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton."""
    return Settings()
