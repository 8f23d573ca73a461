# Domain models package (Pydantic models and errors)

from src.tmpe.domain.errors import (
    ConfigDecodeError,
    GlobalConfigError,
    StorageError,
    StorageIOError,
    StorageNotFoundError,
    TimestampUnavailableError,
)
from src.tmpe.domain.global_config import (
    LATEST_VERSION,
    VERSION_CHECK_DISABLED,
    GlobalConfig,
)

__all__ = [
    # Payload
    "GlobalConfig",
    "LATEST_VERSION",
    "VERSION_CHECK_DISABLED",
    # Errors
    "ConfigDecodeError",
    "GlobalConfigError",
    "StorageError",
    "StorageIOError",
    "StorageNotFoundError",
    "TimestampUnavailableError",
]
