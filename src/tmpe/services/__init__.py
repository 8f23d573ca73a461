# Services package (config lifecycle logic)

from src.tmpe.services.global_config_service import (
    GlobalConfigService,
    LifecycleState,
    get_global_config_service,
)
from src.tmpe.services.version_migrator import MigrationDecision, VersionMigrator

__all__ = [
    # Global config service
    "GlobalConfigService",
    "LifecycleState",
    "get_global_config_service",
    # Version migrator
    "MigrationDecision",
    "VersionMigrator",
]
