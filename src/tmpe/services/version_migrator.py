"""Schema version check and backup for stale global config files.

Any version bump is treated as a breaking schema change. A stale file is
not migrated field by field: its raw bytes are copied into a backup slot
for the user to recover by hand, and the caller resets to defaults.
"""

import logging
from enum import Enum
from pathlib import Path

from src.tmpe.domain.errors import StorageError, TimestampUnavailableError
from src.tmpe.domain.global_config import (
    LATEST_VERSION,
    VERSION_CHECK_DISABLED,
    GlobalConfig,
)
from src.tmpe.repositories.interfaces import ConfigStorageInterface

logger = logging.getLogger(__name__)


class MigrationDecision(str, Enum):
    """Outcome of a version check."""

    ACCEPT = "accept"
    MIGRATE = "migrate"


class VersionMigrator:
    """Decides whether a loaded payload predates the current schema.

    Args:
        latest_version: Version written by this build. Defaults to
            :data:`~src.tmpe.domain.global_config.LATEST_VERSION`.
    """

    def __init__(self, latest_version: int = LATEST_VERSION) -> None:
        self.latest_version = latest_version

    def check(self, config: GlobalConfig) -> MigrationDecision:
        """Compare the payload version against the latest known version.

        Args:
            config: Freshly decoded payload

        Returns:
            MIGRATE if the payload is older than ``latest_version`` and does
            not carry the version-check-disabled sentinel, ACCEPT otherwise.
        """
        if (
            config.version != VERSION_CHECK_DISABLED
            and config.version < self.latest_version
        ):
            return MigrationDecision.MIGRATE
        return MigrationDecision.ACCEPT

    def backup(self, raw: bytes, storage: ConfigStorageInterface) -> Path | None:
        """Copy the stale file content into a fresh backup slot.

        Best effort: storage failures are logged and swallowed, since writing
        the new default config matters more than a perfect backup.

        Args:
            raw: Bytes of the stale config exactly as read from disk
            storage: Storage used to resolve the slot and write the backup

        Returns:
            Path of the written backup, or None if the backup failed
        """
        filename: Path | None = None
        try:
            filename = storage.resolve_backup_slot()
            logger.info("Writing backup of outdated global config to '%s'...", filename)
            storage.write(raw, filename)
        except TimestampUnavailableError as exc:
            # Content is on disk; only the stat afterwards failed
            logger.debug("Backup written to '%s' but not stat'able: %s", filename, exc)
        except StorageError as exc:
            logger.warning(
                "Error occurred while saving backup config to '%s': %s",
                filename if filename is not None else storage.backup_prefix,
                exc,
            )
            return None
        return filename
