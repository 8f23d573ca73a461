"""Lifecycle management for the live global config.

The service owns the single live :class:`GlobalConfig`, loads it on first
use, resets stale or unreadable files to defaults and, when diagnostic
polling is enabled, picks up edits made to the file by other processes.

Lifecycle::

    UNINITIALIZED --instance()/init()--> LOADING
    LOADING --load ok, current version--> LIVE
    LOADING --missing/unreadable/corrupt--> default write --> LIVE
    LOADING --load ok, stale version--> backup + default write --> LIVE
    LIVE --reset()--> default write --> LIVE
    LIVE --reload() / external edit detected--> LOADING --> ... --> LIVE

Storage and decode errors never escape this module. Every failure is
logged and replaced by an in-memory default, so ``instance()`` always
returns a usable payload. All calls are expected on the simulation thread;
nothing here is locked.
"""

import logging
import time
from enum import Enum
from functools import lru_cache
from pathlib import Path

from src.tmpe.config import get_settings
from src.tmpe.domain.errors import (
    ConfigDecodeError,
    StorageIOError,
    StorageNotFoundError,
    TimestampUnavailableError,
)
from src.tmpe.domain.global_config import GlobalConfig
from src.tmpe.repositories.config_file_repository import ConfigFileRepository
from src.tmpe.repositories.interfaces import ConfigStorageInterface
from src.tmpe.services.version_migrator import MigrationDecision, VersionMigrator
from src.tmpe.utils.frame_clock import (
    DEFAULT_EPOCH_SHIFT,
    FrameSource,
    get_frame_counter,
)
from src.tmpe.utils.global_config_codec import (
    decode_global_config,
    encode_global_config,
)

logger = logging.getLogger(__name__)

class LifecycleState(str, Enum):
    """Where the service is in its load cycle."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    LIVE = "live"


class GlobalConfigService:
    """Owner of the live global config.

    Create one per process (see :func:`get_global_config_service`), call
    :meth:`init` at startup and hand the service to consumers. Consumers
    call :meth:`instance` whenever they need current values instead of
    keeping the returned payload around.
    """

    def __init__(
        self,
        storage: ConfigStorageInterface,
        migrator: VersionMigrator | None = None,
        frame_source: FrameSource | None = None,
        diagnostic_polling_enabled: bool = False,
        epoch_shift: int = DEFAULT_EPOCH_SHIFT,
    ) -> None:
        """Initialize the service.

        Args:
            storage: Where the config file lives
            migrator: Version check, defaults to the latest schema version
            frame_source: Host frame counter; required for diagnostic polling
            diagnostic_polling_enabled: Check the file for external edits at
                most once per frame epoch
            epoch_shift: Right shift applied to the frame index to get the
                polling epoch (8 = one check per 256 frames)

        Raises:
            ValueError: If polling is enabled without a frame source
        """
        if diagnostic_polling_enabled and frame_source is None:
            raise ValueError("diagnostic polling requires a frame source")
        if epoch_shift < 0:
            raise ValueError(f"epoch_shift must be >= 0, got {epoch_shift}")

        self._storage = storage
        self._migrator = migrator or VersionMigrator()
        self._frame_source = frame_source
        self._diagnostic_polling_enabled = diagnostic_polling_enabled
        self._epoch_shift = epoch_shift

        self._instance: GlobalConfig | None = None
        self._modified_time: int | None = None
        self._last_check_epoch: int | None = None
        self._state = LifecycleState.UNINITIALIZED

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def modified_time(self) -> int | None:
        """Last known modification time of the config file (ns), if any."""
        return self._modified_time

    @property
    def config_path(self) -> Path:
        return self._storage.config_path

    @property
    def diagnostic_polling_enabled(self) -> bool:
        return self._diagnostic_polling_enabled

    def init(self) -> GlobalConfig:
        """Load the config at host startup.

        Safe to call more than once; only the first call loads.

        Returns:
            The live config
        """
        if self._instance is None:
            self._instantiate()
        return self._instance

    def instance(self) -> GlobalConfig:
        """Return the live config, loading it on first use.

        With diagnostic polling enabled, calls after the first one also
        check the file for external edits whenever the frame epoch has
        advanced since the last check.

        Returns:
            The live config
        """
        if self._instance is None:
            self._instantiate()
        elif self._diagnostic_polling_enabled:
            self._poll_freshness()
        return self._instance

    def reload(self, check_version: bool = True) -> None:
        """Load the config file and make it the live config.

        Missing, unreadable or malformed files are replaced by defaults.
        With ``check_version`` a file older than the current schema is backed
        up and replaced by defaults; without it any decodable file is used.
        An accepted file is written back re-encoded, which normalizes its
        formatting and fills in fields it did not have.

        Args:
            check_version: Run the schema version check
        """
        self._state = LifecycleState.LOADING
        path = self._storage.config_path

        logger.info("Loading global config from file '%s'...", path)
        try:
            raw, _ = self._storage.load()
            config = decode_global_config(raw)
        except StorageNotFoundError:
            logger.warning("Global config '%s' does not exist. Generating default config.", path)
            self.reset()
            return
        except StorageIOError as exc:
            logger.warning("Could not read global config: %s. Generating default config.", exc)
            self.reset()
            return
        except ConfigDecodeError as exc:
            logger.warning("Could not decode global config: %s. Generating default config.", exc)
            self.reset()
            return

        logger.info("Global config loaded (version %d).", config.version)

        if check_version and self._migrator.check(config) is MigrationDecision.MIGRATE:
            logger.info(
                "Global config version %d is older than %d. Backing up and resetting.",
                config.version,
                self._migrator.latest_version,
            )
            self._migrator.backup(raw, self._storage)
            self.reset()
            return

        self._adopt(config)

    def reset(self) -> None:
        """Replace the live config and the file with defaults."""
        logger.info("Resetting global config.")
        self._adopt(GlobalConfig())

    def _reload_if_newer(self) -> bool:
        """Reload if the file changed since this process last wrote it.

        The version check is skipped, so a hand-edited file is taken as-is.
        Timestamp errors are logged and otherwise ignored.

        Does nothing before the first load; the version check must run
        on that one.

        Returns:
            True if the file was reloaded
        """
        if self._instance is None:
            return False

        try:
            modified = self._storage.last_modified()
        except TimestampUnavailableError as exc:
            logger.warning("Could not determine modification date of global config: %s", exc)
            return False

        if self._modified_time is not None and modified <= self._modified_time:
            return False

        logger.info("Detected modification of global config.")
        self.reload(check_version=False)
        if self._modified_time is None or self._modified_time < modified:
            self._modified_time = modified
        return True

    def _instantiate(self) -> None:
        self.reload()
        if self._diagnostic_polling_enabled:
            self._last_check_epoch = self._current_epoch()

    def _poll_freshness(self) -> None:
        epoch = self._current_epoch()
        if self._last_check_epoch is None:
            self._last_check_epoch = epoch
        elif self._last_check_epoch < epoch:
            self._last_check_epoch = epoch
            self._reload_if_newer()

    def _current_epoch(self) -> int:
        return self._frame_source() >> self._epoch_shift

    def _adopt(self, config: GlobalConfig) -> None:
        self._instance = config
        self._modified_time = self._persist(config)
        self._state = LifecycleState.LIVE

    def _persist(self, config: GlobalConfig) -> int:
        """Write the config to the primary file.

        Returns:
            Modification time of the primary file after the write. Falls
            back to the current time if it cannot be determined.
        """
        path = self._storage.config_path
        logger.info("Writing global config to file '%s'...", path)
        try:
            return self._storage.write(encode_global_config(config))
        except StorageIOError as exc:
            logger.error("Could not write global config: %s", exc)
        except TimestampUnavailableError as exc:
            logger.warning("Could not determine modification date of global config: %s", exc)
            return time.time_ns()

        try:
            return self._storage.last_modified()
        except TimestampUnavailableError as exc:
            logger.warning("Could not determine modification date of global config: %s", exc)
            return time.time_ns()


@lru_cache
def get_global_config_service() -> GlobalConfigService:
    """Get the process-wide config service built from settings.

    The service is not loaded yet; the host calls :meth:`GlobalConfigService.init`
    at startup.
    """
    settings = get_settings()
    storage = ConfigFileRepository(
        settings.config_path,
        backup_slot_limit=settings.backup_slot_limit,
    )
    return GlobalConfigService(
        storage,
        frame_source=get_frame_counter(),
        diagnostic_polling_enabled=settings.diagnostic_polling_enabled,
        epoch_shift=settings.freshness_epoch_shift,
    )
