"""Repository for the global config file on local disk."""

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from src.tmpe.domain.errors import (
    StorageIOError,
    StorageNotFoundError,
    TimestampUnavailableError,
)
from src.tmpe.repositories.interfaces import ConfigStorageInterface

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


class ConfigFileRepository(ConfigStorageInterface):
    """Filesystem-based storage for TMPE_GlobalConfig.xml and its backups.

    Backups live next to the primary file as ``<name>.bak``, then
    ``<name>.bak.0``, ``<name>.bak.1`` and so on. Writes go through a
    temporary file in the same directory so readers never see a partially
    written config.
    """

    def __init__(
        self,
        config_path: Path | str,
        backup_slot_limit: int | None = None,
    ) -> None:
        """Initialize repository with the primary config path.

        Args:
            config_path: Path of the primary config file
            backup_slot_limit: Maximum number of numbered backup names to
                try before giving up. None tries without limit.
        """
        self.config_path = Path(config_path)
        self.backup_prefix = self.config_path.with_name(
            self.config_path.name + BACKUP_SUFFIX
        )
        self._backup_slot_limit = backup_slot_limit

    def load(self) -> tuple[bytes, int]:
        """Read the primary config file.

        Returns:
            Tuple of (file content, last-modified timestamp in nanoseconds)

        Raises:
            StorageNotFoundError: If the primary file does not exist
            StorageIOError: If the file exists but cannot be read
        """
        path = self.config_path
        try:
            modified = path.stat().st_mtime_ns
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise StorageNotFoundError(f"Global config file not found: {path}") from exc
        except OSError as exc:
            raise StorageIOError(f"Could not read global config file {path}: {exc}") from exc

        logger.debug("Read %d bytes from %s", len(data), path)
        return data, modified

    def write(self, data: bytes, filename: Path | None = None) -> int:
        """Atomically write bytes to the primary file or the given filename.

        Writes to a temporary file first, then uses os.replace() to move it
        onto the target so an interrupted write never truncates the config.

        Args:
            data: Encoded payload
            filename: Target path, defaults to the primary file

        Returns:
            Last-modified timestamp of the written file in nanoseconds

        Raises:
            StorageIOError: If the write fails
            TimestampUnavailableError: If the timestamp cannot be read back
        """
        path = Path(filename) if filename is not None else self.config_path

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}_",
                suffix=".tmp",
            )
        except OSError as exc:
            raise StorageIOError(f"Could not write {path}: {exc}") from exc

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_path, path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.unlink(tmp_path)
            raise StorageIOError(f"Could not write {path}: {exc}") from exc

        return self.last_modified(path)

    def last_modified(self, filename: Path | None = None) -> int:
        """Get the last-modified timestamp of a file.

        Args:
            filename: Path to check, defaults to the primary file

        Returns:
            Timestamp in nanoseconds

        Raises:
            TimestampUnavailableError: If the file is missing or cannot be stat'ed
        """
        path = Path(filename) if filename is not None else self.config_path
        try:
            return path.stat().st_mtime_ns
        except OSError as exc:
            raise TimestampUnavailableError(
                f"Could not determine modification time of {path}: {exc}"
            ) from exc

    def resolve_backup_slot(self, prefix: Path | None = None) -> Path:
        """Find the first unused backup filename.

        Tries ``prefix``, ``prefix.0``, ``prefix.1``, ... in order and
        returns the first one that does not exist. Existing backups are
        therefore never overwritten.

        Args:
            prefix: Base backup path, defaults to ``backup_prefix``

        Returns:
            A path that did not exist at call time

        Raises:
            StorageIOError: If existence cannot be checked or the configured
                slot limit is exhausted
        """
        prefix = Path(prefix) if prefix is not None else self.backup_prefix
        candidate = prefix
        index = 0

        try:
            while candidate.exists():
                if (
                    self._backup_slot_limit is not None
                    and index >= self._backup_slot_limit
                ):
                    raise StorageIOError(
                        f"No free backup slot for {prefix} after "
                        f"{self._backup_slot_limit} attempts"
                    )
                candidate = prefix.with_name(f"{prefix.name}.{index}")
                index += 1
        except OSError as exc:
            raise StorageIOError(f"Could not check backup slot {candidate}: {exc}") from exc

        return candidate
