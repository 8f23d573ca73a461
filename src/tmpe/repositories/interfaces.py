"""Abstract base classes for repository interfaces.

Defines the contracts that concrete repository implementations must fulfill.
Services depend on these interfaces (not concrete classes) so storage can be
swapped or mocked in tests.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ConfigStorageInterface(ABC):
    """Abstract interface for the persisted global config file.

    Stores opaque encoded payload bytes under a fixed primary filename and
    hands out collision-free backup filenames next to it.
    """

    config_path: Path
    """Path of the primary config file."""

    backup_prefix: Path
    """Base path for backups; numeric suffixes are appended on collision."""

    @abstractmethod
    def load(self) -> tuple[bytes, int]:
        """Read the primary config file.

        Returns:
            Tuple of (file content, last-modified timestamp in nanoseconds)

        Raises:
            StorageNotFoundError: If the primary file does not exist
            StorageIOError: If the file exists but cannot be read
        """
        ...

    @abstractmethod
    def write(self, data: bytes, filename: Path | None = None) -> int:
        """Write bytes to the primary file or to the given filename.

        Any existing content of the target is replaced.

        Args:
            data: Encoded payload
            filename: Target path, defaults to the primary file

        Returns:
            Last-modified timestamp of the written file in nanoseconds

        Raises:
            StorageIOError: If the write fails
            TimestampUnavailableError: If the write succeeded but the
                timestamp cannot be read back
        """
        ...

    @abstractmethod
    def last_modified(self, filename: Path | None = None) -> int:
        """Get the last-modified timestamp of a file.

        Args:
            filename: Path to check, defaults to the primary file

        Returns:
            Timestamp in nanoseconds

        Raises:
            TimestampUnavailableError: If the timestamp cannot be determined
        """
        ...

    @abstractmethod
    def resolve_backup_slot(self, prefix: Path | None = None) -> Path:
        """Find the first unused backup filename.

        Tries ``prefix``, ``prefix.0``, ``prefix.1``, ... in order.

        Args:
            prefix: Base backup path, defaults to ``backup_prefix``

        Returns:
            A path that did not exist at call time

        Raises:
            StorageIOError: If a name cannot be checked or the slot limit is reached
        """
        ...
