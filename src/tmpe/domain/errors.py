"""Exception hierarchy for global config storage and decoding.

Raised by the repository and the codec. The config service catches every
kind at its boundary and falls back to a default payload, so none of these
reach consumers of the live config.
"""


class GlobalConfigError(Exception):
    """Base class for all global config failures."""


class StorageError(GlobalConfigError):
    """Raised when the config file cannot be accessed."""


class StorageNotFoundError(StorageError):
    """Raised when the config file does not exist."""


class StorageIOError(StorageError):
    """Raised when reading or writing the config file fails."""


class TimestampUnavailableError(StorageError):
    """Raised when the modification time of a file cannot be determined."""


class ConfigDecodeError(GlobalConfigError):
    """Raised when persisted config content is malformed."""
