# Repositories package (data access abstraction)

from src.tmpe.repositories.config_file_repository import ConfigFileRepository
from src.tmpe.repositories.interfaces import ConfigStorageInterface

__all__ = ["ConfigFileRepository", "ConfigStorageInterface"]
