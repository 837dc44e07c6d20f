"""Core application components."""

from jobboard.core.config import Settings, settings
from jobboard.core.exceptions import ApplicationError, StorageError
from jobboard.core.files import FileStore
from jobboard.core.storage import Base, Database

__all__ = [
    "ApplicationError",
    "Base",
    "Database",
    "FileStore",
    "Settings",
    "StorageError",
    "settings",
]
