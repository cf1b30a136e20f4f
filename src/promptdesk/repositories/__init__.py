"""Storage backends for PromptDesk."""

from ..config import Settings
from .base import Storage
from .memory import MemoryStorage


def create_storage(settings: Settings) -> Storage:
    """Build the storage backend named by ``settings.storage_backend``."""
    backend = settings.storage_backend.lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "sql":
        from ..database import create_engine_for
        from .sql import SqlStorage

        return SqlStorage(create_engine_for(settings))
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = ["Storage", "MemoryStorage", "create_storage"]
