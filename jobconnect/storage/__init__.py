"""Resource access layer."""

from jobconnect.storage.base import Storage
from jobconnect.storage.database import DatabaseStorage
from jobconnect.storage.memory import MemoryStorage

__all__ = ["Storage", "DatabaseStorage", "MemoryStorage"]
