from chore_tracker.storage.interface import NotFoundError, Storage, StorageError
from chore_tracker.storage.memory import MemStorage

__all__ = ["MemStorage", "NotFoundError", "Storage", "StorageError"]
