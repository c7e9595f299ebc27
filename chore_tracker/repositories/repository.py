import itertools
import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from chore_tracker.models.base import Entity

T = TypeVar("T", bound=Entity)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """In-memory table with common CRUD operations."""

    def __init__(self, model: Type[T]):
        """
        Initialize an empty table for the given entity model.

        Args:
            model: The pydantic entity class stored in this table

        Ids are handed out from 1 and never reused, even after a delete.
        """
        self.model = model
        self._rows: Dict[int, T] = {}
        self._ids = itertools.count(1)

    def get(self, id: int) -> Optional[T]:
        """Get a single record by ID."""
        return self._rows.get(id)

    def get_all(self) -> List[T]:
        """Get all records in insertion order."""
        return list(self._rows.values())

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Get all records matching predicate, in insertion order."""
        return [obj for obj in self._rows.values() if predicate(obj)]

    def first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Get the first record matching predicate."""
        return next((obj for obj in self._rows.values() if predicate(obj)), None)

    def create_from_dict(self, data: Dict[str, Any]) -> T:
        """Create a new record from dictionary, assigning the next ID."""
        id = next(self._ids)
        obj = self.model(**{**data, "id": id})
        self._rows[id] = obj
        logger.debug("Created %s %s", self.model.__name__, id)
        return obj

    def update(self, id: int, data: Dict[str, Any]) -> Optional[T]:
        """
        Replace a record with a copy that has data merged in.

        Unknown keys and the id itself are ignored. Returns None if the
        record does not exist.
        """
        obj = self.get(id)
        if obj is None:
            return None

        changes = {
            key: value
            for key, value in data.items()
            if key in self.model.model_fields and key != "id"
        }
        updated = self.model.model_validate({**obj.model_dump(), **changes})
        self._rows[id] = updated
        logger.debug("Updated %s %s: %s", self.model.__name__, id, sorted(changes))
        return updated

    def delete(self, id: int) -> bool:
        """Delete a record by ID. Returns True if deleted, False if not found."""
        if self._rows.pop(id, None) is None:
            return False
        logger.debug("Deleted %s %s", self.model.__name__, id)
        return True

    def exists(self, id: int) -> bool:
        """Check if a record exists by ID."""
        return id in self._rows

    def count(self) -> int:
        return len(self._rows)
