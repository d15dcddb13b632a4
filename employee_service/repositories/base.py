"""
Base repository with common CRUD operations.

Keeps records in process memory, keyed by an auto-incrementing
integer id. Entity repositories inherit from it.
"""

import asyncio
from typing import Generic, List, TypeVar

# Type variable for generic record; records expose ``id`` and ``copy()``
ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Base in-memory repository providing common CRUD operations.

    A single lock guards the whole collection. Ids come from a
    monotonic counter and are never handed out twice, even after
    deletes or ``clear()``.

    Attributes:
        lock: Mutex serializing every read and write
    """

    def __init__(self):
        """Initialize an empty repository."""
        self._records: dict[int, ModelType] = {}
        self._last_id = 0
        self.lock = asyncio.Lock()

    async def get_by_id(self, id: int) -> ModelType | None:
        """
        Get a single record by ID.

        Args:
            id: Record id

        Returns:
            Copy of the record or None if not found
        """
        async with self.lock:
            record = self._records.get(id)
            return record.copy() if record is not None else None

    async def get_all(self) -> List[ModelType]:
        """
        Get all records in insertion order.

        Returns:
            List of record copies
        """
        async with self.lock:
            return [record.copy() for record in self._records.values()]

    async def create(self, obj: ModelType) -> ModelType:
        """
        Store a new record and assign its id.

        Args:
            obj: Record without an id

        Returns:
            Copy of the stored record, id populated
        """
        async with self.lock:
            self._last_id += 1
            stored = obj.copy()
            stored.id = self._last_id
            self._records[stored.id] = stored
            return stored.copy()

    async def delete(self, id: int) -> bool:
        """
        Delete a record by ID.

        Args:
            id: Record id

        Returns:
            True if deleted, False if not found
        """
        async with self.lock:
            return self._records.pop(id, None) is not None

    async def exists(self, id: int) -> bool:
        """Check if a record exists by ID."""
        async with self.lock:
            return id in self._records

    async def count(self) -> int:
        """Number of stored records."""
        async with self.lock:
            return len(self._records)

    async def clear(self) -> None:
        """Drop every record. The id counter keeps its value."""
        async with self.lock:
            self._records.clear()
