"""Shared repository plumbing: collection wiring and the storage error type.

Driver failures are re-raised as :class:`StorageError` so callers can tell
an unreachable database apart from rejected input.
"""

from __future__ import annotations

from abc import ABC
from typing import ClassVar, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.database import DatabaseManager

T = TypeVar("T", bound="BaseRepository")


class StorageError(RuntimeError):
    """Raised when the database cannot complete a read or write."""


class BaseRepository(ABC):
    """Wires a repository to its Motor collection via ``COLLECTION_NAME``."""

    COLLECTION_NAME: ClassVar[str]

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._col = collection

    @classmethod
    def from_db(cls: type[T], db: DatabaseManager) -> T:
        """Build the repository against the live ``DatabaseManager``."""
        return cls(db.get_collection(cls.COLLECTION_NAME))

    async def ensure_indexes(self) -> None:
        """Create collection indexes at startup.  No-op by default."""
