"""
Storage abstraction layer.

Showcase items live in a single flat key-value namespace keyed by id,
with hash-map semantics: get, get all, put, delete. There are no
secondary indexes and no transactions; every slug or locale query scans
``get_all()``. Implementations only guarantee per-key atomic
read/replace.

Implementations:
- InMemoryItemStorage -> local development and tests
- LocalFileItemStorage -> single JSON document on disk
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ItemStorage(ABC):
    """
    Key-value storage for item records.
    
    Records are plain JSON-compatible dicts; the service layer owns
    (de)serialization.
    """
    
    @abstractmethod
    async def get(self, id: str) -> dict[str, Any] | None:
        """Get a record by ID."""
        pass
    
    @abstractmethod
    async def get_all(self) -> list[dict[str, Any]]:
        """Get every record in the namespace."""
        pass
    
    @abstractmethod
    async def put(self, id: str, record: dict[str, Any]) -> None:
        """Store a record, replacing any existing one."""
        pass
    
    @abstractmethod
    async def delete(self, id: str) -> bool:
        """Delete a record. Returns False if it did not exist."""
        pass


class Namespaces:
    """Standard storage namespace names."""
    
    SHOWCASE_ITEMS = "showcase:items"
