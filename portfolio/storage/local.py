"""
Local storage implementations.

In-memory or filesystem-based implementations that work without any
external services.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from portfolio.config import Settings
from portfolio.storage.base import ItemStorage, Namespaces

logger = logging.getLogger(__name__)


# =============================================================================
# In-Memory Storage
# =============================================================================


class InMemoryItemStorage(ItemStorage):
    """In-memory item storage for development and tests."""
    
    def __init__(self):
        self._data: dict[str, dict[str, Any]] = {}
    
    async def get(self, id: str) -> dict[str, Any] | None:
        record = self._data.get(id)
        return copy.deepcopy(record) if record is not None else None
    
    async def get_all(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(record) for record in self._data.values()]
    
    async def put(self, id: str, record: dict[str, Any]) -> None:
        self._data[id] = copy.deepcopy(record)
    
    async def delete(self, id: str) -> bool:
        if id in self._data:
            del self._data[id]
            return True
        return False


# =============================================================================
# Local Filesystem Storage
# =============================================================================


class LocalFileItemStorage(ItemStorage):
    """
    Store all records in one JSON file, keyed by id.
    
    The file mirrors a single key-value hash: ``{id: record}``. Every write
    rewrites the file through a temporary sibling and an atomic rename.
    """
    
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
    
    def _read(self) -> dict[str, dict[str, Any]]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            return json.load(f)
    
    def _write(self, data: dict[str, dict[str, Any]]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.path)
    
    async def get(self, id: str) -> dict[str, Any] | None:
        return self._read().get(id)
    
    async def get_all(self) -> list[dict[str, Any]]:
        return list(self._read().values())
    
    async def put(self, id: str, record: dict[str, Any]) -> None:
        data = self._read()
        data[id] = record
        self._write(data)
    
    async def delete(self, id: str) -> bool:
        data = self._read()
        if id not in data:
            return False
        del data[id]
        self._write(data)
        return True


# =============================================================================
# Factory
# =============================================================================


def create_local_storage(settings: Settings) -> ItemStorage:
    """Create item storage for the configured backend."""
    backend = settings.storage_backend.lower()
    
    if backend == "memory":
        return InMemoryItemStorage()
    
    if backend == "file":
        path = Path(settings.data_dir) / f"{Namespaces.SHOWCASE_ITEMS.replace(':', '_')}.json"
        logger.info("Using file storage at %s", path)
        return LocalFileItemStorage(path)
    
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
