"""
Storage abstractions.

Items are kept in one flat key-value namespace keyed by id.
"""

from portfolio.storage.base import ItemStorage, Namespaces
from portfolio.storage.local import (
    InMemoryItemStorage,
    LocalFileItemStorage,
    create_local_storage,
)

__all__ = [
    "ItemStorage",
    "Namespaces",
    "InMemoryItemStorage",
    "LocalFileItemStorage",
    "create_local_storage",
]
