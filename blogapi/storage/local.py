"""
Local storage implementations.

In-memory storage for development and tests, and a JSON-file store that
survives restarts without any external services.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from blogapi.storage.base import MetadataStorage, StorageProvider

logger = logging.getLogger(__name__)


def _matches(doc: dict[str, Any], filters: dict[str, Any] | None) -> bool:
    if not filters:
        return True
    return all(doc.get(key) == value for key, value in filters.items())


# =============================================================================
# In-Memory Metadata Storage
# =============================================================================


class InMemoryMetadataStorage(MetadataStorage):
    """In-memory document storage."""

    def __init__(self):
        # dicts keep insertion order, which is the natural order of queries
        self._data: dict[str, dict[str, dict[str, Any]]] = {}

    async def save(self, collection: str, id: str, data: dict[str, Any]) -> None:
        self._data.setdefault(collection, {})[id] = copy.deepcopy(data)

    async def get(self, collection: str, id: str) -> dict[str, Any] | None:
        doc = self._data.get(collection, {}).get(id)
        return copy.deepcopy(doc) if doc is not None else None

    async def delete(self, collection: str, id: str) -> bool:
        if id in self._data.get(collection, {}):
            del self._data[collection][id]
            return True
        return False

    async def query(
        self,
        collection: str,
        filters: dict[str, Any] | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        docs = [
            doc for doc in self._data.get(collection, {}).values()
            if _matches(doc, filters)
        ]
        return copy.deepcopy(docs[offset:offset + limit])

    async def update(self, collection: str, id: str, updates: dict[str, Any]) -> bool:
        doc = self._data.get(collection, {}).get(id)
        if doc is None:
            return False
        doc.update(copy.deepcopy(updates))
        return True


# =============================================================================
# JSON File Metadata Storage
# =============================================================================


class JsonFileMetadataStorage(InMemoryMetadataStorage):
    """
    Document storage persisted as one JSON file per collection.

    Reads are served from memory; every write rewrites the collection
    file atomically.
    """

    def __init__(self, base_path: str = "./data/documents"):
        super().__init__()
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._load()

    def _collection_path(self, collection: str) -> Path:
        return self.base_path / f"{collection}.json"

    def _load(self) -> None:
        for path in sorted(self.base_path.glob("*.json")):
            with path.open(encoding="utf-8") as f:
                self._data[path.stem] = json.load(f)
            logger.debug(f"Loaded {len(self._data[path.stem])} documents from {path}")

    def _flush(self, collection: str) -> None:
        path = self._collection_path(collection)
        fd, tmp = tempfile.mkstemp(dir=self.base_path, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data.get(collection, {}), f, indent=2)
            os.replace(tmp, path)
        except BaseException:
            os.unlink(tmp)
            raise

    async def save(self, collection: str, id: str, data: dict[str, Any]) -> None:
        await super().save(collection, id, data)
        self._flush(collection)

    async def delete(self, collection: str, id: str) -> bool:
        deleted = await super().delete(collection, id)
        if deleted:
            self._flush(collection)
        return deleted

    async def update(self, collection: str, id: str, updates: dict[str, Any]) -> bool:
        updated = await super().update(collection, id, updates)
        if updated:
            self._flush(collection)
        return updated


# =============================================================================
# Factory
# =============================================================================


def create_local_storage(backend: str = "memory", data_dir: str = "./data") -> StorageProvider:
    """Create a StorageProvider with local implementations."""
    if backend == "memory":
        metadata: MetadataStorage = InMemoryMetadataStorage()
    elif backend == "file":
        metadata = JsonFileMetadataStorage(f"{data_dir}/documents")
    else:
        raise ValueError(f"Unknown storage backend: {backend}")
    return StorageProvider(metadata=metadata)
