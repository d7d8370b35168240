"""
Storage abstractions.
"""

from blogapi.storage.base import (
    MetadataStorage,
    StorageProvider,
    Collections,
)
from blogapi.storage.local import (
    InMemoryMetadataStorage,
    JsonFileMetadataStorage,
    create_local_storage,
)

__all__ = [
    "MetadataStorage",
    "StorageProvider",
    "Collections",
    "InMemoryMetadataStorage",
    "JsonFileMetadataStorage",
    "create_local_storage",
]
