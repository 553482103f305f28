"""
Persistence adapters.

Today every collection is a JSON file on disk. Services depend on the store
object they are handed rather than opening the files themselves, so adding a
lock or a cache later only touches this package.
"""

from mockapi.repositories.json_storage import JsonCollectionStore, Record, StorageError

__all__ = ["JsonCollectionStore", "Record", "StorageError"]
