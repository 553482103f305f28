"""CRUD use cases shared by every collection (cars, bookings)."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Mapping

from mockapi.repositories.json_storage import JsonCollectionStore, Record
from mockapi.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, Page, paginate

logger = logging.getLogger(__name__)


class CollectionError(Exception):
    """Base exception for collection workflows."""


class RecordNotFoundError(CollectionError):
    """Raised when no record in the collection carries the requested id."""

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection}: record {record_id} not found")


def timestamp_id() -> str:
    """Current time in milliseconds as a string. Collisions are not handled."""
    return str(int(time.time() * 1000))


class CollectionService:
    """List/get/create/update/delete over one JsonCollectionStore.

    Every call loads the full collection from disk; mutating calls save it
    back before returning.
    """

    def __init__(
        self,
        name: str,
        store: JsonCollectionStore,
        *,
        id_factory: Callable[[], str] = timestamp_id,
    ) -> None:
        self.name = name
        self.store = store
        self.id_factory = id_factory

    def list(self, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Page:
        return paginate(self.store.load(), page, limit)

    def get(self, record_id: str) -> Record:
        record = self.store.find_by_id(self.store.load(), record_id)
        if record is None:
            raise RecordNotFoundError(self.name, record_id)
        return record

    def create(self, payload: Mapping[str, Any]) -> Record:
        records = self.store.load()
        record: Dict[str, Any] = dict(payload)
        record["id"] = self.id_factory()
        records.append(record)
        self.store.save(records)
        logger.info("%s: created record %s", self.name, record["id"])
        return record

    def update(self, record_id: str, patch: Mapping[str, Any]) -> Record:
        records = self.store.load()
        idx = self.store.find_index(records, record_id)
        if idx == -1:
            raise RecordNotFoundError(self.name, record_id)
        # shallow merge; a patch carrying "id" reassigns it
        records[idx] = {**records[idx], **patch}
        self.store.save(records)
        logger.info("%s: updated record %s", self.name, record_id)
        return records[idx]

    def delete(self, record_id: str) -> None:
        records = self.store.load()
        remaining = [r for r in records if not (isinstance(r, dict) and r.get("id") == record_id)]
        if len(remaining) == len(records):
            raise RecordNotFoundError(self.name, record_id)
        self.store.save(remaining)
        logger.info("%s: deleted record %s", self.name, record_id)
