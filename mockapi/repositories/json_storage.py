"""
JSON file persistence for a single collection.

Each collection lives in its own file holding a top-level array of objects.
The whole file is read at the start of every operation and rewritten after
every mutation; nothing is cached between calls and there is no locking, so
concurrent writers race and the last save wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class StorageError(Exception):
    """Raised by a strict store when the backing file cannot be read or written."""

    def __init__(self, path: Path, action: str) -> None:
        self.path = path
        self.action = action
        super().__init__(f"Could not {action} {path}")


class JsonCollectionStore:
    """Whole-file load/save of one collection.

    By default failures are logged and swallowed: load() answers an empty
    list and save() becomes a no-op. With strict=True they are logged and
    re-raised as StorageError.
    """

    def __init__(self, path: Path | str, *, strict: bool = False) -> None:
        self.path = Path(path)
        self.strict = strict

    def load(self) -> List[Record]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        except (OSError, ValueError) as exc:
            logger.exception("Error reading data file %s", self.path)
            if self.strict:
                raise StorageError(self.path, "read") from exc
            return []
        return data

    def save(self, records: List[Record]) -> None:
        try:
            self.path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.exception("Error writing to data file %s", self.path)
            if self.strict:
                raise StorageError(self.path, "write") from exc

    @staticmethod
    def find_index(records: List[Record], record_id: str) -> int:
        for idx, record in enumerate(records):
            if isinstance(record, dict) and record.get("id") == record_id:
                return idx
        return -1

    @classmethod
    def find_by_id(cls, records: List[Record], record_id: str) -> Optional[Record]:
        idx = cls.find_index(records, record_id)
        return records[idx] if idx != -1 else None
