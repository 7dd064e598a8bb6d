"""StoreService: JSON-file backed collections of records.

Each store owns one file holding a JSON array. Every call reloads the
array from disk, mutates it in memory and rewrites the whole file.

- ``JsonStore``: checklists and the shared list/get/create/update/delete logic
- ``AlertStore``: forces ``status: "active"`` on create
- ``BlogStore``: author default, ``readTime`` derivation, newest-first listing
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, List, Optional

from stockdesk.utils.ids import new_record_id, utc_now_iso
from stockdesk.utils.io_utils import read_json, write_json
from stockdesk.utils.text import estimate_read_time


Record = Dict[str, Any]

# Fields assigned by the store, never taken from an update body
RESERVED_FIELDS = ("id", "createdAt")


class StoreError(Exception):
    """Base error for store operations."""


class RecordNotFound(StoreError):
    def __init__(self, store: str, record_id: Any):
        super().__init__(f"{store}: no record with id {record_id!r}")
        self.store = store
        self.record_id = record_id


class PersistenceError(StoreError):
    def __init__(self, store: str, path: str, cause: Exception):
        super().__init__(f"{store}: failed to write {path}: {cause}")
        self.store = store
        self.path = path
        self.cause = cause


class JsonStore:
    def __init__(self, path: str, name: Optional[str] = None):
        self.path = path
        self.name = name or os.path.splitext(os.path.basename(path))[0]
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"

    # -------- file access --------

    def ensure_file(self) -> None:
        """Create the backing file with an empty array if it is missing."""
        if not os.path.exists(self.path):
            write_json(self.path, [])

    def _load(self) -> List[Record]:
        try:
            data = read_json(self.path, default=[])
        except (OSError, ValueError) as e:
            logging.error(f"Error reading {self.path}: {e}")
            return []
        if not isinstance(data, list):
            logging.error(f"Error reading {self.path}: expected a JSON array, got {type(data).__name__}")
            return []
        return data

    def _save(self, records: List[Record]) -> None:
        try:
            write_json(self.path, records)
        except (OSError, TypeError, ValueError) as e:
            logging.error(f"Error writing {self.path}: {e}")
            raise PersistenceError(self.name, self.path, e) from e

    @staticmethod
    def _index_of(records: List[Record], record_id: int) -> int:
        for i, rec in enumerate(records):
            if isinstance(rec, dict) and rec.get("id") == record_id:
                return i
        return -1

    # -------- hooks --------

    def _on_create(self, record: Record) -> Record:
        return record

    def _on_update(self, record: Record, fields: Record) -> Record:
        return record

    # -------- operations --------

    def list(self) -> List[Record]:
        return self._load()

    def get(self, record_id: int) -> Record:
        records = self._load()
        idx = self._index_of(records, record_id)
        if idx == -1:
            raise RecordNotFound(self.name, record_id)
        return records[idx]

    def create(self, fields: Record) -> Record:
        with self._lock:
            records = self._load()
            record_id = new_record_id(r.get("id") for r in records if isinstance(r, dict))
            record: Record = {"id": record_id, **fields}
            record = self._on_create(record)
            # Server-assigned values win over anything in the body
            record["id"] = record_id
            record["createdAt"] = utc_now_iso()
            records.append(record)
            self._save(records)
        logging.info(f"{self.name}: created record {record['id']}")
        return record

    def update(self, record_id: int, fields: Record) -> Record:
        with self._lock:
            records = self._load()
            idx = self._index_of(records, record_id)
            if idx == -1:
                raise RecordNotFound(self.name, record_id)
            current = records[idx]
            changes = {k: v for k, v in fields.items() if k not in RESERVED_FIELDS}
            merged = {**current, **changes}
            merged = self._on_update(merged, changes)
            merged["updatedAt"] = utc_now_iso()
            records[idx] = merged
            self._save(records)
        logging.info(f"{self.name}: updated record {record_id}")
        return merged

    def delete(self, record_id: int) -> Record:
        with self._lock:
            records = self._load()
            kept = [r for r in records if not (isinstance(r, dict) and r.get("id") == record_id)]
            if len(kept) == len(records):
                raise RecordNotFound(self.name, record_id)
            removed = records[self._index_of(records, record_id)]
            self._save(kept)
        logging.info(f"{self.name}: deleted record {record_id}")
        return removed


class AlertStore(JsonStore):
    def _on_create(self, record: Record) -> Record:
        record["status"] = "active"
        return record


class BlogStore(JsonStore):
    def __init__(self, path: str, name: Optional[str] = None, default_author: str = ""):
        super().__init__(path, name)
        self.default_author = default_author

    def _on_create(self, record: Record) -> Record:
        if not record.get("author"):
            record["author"] = self.default_author
        record["readTime"] = estimate_read_time(record.get("content"))
        return record

    def _on_update(self, record: Record, fields: Record) -> Record:
        if "content" in fields:
            record["readTime"] = estimate_read_time(fields.get("content"))
        return record

    def list(self) -> List[Record]:
        posts = [p for p in self._load() if isinstance(p, dict)]
        posts.sort(key=lambda p: str(p.get("createdAt") or ""), reverse=True)
        return posts
