from __future__ import annotations

import itertools
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

import pytest

from groupmatch.core.errors import NotFound, StorageError
from groupmatch.database.store import ARRAY_CONTAINS, check_op


class FakeStore:
    """In-memory DocumentStore. Sub-collection paths are kept as their own buckets."""

    def __init__(self) -> None:
        self.collections: dict[str, list[dict[str, Any]]] = {}
        self.fail_with: Optional[str] = None
        self._seq = itertools.count(1)
        self._lock = threading.Lock()

    def _bucket(self, collection: str) -> list[dict[str, Any]]:
        return self.collections.setdefault(collection, [])

    def _maybe_fail(self) -> None:
        if self.fail_with:
            raise StorageError(self.fail_with)

    def _stamp(self, document: dict[str, Any]) -> dict[str, Any]:
        doc = dict(document)
        doc.setdefault("id", uuid.uuid4().hex)
        doc["created_at"] = datetime.now(timezone.utc)
        doc["seq"] = next(self._seq)
        return doc

    def seed(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            doc = self._stamp(document)
            self._bucket(collection).append(doc)
            return dict(doc)

    def read_all(self, collection: str) -> list[dict[str, Any]]:
        self._maybe_fail()
        with self._lock:
            return [dict(d) for d in self._bucket(collection)]

    def read_where(self, collection: str, field: str, op: str, value: Any) -> list[dict[str, Any]]:
        check_op(op)
        self._maybe_fail()
        with self._lock:
            if op == ARRAY_CONTAINS:
                return [dict(d) for d in self._bucket(collection) if value in d.get(field, [])]
            return [dict(d) for d in self._bucket(collection) if d.get(field) == value]

    def read_one(self, collection: str, doc_id: str) -> dict[str, Any]:
        self._maybe_fail()
        with self._lock:
            for d in self._bucket(collection):
                if d["id"] == doc_id:
                    return dict(d)
        raise NotFound(f"{collection} document {doc_id} not found")

    def insert(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        self._maybe_fail()
        return self.seed(collection, document)

    def insert_if_absent(
        self, collection: str, document: dict[str, Any], key_fields: Sequence[str]
    ) -> tuple[dict[str, Any], bool]:
        self._maybe_fail()
        with self._lock:
            for d in self._bucket(collection):
                if all(d.get(f) == document[f] for f in key_fields):
                    return dict(d), False
            doc = self._stamp(document)
            self._bucket(collection).append(doc)
            return dict(doc), True

    def update(self, collection: str, doc_id: str, partial: dict[str, Any]) -> dict[str, Any]:
        self._maybe_fail()
        with self._lock:
            for d in self._bucket(collection):
                if d["id"] == doc_id:
                    d.update(partial)
                    return dict(d)
        raise NotFound(f"{collection} document {doc_id} not found")


def add_group(store: FakeStore, group_id: str, user_id: str) -> None:
    store.seed("groups", {
        "id": group_id,
        "name": f"Group {group_id}",
        "bio": f"We are {group_id}",
        "photo_url": f"https://img.example/{group_id}.png",
        "admin_user_id": user_id,
    })
    store.seed("users", {"id": user_id, "group_id": group_id})


@pytest.fixture
def store() -> FakeStore:
    store = FakeStore()
    for n in (1, 2, 3, 4):
        add_group(store, f"g{n}", f"u{n}")
    return store
