import logging
from typing import Any, Dict, List, Sequence, Tuple

from postgrest.exceptions import APIError
from supabase import Client

from groupmatch.core.errors import NotFound, StorageError
from groupmatch.database.store import ARRAY_CONTAINS, Document, check_op, split_collection

logger = logging.getLogger(__name__)

# PostgREST code for a value that does not parse as the column type (e.g. a non-uuid id)
INVALID_TEXT_REPRESENTATION = "22P02"


class SupabaseStore:
    """DocumentStore over Supabase tables.

    Column defaults assign id, created_at (now()) and seq (identity), so
    inserts never send them. Uniqueness for insert_if_absent comes from the
    table's unique constraint on the key columns.
    """

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _scoped(self, collection: str, query):
        _, scope = split_collection(collection)
        if scope is not None:
            query = query.eq(scope[0], scope[1])
        return query

    def _table(self, collection: str):
        table, _ = split_collection(collection)
        return self.supabase.table(table)

    def _with_scope(self, collection: str, document: Document) -> Document:
        _, scope = split_collection(collection)
        data = dict(document)
        if scope is not None:
            data.setdefault(scope[0], scope[1])
        return data

    def _fail(self, action: str, collection: str, e: Exception):
        logger.error(f"Store {action} on {collection} failed: {e}")
        return StorageError(f"Storage unavailable while trying to {action} {collection}")

    def read_all(self, collection: str) -> List[Document]:
        try:
            result = self._scoped(collection, self._table(collection).select("*")).execute()
            return list(result.data or [])
        except Exception as e:
            raise self._fail("read", collection, e) from e

    def read_where(self, collection: str, field: str, op: str, value: Any) -> List[Document]:
        check_op(op)
        try:
            query = self._scoped(collection, self._table(collection).select("*"))
            if op == ARRAY_CONTAINS:
                query = query.contains(field, [value])
            else:
                query = query.eq(field, value)
            result = query.execute()
            return list(result.data or [])
        except Exception as e:
            raise self._fail("query", collection, e) from e

    def read_one(self, collection: str, doc_id: str) -> Document:
        try:
            result = self._scoped(collection, self._table(collection).select("*"))\
                .eq("id", doc_id)\
                .limit(1)\
                .execute()
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                raise NotFound(f"{collection} document {doc_id} not found") from e
            raise self._fail("read", collection, e) from e
        except Exception as e:
            raise self._fail("read", collection, e) from e
        if not result.data:
            raise NotFound(f"{collection} document {doc_id} not found")
        return result.data[0]

    def insert(self, collection: str, document: Document) -> Document:
        try:
            result = self._table(collection).insert(self._with_scope(collection, document)).execute()
        except Exception as e:
            raise self._fail("insert into", collection, e) from e
        if not result.data:
            raise StorageError(f"Insert into {collection} returned no row")
        return result.data[0]

    def insert_if_absent(
        self, collection: str, document: Document, key_fields: Sequence[str]
    ) -> Tuple[Document, bool]:
        data = self._with_scope(collection, document)
        try:
            # ignore_duplicates turns a key conflict into an empty result
            # instead of overwriting the existing row
            result = self._table(collection)\
                .upsert(data, on_conflict=",".join(key_fields), ignore_duplicates=True)\
                .execute()
            if result.data:
                return result.data[0], True
            query = self._scoped(collection, self._table(collection).select("*"))
            for field in key_fields:
                query = query.eq(field, data[field])
            existing = query.limit(1).execute()
        except Exception as e:
            raise self._fail("upsert into", collection, e) from e
        if not existing.data:
            raise StorageError(f"Keyed insert into {collection} neither created nor found a row")
        return existing.data[0], False

    def update(self, collection: str, doc_id: str, partial: Dict[str, Any]) -> Document:
        try:
            result = self._scoped(collection, self._table(collection).update(partial))\
                .eq("id", doc_id)\
                .execute()
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                raise NotFound(f"{collection} document {doc_id} not found") from e
            raise self._fail("update", collection, e) from e
        except Exception as e:
            raise self._fail("update", collection, e) from e
        if not result.data:
            raise NotFound(f"{collection} document {doc_id} not found")
        return result.data[0]
