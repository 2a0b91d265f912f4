"""
Store Adapter contract consumed by the matching and conversation services.

The services never talk to a concrete backend; they are handed something
that satisfies DocumentStore. Collections are plain names ("groups",
"likes", "matches") or a sub-collection path scoped under a parent
document ("matches/{match_id}/messages").
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

EQ = "=="
ARRAY_CONTAINS = "array-contains"
SUPPORTED_OPS = (EQ, ARRAY_CONTAINS)

# Sub-collection parent -> column holding the parent id in the child table
PARENT_FIELDS = {"matches": "match_id"}

Document = Dict[str, Any]


class DocumentStore(Protocol):
    def read_all(self, collection: str) -> List[Document]:
        ...

    def read_where(self, collection: str, field: str, op: str, value: Any) -> List[Document]:
        ...

    def read_one(self, collection: str, doc_id: str) -> Document:
        """Return the document or raise NotFound"""
        ...

    def insert(self, collection: str, document: Document) -> Document:
        """Insert and return the stored document with id, created_at and seq assigned"""
        ...

    def insert_if_absent(
        self, collection: str, document: Document, key_fields: Sequence[str]
    ) -> Tuple[Document, bool]:
        """Atomically create unless a document with the same key exists; (document, created)"""
        ...

    def update(self, collection: str, doc_id: str, partial: Document) -> Document:
        ...


def message_collection(match_id: str) -> str:
    return f"matches/{match_id}/messages"


def split_collection(collection: str) -> Tuple[str, Optional[Tuple[str, str]]]:
    """Split "parent/{id}/child" into ("child", (parent_field, id)); plain names pass through"""
    parts = collection.split("/")
    if len(parts) == 1:
        return collection, None
    if len(parts) != 3 or not parts[1]:
        raise ValueError(f"Unsupported collection path: {collection}")
    parent, parent_id, child = parts
    if parent not in PARENT_FIELDS:
        raise ValueError(f"Collection {parent!r} has no sub-collections")
    return child, (PARENT_FIELDS[parent], parent_id)


def check_op(op: str) -> None:
    if op not in SUPPORTED_OPS:
        raise ValueError(f"Unsupported query operator: {op}")
