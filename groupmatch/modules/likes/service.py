import logging
from typing import Set

from groupmatch.core.decoding import decode
from groupmatch.core.errors import ValidationError
from groupmatch.database.store import EQ, DocumentStore
from groupmatch.modules.groups.service import GroupService
from groupmatch.modules.likes.schemas import Like

logger = logging.getLogger(__name__)

LIKES = "likes"
LIKE_KEY = ("from_group_id", "to_group_id")


class LikeLedger:
    """Directional like edges between groups.

    record_like is idempotent: the (from, to) pair is the key, so a retried
    or double-submitted like returns the row that already exists.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self.groups = GroupService(store)

    def record_like(self, from_group_id: str, to_group_id: str) -> Like:
        if from_group_id == to_group_id:
            raise ValidationError("A group cannot like itself")
        self.groups.get_group(from_group_id)
        self.groups.get_group(to_group_id)

        doc, created = self.store.insert_if_absent(
            LIKES,
            {"from_group_id": from_group_id, "to_group_id": to_group_id},
            LIKE_KEY,
        )
        if created:
            logger.info(f"Like recorded {from_group_id} -> {to_group_id}")
        else:
            logger.info(f"Duplicate like {from_group_id} -> {to_group_id} ignored")
        return decode(Like, doc)

    def has_like(self, from_group_id: str, to_group_id: str) -> bool:
        # existence, not count: tolerates duplicate rows from older writers
        return to_group_id in self.liked_group_ids(from_group_id)

    def liked_group_ids(self, from_group_id: str) -> Set[str]:
        docs = self.store.read_where(LIKES, "from_group_id", EQ, from_group_id)
        return {decode(Like, doc).to_group_id for doc in docs}
