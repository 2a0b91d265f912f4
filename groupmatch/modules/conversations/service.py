import logging
from typing import List, Optional

from groupmatch.config import settings
from groupmatch.core.decoding import decode, decode_all
from groupmatch.core.errors import ValidationError
from groupmatch.database.store import DocumentStore, message_collection
from groupmatch.modules.conversations.schemas import Message
from groupmatch.modules.matches.service import MatchRegistry

logger = logging.getLogger(__name__)


def message_order(message: Message):
    return (message.created_at, message.seq or 0)


class ConversationLog:
    """Append-only message history of a match.

    Pull based: clients call list_messages on open and on refresh. Every
    read and write first checks that the caller's group belongs to the match.
    """

    def __init__(self, store: DocumentStore, registry: Optional[MatchRegistry] = None):
        self.store = store
        self.registry = registry or MatchRegistry(store)

    def list_messages(self, match_id: str, group_id: str) -> List[Message]:
        self.registry.get_match_for_group(match_id, group_id)
        messages = decode_all(Message, self.store.read_all(message_collection(match_id)))
        # TODO: page by (created_at, seq) once long conversations need it
        return sorted(messages, key=message_order)

    def post_message(self, match_id: str, author_group_id: str, text: str) -> Message:
        body = (text or "").strip()
        if not body:
            raise ValidationError("Message text cannot be empty")
        if len(body) > settings.message_max_length:
            raise ValidationError(f"Message text exceeds {settings.message_max_length} characters")

        self.registry.get_match_for_group(match_id, author_group_id)
        doc = self.store.insert(message_collection(match_id), {
            "match_id": match_id,
            "author_group_id": author_group_id,
            "text": body,
        })
        message = decode(Message, doc)
        logger.debug(f"Message {message.id} posted to match {match_id} by {author_group_id}")
        return message
