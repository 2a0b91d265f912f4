from groupmatch.config import settings
from groupmatch.core.errors import ValidationError
from groupmatch.database.store import DocumentStore
from groupmatch.modules.feed.schemas import FeedPage, SwipeResult
from groupmatch.modules.groups.schemas import Group, GroupResponse
from groupmatch.modules.groups.service import GroupService
from groupmatch.modules.likes.schemas import LikeResponse
from groupmatch.modules.likes.service import LikeLedger
from groupmatch.modules.matches.service import MatchRegistry
from typing import List, Optional


def advance_cursor(cursor: Optional[str], candidate_id: str) -> str:
    """Move a keyset cursor past candidate_id; never moves backwards"""
    if cursor is None or candidate_id > cursor:
        return candidate_id
    return cursor


class CandidateFeed:
    """Groups a given group can still swipe on.

    Candidates are ordered by group id and consumed through a keyset cursor
    (the id of the last candidate passed or liked), so the feed can be
    resumed from any request without server-side state.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self.groups = GroupService(store)
        self.ledger = LikeLedger(store)
        self.registry = MatchRegistry(store, self.ledger)

    def list_candidates(self, group_id: str, after: Optional[str] = None) -> List[Group]:
        self.groups.get_group(group_id)
        liked = self.ledger.liked_group_ids(group_id)
        return [
            group for group in self.groups.list_groups()
            if group.id != group_id
            and group.id not in liked
            and (after is None or group.id > after)
        ]

    def get_page(self, group_id: str, after: Optional[str] = None, limit: Optional[int] = None) -> FeedPage:
        limit = limit or settings.feed_page_size
        candidates = self.list_candidates(group_id, after)
        return FeedPage(
            candidates=[GroupResponse.model_validate(g, from_attributes=True) for g in candidates[:limit]],
            cursor=after,
            has_more=len(candidates) > limit,
        )

    def pass_candidate(self, group_id: str, candidate_id: str, cursor: Optional[str] = None) -> SwipeResult:
        """Skip a candidate; nothing is written"""
        if candidate_id == group_id:
            raise ValidationError("A group cannot swipe on itself")
        self.groups.get_group(candidate_id)
        return SwipeResult(cursor=advance_cursor(cursor, candidate_id))

    def like_candidate(self, group_id: str, candidate_id: str, cursor: Optional[str] = None) -> SwipeResult:
        """Record the like, then check for a match; the cursor only advances once both succeed"""
        like = self.ledger.record_like(group_id, candidate_id)
        match = self.registry.check_and_create_match(group_id, candidate_id)
        return SwipeResult(
            cursor=advance_cursor(cursor, candidate_id),
            like=LikeResponse.model_validate(like, from_attributes=True),
            match=self.registry.get_match_detail(match.id, group_id) if match else None,
        )
