import logging
from typing import List, Optional

from groupmatch.core.decoding import decode, decode_all
from groupmatch.core.errors import Forbidden, NotFound, ValidationError
from groupmatch.database.store import ARRAY_CONTAINS, DocumentStore
from groupmatch.modules.groups.schemas import Group, GroupResponse
from groupmatch.modules.groups.service import GroupService
from groupmatch.modules.likes.service import LikeLedger
from groupmatch.modules.matches.schemas import Match, MatchWithGroupResponse

logger = logging.getLogger(__name__)

MATCHES = "matches"


def canonical_pair_key(group_a: str, group_b: str) -> str:
    """Order-independent key for an unordered pair of groups"""
    if group_a == group_b:
        raise ValidationError("A match needs two different groups")
    return ":".join(sorted((group_a, group_b)))


class MatchRegistry:
    def __init__(self, store: DocumentStore, ledger: Optional[LikeLedger] = None):
        self.store = store
        self.ledger = ledger or LikeLedger(store)
        self.groups = GroupService(store)

    def check_and_create_match(self, group_a: str, group_b: str) -> Optional[Match]:
        """Create the match for {group_a, group_b} once both likes exist.

        Safe to call any number of times from either side: creation is a
        keyed insert on the canonical pair, so concurrent callers converge on
        the same row. Each side records its own like before checking, so when
        two likes race at least one caller sees the other's like.
        """
        pair_key = canonical_pair_key(group_a, group_b)
        if not (self.ledger.has_like(group_b, group_a) and self.ledger.has_like(group_a, group_b)):
            return None

        doc, created = self.store.insert_if_absent(
            MATCHES,
            {"pair_key": pair_key, "group_ids": sorted((group_a, group_b))},
            ("pair_key",),
        )
        if created:
            logger.info(f"Match created for {pair_key}")
        else:
            logger.info(f"Match for {pair_key} already exists")
        return decode(Match, doc)

    def get_match(self, match_id: str) -> Match:
        try:
            doc = self.store.read_one(MATCHES, match_id)
        except NotFound:
            raise NotFound(f"Match {match_id} not found")
        return decode(Match, doc)

    def get_match_for_group(self, match_id: str, group_id: str) -> Match:
        """Load a match, failing with Forbidden unless group_id is one of its two groups"""
        match = self.get_match(match_id)
        if group_id not in match.group_ids:
            logger.warning(f"Group {group_id} tried to access match {match_id}")
            raise Forbidden("Your group is not part of this match")
        return match

    def list_matches(self, group_id: str) -> List[MatchWithGroupResponse]:
        """Matches of a group with the other side's profile, newest first"""
        matches = decode_all(Match, self.store.read_where(MATCHES, "group_ids", ARRAY_CONTAINS, group_id))
        matches.sort(key=lambda m: (m.created_at, m.seq or 0), reverse=True)
        results = []
        for match in matches:
            try:
                other = self.groups.get_group(match.other_group_id(group_id))
            except NotFound:
                # other group was removed by the profile service; nothing to show
                continue
            results.append(self._with_group(match, other))
        return results

    def get_match_detail(self, match_id: str, group_id: str) -> MatchWithGroupResponse:
        match = self.get_match_for_group(match_id, group_id)
        other = self.groups.get_group(match.other_group_id(group_id))
        return self._with_group(match, other)

    def _with_group(self, match: Match, other: Group) -> MatchWithGroupResponse:
        return MatchWithGroupResponse(
            match_id=match.id,
            created_at=match.created_at,
            other_group=GroupResponse.model_validate(other, from_attributes=True),
        )
