from pydantic import BaseModel
from typing import List, Optional

from groupmatch.modules.groups.schemas import GroupResponse
from groupmatch.modules.likes.schemas import LikeResponse
from groupmatch.modules.matches.schemas import MatchWithGroupResponse


class FeedPage(BaseModel):
    candidates: List[GroupResponse]
    cursor: Optional[str] = None  # id of the last consumed candidate; None = start of feed
    has_more: bool = False


class SwipeRequest(BaseModel):
    cursor: Optional[str] = None


class SwipeResult(BaseModel):
    cursor: str
    like: Optional[LikeResponse] = None
    match: Optional[MatchWithGroupResponse] = None
