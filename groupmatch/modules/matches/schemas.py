from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime

from groupmatch.modules.groups.schemas import GroupResponse


class Match(BaseModel):
    id: str
    pair_key: str
    group_ids: List[str]
    created_at: datetime
    seq: Optional[int] = None

    @field_validator("group_ids")
    @classmethod
    def two_distinct_groups(cls, value: List[str]) -> List[str]:
        if len(value) != 2 or value[0] == value[1]:
            raise ValueError("a match joins exactly two distinct groups")
        return value

    def other_group_id(self, group_id: str) -> str:
        return self.group_ids[1] if self.group_ids[0] == group_id else self.group_ids[0]


class MatchWithGroupResponse(BaseModel):
    match_id: str
    created_at: datetime
    other_group: GroupResponse
