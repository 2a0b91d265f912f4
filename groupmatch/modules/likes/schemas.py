from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class Like(BaseModel):
    id: str
    from_group_id: str
    to_group_id: str
    created_at: datetime
    seq: Optional[int] = None


class LikeResponse(BaseModel):
    id: str
    from_group_id: str
    to_group_id: str
    created_at: datetime

    class Config:
        from_attributes = True
