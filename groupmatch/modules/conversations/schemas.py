from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class Message(BaseModel):
    id: str
    match_id: str
    author_group_id: str
    text: str
    created_at: datetime
    seq: Optional[int] = None


class MessageCreate(BaseModel):
    text: str


class MessageResponse(BaseModel):
    id: str
    match_id: str
    author_group_id: str
    text: str
    created_at: datetime

    class Config:
        from_attributes = True
