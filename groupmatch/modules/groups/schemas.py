from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class Group(BaseModel):
    id: str
    name: str
    bio: str = ""
    photo_url: str = ""
    admin_user_id: str
    created_at: Optional[datetime] = None


class GroupResponse(BaseModel):
    id: str
    name: str
    bio: str
    photo_url: str

    class Config:
        from_attributes = True


class UserRecord(BaseModel):
    id: str
    group_id: Optional[str] = None
