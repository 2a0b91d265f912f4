from groupmatch.core.decoding import decode, decode_all
from groupmatch.core.errors import NotFound
from groupmatch.database.store import DocumentStore
from groupmatch.modules.groups.schemas import Group, UserRecord
from typing import List, Optional

GROUPS = "groups"
USERS = "users"


class GroupService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def get_group(self, group_id: str) -> Group:
        """Get group by ID"""
        try:
            doc = self.store.read_one(GROUPS, group_id)
        except NotFound:
            raise NotFound(f"Group {group_id} not found")
        return decode(Group, doc)

    def list_groups(self) -> List[Group]:
        """All groups, ordered by id so every store enumerates them the same way"""
        groups = decode_all(Group, self.store.read_all(GROUPS))
        return sorted(groups, key=lambda g: g.id)

    def get_group_id_for_user(self, user_id: str) -> Optional[str]:
        """The group the user administers, or None if they have not created one yet"""
        try:
            doc = self.store.read_one(USERS, user_id)
        except NotFound:
            return None
        return decode(UserRecord, doc).group_id
