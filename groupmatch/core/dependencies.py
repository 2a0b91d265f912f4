"""
Core dependencies: store wiring, authentication and current-group resolution
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from supabase import Client
from typing import Dict, Optional
import logging

from groupmatch.core.errors import NotFound, Unauthenticated
from groupmatch.database.store import DocumentStore
from groupmatch.database.supabase_client import get_supabase
from groupmatch.database.supabase_store import SupabaseStore
from groupmatch.modules.auth.service import AuthService
from groupmatch.modules.groups.service import GroupService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_store(supabase: Client = Depends(get_supabase)) -> DocumentStore:
    return SupabaseStore(supabase)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict:
    """Extract current user info from JWT token"""
    if credentials is None:
        raise Unauthenticated("Not signed in")
    return auth_service.get_current_user(credentials.credentials)


def get_current_group_id(
    user_data: Dict = Depends(get_current_user),
    store: DocumentStore = Depends(get_store)
) -> str:
    """Group of the signed-in user; every matching operation acts on behalf of it"""
    group_id = GroupService(store).get_group_id_for_user(user_data["id"])
    if not group_id:
        logger.info(f"User {user_data['id']} has no group yet")
        raise NotFound("Create a group first")
    return group_id
