from fastapi import APIRouter, Depends
from groupmatch.core.dependencies import get_current_group_id, get_store
from groupmatch.database.store import DocumentStore
from groupmatch.modules.groups.schemas import GroupResponse
from groupmatch.modules.groups.service import GroupService

router = APIRouter(prefix="/groups", tags=["groups"])


def get_group_service(store: DocumentStore = Depends(get_store)) -> GroupService:
    return GroupService(store)


@router.get("/me", response_model=GroupResponse)
async def get_my_group(
    group_id: str = Depends(get_current_group_id),
    service: GroupService = Depends(get_group_service)
):
    """Profile of the caller's own group"""
    return service.get_group(group_id)


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(
    group_id: str,
    current_group_id: str = Depends(get_current_group_id),
    service: GroupService = Depends(get_group_service)
):
    """Public profile of any group"""
    return service.get_group(group_id)
