from fastapi import APIRouter, Depends
from groupmatch.core.dependencies import get_current_group_id, get_store
from groupmatch.database.store import DocumentStore
from groupmatch.modules.conversations.schemas import MessageCreate, MessageResponse
from groupmatch.modules.conversations.service import ConversationLog
from groupmatch.modules.matches.schemas import MatchWithGroupResponse
from groupmatch.modules.matches.service import MatchRegistry
from typing import List

router = APIRouter(prefix="/matches", tags=["matches"])


def get_match_registry(store: DocumentStore = Depends(get_store)) -> MatchRegistry:
    return MatchRegistry(store)


def get_conversation_log(store: DocumentStore = Depends(get_store)) -> ConversationLog:
    return ConversationLog(store)


@router.get("", response_model=List[MatchWithGroupResponse])
async def list_matches(
    group_id: str = Depends(get_current_group_id),
    registry: MatchRegistry = Depends(get_match_registry)
):
    """Matches of the caller's group"""
    return registry.list_matches(group_id)


@router.get("/{match_id}", response_model=MatchWithGroupResponse)
async def get_match(
    match_id: str,
    group_id: str = Depends(get_current_group_id),
    registry: MatchRegistry = Depends(get_match_registry)
):
    """Match header: the other group (only if the caller's group is part of the match)"""
    return registry.get_match_detail(match_id, group_id)


@router.get("/{match_id}/messages", response_model=List[MessageResponse])
async def list_messages(
    match_id: str,
    group_id: str = Depends(get_current_group_id),
    log: ConversationLog = Depends(get_conversation_log)
):
    """Full message history, oldest first"""
    return log.list_messages(match_id, group_id)


@router.post("/{match_id}/messages", response_model=MessageResponse, status_code=201)
async def post_message(
    match_id: str,
    message_data: MessageCreate,
    group_id: str = Depends(get_current_group_id),
    log: ConversationLog = Depends(get_conversation_log)
):
    """Send a message as the caller's group"""
    return log.post_message(match_id, group_id, message_data.text)
