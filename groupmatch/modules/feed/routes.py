from fastapi import APIRouter, Depends, Query
from groupmatch.core.dependencies import get_current_group_id, get_store
from groupmatch.database.store import DocumentStore
from groupmatch.modules.feed.schemas import FeedPage, SwipeRequest, SwipeResult
from groupmatch.modules.feed.service import CandidateFeed
from typing import Optional

router = APIRouter(prefix="/feed", tags=["feed"])


def get_candidate_feed(store: DocumentStore = Depends(get_store)) -> CandidateFeed:
    return CandidateFeed(store)


@router.get("", response_model=FeedPage)
async def list_candidates(
    after: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    group_id: str = Depends(get_current_group_id),
    feed: CandidateFeed = Depends(get_candidate_feed)
):
    """Groups not yet liked by the caller's group, after the given cursor"""
    return feed.get_page(group_id, after=after, limit=limit)


@router.post("/{candidate_id}/like", response_model=SwipeResult)
async def like(
    candidate_id: str,
    swipe: Optional[SwipeRequest] = None,
    group_id: str = Depends(get_current_group_id),
    feed: CandidateFeed = Depends(get_candidate_feed)
):
    """Like a candidate; the response carries the match when the like was mutual"""
    return feed.like_candidate(group_id, candidate_id, swipe.cursor if swipe else None)


@router.post("/{candidate_id}/pass", response_model=SwipeResult)
async def pass_candidate(
    candidate_id: str,
    swipe: Optional[SwipeRequest] = None,
    group_id: str = Depends(get_current_group_id),
    feed: CandidateFeed = Depends(get_candidate_feed)
):
    """Skip a candidate without recording anything"""
    return feed.pass_candidate(group_id, candidate_id, swipe.cursor if swipe else None)
