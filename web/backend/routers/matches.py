#!/usr/bin/env python3
"""
Match endpoints - recommendations, likes, rejections and match requests.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.recommender import RecommendationService, build_preferences
from ..config import get_config
from ..dependencies import get_db, get_recommendation_service, get_current_user_id
from ..services.match_service import MatchService, to_recommendations_response
from ..models.requests import MatchRequestPayload, MatchResponsePayload
from ..models.responses import (
    RecommendationsResponse,
    MessageResponse,
    IncomingRequestsResponse,
    RecentMatchesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/match", tags=["match"])


@router.get("/recommendations", response_model=RecommendationsResponse)
def get_recommendations(
    gender: Optional[str] = Query(default=None, description="Target gender letter, e.g. M or F"),
    age_min: Optional[str] = Query(default=None, description="Minimum age, 0 = unset"),
    age_max: Optional[str] = Query(default=None, description="Maximum age, 0 = unset"),
    limit: Optional[str] = Query(default=None, description="Page size; default applied when absent or out of range"),
    min_score: Optional[str] = Query(default=None, description="Minimum total score 0-100"),
    cursor: Optional[str] = Query(default=None, description="next_cursor from the previous page, 0 = first page"),
    viewer_id: int = Depends(get_current_user_id),
    service: RecommendationService = Depends(get_recommendation_service)
):
    """
    Get ranked match recommendations for the current user.

    Candidates are sorted by compatibility score (highest first). A page can
    contain fewer than ``limit`` candidates while ``next_cursor`` is non-zero,
    because profiles the user already liked or rejected are removed after the
    page is fetched; keep paging until ``next_cursor`` is 0. The lowest-ranked of
    the ``limit + 1`` rows scored for a page is dropped and does not reappear
    on the next page.
    """
    prefs = build_preferences(
        get_config().recommender,
        gender=gender,
        age_min=age_min,
        age_max=age_max,
        min_score=min_score,
        cursor=cursor,
        limit=limit
    )
    recommendation = service.recommend(viewer_id, prefs)
    return to_recommendations_response(recommendation)


@router.post("/request", response_model=MessageResponse)
def send_match_request(
    payload: MatchRequestPayload,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Like another user. The receiver stops appearing in your recommendations.
    """
    MatchService(db).send_request(user_id, payload.receiver_id)
    return MessageResponse(success=True, message="request sent")


@router.post("/reject", response_model=MessageResponse)
def reject_user(
    payload: MatchRequestPayload,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Reject another user so they no longer appear in your recommendations.
    """
    MatchService(db).reject(user_id, payload.receiver_id)
    return MessageResponse(success=True, message="rejected")


@router.post("/respond", response_model=MessageResponse)
def respond_to_request(
    payload: MatchResponsePayload,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Accept or reject a match request. Accepting creates a mutual match.
    """
    status = MatchService(db).respond(user_id, payload.sender_id, payload.accept)
    return MessageResponse(success=True, message=status)


@router.get("/incoming-requests", response_model=IncomingRequestsResponse)
def get_incoming_requests(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Pending match requests sent to the current user, newest first.
    """
    requests = MatchService(db).get_incoming_requests(user_id)
    return IncomingRequestsResponse(success=True, count=len(requests), requests=requests)


@router.get("/recent", response_model=RecentMatchesResponse)
def get_recent_matches(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Mutual matches of the current user, newest first.
    """
    matches = MatchService(db).get_recent_matches(user_id)
    return RecentMatchesResponse(success=True, count=len(matches), matches=matches)
