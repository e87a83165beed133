#!/usr/bin/env python3
"""
Match service - business logic for likes, rejections and match requests.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.recommender.models import Recommendation, Candidate
from database.repositories import (
    ProfileRepository,
    ExclusionRepository,
    ImageRepository,
    MatchRequestRepository,
)
from database.repositories.exclusion import REASON_LIKED, REASON_REJECTED
from ..models.responses import (
    CandidateProfile,
    RecommendedCandidate,
    RecommendationsResponse,
    IncomingRequest,
    RecentMatch,
)
from ..exceptions import (
    ServiceException,
    UserNotFoundException,
    MatchRequestNotFoundException,
    InvalidMatchActionException,
)

logger = logging.getLogger(__name__)


def _to_recommended_candidate(candidate: Candidate) -> RecommendedCandidate:
    profile = candidate.profile
    return RecommendedCandidate(
        user=CandidateProfile(
            id=profile.id,
            name=profile.name,
            gender=profile.gender,
            age=profile.age,
            city=profile.city,
            total_score=profile.total_score,
            personality=profile.personality,
            communication=profile.communication,
            emotional=profile.emotional,
            confidence=profile.confidence,
            images=list(candidate.images),
        ),
        score=round(candidate.score, 2),
        reasons=list(candidate.reasons),
        match_score=candidate.match_percentage,
    )


def to_recommendations_response(recommendation: Recommendation) -> RecommendationsResponse:
    """Convert a core Recommendation into the API response model."""
    candidates = [_to_recommended_candidate(c) for c in recommendation.candidates]
    return RecommendationsResponse(
        success=True,
        count=len(candidates),
        candidates=candidates,
        next_cursor=recommendation.next_cursor,
    )


class MatchService:
    """Service for likes, rejections and match requests."""

    def __init__(self, db: Session):
        self.db = db
        self.profiles = ProfileRepository(db)
        self.exclusions = ExclusionRepository(db)
        self.images = ImageRepository(db)
        self.requests = MatchRequestRepository(db)

    def _validate_target(self, user_id: int, target_id: int) -> None:
        if user_id == target_id:
            raise InvalidMatchActionException("Cannot perform this action on yourself")
        if self.profiles.get_profile(target_id) is None:
            raise UserNotFoundException(f"User {target_id} not found")

    def send_request(self, sender_id: int, receiver_id: int) -> None:
        """
        Like another user: record a pending match request and hide the
        receiver from the sender's future recommendations.

        The exclusion write is best-effort; the like itself has already
        been committed when it runs.

        Raises:
            InvalidMatchActionException: If sender and receiver are the same.
            UserNotFoundException: If the receiver does not exist.
        """
        self._validate_target(sender_id, receiver_id)

        try:
            self.requests.send_request(sender_id, receiver_id)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to send match request {sender_id} -> {receiver_id}: {e}", exc_info=True)
            raise ServiceException("Failed to send match request") from e

        try:
            self.exclusions.add_exclusion(sender_id, receiver_id, REASON_LIKED)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"Could not record exclusion {sender_id} -> {receiver_id} after like: {e}")

    def reject(self, user_id: int, target_id: int) -> None:
        """
        Reject (swipe left on) another user.

        Raises:
            InvalidMatchActionException: If user and target are the same.
            UserNotFoundException: If the target does not exist.
            ServiceException: If the exclusion could not be stored.
        """
        self._validate_target(user_id, target_id)

        try:
            self.exclusions.add_exclusion(user_id, target_id, REASON_REJECTED)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to reject user {target_id} for {user_id}: {e}", exc_info=True)
            raise ServiceException("Failed to reject user") from e

    def respond(self, receiver_id: int, sender_id: int, accept: bool) -> str:
        """
        Accept or reject a match request sent to ``receiver_id``.

        Returns:
            "accepted" or "rejected".

        Raises:
            MatchRequestNotFoundException: If no such request exists.
        """
        try:
            request = self.requests.respond(sender_id, receiver_id, accept)
            if request is None:
                raise MatchRequestNotFoundException(
                    f"No match request from {sender_id} to {receiver_id}"
                )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to respond to match request {sender_id} -> {receiver_id}: {e}", exc_info=True)
            raise ServiceException("Failed to respond to match request") from e

        return request.status

    def get_incoming_requests(self, receiver_id: int) -> List[IncomingRequest]:
        """Pending requests sent to ``receiver_id``, newest first."""
        incoming = []
        for row in self.requests.get_incoming_requests(receiver_id):
            urls = self.images.get_image_urls(row['sender_id'])
            created_at = row.get('created_at')
            incoming.append(IncomingRequest(
                id=row['id'],
                sender_id=row['sender_id'],
                name=row['name'] or "",
                age=row['age'],
                location=row['city'],
                image=urls[0] if urls else None,
                compatibility=row['total_score'],
                created_at=created_at.isoformat() if created_at is not None else None,
            ))
        return incoming

    def get_recent_matches(self, user_id: int) -> List[RecentMatch]:
        """Mutual matches of ``user_id``, newest first."""
        matches = []
        for row in self.requests.get_recent_matches(user_id):
            urls = self.images.get_image_urls(row['user_id'])
            matched_at = row.get('matched_at')
            matches.append(RecentMatch(
                match_id=row['match_id'],
                user_id=row['user_id'],
                name=row['name'] or "",
                age=row['age'],
                location=row['city'],
                image=urls[0] if urls else None,
                compatibility=row['total_score'],
                matched_at=matched_at.isoformat() if matched_at is not None else None,
            ))
        return matches
