import logging
from typing import List, Optional, Dict, Any

from sqlalchemy import select, func, or_, and_, case

from database.models import MatchRequest, Match, User, TraitScores
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

STATUS_PENDING = 'pending'
STATUS_ACCEPTED = 'accepted'
STATUS_REJECTED = 'rejected'


class MatchRequestRepository(BaseRepository):
    def get_request(self, sender_id: int, receiver_id: int) -> Optional[MatchRequest]:
        stmt = select(MatchRequest).where(
            MatchRequest.sender_id == sender_id,
            MatchRequest.receiver_id == receiver_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def send_request(self, sender_id: int, receiver_id: int) -> MatchRequest:
        """Create a pending request, or reset an existing one to pending."""
        existing = self.get_request(sender_id, receiver_id)
        if existing:
            existing.status = STATUS_PENDING
            existing.created_at = func.now()
            self.db.flush()
            return existing

        return self.add(MatchRequest(sender_id=sender_id, receiver_id=receiver_id, status=STATUS_PENDING))

    def respond(self, sender_id: int, receiver_id: int, accept: bool) -> Optional[MatchRequest]:
        """
        Accept or reject a request. Accepting creates the mutual match.

        Returns:
            The updated request, or None if no request exists.
        """
        request = self.get_request(sender_id, receiver_id)
        if request is None:
            return None

        request.status = STATUS_ACCEPTED if accept else STATUS_REJECTED

        if accept and self.get_match(sender_id, receiver_id) is None:
            self.add(Match(user1_id=sender_id, user2_id=receiver_id))
            logger.info(f"Users {sender_id} and {receiver_id} matched")

        self.db.flush()
        return request

    def get_match(self, user_a: int, user_b: int) -> Optional[Match]:
        stmt = select(Match).where(or_(
            and_(Match.user1_id == user_a, Match.user2_id == user_b),
            and_(Match.user1_id == user_b, Match.user2_id == user_a)
        ))
        return self.db.execute(stmt).scalar_one_or_none()

    def get_incoming_requests(self, receiver_id: int) -> List[Dict[str, Any]]:
        """Pending requests for ``receiver_id`` with sender details, newest first."""
        stmt = (
            select(
                MatchRequest.id,
                MatchRequest.sender_id,
                MatchRequest.created_at,
                User.name,
                func.coalesce(User.age, 0).label('age'),
                func.coalesce(User.city, '').label('city'),
                func.coalesce(TraitScores.total_score, 0).label('total_score'),
            )
            .join(User, User.user_id == MatchRequest.sender_id)
            .outerjoin(TraitScores, TraitScores.user_id == User.user_id)
            .where(
                MatchRequest.receiver_id == receiver_id,
                MatchRequest.status == STATUS_PENDING
            )
            .order_by(MatchRequest.created_at.desc(), MatchRequest.id.desc())
        )
        return [dict(row._mapping) for row in self.db.execute(stmt).all()]

    def get_recent_matches(self, user_id: int) -> List[Dict[str, Any]]:
        """Matches involving ``user_id`` with the other user's details, newest first."""
        other_id = case(
            (Match.user1_id == user_id, Match.user2_id),
            else_=Match.user1_id
        )
        stmt = (
            select(
                Match.id.label('match_id'),
                other_id.label('user_id'),
                Match.matched_at,
                User.name,
                func.coalesce(User.age, 0).label('age'),
                func.coalesce(User.city, '').label('city'),
                func.coalesce(TraitScores.total_score, 0).label('total_score'),
            )
            .join(User, User.user_id == other_id)
            .outerjoin(TraitScores, TraitScores.user_id == User.user_id)
            .where(or_(Match.user1_id == user_id, Match.user2_id == user_id))
            .order_by(Match.matched_at.desc(), Match.id.desc())
        )
        return [dict(row._mapping) for row in self.db.execute(stmt).all()]
