import logging
from typing import Set

from sqlalchemy import select, func

from database.models import UserExclusion
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

REASON_LIKED = "liked"
REASON_REJECTED = "rejected"


class ExclusionRepository(BaseRepository):
    def fetch_exclusions(self, user_id: int) -> Set[int]:
        stmt = select(UserExclusion.target_id).where(UserExclusion.user_id == user_id)
        return {int(target_id) for target_id in self.db.execute(stmt).scalars().all()}

    def add_exclusion(self, user_id: int, target_id: int, reason: str) -> UserExclusion:
        """Insert or refresh an exclusion; the latest reason wins."""
        existing = self.db.execute(
            select(UserExclusion).where(
                UserExclusion.user_id == user_id,
                UserExclusion.target_id == target_id
            )
        ).scalar_one_or_none()

        if existing:
            existing.reason = reason
            existing.created_at = func.now()
            self.db.flush()
            return existing

        logger.info(f"User {user_id} excluded {target_id} ({reason})")
        return self.add(UserExclusion(user_id=user_id, target_id=target_id, reason=reason))
