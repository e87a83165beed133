import logging
from typing import Optional

from sqlalchemy import select, func

from core.recommender.models import Profile, MatchPreferences, CandidatePage
from database.models import User, TraitScores
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _row_to_profile(row) -> Profile:
    return Profile(
        id=int(row.user_id),
        name=row.name or "",
        gender=row.gender or "",
        age=row.age or 0,
        city=row.city or "",
        lat=row.lat,
        lon=row.lon,
        total_score=int(row.total_score),
        personality=int(row.personality),
        communication=int(row.communication),
        emotional=int(row.emotional),
        confidence=int(row.confidence),
    )


class ProfileRepository(BaseRepository):
    """Reads profiles joined with their trait scores (missing scores read as 0)."""

    _total_score = func.coalesce(TraitScores.total_score, 0)

    def _profile_select(self):
        return (
            select(
                User.user_id,
                User.name,
                User.gender,
                User.age,
                User.city,
                User.lat,
                User.lon,
                self._total_score.label('total_score'),
                func.coalesce(TraitScores.personality, 0).label('personality'),
                func.coalesce(TraitScores.communication, 0).label('communication'),
                func.coalesce(TraitScores.emotional, 0).label('emotional'),
                func.coalesce(TraitScores.confidence, 0).label('confidence'),
            )
            .select_from(User)
            .outerjoin(TraitScores, TraitScores.user_id == User.user_id)
        )

    def get_profile(self, user_id: int) -> Optional[Profile]:
        stmt = self._profile_select().where(User.user_id == user_id)
        row = self.db.execute(stmt).first()
        return _row_to_profile(row) if row else None

    def fetch_candidate_page(self, prefs: MatchPreferences) -> CandidatePage:
        """Fetch up to ``limit + 1`` profiles matching the filters, by ascending id.

        All fetched rows are returned. When the extra row exists, its id
        becomes the next cursor.
        """
        stmt = self._profile_select()

        if prefs.target_gender:
            stmt = stmt.where(User.gender == prefs.target_gender)
        if prefs.age_min > 0:
            stmt = stmt.where(User.age >= prefs.age_min)
        if prefs.age_max > 0:
            stmt = stmt.where(User.age <= prefs.age_max)
        if prefs.min_score > 0:
            stmt = stmt.where(self._total_score >= prefs.min_score)
        if prefs.cursor > 0:
            stmt = stmt.where(User.user_id > prefs.cursor)

        stmt = stmt.order_by(User.user_id).limit(prefs.limit + 1)  # +1 to detect next cursor

        profiles = [_row_to_profile(row) for row in self.db.execute(stmt).all()]

        next_cursor = 0
        if len(profiles) > prefs.limit:
            next_cursor = profiles[-1].id

        logger.debug(f"Candidate page: {len(profiles)} rows, next_cursor={next_cursor}")
        return CandidatePage(profiles=profiles, next_cursor=next_cursor)
