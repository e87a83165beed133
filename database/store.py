"""SQL-backed ProfileStore used by the RecommendationService."""

import logging
from typing import Callable, List, Set, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import InfrastructureError, ProfileNotFoundError
from core.recommender.interfaces import ProfileStore
from core.recommender.models import Profile, MatchPreferences, CandidatePage
from database.database import db_session_scope
from database.repositories import ProfileRepository, ExclusionRepository, ImageRepository

logger = logging.getLogger(__name__)


class SqlProfileStore(ProfileStore):
    """
    Adapter that implements ProfileStore on top of the SQLAlchemy repositories.

    Every call opens its own session, so the store can be shared by the
    ranker's worker threads. Database errors are re-raised as
    InfrastructureError.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Args:
            session_factory: Callable returning a new Session; defaults to the
                application's configured sessionmaker
        """
        self._session_factory = session_factory

    def get_profile(self, profile_id: int) -> Profile:
        try:
            with db_session_scope(self._session_factory) as db:
                profile = ProfileRepository(db).get_profile(profile_id)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Profile lookup failed for {profile_id}: {e}") from e

        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    def fetch_exclusions(self, viewer_id: int) -> Set[int]:
        try:
            with db_session_scope(self._session_factory) as db:
                return ExclusionRepository(db).fetch_exclusions(viewer_id)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Exclusion lookup failed for {viewer_id}: {e}") from e

    def fetch_candidate_page(self, prefs: MatchPreferences) -> CandidatePage:
        try:
            with db_session_scope(self._session_factory) as db:
                return ProfileRepository(db).fetch_candidate_page(prefs)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Candidate query failed: {e}") from e

    def fetch_image_urls(self, profile_id: int) -> List[str]:
        try:
            with db_session_scope(self._session_factory) as db:
                return ImageRepository(db).get_image_urls(profile_id)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Image lookup failed for {profile_id}: {e}") from e
