"""
Profile Store Interface - storage collaborator consumed by the recommender.

Implementations must be safe to call from several worker threads at once;
``fetch_image_urls`` is invoked concurrently by the ranker.
"""
from abc import ABC, abstractmethod
from typing import List, Set

from core.recommender.models import Profile, MatchPreferences, CandidatePage


class ProfileStore(ABC):
    """
    Abstract interface for profile, exclusion and image lookups.
    """

    @abstractmethod
    def get_profile(self, profile_id: int) -> Profile:
        """
        Load one profile with its trait scores.

        Raises:
            ProfileNotFoundError: If no such profile exists
        """
        pass

    @abstractmethod
    def fetch_exclusions(self, viewer_id: int) -> Set[int]:
        """
        Ids the viewer already liked or rejected. An empty set is valid.
        """
        pass

    @abstractmethod
    def fetch_candidate_page(self, prefs: MatchPreferences) -> CandidatePage:
        """
        Fetch up to ``prefs.limit + 1`` profiles ordered by ascending id.

        Rows are filtered by target gender, age bounds, minimum total score
        and ``id > prefs.cursor``. When ``limit + 1`` rows exist, the page's
        ``next_cursor`` is the id of the last row.
        """
        pass

    @abstractmethod
    def fetch_image_urls(self, profile_id: int) -> List[str]:
        """
        Image URLs for a profile, primary image first. Empty when none.
        """
        pass
