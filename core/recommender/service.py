#!/usr/bin/env python3
"""
Recommendation Service - builds a ranked page of candidates for a viewer.

Pipeline:
1. Load the viewer profile (missing viewer fails fast)
2. Load the viewer's exclusion set (degrades to empty by default)
3. Fetch one page of raw candidates (limit + 1 rows for cursor detection)
4. Drop the viewer and excluded ids
5. Score, enrich, sort and truncate via the ConcurrentRanker

Pagination note: the next cursor is passed through exactly as the candidate
source returned it. Exclusions are applied after the page is fetched, so a
page can hold fewer than ``limit`` candidates while a next cursor is still
present. No additional pages are fetched to fill the gap.

The next page starts after the (limit+1)-th row. All limit+1 rows are
scored, so whichever of them ranks lowest and is truncated away is never
returned on any page.
"""

import logging
import threading
from typing import Optional, Set

from core.config_loader import RecommenderConfig
from core.errors import RecommendationError, InfrastructureError, RecommendationCancelled
from core.recommender.exclusion import filter_candidates
from core.recommender.interfaces import ProfileStore
from core.recommender.models import MatchPreferences, Recommendation, Profile, CandidatePage
from core.recommender.ranker import ConcurrentRanker

logger = logging.getLogger(__name__)


class RecommendationService:
    """
    Stateless request/response orchestrator for recommendations.

    Collaborator errors are never retried here; retry policy belongs to
    the caller.
    """

    def __init__(
        self,
        store: ProfileStore,
        config: Optional[RecommenderConfig] = None,
        ranker: Optional[ConcurrentRanker] = None
    ):
        self.store = store
        self.config = config or RecommenderConfig()
        self.ranker = ranker or ConcurrentRanker(store, max_workers=self.config.max_workers)

    def recommend(
        self,
        viewer_id: int,
        prefs: MatchPreferences,
        cancel_event: Optional[threading.Event] = None,
        timeout: Optional[float] = None
    ) -> Recommendation:
        """Compute one page of recommendations for ``viewer_id``.

        Args:
            viewer_id: Id of the user receiving recommendations
            prefs: Filters and pagination (limit already clamped)
            cancel_event: Set by the caller to abandon the request
            timeout: Ranking timeout in seconds; defaults to the configured value

        Returns:
            Recommendation with candidates sorted by descending score

        Raises:
            ProfileNotFoundError: Viewer does not exist
            InfrastructureError: A storage call failed
            RecommendationCancelled: Cancelled or timed out during ranking
        """
        if timeout is None:
            timeout = self.config.timeout_seconds

        viewer = self._load_viewer(viewer_id)
        exclusions = self._load_exclusions(viewer_id)
        page = self._load_candidate_page(prefs)

        eligible = filter_candidates(page.profiles, exclusions, viewer_id)

        if cancel_event is not None and cancel_event.is_set():
            raise RecommendationCancelled(f"Recommendation for viewer {viewer_id} cancelled before ranking")

        ranked = self.ranker.rank(
            viewer,
            eligible,
            limit=prefs.limit,
            cancel_event=cancel_event,
            timeout=timeout
        )

        logger.info(
            f"Recommendations for viewer {viewer_id}: fetched={len(page.profiles)} "
            f"eligible={len(eligible)} returned={len(ranked)} next_cursor={page.next_cursor}"
        )

        return Recommendation(candidates=ranked, next_cursor=page.next_cursor)

    def _load_viewer(self, viewer_id: int) -> Profile:
        try:
            return self.store.get_profile(viewer_id)
        except RecommendationError:
            raise
        except Exception as e:
            logger.error(f"Failed to load viewer profile {viewer_id}: {e}", exc_info=True)
            raise InfrastructureError(f"Failed to load viewer profile {viewer_id}") from e

    def _load_exclusions(self, viewer_id: int) -> Set[int]:
        try:
            return set(self.store.fetch_exclusions(viewer_id) or ())
        except Exception as e:
            if self.config.exclusion_failure_policy == "fail":
                logger.error(f"Exclusion lookup failed for viewer {viewer_id}: {e}", exc_info=True)
                if isinstance(e, InfrastructureError):
                    raise
                raise InfrastructureError(f"Exclusion lookup failed for viewer {viewer_id}") from e
            logger.warning(
                f"Exclusion lookup failed for viewer {viewer_id}, continuing with no exclusions: {e}"
            )
            return set()

    def _load_candidate_page(self, prefs: MatchPreferences) -> CandidatePage:
        try:
            return self.store.fetch_candidate_page(prefs)
        except RecommendationError:
            raise
        except Exception as e:
            logger.error(f"Candidate fetch failed: {e}", exc_info=True)
            raise InfrastructureError("Candidate fetch failed") from e
