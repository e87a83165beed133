#!/usr/bin/env python3
"""
Concurrent Ranker - scores and enriches candidates on a bounded worker pool.

Each candidate becomes one task on a ThreadPoolExecutor. Tasks never touch
shared state; they put their outcome on a queue that the calling thread
drains. Once every task has reported, the collected candidates are sorted
by raw score (descending, ties by ascending id) and truncated to the limit.
"""

import logging
import queue
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from core.errors import RecommendationError, InfrastructureError, RecommendationCancelled
from core.recommender import scorer
from core.recommender.interfaces import ProfileStore
from core.recommender.models import Profile, Candidate

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


@dataclass
class _TaskFailure:
    """Outcome of a task that raised."""
    profile_id: int
    error: BaseException


def sort_candidates(candidates: List[Candidate]) -> List[Candidate]:
    """Order by raw score descending, then by profile id ascending."""
    return sorted(candidates, key=lambda c: (-c.score, c.profile.id))


class ConcurrentRanker:
    """
    Scores candidates concurrently against a viewer.

    Image enrichment failures are logged and the candidate is returned
    without images. Any other task failure fails the whole ranking.
    """

    def __init__(
        self,
        store: ProfileStore,
        max_workers: int = DEFAULT_MAX_WORKERS,
        poll_interval: float = 0.05
    ):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.store = store
        self.max_workers = max_workers
        self.poll_interval = poll_interval

    def rank(
        self,
        viewer: Profile,
        candidates: List[Profile],
        limit: int,
        cancel_event: Optional[threading.Event] = None,
        timeout: Optional[float] = None
    ) -> List[Candidate]:
        """Score every candidate, sort, and keep the best ``limit``.

        Args:
            viewer: Profile receiving the recommendations
            candidates: Already-filtered profiles to score
            limit: Maximum number of results to return (<= 0 keeps all)
            cancel_event: Set by the caller to abandon the ranking
            timeout: Seconds to wait for all tasks before giving up

        Returns:
            Ranked candidates, at most ``limit`` long

        Raises:
            RecommendationCancelled: If cancelled or timed out
            InfrastructureError: If any task failed for a reason other
                than image enrichment
        """
        if not candidates:
            return []

        if cancel_event is None:
            cancel_event = threading.Event()

        deadline = time.monotonic() + timeout if timeout is not None else None
        outcomes: "queue.Queue" = queue.Queue()
        collected: List[Candidate] = []

        executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="ranker"
        )
        try:
            for profile in candidates:
                executor.submit(self._run_task, viewer, profile, outcomes, cancel_event)

            while len(collected) < len(candidates):
                if cancel_event.is_set():
                    raise RecommendationCancelled(
                        f"Ranking cancelled after {len(collected)}/{len(candidates)} candidates"
                    )
                if deadline is not None and time.monotonic() >= deadline:
                    cancel_event.set()
                    raise RecommendationCancelled(
                        f"Ranking timed out after {timeout}s "
                        f"({len(collected)}/{len(candidates)} candidates scored)"
                    )

                try:
                    outcome = outcomes.get(timeout=self.poll_interval)
                except queue.Empty:
                    continue

                if isinstance(outcome, _TaskFailure):
                    cancel_event.set()
                    if isinstance(outcome.error, RecommendationError):
                        raise outcome.error
                    raise InfrastructureError(
                        f"Scoring failed for candidate {outcome.profile_id}: {outcome.error}"
                    ) from outcome.error

                collected.append(outcome)
        finally:
            # In-flight tasks see the event and bail; queued ones never start
            executor.shutdown(wait=False, cancel_futures=True)

        ranked = sort_candidates(collected)
        if limit > 0:
            ranked = ranked[:limit]
        return ranked

    def _run_task(
        self,
        viewer: Profile,
        profile: Profile,
        outcomes: "queue.Queue",
        cancel_event: threading.Event
    ) -> None:
        if cancel_event.is_set():
            return
        try:
            outcomes.put(self._score_candidate(viewer, profile))
        except BaseException as e:
            # Every started task reports exactly one outcome
            outcomes.put(_TaskFailure(profile_id=profile.id, error=e))

    def _score_candidate(self, viewer: Profile, profile: Profile) -> Candidate:
        raw, reasons = scorer.score(viewer, profile, distance_km=0.0)
        return Candidate(
            profile=profile,
            score=raw,
            reasons=reasons,
            match_percentage=scorer.match_percentage(raw),
            images=self._fetch_images(profile.id)
        )

    def _fetch_images(self, profile_id: int) -> List[str]:
        try:
            return list(self.store.fetch_image_urls(profile_id) or [])
        except Exception as e:
            logger.warning(f"Image lookup failed for profile {profile_id}, continuing without images: {e}")
            return []
