"""Removes the viewer and already-decided profiles from a candidate page."""

from typing import Iterable, List, AbstractSet

from core.recommender.models import Profile


def filter_candidates(
    candidates: Iterable[Profile],
    excluded_ids: AbstractSet[int],
    viewer_id: int
) -> List[Profile]:
    """Return candidates that are neither the viewer nor excluded, in input order."""
    return [
        c for c in candidates
        if c.id != viewer_id and c.id not in excluded_ids
    ]
