#!/usr/bin/env python3
"""
Compatibility Scorer

Rule-based score between a viewer and a candidate profile:
- Total score proximity: up to 35 points
- Trait similarity: weighted blend of four traits, up to 40 points
- Geo distance: reserved, zero weight

Raw score range is [0, 75]. Pure and deterministic; safe to call from any
thread.
"""

from typing import List, Tuple

from core.recommender.models import Profile

# ----------------------------
# Weights
# ----------------------------
TOTAL_SCORE_POINTS = 35.0
TRAITS_POINTS = 40.0
GEO_DISTANCE_POINTS = 0.0

MAX_RAW_SCORE = TOTAL_SCORE_POINTS + TRAITS_POINTS + GEO_DISTANCE_POINTS

TRAIT_WEIGHTS = {
    "personality": 0.3,
    "communication": 0.3,
    "emotional": 0.2,
    "confidence": 0.2,
}

REASON_TOTAL_SCORE = "total_score_proximity"
REASON_TRAITS = "traits_match"


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def similarity01(a: int, b: int) -> float:
    """Similarity of two 0-100 values, in [0, 1]."""
    return 1.0 - abs(a - b) / 100.0


def score(viewer: Profile, candidate: Profile, distance_km: float = 0.0) -> Tuple[float, List[str]]:
    """Score a candidate for a viewer.

    Args:
        viewer: Profile of the user receiving recommendations
        candidate: Profile being scored
        distance_km: Distance between the two users. Accepted for forward
            compatibility; carries zero weight.

    Returns:
        (raw_score, reasons) with raw_score in [0, 75]
    """
    reasons: List[str] = []

    total_component = TOTAL_SCORE_POINTS * similarity01(viewer.total_score, candidate.total_score)
    reasons.append(REASON_TOTAL_SCORE)

    trait_similarity = sum(
        weight * similarity01(getattr(viewer, trait), getattr(candidate, trait))
        for trait, weight in TRAIT_WEIGHTS.items()
    )
    traits_component = TRAITS_POINTS * trait_similarity
    reasons.append(REASON_TRAITS)

    raw = total_component + traits_component
    return _clamp(raw, 0.0, MAX_RAW_SCORE), reasons


def match_percentage(raw_score: float) -> int:
    """Rescale a raw score to a 0-100 display percentage."""
    return min(100, round(raw_score * 100 / MAX_RAW_SCORE))
