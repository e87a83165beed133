#!/usr/bin/env python3
"""
Recommender Module - ranked, paginated match recommendations.

Public API:
- RecommendationService: Orchestrates lookup, filtering and ranking
- ConcurrentRanker: Bounded worker pool that scores and enriches candidates
- ProfileStore: Storage collaborator interface
- score / match_percentage: Pure compatibility scoring

Modules:
- models.py: Data structures (Profile, MatchPreferences, Candidate, Recommendation)
- scorer.py: Rule-based compatibility score
- exclusion.py: Self/exclusion filtering
- ranker.py: Concurrent scoring and ranking
- preferences.py: Request parameter normalization
- service.py: RecommendationService orchestrator
"""

from core.recommender.models import (
    Profile, MatchPreferences, Candidate, CandidatePage, Recommendation
)
from core.recommender.interfaces import ProfileStore
from core.recommender.scorer import score, match_percentage
from core.recommender.exclusion import filter_candidates
from core.recommender.ranker import ConcurrentRanker
from core.recommender.preferences import build_preferences
from core.recommender.service import RecommendationService

__all__ = [
    'RecommendationService', 'ConcurrentRanker', 'ProfileStore',
    'Profile', 'MatchPreferences', 'Candidate', 'CandidatePage', 'Recommendation',
    'score', 'match_percentage', 'filter_candidates', 'build_preferences',
]
