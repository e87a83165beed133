"""Builds MatchPreferences from loosely-typed request parameters."""

import logging
from typing import Optional, Any

from core.config_loader import RecommenderConfig
from core.recommender.models import MatchPreferences

logger = logging.getLogger(__name__)


def _to_int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-integer preference value: {value!r}")
        return default


def clamp_limit(limit: Optional[int], config: RecommenderConfig) -> int:
    """Return ``limit`` if within [1, max_limit], else the configured default."""
    if limit is None or limit <= 0 or limit > config.max_limit:
        return min(config.default_limit, config.max_limit)
    return limit


def build_preferences(
    config: RecommenderConfig,
    gender: Optional[str] = None,
    age_min: Any = None,
    age_max: Any = None,
    min_score: Any = None,
    cursor: Any = None,
    limit: Any = None
) -> MatchPreferences:
    """
    Normalize raw request parameters into MatchPreferences.

    - gender: first letter, upper-cased; empty means any
    - age_min / age_max: 0 or negative means unset
    - min_score: 0-100, configured default when unset or out of range
    - cursor: last seen id, 0 for the first page
    - limit: clamped to [1, max_limit], default when absent or out of range
    """
    target_gender = gender.strip()[:1].upper() if gender and gender.strip() else None

    parsed_min_score = _to_int(min_score, config.default_min_score)
    if parsed_min_score < 0 or parsed_min_score > 100:
        parsed_min_score = config.default_min_score

    return MatchPreferences(
        target_gender=target_gender,
        age_min=max(0, _to_int(age_min, 0)),
        age_max=max(0, _to_int(age_max, 0)),
        min_score=parsed_min_score,
        cursor=max(0, _to_int(cursor, 0)),
        limit=clamp_limit(_to_int(limit, 0), config)
    )
