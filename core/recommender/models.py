"""Data structures passed through the recommendation pipeline.

All of these are built per request from storage reads and discarded once
the response has been assembled.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Profile:
    """Read-only snapshot of a user profile and its trait scores.

    Trait and total scores are validated upstream to lie in [0, 100].
    """
    id: int
    name: str = ""
    gender: str = ""
    age: int = 0
    city: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None
    total_score: int = 0
    personality: int = 0
    communication: int = 0
    emotional: int = 0
    confidence: int = 0


@dataclass
class MatchPreferences:
    """Filters and pagination for one recommendation request."""
    target_gender: Optional[str] = None
    age_min: int = 0  # 0 = unset
    age_max: int = 0  # 0 = unset
    min_score: int = 60
    cursor: int = 0  # last seen profile id, 0 = first page
    limit: int = 10


@dataclass
class Candidate:
    """A profile scored against one viewer."""
    profile: Profile
    score: float
    reasons: List[str] = field(default_factory=list)
    match_percentage: int = 0
    images: List[str] = field(default_factory=list)


@dataclass
class CandidatePage:
    """One page of raw candidates from the candidate source.

    ``profiles`` may hold up to ``limit + 1`` rows; ``next_cursor`` is 0 when
    there is no further page.
    """
    profiles: List[Profile]
    next_cursor: int = 0


@dataclass
class Recommendation:
    """Ranked candidates plus the cursor for the following page.

    The candidate list can be shorter than the requested limit even when
    ``next_cursor`` is set, because exclusions are removed after the page
    is fetched.
    """
    candidates: List[Candidate] = field(default_factory=list)
    next_cursor: int = 0
