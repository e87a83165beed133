"""
Error taxonomy for the recommendation core.

Only degraded lookups (exclusions, image enrichment) are recovered inside the
core; everything else surfaces as one of these exceptions.
"""


class RecommendationError(Exception):
    """Base exception for recommendation errors."""
    pass


class ProfileNotFoundError(RecommendationError):
    """Raised when a requested profile does not exist."""

    def __init__(self, profile_id: int):
        super().__init__(f"Profile {profile_id} not found")
        self.profile_id = profile_id


class InfrastructureError(RecommendationError):
    """Raised when a storage collaborator call fails."""
    pass


class RecommendationCancelled(RecommendationError):
    """Raised when the caller cancels or the ranking times out."""
    pass
