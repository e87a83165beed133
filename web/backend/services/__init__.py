"""Business logic services."""

from .match_service import MatchService, to_recommendations_response
