#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class CandidateProfile(BaseModel):
    """Public projection of a candidate profile."""
    id: int
    name: str
    gender: str
    age: int
    city: str
    total_score: int = Field(ge=0, le=100)
    personality: int = Field(ge=0, le=100)
    communication: int = Field(ge=0, le=100)
    emotional: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)
    images: List[str] = Field(default_factory=list)


class RecommendedCandidate(BaseModel):
    """A candidate with its compatibility score."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "id": 42,
                    "name": "Asha",
                    "gender": "F",
                    "age": 27,
                    "city": "Pune",
                    "total_score": 78,
                    "personality": 80,
                    "communication": 74,
                    "emotional": 70,
                    "confidence": 82,
                    "images": ["https://cdn.example.com/u/42/primary.jpg"]
                },
                "score": 68.9,
                "reasons": ["total_score_proximity", "traits_match"],
                "match_score": 92
            }
        }
    )

    user: CandidateProfile
    score: float = Field(ge=0, le=75, description="Raw compatibility score")
    reasons: List[str]
    match_score: int = Field(ge=0, le=100, description="Score rescaled to a percentage")


class RecommendationsResponse(BaseModel):
    """
    One page of recommendations.

    ``candidates`` may be shorter than the requested limit while
    ``next_cursor`` is non-zero: already-decided profiles are removed after
    the page is fetched. Keep paging until ``next_cursor`` is 0.

    Each page scores ``limit + 1`` rows and the next page starts after the
    last of them, so the lowest-ranked of those rows is dropped and never
    returned on a later page.
    """
    success: bool
    count: int
    candidates: List[RecommendedCandidate]
    next_cursor: int = 0


class MessageResponse(BaseModel):
    """Simple acknowledgement."""
    success: bool
    message: str


class IncomingRequest(BaseModel):
    """A pending match request received by the current user."""
    id: int
    sender_id: int
    name: str
    age: int
    location: str
    image: Optional[str] = None
    compatibility: int = Field(ge=0, le=100)
    created_at: Optional[str] = None


class IncomingRequestsResponse(BaseModel):
    """Pending match requests, newest first."""
    success: bool
    count: int
    requests: List[IncomingRequest]


class RecentMatch(BaseModel):
    """A mutual match, seen from the current user's side."""
    match_id: int
    user_id: int
    name: str
    age: int
    location: str
    image: Optional[str] = None
    compatibility: int = Field(ge=0, le=100)
    matched_at: Optional[str] = None


class RecentMatchesResponse(BaseModel):
    """Mutual matches, newest first."""
    success: bool
    count: int
    matches: List[RecentMatch]
