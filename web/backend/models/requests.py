#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field


class MatchRequestPayload(BaseModel):
    """Like (send a match request to) or reject another user."""
    receiver_id: int = Field(..., gt=0, description="Id of the user being liked or rejected")


class MatchResponsePayload(BaseModel):
    """Accept or reject an incoming match request."""
    sender_id: int = Field(..., gt=0, description="Id of the user who sent the request")
    accept: bool = Field(..., description="True to accept, False to reject")
