#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator

from fastapi import Header, HTTPException
from sqlalchemy.orm import Session

from core.recommender import RecommendationService
from database.database import get_session_factory
from database.store import SqlProfileStore
from .config import get_config


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Yields:
        Session: Database session that will be automatically closed.
    """
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@lru_cache()
def get_recommendation_service() -> RecommendationService:
    """
    Shared RecommendationService.

    The service is stateless per request; the SQL store opens a fresh
    session for every collaborator call.
    """
    config = get_config()
    store = SqlProfileStore(get_session_factory())
    return RecommendationService(store, config=config.recommender)


def get_current_user_id(x_user_id: int = Header(..., alias="X-User-Id")) -> int:
    """
    Id of the authenticated user.

    Token validation happens upstream (gateway/auth middleware), which
    forwards the verified user id in the ``X-User-Id`` header.
    """
    if x_user_id <= 0:
        raise HTTPException(status_code=401, detail="Invalid user id")
    return x_user_id
