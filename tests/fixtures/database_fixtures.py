#!/usr/bin/env python3
"""
Test fixtures for repository and store tests.

Builds an in-memory SQLite database with the full schema and provides
helpers to seed users, scores and images.
"""
from typing import Optional, Tuple

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.database import build_session_factory
from database.models import Base, User, TraitScores, UserImage


def make_sqlite_session_factory() -> sessionmaker:
    """
    Fresh in-memory database shared by every session from the factory.

    StaticPool keeps a single connection so worker threads see the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    return build_session_factory(engine)


def seed_user(
    db,
    user_id: int,
    total: Optional[int] = 70,
    traits: Tuple[int, int, int, int] = (70, 70, 70, 70),
    gender: str = "F",
    age: int = 28,
    city: str = "Pune"
) -> User:
    """Insert a user and, unless ``total`` is None, their trait scores."""
    user = User(
        user_id=user_id,
        name=f"User {user_id}",
        email=f"user{user_id}@example.com",
        gender=gender,
        age=age,
        city=city
    )
    db.add(user)
    if total is not None:
        personality, communication, emotional, confidence = traits
        db.add(TraitScores(
            user_id=user_id,
            total_score=total,
            personality=personality,
            communication=communication,
            emotional=emotional,
            confidence=confidence
        ))
    db.flush()
    return user


def seed_image(db, user_id: int, url: Optional[str], is_primary: bool = False, uploaded_at=None) -> UserImage:
    image = UserImage(
        user_id=user_id,
        object_name=f"users/{user_id}/{url or 'missing'}",
        public_url=url,
        is_primary=is_primary
    )
    if uploaded_at is not None:
        image.uploaded_at = uploaded_at
    db.add(image)
    db.flush()
    return image
