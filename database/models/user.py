from sqlalchemy import Column, Text, Boolean, Integer, BigInteger, Float, TIMESTAMP, ForeignKey, func, Index, CheckConstraint
from sqlalchemy.orm import relationship

from .base import Base

# BIGSERIAL on Postgres, plain INTEGER on SQLite so autoincrement works there
IdType = BigInteger().with_variant(Integer, "sqlite")


class User(Base):
    """
    Dating profile: identity and demographic attributes.

    Trait scores live in the separate ``scores`` table.
    """
    __tablename__ = 'users'

    user_id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True)
    gender = Column(Text)  # 'M' or 'F'
    age = Column(Integer)
    city = Column(Text)
    lat = Column(Float)
    lon = Column(Float)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    scores = relationship("TraitScores", back_populates="user", uselist=False, cascade="all, delete-orphan")
    images = relationship("UserImage", back_populates="owner", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_gender_age', 'gender', 'age'),
    )


class TraitScores(Base):
    """
    Questionnaire results for a user, each in [0, 100].
    """
    __tablename__ = 'scores'

    user_id = Column(IdType, ForeignKey('users.user_id', ondelete='CASCADE'), primary_key=True)
    total_score = Column(Integer, nullable=False, default=0)
    personality = Column(Integer, nullable=False, default=0)
    communication = Column(Integer, nullable=False, default=0)
    emotional = Column(Integer, nullable=False, default=0)
    confidence = Column(Integer, nullable=False, default=0)

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="scores")

    __table_args__ = (
        CheckConstraint('total_score BETWEEN 0 AND 100', name='ck_scores_total_range'),
        Index('idx_scores_total', 'total_score'),
    )


class UserImage(Base):
    """
    Uploaded profile image. Storage itself is handled elsewhere; only the
    public URL is kept here.
    """
    __tablename__ = 'user_images'

    id = Column(IdType, primary_key=True, autoincrement=True)
    user_id = Column(IdType, ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    object_name = Column(Text, nullable=False)
    public_url = Column(Text)
    is_primary = Column(Boolean, nullable=False, default=False)
    uploaded_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    owner = relationship("User", back_populates="images")

    __table_args__ = (
        Index('idx_user_images_user', 'user_id'),
    )
