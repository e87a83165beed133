from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, func, UniqueConstraint, Index

from .base import Base
from .user import IdType


class UserExclusion(Base):
    """
    Profiles a user has already decided on (liked or rejected).

    These are hidden from that user's future recommendations.
    """
    __tablename__ = 'user_exclusions'

    id = Column(IdType, primary_key=True, autoincrement=True)
    user_id = Column(IdType, ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    target_id = Column(IdType, ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    reason = Column(Text, nullable=False)  # liked|rejected
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint('user_id', 'target_id', name='uq_user_exclusions_pair'),
        Index('idx_user_exclusions_user', 'user_id'),
    )


class MatchRequest(Base):
    """
    A like sent from one user to another, pending until the receiver responds.
    """
    __tablename__ = 'match_requests'

    id = Column(IdType, primary_key=True, autoincrement=True)
    sender_id = Column(IdType, ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    receiver_id = Column(IdType, ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    status = Column(Text, nullable=False, default='pending')  # pending|accepted|rejected
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint('sender_id', 'receiver_id', name='uq_match_requests_pair'),
        Index('idx_match_requests_receiver_status', 'receiver_id', 'status'),
    )


class Match(Base):
    """
    Mutual match created when a request is accepted.
    """
    __tablename__ = 'matches'

    id = Column(IdType, primary_key=True, autoincrement=True)
    user1_id = Column(IdType, ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    user2_id = Column(IdType, ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    matched_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint('user1_id', 'user2_id', name='uq_matches_pair'),
    )
