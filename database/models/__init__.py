from .base import Base
from .user import User, TraitScores, UserImage
from .match import UserExclusion, MatchRequest, Match

__all__ = [
    'Base',
    'User',
    'TraitScores',
    'UserImage',
    'UserExclusion',
    'MatchRequest',
    'Match',
]
