from database.repositories.base import BaseRepository
from database.repositories.profile import ProfileRepository
from database.repositories.exclusion import ExclusionRepository
from database.repositories.image import ImageRepository
from database.repositories.match import MatchRequestRepository

__all__ = [
    'BaseRepository',
    'ProfileRepository',
    'ExclusionRepository',
    'ImageRepository',
    'MatchRequestRepository',
]
