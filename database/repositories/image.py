from typing import List

from sqlalchemy import select

from database.models import UserImage
from database.repositories.base import BaseRepository


class ImageRepository(BaseRepository):
    def get_image_urls(self, user_id: int) -> List[str]:
        """Public URLs for a user's images: primary first, then newest upload."""
        stmt = (
            select(UserImage.public_url)
            .where(
                UserImage.user_id == user_id,
                UserImage.public_url.is_not(None),
                UserImage.public_url != ''
            )
            .order_by(UserImage.is_primary.desc(), UserImage.uploaded_at.desc(), UserImage.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())
