from typing import Any

from sqlalchemy.orm import Session


class BaseRepository:
    """Shared session handling for the profile, exclusion and match repositories."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, instance: Any) -> Any:
        self.db.add(instance)
        self.db.flush()  # Generate ID
        return instance

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
