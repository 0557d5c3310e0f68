"""Cleaner repository - Database operations for cleaners"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Cleaner, CleaningSession
from ...shared.store import commit_or_raise


class CleanerRepository:
    """Repository for cleaner database operations"""

    @staticmethod
    def list_cleaners(db: Session) -> list[Cleaner]:
        """Get all cleaners ordered by name"""
        return db.query(Cleaner).order_by(Cleaner.name).all()

    @staticmethod
    def get_cleaner(db: Session, cleaner_id: str) -> Optional[Cleaner]:
        """Get a specific cleaner by ID"""
        return db.query(Cleaner).filter(Cleaner.id == cleaner_id).first()

    @staticmethod
    def create_cleaner(db: Session, **cleaner_data) -> Cleaner:
        """Create a new cleaner"""
        cleaner = Cleaner(**cleaner_data)
        db.add(cleaner)
        commit_or_raise(db)
        db.refresh(cleaner)
        return cleaner

    @staticmethod
    def update_cleaner(db: Session, cleaner: Cleaner, **updates) -> Cleaner:
        """Update a cleaner with provided fields"""
        for key, value in updates.items():
            if hasattr(cleaner, key):
                setattr(cleaner, key, value)

        commit_or_raise(db)
        db.refresh(cleaner)
        return cleaner

    @staticmethod
    def delete_cleaner(db: Session, cleaner: Cleaner) -> None:
        """Delete a cleaner"""
        db.delete(cleaner)
        commit_or_raise(db, conflict_message="Cannot delete resource with dependencies")

    @staticmethod
    def count_sessions_by_name(db: Session, name: str) -> int:
        """Number of sessions whose resolved cleaner name matches"""
        return (
            db.query(func.count(CleaningSession.id))
            .join(Cleaner, CleaningSession.cleaner_id == Cleaner.id)
            .filter(Cleaner.name == name)
            .scalar()
        )
