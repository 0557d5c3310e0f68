"""Apartment repository - Database operations for apartments"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Apartment, CleaningSession
from ...shared.store import commit_or_raise

DUPLICATE_NUMBER_MESSAGE = "Apartment number already exists"


class ApartmentRepository:
    """Repository for apartment database operations"""

    @staticmethod
    def list_apartments(db: Session) -> list[Apartment]:
        """Get all apartments ordered by apartment number"""
        return db.query(Apartment).order_by(Apartment.apartment_number).all()

    @staticmethod
    def get_apartment(db: Session, apartment_id: str) -> Optional[Apartment]:
        """Get a specific apartment by ID"""
        return db.query(Apartment).filter(Apartment.id == apartment_id).first()

    @staticmethod
    def find_by_number(
        db: Session, apartment_number: str, exclude_id: Optional[str] = None
    ) -> Optional[Apartment]:
        """Case-insensitive lookup by apartment number"""
        query = db.query(Apartment).filter(
            func.lower(Apartment.apartment_number) == apartment_number.lower()
        )
        if exclude_id:
            query = query.filter(Apartment.id != exclude_id)
        return query.first()

    @staticmethod
    def create_apartment(db: Session, **apartment_data) -> Apartment:
        """Create a new apartment"""
        apartment = Apartment(**apartment_data)
        db.add(apartment)
        commit_or_raise(db, conflict_message=DUPLICATE_NUMBER_MESSAGE)
        db.refresh(apartment)
        return apartment

    @staticmethod
    def update_apartment(db: Session, apartment: Apartment, **updates) -> Apartment:
        """Update an apartment with provided fields"""
        for key, value in updates.items():
            if hasattr(apartment, key):
                setattr(apartment, key, value)

        commit_or_raise(db, conflict_message=DUPLICATE_NUMBER_MESSAGE)
        db.refresh(apartment)
        return apartment

    @staticmethod
    def delete_apartment(db: Session, apartment: Apartment) -> None:
        """Delete an apartment"""
        db.delete(apartment)
        commit_or_raise(db, conflict_message="Cannot delete resource with dependencies")

    @staticmethod
    def count_sessions(db: Session, apartment_id: str) -> int:
        """Number of cleaning sessions referencing the apartment"""
        return (
            db.query(func.count(CleaningSession.id))
            .filter(CleaningSession.apartment_id == apartment_id)
            .scalar()
        )
