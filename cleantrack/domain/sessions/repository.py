"""Cleaning session repository - Database operations for sessions"""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import CleaningSession
from ...shared.store import commit_or_raise
from .schemas import CleaningSessionDetail

DOUBLE_BOOKING_MESSAGE = "Cleaner is already scheduled for this date"


def build_detail(session: CleaningSession) -> CleaningSessionDetail:
    """Resolve apartment/cleaner labels from the current rows (never snapshotted)"""
    apartment = session.apartment
    cleaner = session.cleaner
    return CleaningSessionDetail(
        id=session.id,
        apartment_id=session.apartment_id,
        cleaner_id=session.cleaner_id,
        cleaning_date=session.cleaning_date,
        notes=session.notes,
        price=session.price,
        welcome_pack_fee=session.welcome_pack_fee,
        created_at=session.created_at,
        updated_at=session.updated_at,
        apartment_number=apartment.apartment_number if apartment else None,
        owner_name=apartment.owner_name if apartment else None,
        owner_email=apartment.owner_email if apartment else None,
        address=apartment.address if apartment else None,
        cleaner_name=cleaner.name if cleaner else None,
        cleaner_phone=cleaner.phone if cleaner else None,
        cleaner_email=cleaner.email if cleaner else None,
    )


class SessionRepository:
    """Repository for cleaning session database operations"""

    @staticmethod
    def _detailed_query(db: Session):
        return db.query(CleaningSession).options(
            joinedload(CleaningSession.apartment),
            joinedload(CleaningSession.cleaner),
        )

    @staticmethod
    def list_sessions(db: Session) -> list[CleaningSessionDetail]:
        """All sessions, detailed projection, newest first"""
        sessions = (
            SessionRepository._detailed_query(db)
            .order_by(CleaningSession.cleaning_date.desc())
            .all()
        )
        return [build_detail(s) for s in sessions]

    @staticmethod
    def list_sessions_basic(db: Session) -> list[CleaningSession]:
        """All sessions in raw foreign key form (used for conflict checks)"""
        return db.query(CleaningSession).order_by(CleaningSession.cleaning_date.desc()).all()

    @staticmethod
    def list_upcoming(db: Session, today: date) -> list[CleaningSessionDetail]:
        """Detailed sessions dated today or later, soonest first"""
        sessions = (
            SessionRepository._detailed_query(db)
            .filter(CleaningSession.cleaning_date >= today)
            .order_by(CleaningSession.cleaning_date)
            .all()
        )
        return [build_detail(s) for s in sessions]

    @staticmethod
    def get_session(db: Session, session_id: str) -> Optional[CleaningSession]:
        """Get a specific session by ID"""
        return SessionRepository._detailed_query(db).filter(CleaningSession.id == session_id).first()

    @staticmethod
    def create_session(db: Session, **session_data) -> CleaningSession:
        """Create a new session; the unique (cleaner, date) constraint is the backstop"""
        session = CleaningSession(**session_data)
        db.add(session)
        commit_or_raise(db, conflict_message=DOUBLE_BOOKING_MESSAGE)
        db.refresh(session)
        return session

    @staticmethod
    def update_session(db: Session, session: CleaningSession, **updates) -> CleaningSession:
        """Update a session with provided fields"""
        for key, value in updates.items():
            if hasattr(session, key):
                setattr(session, key, value)

        commit_or_raise(db, conflict_message=DOUBLE_BOOKING_MESSAGE)
        db.refresh(session)
        return session

    @staticmethod
    def delete_session(db: Session, session: CleaningSession) -> None:
        """Delete a session"""
        db.delete(session)
        commit_or_raise(db)
