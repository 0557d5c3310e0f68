"""Cleaning session service - scheduling rules and pricing on write"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from ...exceptions import ConflictError, NotFoundError, ValidationError
from ...models import CleaningSession
from ...shared.pagination import Page
from ...shared.validators import ensure_uuid
from ..apartments.repository import ApartmentRepository
from ..billing.pricing import MAX_AMOUNT, compute_price, welcome_pack_marker
from ..billing.settings_service import SettingsService
from ..cleaners.repository import CleanerRepository
from .conflicts import effective_assignment, find_conflict
from .filters import filter_and_paginate
from .repository import DOUBLE_BOOKING_MESSAGE, SessionRepository, build_detail
from .schemas import CleaningSessionDetail, SessionCreate, SessionFilters, SessionUpdate

logger = logging.getLogger(__name__)


class SessionService:
    """Service layer for cleaning session business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SessionRepository()
        self.apartments = ApartmentRepository()
        self.cleaners = CleanerRepository()
        self.settings = SettingsService(db)

    def list_sessions(self, filters: SessionFilters) -> Page:
        """Filtered, paginated detailed sessions"""
        sessions = self.repo.list_sessions(self.db)
        apartments = self.apartments.list_apartments(self.db) if filters.apartment_id else []
        cleaners = self.cleaners.list_cleaners(self.db) if filters.cleaner_id else []
        return filter_and_paginate(sessions, filters, apartments, cleaners)

    def list_upcoming(self, today: date) -> list[CleaningSessionDetail]:
        return self.repo.list_upcoming(self.db, today)

    def _get_session_row(self, session_id: str) -> CleaningSession:
        ensure_uuid(session_id, "Session")
        session = self.repo.get_session(self.db, session_id)
        if not session:
            raise NotFoundError("Cleaning session", session_id)
        return session

    def get_session(self, session_id: str) -> CleaningSessionDetail:
        return build_detail(self._get_session_row(session_id))

    def _require_references(self, apartment_id=None, cleaner_id=None) -> None:
        """Referenced apartment and cleaner must exist (apartment checked first)"""
        if apartment_id and not self.apartments.get_apartment(self.db, apartment_id):
            raise NotFoundError("Apartment", apartment_id)
        if cleaner_id and not self.cleaners.get_cleaner(self.db, cleaner_id):
            raise NotFoundError("Cleaner", cleaner_id)

    def _reject_double_booking(self, cleaner_id: str, cleaning_date, exclude_session_id=None) -> None:
        existing = self.repo.list_sessions_basic(self.db)
        clash = find_conflict(existing, cleaner_id, cleaning_date, exclude_session_id)
        if clash:
            logger.warning(
                f"⚠️ Double booking rejected: cleaner {cleaner_id} on {cleaning_date} "
                f"(existing session {clash.id})"
            )
            raise ConflictError(
                DOUBLE_BOOKING_MESSAGE,
                {"conflicting_session_id": clash.id},
            )

    @staticmethod
    def _priced(base_price, include_welcome_pack: bool, fee):
        """Price to store; base plus fee must still fit the price column"""
        price = compute_price(base_price, include_welcome_pack, fee)
        if price is not None and price > MAX_AMOUNT:
            raise ValidationError("Price exceeds the maximum amount", {"price": str(price)})
        return price

    def create_session(self, data: SessionCreate) -> CleaningSessionDetail:
        """Validate references, reject double booking, price, then persist"""
        logger.info(
            f"📥 Scheduling cleaner {data.cleaner_id} at apartment {data.apartment_id} on {data.cleaning_date}"
        )
        self._require_references(data.apartment_id, data.cleaner_id)
        self._reject_double_booking(data.cleaner_id, data.cleaning_date)

        fee = self.settings.get_welcome_pack_fee() if data.include_welcome_pack else 0
        session = self.repo.create_session(
            self.db,
            apartment_id=data.apartment_id,
            cleaner_id=data.cleaner_id,
            cleaning_date=data.cleaning_date,
            notes=data.notes,
            price=self._priced(data.price, data.include_welcome_pack, fee),
            welcome_pack_fee=welcome_pack_marker(data.include_welcome_pack, fee),
        )
        logger.info(f"✅ Created cleaning session {session.id}")
        return build_detail(session)

    def update_session(self, session_id: str, data: SessionUpdate) -> CleaningSessionDetail:
        """Update a session; the conflict check uses the post-update cleaner and date"""
        session = self._get_session_row(session_id)
        self._require_references(data.apartment_id, data.cleaner_id)

        cleaner_id, cleaning_date = effective_assignment(session, data.cleaner_id, data.cleaning_date)
        self._reject_double_booking(cleaner_id, cleaning_date, exclude_session_id=session.id)

        updates = data.model_dump(exclude_unset=True, exclude={"include_welcome_pack"})
        # Foreign keys and date can't be cleared
        for field in ("apartment_id", "cleaner_id", "cleaning_date"):
            if field in updates and updates[field] is None:
                updates.pop(field)

        if data.include_welcome_pack:
            fee = self.settings.get_welcome_pack_fee()
            base_price = updates.get("price", session.price)
            updates["price"] = self._priced(base_price, True, fee)
            updates["welcome_pack_fee"] = welcome_pack_marker(True, fee)

        logger.info(f"✏️ Updating cleaning session {session.id}: {sorted(updates)}")
        session = self.repo.update_session(self.db, session, **updates)
        return build_detail(session)

    def delete_session(self, session_id: str) -> None:
        session = self._get_session_row(session_id)
        self.repo.delete_session(self.db, session)
        logger.info(f"🗑️ Deleted cleaning session {session_id}")
