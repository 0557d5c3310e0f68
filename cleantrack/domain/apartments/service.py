"""Apartment service - Business logic for apartment operations"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...config import DEFAULT_PAGE_LIMIT
from ...exceptions import ConflictError, NotFoundError
from ...models import Apartment
from ...shared.pagination import Page, paginate
from ...shared.validators import ensure_uuid
from .repository import DUPLICATE_NUMBER_MESSAGE, ApartmentRepository
from .schemas import ApartmentCreate, ApartmentUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("apartment_number", "owner_name")


def matches_search(apartment: Apartment, search: str) -> bool:
    """Case-insensitive substring match over number, owner, email and address"""
    needle = search.lower()
    haystack = (
        apartment.apartment_number,
        apartment.owner_name,
        apartment.owner_email,
        apartment.address,
    )
    return any(value and needle in value.lower() for value in haystack)


class ApartmentService:
    """Service layer for apartment business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ApartmentRepository()

    def list_apartments(
        self,
        search: Optional[str] = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> Page:
        """Get apartments, optionally searched, one page at a time"""
        apartments = self.repo.list_apartments(self.db)
        if search:
            apartments = [apt for apt in apartments if matches_search(apt, search)]
        return paginate(apartments, limit, offset)

    def get_apartment(self, apartment_id: str) -> Apartment:
        """Get a specific apartment"""
        ensure_uuid(apartment_id, "Apartment")
        apartment = self.repo.get_apartment(self.db, apartment_id)
        if not apartment:
            raise NotFoundError("Apartment", apartment_id)
        return apartment

    def create_apartment(self, data: ApartmentCreate) -> Apartment:
        """Create a new apartment with a unique (case-insensitive) number"""
        logger.info(f"📥 Creating apartment {data.apartment_number}")

        if self.repo.find_by_number(self.db, data.apartment_number):
            logger.warning(f"⚠️ Duplicate apartment number: {data.apartment_number}")
            raise ConflictError(DUPLICATE_NUMBER_MESSAGE)

        return self.repo.create_apartment(self.db, **data.model_dump())

    def update_apartment(self, apartment_id: str, data: ApartmentUpdate) -> Apartment:
        """Update an apartment"""
        apartment = self.get_apartment(apartment_id)

        updates = data.model_dump(exclude_unset=True)
        # Required columns can't be cleared
        for field in REQUIRED_FIELDS:
            if field in updates and updates[field] is None:
                updates.pop(field)

        new_number = updates.get("apartment_number")
        if new_number and self.repo.find_by_number(self.db, new_number, exclude_id=apartment.id):
            logger.warning(f"⚠️ Duplicate apartment number on update: {new_number}")
            raise ConflictError(DUPLICATE_NUMBER_MESSAGE)

        logger.info(f"✏️ Updating apartment {apartment.id}: {sorted(updates)}")
        return self.repo.update_apartment(self.db, apartment, **updates)

    def delete_apartment(self, apartment_id: str) -> None:
        """Delete an apartment; blocked while sessions reference it"""
        apartment = self.get_apartment(apartment_id)

        session_count = self.repo.count_sessions(self.db, apartment.id)
        if session_count > 0:
            logger.warning(
                f"⚠️ Delete blocked for apartment {apartment.apartment_number}: {session_count} session(s)"
            )
            raise ConflictError(
                f"Cannot delete apartment. It has {session_count} cleaning session(s). "
                "Please delete the sessions first.",
                {"sessionCount": session_count},
            )

        self.repo.delete_apartment(self.db, apartment)
        logger.info(f"🗑️ Deleted apartment {apartment.apartment_number}")
