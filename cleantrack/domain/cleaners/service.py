"""Cleaner service - Business logic for cleaner operations"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...config import DEFAULT_PAGE_LIMIT
from ...exceptions import ConflictError, NotFoundError
from ...models import Cleaner
from ...shared.pagination import Page, paginate
from ...shared.validators import ensure_uuid
from .repository import CleanerRepository
from .schemas import CleanerCreate, CleanerUpdate

logger = logging.getLogger(__name__)


def matches_search(cleaner: Cleaner, search: str) -> bool:
    needle = search.lower()
    return any(
        value and needle in value.lower() for value in (cleaner.name, cleaner.email, cleaner.phone)
    )


class CleanerService:
    """Service layer for cleaner business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CleanerRepository()

    def list_cleaners(
        self,
        search: Optional[str] = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> Page:
        cleaners = self.repo.list_cleaners(self.db)
        if search:
            cleaners = [c for c in cleaners if matches_search(c, search)]
        return paginate(cleaners, limit, offset)

    def get_cleaner(self, cleaner_id: str) -> Cleaner:
        ensure_uuid(cleaner_id, "Cleaner")
        cleaner = self.repo.get_cleaner(self.db, cleaner_id)
        if not cleaner:
            raise NotFoundError("Cleaner", cleaner_id)
        return cleaner

    def create_cleaner(self, data: CleanerCreate) -> Cleaner:
        logger.info(f"📥 Creating cleaner {data.name}")
        return self.repo.create_cleaner(self.db, **data.model_dump())

    def update_cleaner(self, cleaner_id: str, data: CleanerUpdate) -> Cleaner:
        cleaner = self.get_cleaner(cleaner_id)

        updates = data.model_dump(exclude_unset=True)
        if "name" in updates and updates["name"] is None:
            updates.pop("name")

        logger.info(f"✏️ Updating cleaner {cleaner.id}: {sorted(updates)}")
        return self.repo.update_cleaner(self.db, cleaner, **updates)

    def delete_cleaner(self, cleaner_id: str) -> None:
        """Delete a cleaner; blocked while sessions reference them by name"""
        cleaner = self.get_cleaner(cleaner_id)

        session_count = self.repo.count_sessions_by_name(self.db, cleaner.name)
        if session_count > 0:
            logger.warning(f"⚠️ Delete blocked for cleaner {cleaner.name}: {session_count} session(s)")
            raise ConflictError(
                f"Cannot delete cleaner. They have {session_count} cleaning session(s). "
                "Please reassign or delete the sessions first.",
                {"sessionCount": session_count},
            )

        self.repo.delete_cleaner(self.db, cleaner)
        logger.info(f"🗑️ Deleted cleaner {cleaner.name}")
