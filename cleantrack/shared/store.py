"""Commit helper shared by the repositories"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import ConflictError, StoreError

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, conflict_message: Optional[str] = None) -> None:
    """
    Commit the unit of work.

    A unique-constraint violation becomes ConflictError when the caller
    names the conflict; every other failure is rolled back, logged and
    surfaced as a generic StoreError.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if conflict_message:
            logger.warning(f"⚠️ Storage constraint rejected write: {conflict_message}")
            raise ConflictError(conflict_message)
        logger.error(f"❌ Integrity error on commit: {e}")
        raise StoreError()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Database commit failed: {e}")
        raise StoreError()
