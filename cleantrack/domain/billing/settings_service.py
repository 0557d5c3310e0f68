"""Settings service - welcome pack fee configuration"""

import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy.orm import Session

from ...config import WELCOME_PACK_FEE
from ...exceptions import ValidationError
from .repository import WELCOME_PACK_FEE_KEY, SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Service layer for process-wide settings"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SettingsRepository()

    def get_welcome_pack_fee(self) -> Decimal:
        """Stored fee, or the configured default when none was saved"""
        raw = self.repo.get_value(self.db, WELCOME_PACK_FEE_KEY)
        if raw is None:
            return WELCOME_PACK_FEE
        try:
            return Decimal(raw)
        except InvalidOperation:
            logger.error(f"❌ Stored welcome pack fee is not numeric: {raw!r}, using default")
            return WELCOME_PACK_FEE

    def set_welcome_pack_fee(self, fee: Decimal) -> Decimal:
        """Store a new fee. Only future session pricing is affected."""
        if fee < 0:
            raise ValidationError("Invalid fee", {"fee": str(fee)})

        self.repo.set_value(self.db, WELCOME_PACK_FEE_KEY, str(fee))
        logger.info(f"💰 Welcome pack fee set to {fee}")
        return fee
