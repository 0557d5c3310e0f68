"""Settings router - welcome pack fee endpoints"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.responses import success_response
from .schemas import WelcomePackFeeResponse, WelcomePackFeeUpdate
from .settings_service import SettingsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    """Dependency injection for SettingsService"""
    return SettingsService(db)


@router.get("/welcome-pack")
async def get_welcome_pack_fee(service: SettingsService = Depends(get_settings_service)):
    """Get the current welcome pack fee"""
    fee = service.get_welcome_pack_fee()
    return success_response(WelcomePackFeeResponse(fee=fee))


@router.put("/welcome-pack")
async def update_welcome_pack_fee(
    data: WelcomePackFeeUpdate,
    service: SettingsService = Depends(get_settings_service),
):
    """Set the welcome pack fee applied to future sessions"""
    fee = service.set_welcome_pack_fee(data.fee)
    return success_response(WelcomePackFeeResponse(fee=fee), "Welcome pack fee updated successfully")
