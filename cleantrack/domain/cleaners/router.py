"""Cleaner router - FastAPI endpoints for cleaner operations"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ...database import get_db
from ...shared.responses import paginated_response, success_response
from .schemas import CleanerCreate, CleanerResponse, CleanerUpdate
from .service import CleanerService

router = APIRouter(prefix="/cleaners", tags=["Cleaners"])


def get_cleaner_service(db: Session = Depends(get_db)) -> CleanerService:
    """Dependency injection for CleanerService"""
    return CleanerService(db)


@router.get("")
async def list_cleaners(
    search: Optional[str] = Query(None),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    service: CleanerService = Depends(get_cleaner_service),
):
    """Get all cleaners with optional search and pagination"""
    page = service.list_cleaners(search, limit, offset)
    page.items = [CleanerResponse.model_validate(c) for c in page.items]
    return paginated_response(page, "Cleaners retrieved successfully")


@router.post("", status_code=201)
async def create_cleaner(
    data: CleanerCreate,
    service: CleanerService = Depends(get_cleaner_service),
):
    """Create a new cleaner"""
    cleaner = service.create_cleaner(data)
    return success_response(CleanerResponse.model_validate(cleaner), "Cleaner created successfully", 201)


@router.get("/{cleaner_id}")
async def get_cleaner(
    cleaner_id: str,
    service: CleanerService = Depends(get_cleaner_service),
):
    """Get a specific cleaner"""
    cleaner = service.get_cleaner(cleaner_id)
    return success_response(CleanerResponse.model_validate(cleaner), "Cleaner retrieved successfully")


@router.put("/{cleaner_id}")
async def update_cleaner(
    cleaner_id: str,
    data: CleanerUpdate,
    service: CleanerService = Depends(get_cleaner_service),
):
    """Update a cleaner"""
    cleaner = service.update_cleaner(cleaner_id, data)
    return success_response(CleanerResponse.model_validate(cleaner), "Cleaner updated successfully")


@router.delete("/{cleaner_id}")
async def delete_cleaner(
    cleaner_id: str,
    service: CleanerService = Depends(get_cleaner_service),
):
    """Delete a cleaner (blocked while they have cleaning sessions)"""
    service.delete_cleaner(cleaner_id)
    return success_response(None, "Cleaner deleted successfully")
