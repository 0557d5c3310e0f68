"""Apartment router - FastAPI endpoints for apartment operations"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ...database import get_db
from ...shared.responses import paginated_response, success_response
from .schemas import ApartmentCreate, ApartmentResponse, ApartmentUpdate
from .service import ApartmentService

router = APIRouter(prefix="/apartments", tags=["Apartments"])


def get_apartment_service(db: Session = Depends(get_db)) -> ApartmentService:
    """Dependency injection for ApartmentService"""
    return ApartmentService(db)


@router.get("")
async def list_apartments(
    search: Optional[str] = Query(None),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    service: ApartmentService = Depends(get_apartment_service),
):
    """Get all apartments with optional search and pagination"""
    page = service.list_apartments(search, limit, offset)
    page.items = [ApartmentResponse.model_validate(apt) for apt in page.items]
    return paginated_response(page, "Apartments retrieved successfully")


@router.post("", status_code=201)
async def create_apartment(
    data: ApartmentCreate,
    service: ApartmentService = Depends(get_apartment_service),
):
    """Create a new apartment"""
    apartment = service.create_apartment(data)
    return success_response(
        ApartmentResponse.model_validate(apartment), "Apartment created successfully", 201
    )


@router.get("/{apartment_id}")
async def get_apartment(
    apartment_id: str,
    service: ApartmentService = Depends(get_apartment_service),
):
    """Get a specific apartment"""
    apartment = service.get_apartment(apartment_id)
    return success_response(
        ApartmentResponse.model_validate(apartment), "Apartment retrieved successfully"
    )


@router.put("/{apartment_id}")
async def update_apartment(
    apartment_id: str,
    data: ApartmentUpdate,
    service: ApartmentService = Depends(get_apartment_service),
):
    """Update an apartment"""
    apartment = service.update_apartment(apartment_id, data)
    return success_response(
        ApartmentResponse.model_validate(apartment), "Apartment updated successfully"
    )


@router.delete("/{apartment_id}")
async def delete_apartment(
    apartment_id: str,
    service: ApartmentService = Depends(get_apartment_service),
):
    """Delete an apartment (blocked while it has cleaning sessions)"""
    service.delete_apartment(apartment_id)
    return success_response(None, "Apartment deleted successfully")
