"""Cleaning session router - FastAPI endpoints for scheduling"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...config import DEFAULT_PAGE_LIMIT
from ...database import get_db
from ...shared.clock import get_today
from ...shared.responses import paginated_response, success_response
from ...shared.validators import parse_criteria
from .schemas import SessionCreate, SessionFilters, SessionUpdate
from .service import SessionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cleaning-sessions", tags=["Cleaning Sessions"])


def get_session_service(db: Session = Depends(get_db)) -> SessionService:
    """Dependency injection for SessionService"""
    return SessionService(db)


def get_session_filters(
    apartment_id: Optional[str] = Query(None),
    apartment: Optional[str] = Query(None, description="Apartment number"),
    cleaner_id: Optional[str] = Query(None),
    month: Optional[str] = Query(None, description="YYYY-MM"),
    year: Optional[str] = Query(None, description="YYYY"),
    start_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    limit: int = Query(DEFAULT_PAGE_LIMIT),
    offset: int = Query(0),
) -> SessionFilters:
    """Collect query parameters into validated SessionFilters"""
    return parse_criteria(
        SessionFilters,
        apartment_id=apartment_id,
        apartment=apartment,
        cleaner_id=cleaner_id,
        month=month,
        year=year,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )


@router.get("")
async def list_sessions(
    filters: SessionFilters = Depends(get_session_filters),
    service: SessionService = Depends(get_session_service),
):
    """Get cleaning sessions with filtering and pagination"""
    page = service.list_sessions(filters)
    return paginated_response(page, "Cleaning sessions retrieved successfully")


@router.get("/upcoming")
async def list_upcoming_sessions(
    today: date = Depends(get_today),
    service: SessionService = Depends(get_session_service),
):
    """Get sessions scheduled for today or later"""
    return success_response(service.list_upcoming(today), "Upcoming sessions retrieved successfully")


@router.post("", status_code=201)
async def create_session(
    data: SessionCreate,
    service: SessionService = Depends(get_session_service),
):
    """Schedule a new cleaning session"""
    session = service.create_session(data)
    return success_response(session, "Cleaning session created successfully", 201)


@router.get("/{session_id}")
async def get_session(
    session_id: str,
    service: SessionService = Depends(get_session_service),
):
    """Get a specific cleaning session"""
    return success_response(service.get_session(session_id), "Cleaning session retrieved successfully")


@router.put("/{session_id}")
async def update_session(
    session_id: str,
    data: SessionUpdate,
    service: SessionService = Depends(get_session_service),
):
    """Update a cleaning session"""
    session = service.update_session(session_id, data)
    return success_response(session, "Cleaning session updated successfully")


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    service: SessionService = Depends(get_session_service),
):
    """Delete a cleaning session"""
    service.delete_session(session_id)
    return success_response(None, "Cleaning session deleted successfully")
