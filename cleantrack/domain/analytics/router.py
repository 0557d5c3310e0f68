"""Analytics router - reporting endpoints"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.clock import get_today
from ...shared.responses import success_response
from ...shared.validators import parse_criteria
from .schemas import AnalyticsFilters
from .service import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["Analytics"])


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    """Dependency injection for AnalyticsService"""
    return AnalyticsService(db)


def get_analytics_filters(
    apartment_id: Optional[str] = Query(None),
    apartment: Optional[str] = Query(None, description="Apartment number"),
    cleaner_id: Optional[str] = Query(None),
    month: Optional[str] = Query(None, description="YYYY-MM"),
    year: Optional[str] = Query(None, description="YYYY"),
    start_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
) -> AnalyticsFilters:
    return parse_criteria(
        AnalyticsFilters,
        apartment_id=apartment_id,
        apartment=apartment,
        cleaner_id=cleaner_id,
        month=month,
        year=year,
        start_date=start_date,
        end_date=end_date,
    )


@router.get("")
async def get_analytics(
    filters: AnalyticsFilters = Depends(get_analytics_filters),
    today: date = Depends(get_today),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Summary, breakdowns, trends and invoicing totals for a period"""
    result = service.get_analytics(filters, today)
    return success_response(result, "Analytics retrieved successfully")


@router.get("/dashboard")
async def get_dashboard(
    today: date = Depends(get_today),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Headline counts for the admin dashboard"""
    return success_response(service.get_dashboard(today), "Dashboard stats retrieved successfully")


@router.get("/invoices/{apartment_id}")
async def get_apartment_invoice(
    apartment_id: str,
    month: Optional[str] = Query(None, description="YYYY-MM"),
    year: Optional[str] = Query(None, description="YYYY"),
    start_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    service: AnalyticsService = Depends(get_analytics_service),
):
    """Line-item invoice for one apartment over a period"""
    filters = parse_criteria(
        AnalyticsFilters,
        month=month,
        year=year,
        start_date=start_date,
        end_date=end_date,
    )
    invoice = service.get_apartment_invoice(apartment_id, filters)
    return success_response(invoice, "Invoice retrieved successfully")
