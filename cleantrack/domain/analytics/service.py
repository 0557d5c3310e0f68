"""Analytics service - loads the store snapshot and runs the aggregation engine"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from ..apartments.repository import ApartmentRepository
from ..apartments.service import ApartmentService
from ..cleaners.repository import CleanerRepository
from ..sessions.repository import SessionRepository
from .aggregation import aggregate, build_apartment_invoice, dashboard_stats
from .schemas import AnalyticsFilters, AnalyticsResult, ApartmentInvoice, DashboardStats

logger = logging.getLogger(__name__)


def period_criteria(filters: AnalyticsFilters) -> AnalyticsFilters:
    """Month takes precedence over year when both are supplied"""
    if filters.month and filters.year:
        return filters.model_copy(update={"year": None})
    return filters


class AnalyticsService:
    """Service layer for read-only analytics"""

    def __init__(self, db: Session):
        self.db = db
        self.sessions = SessionRepository()
        self.apartments = ApartmentRepository()
        self.cleaners = CleanerRepository()

    def get_analytics(self, filters: AnalyticsFilters, today: date) -> AnalyticsResult:
        criteria = period_criteria(filters)
        logger.info(f"📊 Building analytics for {criteria.model_dump(exclude_none=True)}")
        return aggregate(
            self.sessions.list_sessions(self.db),
            self.apartments.list_apartments(self.db),
            self.cleaners.list_cleaners(self.db),
            criteria,
            today,
        )

    def get_dashboard(self, today: date) -> DashboardStats:
        return dashboard_stats(
            len(self.apartments.list_apartments(self.db)),
            len(self.cleaners.list_cleaners(self.db)),
            self.sessions.list_sessions_basic(self.db),
            today,
        )

    def get_apartment_invoice(self, apartment_id: str, filters: AnalyticsFilters) -> ApartmentInvoice:
        """Invoice for one apartment; unknown ids raise NotFoundError"""
        apartment = ApartmentService(self.db).get_apartment(apartment_id)
        return build_apartment_invoice(
            self.sessions.list_sessions(self.db),
            apartment,
            period_criteria(filters),
        )
