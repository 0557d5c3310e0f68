"""Analytics domain schemas - shapes returned by the aggregation engine"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_iso_date, validate_month, validate_uuid, validate_year


class AnalyticsFilters(BaseModel):
    """Period and scope accepted by the analytics endpoints"""

    apartment_id: Optional[str] = None
    apartment: Optional[str] = None
    cleaner_id: Optional[str] = None
    month: Optional[str] = None
    year: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @field_validator("apartment_id", "cleaner_id")
    @classmethod
    def validate_ids(cls, v):
        if v is not None and not validate_uuid(v):
            raise ValueError("Invalid ID format")
        return v

    @field_validator("month")
    @classmethod
    def validate_month_key(cls, v):
        return validate_month(v)

    @field_validator("year")
    @classmethod
    def validate_year_key(cls, v):
        return validate_year(v)

    @field_validator("start_date", "end_date")
    @classmethod
    def validate_range_bound(cls, v):
        return validate_iso_date(v)


class AnalyticsSummary(BaseModel):
    total_cleanings: int
    active_apartments: int
    active_cleaners: int
    average_cleanings_per_apartment: str
    total_revenue: Decimal
    total_cleaner_payouts: Decimal
    net_revenue: Decimal


class ApartmentCleanings(BaseModel):
    apartment_id: str
    apartment_number: str
    owner_name: Optional[str] = None
    cleaning_count: int


class CleanerWorkload(BaseModel):
    cleaner_id: str
    cleaner_name: str
    session_count: int


class CleanerEarnings(BaseModel):
    cleaner_id: str
    cleaner_name: str
    session_count: int
    total_earnings: Decimal
    average_earnings_per_session: Decimal


class MonthlyTrend(BaseModel):
    month: str  # "Mar 2025"
    month_key: str  # "2025-03"
    cleaning_count: int
    unique_apartments: int
    unique_cleaners: int


class Insights(BaseModel):
    most_active_apartment: Optional[ApartmentCleanings] = None
    least_active_apartment: Optional[ApartmentCleanings] = None
    top_cleaner: Optional[CleanerWorkload] = None


class InvoiceSummary(BaseModel):
    apartment_id: str
    apartment_number: str
    owner_name: Optional[str] = None
    cleaning_count: int
    total_amount: Decimal


class DateRange(BaseModel):
    month: Optional[str] = None
    year: Optional[str] = None
    total_sessions: int


class AnalyticsResult(BaseModel):
    summary: AnalyticsSummary
    cleanings_by_apartment: list[ApartmentCleanings]
    cleaner_workload: list[CleanerWorkload]
    cleaner_earnings: list[CleanerEarnings]
    monthly_trends: list[MonthlyTrend]
    insights: Insights
    invoicing_data: list[InvoiceSummary]
    date_range: DateRange


class InvoiceLine(BaseModel):
    session_id: str
    cleaning_date: date
    cleaner_name: Optional[str] = None
    notes: Optional[str] = None
    amount: Decimal  # effective price
    welcome_pack_fee: Optional[Decimal] = None


class ApartmentInvoice(BaseModel):
    apartment_id: str
    apartment_number: str
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    address: Optional[str] = None
    month: Optional[str] = None
    year: Optional[str] = None
    lines: list[InvoiceLine]
    cleaning_count: int
    total_amount: Decimal
    welcome_packs_used: int
    welcome_pack_total: Decimal


class DashboardStats(BaseModel):
    total_apartments: int
    total_cleaners: int
    total_sessions: int
    sessions_this_month: int
    upcoming_sessions: int
