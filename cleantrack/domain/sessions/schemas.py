"""Cleaning session domain schemas - Pydantic models for validation"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ...shared.validators import (
    clean_optional_text,
    validate_iso_date,
    validate_month,
    validate_uuid,
    validate_year,
)


def _parse_cleaning_date(v):
    if v is None or isinstance(v, date):
        return v
    if isinstance(v, str):
        return date.fromisoformat(validate_iso_date(v))
    raise ValueError("Invalid date format (YYYY-MM-DD)")


def _check_uuid(v: Optional[str], label: str) -> Optional[str]:
    if v is not None and not validate_uuid(v):
        raise ValueError(f"Invalid {label} ID")
    return v


class SessionCreate(BaseModel):
    """Schema for scheduling a cleaning session"""

    apartment_id: str
    cleaner_id: str
    cleaning_date: date
    notes: Optional[str] = Field(None, max_length=500)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    # Transient: only the resulting price and fee marker are stored
    include_welcome_pack: bool = False

    @field_validator("apartment_id")
    @classmethod
    def validate_apartment_id(cls, v: str) -> str:
        return _check_uuid(v, "apartment")

    @field_validator("cleaner_id")
    @classmethod
    def validate_cleaner_id(cls, v: str) -> str:
        return _check_uuid(v, "cleaner")

    @field_validator("cleaning_date", mode="before")
    @classmethod
    def validate_cleaning_date(cls, v):
        return _parse_cleaning_date(v)

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v):
        return clean_optional_text(v)


class SessionUpdate(BaseModel):
    """Schema for updating a cleaning session; omitted fields keep their value"""

    apartment_id: Optional[str] = None
    cleaner_id: Optional[str] = None
    cleaning_date: Optional[date] = None
    notes: Optional[str] = Field(None, max_length=500)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    include_welcome_pack: bool = False

    @field_validator("apartment_id")
    @classmethod
    def validate_apartment_id(cls, v):
        return _check_uuid(v, "apartment")

    @field_validator("cleaner_id")
    @classmethod
    def validate_cleaner_id(cls, v):
        return _check_uuid(v, "cleaner")

    @field_validator("cleaning_date", mode="before")
    @classmethod
    def validate_cleaning_date(cls, v):
        return _parse_cleaning_date(v)

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v):
        return clean_optional_text(v)


class CleaningSessionResponse(BaseModel):
    """Basic (foreign key) session record"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    apartment_id: str
    cleaner_id: str
    cleaning_date: date
    notes: Optional[str] = None
    price: Optional[Decimal] = None
    welcome_pack_fee: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CleaningSessionDetail(CleaningSessionResponse):
    """Session with apartment and cleaner labels resolved at read time"""

    apartment_number: Optional[str] = None
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    address: Optional[str] = None
    cleaner_name: Optional[str] = None
    cleaner_phone: Optional[str] = None
    cleaner_email: Optional[str] = None


class SessionFilters(BaseModel):
    """Composable session criteria, all optional and ANDed together"""

    apartment_id: Optional[str] = None
    apartment: Optional[str] = None  # apartment number
    cleaner_id: Optional[str] = None
    month: Optional[str] = None  # YYYY-MM
    year: Optional[str] = None  # YYYY
    start_date: Optional[str] = None  # YYYY-MM-DD, inclusive
    end_date: Optional[str] = None  # YYYY-MM-DD, inclusive
    limit: int = Field(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    offset: int = Field(0, ge=0)

    @field_validator("apartment_id")
    @classmethod
    def validate_apartment_id(cls, v):
        return _check_uuid(v, "apartment")

    @field_validator("cleaner_id")
    @classmethod
    def validate_cleaner_id(cls, v):
        return _check_uuid(v, "cleaner")

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
