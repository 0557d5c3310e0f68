"""Apartment domain schemas - Pydantic models for validation"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...shared.validators import clean_optional_text, validate_email


class ApartmentCreate(BaseModel):
    """Schema for creating a new apartment"""

    apartment_number: str = Field(..., min_length=1, max_length=50)
    owner_name: str = Field(..., min_length=1, max_length=100)
    owner_email: Optional[str] = None
    address: Optional[str] = Field(None, max_length=200)
    cleaner_payout: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)

    @field_validator("apartment_number", "owner_name")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v

    @field_validator("owner_email")
    @classmethod
    def validate_owner_email(cls, v):
        return validate_email(v)

    @field_validator("address")
    @classmethod
    def validate_address(cls, v):
        return clean_optional_text(v)


class ApartmentUpdate(BaseModel):
    """Schema for updating an existing apartment"""

    apartment_number: Optional[str] = Field(None, min_length=1, max_length=50)
    owner_name: Optional[str] = Field(None, min_length=1, max_length=100)
    owner_email: Optional[str] = None
    address: Optional[str] = Field(None, max_length=200)
    cleaner_payout: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)

    @field_validator("apartment_number", "owner_name")
    @classmethod
    def validate_required_text(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be blank")
        return v

    @field_validator("owner_email")
    @classmethod
    def validate_owner_email(cls, v):
        return validate_email(v)

    @field_validator("address")
    @classmethod
    def validate_address(cls, v):
        return clean_optional_text(v)


class ApartmentResponse(BaseModel):
    """Schema for apartment response"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    apartment_number: str
    owner_name: str
    owner_email: Optional[str] = None
    address: Optional[str] = None
    cleaner_payout: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
