"""Cleaner domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...shared.validators import clean_optional_text, validate_email


class CleanerCreate(BaseModel):
    """Schema for creating a new cleaner"""

    name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        return clean_optional_text(v)

    @field_validator("email")
    @classmethod
    def validate_cleaner_email(cls, v):
        return validate_email(v)


class CleanerUpdate(BaseModel):
    """Schema for updating an existing cleaner"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be blank")
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        return clean_optional_text(v)

    @field_validator("email")
    @classmethod
    def validate_cleaner_email(cls, v):
        return validate_email(v)


class CleanerResponse(BaseModel):
    """Schema for cleaner response"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
