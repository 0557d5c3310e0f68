"""Billing domain schemas - Pydantic models for validation"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class WelcomePackFeeUpdate(BaseModel):
    """Schema for updating the welcome pack fee"""

    # Same precision as the Numeric(10, 2) price column it feeds
    fee: Decimal = Field(..., max_digits=10, decimal_places=2)

    @field_validator("fee")
    @classmethod
    def validate_fee(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Fee must be a non-negative number")
        return v


class WelcomePackFeeResponse(BaseModel):
    """Schema for welcome pack fee response"""

    fee: Decimal
