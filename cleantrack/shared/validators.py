"""Shared validation utilities"""

import re
import uuid
from datetime import date
from typing import Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
MONTH_PATTERN = r"^\d{4}-\d{2}$"
YEAR_PATTERN = r"^\d{4}$"


def validate_uuid(value: str) -> bool:
    """Validate UUID format"""
    try:
        uuid.UUID(value)
        return True
    except (ValueError, AttributeError, TypeError):
        return False


def ensure_uuid(value: str, resource: str) -> str:
    """Raise ValidationError unless value is a UUID string"""
    if not validate_uuid(value):
        raise ValidationError(f"Invalid {resource.lower()} ID format", {"id": value})
    return value


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Empty strings are treated as "not provided".

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return None

    email = email.strip().lower()

    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def clean_optional_text(value: Optional[str]) -> Optional[str]:
    """Strip whitespace and control characters; blank becomes None"""
    if value is None:
        return None

    value = re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]", "", str(value)).strip()
    return value or None


def validate_iso_date(value: Optional[str]) -> Optional[str]:
    """
    Validate a zero-padded YYYY-MM-DD string that is also a real calendar date.

    Raises:
        ValueError: If the string is malformed or not a real date
    """
    if value is None:
        return value

    if not re.match(DATE_PATTERN, value):
        raise ValueError("Invalid date format (YYYY-MM-DD)")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError("Invalid calendar date")
    return value


def validate_month(value: Optional[str]) -> Optional[str]:
    """Validate a YYYY-MM month key"""
    if value is None:
        return value

    if not re.match(MONTH_PATTERN, value) or not 1 <= int(value[5:]) <= 12:
        raise ValueError("Invalid month format (YYYY-MM)")
    return value


def validate_year(value: Optional[str]) -> Optional[str]:
    """Validate a YYYY year key"""
    if value is None:
        return value

    if not re.match(YEAR_PATTERN, value):
        raise ValueError("Invalid year format (YYYY)")
    return value


def format_validation_errors(errors: list[dict]) -> list[dict]:
    """Flatten pydantic error dicts into [{field, message}]"""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        formatted.append({"field": ".".join(loc), "message": error.get("msg", "Invalid value")})
    return formatted


def parse_criteria(model_cls: type[BaseModel], **values) -> BaseModel:
    """Build a criteria model, reporting bad values as a domain ValidationError"""
    try:
        return model_cls(**values)
    except PydanticValidationError as e:
        raise ValidationError(
            "Validation failed",
            {"validation_errors": format_validation_errors(e.errors())},
        )
