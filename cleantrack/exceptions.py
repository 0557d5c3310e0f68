"""
Domain exceptions for the scheduling and billing engine.

Services raise these; main.py renders them into the response envelope.
"""

from typing import Optional


class CleanTrackError(Exception):
    """Base class for all domain errors."""

    status_code = 400

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CleanTrackError):
    """Malformed input rejected before touching the store."""

    status_code = 400


class NotFoundError(CleanTrackError):
    """Referenced apartment, cleaner or session does not exist."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        details = {"id": resource_id} if resource_id else None
        super().__init__(message=f"{resource} not found", details=details)


class ConflictError(CleanTrackError):
    """Duplicate apartment number, double booking, or delete blocked by sessions."""

    status_code = 409


class StoreError(CleanTrackError):
    """Persistence failure. The message never carries driver internals."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message)
