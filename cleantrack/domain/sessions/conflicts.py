"""
Conflict validator.

A cleaner can be scheduled at most once per calendar date. The checks here
are pure; existence of the referenced apartment and cleaner is verified by
the service before they run.
"""

from datetime import date
from typing import Any, Iterable, Optional, Union

DateLike = Union[date, str]


def date_key(value: DateLike) -> str:
    """Zero-padded YYYY-MM-DD form of a date or date string"""
    return value if isinstance(value, str) else value.isoformat()


def find_conflict(
    sessions: Iterable[Any],
    cleaner_id: str,
    cleaning_date: DateLike,
    exclude_session_id: Optional[str] = None,
) -> Optional[Any]:
    """First other session booking the same cleaner on the same date, if any"""
    wanted = date_key(cleaning_date)
    for session in sessions:
        if (
            session.cleaner_id == cleaner_id
            and date_key(session.cleaning_date) == wanted
            and session.id != exclude_session_id
        ):
            return session
    return None


def check_conflict(
    sessions: Iterable[Any],
    cleaner_id: str,
    cleaning_date: DateLike,
    exclude_session_id: Optional[str] = None,
) -> bool:
    """True when scheduling cleaner_id on cleaning_date would double-book them"""
    return find_conflict(sessions, cleaner_id, cleaning_date, exclude_session_id) is not None


def effective_assignment(
    existing: Any,
    cleaner_id: Optional[str] = None,
    cleaning_date: Optional[DateLike] = None,
) -> tuple[str, DateLike]:
    """(cleaner, date) a session will have after an update; unchanged fields fall back"""
    return (
        cleaner_id or existing.cleaner_id,
        cleaning_date or existing.cleaning_date,
    )
