"""
Query filter.

Narrows a list of detailed sessions by the criteria in SessionFilters.
Criteria are independent and cumulative; pagination is applied last.
Dates compare as zero-padded ISO strings, so prefix and range checks are
plain string operations.
"""

from typing import Any, Iterable, Optional, Sequence

from ...shared.pagination import Page, paginate
from .conflicts import date_key
from .schemas import SessionFilters


def _resolve(records: Iterable[Any], record_id: str, attr: str) -> Optional[str]:
    for record in records:
        if record.id == record_id:
            return getattr(record, attr)
    return None


def filter_sessions(
    sessions: Sequence[Any],
    criteria: SessionFilters,
    apartments: Iterable[Any] = (),
    cleaners: Iterable[Any] = (),
) -> list:
    """
    Apply every supplied criterion in turn.

    apartment_id and cleaner_id are resolved to the apartment number and
    cleaner name through the given apartments/cleaners; an id that does
    not resolve matches no sessions.
    """
    result = list(sessions)

    if criteria.apartment_id:
        number = _resolve(apartments, criteria.apartment_id, "apartment_number")
        result = [s for s in result if number is not None and s.apartment_number == number]

    if criteria.apartment:
        result = [s for s in result if s.apartment_number == criteria.apartment]

    if criteria.cleaner_id:
        name = _resolve(cleaners, criteria.cleaner_id, "name")
        result = [s for s in result if name is not None and s.cleaner_name == name]

    if criteria.month:
        result = [s for s in result if date_key(s.cleaning_date).startswith(criteria.month)]

    if criteria.year:
        result = [s for s in result if date_key(s.cleaning_date).startswith(criteria.year)]

    if criteria.start_date:
        result = [s for s in result if date_key(s.cleaning_date) >= criteria.start_date]

    if criteria.end_date:
        result = [s for s in result if date_key(s.cleaning_date) <= criteria.end_date]

    return result


def filter_and_paginate(
    sessions: Sequence[Any],
    criteria: SessionFilters,
    apartments: Iterable[Any] = (),
    cleaners: Iterable[Any] = (),
) -> Page:
    """filter_sessions followed by limit/offset"""
    filtered = filter_sessions(sessions, criteria, apartments, cleaners)
    return paginate(filtered, criteria.limit, criteria.offset)
