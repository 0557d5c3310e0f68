"""
Aggregation engine.

Reduces the detailed session projection into the analytics views served by
/analytics. Everything here is read-only and works on plain records, so
the functions are usable with ORM rows, pydantic models or test doubles
alike. Sessions are matched to apartments by apartment_number and to
cleaners by name, since that is what the detailed projection carries.

The current date is always passed in; nothing in this module reads the
clock.
"""

from collections import defaultdict
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional, Sequence

from ...config import TREND_MONTHS, UPCOMING_DAYS
from ..billing.pricing import ZERO, cleaner_payout, effective_price, to_decimal
from ..sessions.conflicts import date_key
from ..sessions.filters import filter_sessions
from .schemas import (
    AnalyticsResult,
    AnalyticsSummary,
    ApartmentCleanings,
    ApartmentInvoice,
    CleanerEarnings,
    CleanerWorkload,
    DashboardStats,
    DateRange,
    InvoiceLine,
    InvoiceSummary,
    Insights,
    MonthlyTrend,
)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _group_by(sessions: Iterable[Any], attr: str) -> dict[Any, list]:
    groups = defaultdict(list)
    for session in sessions:
        groups[getattr(session, attr)].append(session)
    return groups


def _average_per_apartment(total_cleanings: int, apartment_count: int) -> str:
    """One decimal place as a string; "0" when there are no apartments"""
    if apartment_count == 0:
        return "0"
    average = Decimal(total_cleanings) / Decimal(apartment_count)
    return str(average.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def trend_months(today: date, months: int = TREND_MONTHS) -> list[tuple[str, str]]:
    """(label, key) pairs for the window ending at today's month, oldest first"""
    window = []
    for back in range(months - 1, -1, -1):
        year, month = _shift_month(today.year, today.month, -back)
        window.append((f"{MONTH_ABBREVIATIONS[month - 1]} {year}", f"{year:04d}-{month:02d}"))
    return window


def monthly_trends(sessions: Sequence[Any], today: date, months: int = TREND_MONTHS) -> list[MonthlyTrend]:
    """Per-month counts over the full session set; the period filter does not apply"""
    trends = []
    for label, key in trend_months(today, months):
        in_month = [s for s in sessions if date_key(s.cleaning_date).startswith(key)]
        trends.append(
            MonthlyTrend(
                month=label,
                month_key=key,
                cleaning_count=len(in_month),
                unique_apartments=len({s.apartment_number for s in in_month}),
                unique_cleaners=len({s.cleaner_name for s in in_month}),
            )
        )
    return trends


def cleanings_by_apartment(apartments: Iterable[Any], by_number: dict) -> list[ApartmentCleanings]:
    """
    Every apartment with its session count, busiest first.

    Apartments without sessions are kept. Ties keep apartment_number order.
    """
    entries = [
        ApartmentCleanings(
            apartment_id=apartment.id,
            apartment_number=apartment.apartment_number,
            owner_name=apartment.owner_name,
            cleaning_count=len(by_number.get(apartment.apartment_number, ())),
        )
        for apartment in sorted(apartments, key=lambda a: a.apartment_number)
    ]
    # list.sort is stable, reverse=True included
    entries.sort(key=lambda e: e.cleaning_count, reverse=True)
    return entries


def cleaner_workload(cleaners: Iterable[Any], by_name: dict) -> list[CleanerWorkload]:
    """Cleaners with at least one session, busiest first (ties keep listing order)"""
    workload = []
    for cleaner in cleaners:
        count = len(by_name.get(cleaner.name, ()))
        if count:
            workload.append(CleanerWorkload(cleaner_id=cleaner.id, cleaner_name=cleaner.name, session_count=count))
    workload.sort(key=lambda w: w.session_count, reverse=True)
    return workload


def cleaner_earnings(
    workload: Iterable[CleanerWorkload],
    by_name: dict,
    payout_for,
) -> list[CleanerEarnings]:
    """Payout totals per working cleaner, highest earner first"""
    earnings = []
    for entry in workload:
        total = sum((payout_for(s) for s in by_name[entry.cleaner_name]), ZERO)
        earnings.append(
            CleanerEarnings(
                cleaner_id=entry.cleaner_id,
                cleaner_name=entry.cleaner_name,
                session_count=entry.session_count,
                total_earnings=total,
                average_earnings_per_session=total / entry.session_count,
            )
        )
    earnings.sort(key=lambda e: e.total_earnings, reverse=True)
    return earnings


def build_insights(by_apartment: list[ApartmentCleanings], workload: list[CleanerWorkload]) -> Insights:
    active = [entry for entry in by_apartment if entry.cleaning_count > 0]
    return Insights(
        most_active_apartment=by_apartment[0] if by_apartment else None,
        least_active_apartment=active[-1] if active else None,
        top_cleaner=workload[0] if workload else None,
    )


def invoicing_data(by_apartment: list[ApartmentCleanings], by_number: dict) -> list[InvoiceSummary]:
    """Billable total per apartment, unset prices counted at the default"""
    return [
        InvoiceSummary(
            apartment_id=entry.apartment_id,
            apartment_number=entry.apartment_number,
            owner_name=entry.owner_name,
            cleaning_count=entry.cleaning_count,
            total_amount=sum(
                (effective_price(s.price) for s in by_number.get(entry.apartment_number, ())),
                ZERO,
            ),
        )
        for entry in by_apartment
    ]


def aggregate(
    all_sessions: Sequence[Any],
    apartments: Sequence[Any],
    cleaners: Sequence[Any],
    criteria: Any,
    today: date,
) -> AnalyticsResult:
    """
    Build the full analytics view for the sessions matching criteria.

    Args:
        all_sessions: detailed sessions (carrying apartment_number and cleaner_name)
        apartments: every apartment; each one appears in the breakdowns
        cleaners: every cleaner; only those with sessions appear in workload
        criteria: filter criteria (apartment_id, apartment, cleaner_id,
            month, year, start_date, end_date)
        today: anchors the monthly trend window

    Returns:
        AnalyticsResult where total_revenue equals the sum of the
        invoicing totals and net_revenue equals total_revenue minus the
        sum of cleaner earnings.
    """
    all_sessions = list(all_sessions)
    apartments = list(apartments)
    cleaners = list(cleaners)

    filtered = filter_sessions(all_sessions, criteria, apartments, cleaners)

    apartments_by_number = {a.apartment_number: a for a in apartments}

    def payout_for(session) -> Decimal:
        # Live payout of the session's apartment; orphans pay nothing
        return cleaner_payout(apartments_by_number.get(session.apartment_number))

    by_number = _group_by(filtered, "apartment_number")
    by_name = _group_by(filtered, "cleaner_name")

    by_apartment = cleanings_by_apartment(apartments, by_number)
    workload = cleaner_workload(cleaners, by_name)
    earnings = cleaner_earnings(workload, by_name, payout_for)
    invoices = invoicing_data(by_apartment, by_number)

    total_revenue = sum((entry.total_amount for entry in invoices), ZERO)
    total_payouts = sum((payout_for(s) for s in filtered), ZERO)

    summary = AnalyticsSummary(
        total_cleanings=len(filtered),
        active_apartments=len(apartments),
        active_cleaners=len(cleaners),
        average_cleanings_per_apartment=_average_per_apartment(len(filtered), len(apartments)),
        total_revenue=total_revenue,
        total_cleaner_payouts=total_payouts,
        net_revenue=total_revenue - total_payouts,
    )

    return AnalyticsResult(
        summary=summary,
        cleanings_by_apartment=by_apartment,
        cleaner_workload=workload,
        cleaner_earnings=earnings,
        monthly_trends=monthly_trends(all_sessions, today),
        insights=build_insights(by_apartment, workload),
        invoicing_data=invoices,
        date_range=DateRange(
            month=getattr(criteria, "month", None),
            year=getattr(criteria, "year", None),
            total_sessions=len(all_sessions),
        ),
    )


def build_apartment_invoice(
    all_sessions: Sequence[Any],
    apartment: Any,
    criteria: Any,
) -> ApartmentInvoice:
    """Chronological billable lines for one apartment over the criteria period"""
    scoped = criteria.model_copy(update={"apartment_id": None, "apartment": apartment.apartment_number})
    sessions = sorted(filter_sessions(all_sessions, scoped), key=lambda s: date_key(s.cleaning_date))

    lines = [
        InvoiceLine(
            session_id=s.id,
            cleaning_date=s.cleaning_date,
            cleaner_name=s.cleaner_name,
            notes=s.notes,
            amount=effective_price(s.price),
            welcome_pack_fee=to_decimal(s.welcome_pack_fee),
        )
        for s in sessions
    ]
    pack_fees = [line.welcome_pack_fee for line in lines if line.welcome_pack_fee and line.welcome_pack_fee > 0]

    return ApartmentInvoice(
        apartment_id=apartment.id,
        apartment_number=apartment.apartment_number,
        owner_name=apartment.owner_name,
        owner_email=apartment.owner_email,
        address=apartment.address,
        month=criteria.month,
        year=criteria.year,
        lines=lines,
        cleaning_count=len(lines),
        total_amount=sum((line.amount for line in lines), ZERO),
        welcome_packs_used=len(pack_fees),
        welcome_pack_total=sum(pack_fees, ZERO),
    )


def dashboard_stats(
    apartment_count: int,
    cleaner_count: int,
    sessions: Sequence[Any],
    today: date,
    upcoming_days: Optional[int] = None,
) -> DashboardStats:
    """Headline counts; "upcoming" is today through today + upcoming_days inclusive"""
    days = UPCOMING_DAYS if upcoming_days is None else upcoming_days
    month_key = today.isoformat()[:7]
    first, last = today.isoformat(), (today + timedelta(days=days)).isoformat()

    keys = [date_key(s.cleaning_date) for s in sessions]
    return DashboardStats(
        total_apartments=apartment_count,
        total_cleaners=cleaner_count,
        total_sessions=len(keys),
        sessions_this_month=sum(1 for key in keys if key.startswith(month_key)),
        upcoming_sessions=sum(1 for key in keys if first <= key <= last),
    )
