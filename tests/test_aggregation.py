from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from cleantrack.domain.analytics.aggregation import (
    aggregate,
    build_apartment_invoice,
    dashboard_stats,
    trend_months,
)
from cleantrack.domain.analytics.schemas import AnalyticsFilters

TODAY = date(2025, 3, 15)


def apartment(apartment_id, number, payout=None):
    return SimpleNamespace(
        id=apartment_id,
        apartment_number=number,
        owner_name=f"Owner {number}",
        owner_email=None,
        address=None,
        cleaner_payout=payout,
    )


def cleaner(cleaner_id, name):
    return SimpleNamespace(id=cleaner_id, name=name)


def visit(session_id, number, name, cleaning_date, price=None, welcome_pack_fee=None):
    return SimpleNamespace(
        id=session_id,
        apartment_number=number,
        cleaner_name=name,
        cleaning_date=cleaning_date,
        price=price,
        notes=None,
        welcome_pack_fee=welcome_pack_fee,
    )


@pytest.fixture
def apartments():
    return [
        apartment("a1", "A101", payout=Decimal("200")),
        apartment("a2", "B202", payout=Decimal("80")),
        apartment("a3", "C303"),
    ]


@pytest.fixture
def cleaners():
    return [cleaner("c1", "Bob"), cleaner("c2", "Jane"), cleaner("c3", "Idle")]


@pytest.fixture
def sessions():
    return [
        visit("s1", "A101", "Jane", date(2025, 3, 5), price=Decimal("230"), welcome_pack_fee=Decimal("50")),
        visit("s2", "A101", "Bob", date(2025, 3, 6)),
        visit("s3", "B202", "Jane", date(2025, 2, 10), price=Decimal("120")),
        visit("s4", "A101", "Jane", date(2024, 7, 1), price=Decimal("100")),
    ]


def test_empty_inputs_produce_zeroes():
    result = aggregate([], [], [], AnalyticsFilters(), TODAY)

    assert result.summary.total_cleanings == 0
    assert result.summary.average_cleanings_per_apartment == "0"
    assert result.summary.total_revenue == 0
    assert result.summary.net_revenue == 0
    assert result.cleanings_by_apartment == []
    assert result.cleaner_workload == []
    assert result.cleaner_earnings == []
    assert result.invoicing_data == []
    assert len(result.monthly_trends) == 6
    assert result.insights.most_active_apartment is None
    assert result.insights.least_active_apartment is None
    assert result.insights.top_cleaner is None


def test_average_is_zero_without_apartments(sessions, cleaners):
    result = aggregate(sessions, [], cleaners, AnalyticsFilters(), TODAY)
    assert result.summary.average_cleanings_per_apartment == "0"
    assert result.summary.total_cleanings == 4


def test_average_has_one_decimal(sessions, apartments, cleaners):
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)
    # 4 sessions over 3 apartments
    assert result.summary.average_cleanings_per_apartment == "1.3"


def test_revenue_identity_and_default_price(sessions, apartments, cleaners):
    for criteria in (AnalyticsFilters(), AnalyticsFilters(month="2025-03"), AnalyticsFilters(year="2024")):
        result = aggregate(sessions, apartments, cleaners, criteria, TODAY)
        invoiced = sum(entry.total_amount for entry in result.invoicing_data)
        assert result.summary.total_revenue == invoiced

    march = aggregate(sessions, apartments, cleaners, AnalyticsFilters(month="2025-03"), TODAY)
    # 230 stored plus 150 default for the unpriced session
    assert march.summary.total_revenue == Decimal("380")
    a101 = next(e for e in march.invoicing_data if e.apartment_number == "A101")
    assert a101.total_amount == Decimal("380")


def test_net_revenue_identity(sessions, apartments, cleaners):
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)
    earned = sum(e.total_earnings for e in result.cleaner_earnings)

    assert result.summary.total_cleaner_payouts == earned
    assert result.summary.net_revenue == result.summary.total_revenue - earned


def test_apartment_breakdown_keeps_idle_apartments(sessions, apartments, cleaners):
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)
    counts = [(e.apartment_number, e.cleaning_count) for e in result.cleanings_by_apartment]
    assert counts == [("A101", 3), ("B202", 1), ("C303", 0)]


def test_ties_keep_apartment_number_order(cleaners):
    apartments = [apartment("a2", "B202"), apartment("a1", "A101"), apartment("a3", "C303")]
    sessions = [
        visit("s1", "C303", "Jane", date(2025, 3, 1)),
        visit("s2", "B202", "Jane", date(2025, 3, 2)),
    ]
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)

    assert [e.apartment_number for e in result.cleanings_by_apartment] == ["B202", "C303", "A101"]
    assert result.insights.most_active_apartment.apartment_number == "B202"
    assert result.insights.least_active_apartment.apartment_number == "C303"


def test_workload_drops_cleaners_without_sessions(sessions, apartments, cleaners):
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)
    assert [(w.cleaner_name, w.session_count) for w in result.cleaner_workload] == [("Jane", 3), ("Bob", 1)]
    assert result.insights.top_cleaner.cleaner_name == "Jane"


def test_workload_ties_keep_cleaner_listing_order(apartments):
    cleaners = [cleaner("c1", "Amy"), cleaner("c2", "Yan"), cleaner("c3", "Zed")]
    sessions = [
        visit("s1", "A101", "Zed", date(2025, 3, 1)),
        visit("s2", "A101", "Zed", date(2025, 3, 2)),
        visit("s3", "B202", "Yan", date(2025, 3, 1)),
        visit("s4", "B202", "Amy", date(2025, 3, 2)),
    ]
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)

    assert [w.cleaner_name for w in result.cleaner_workload] == ["Zed", "Amy", "Yan"]
    assert result.insights.top_cleaner.cleaner_name == "Zed"


def test_earnings_use_current_apartment_payout(sessions, apartments, cleaners):
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)
    earnings = {e.cleaner_name: e for e in result.cleaner_earnings}

    # Jane: two A101 visits at 200 and one B202 visit at 80
    assert earnings["Jane"].total_earnings == Decimal("480")
    assert earnings["Jane"].average_earnings_per_session == Decimal("160")
    assert earnings["Bob"].total_earnings == Decimal("200")
    assert [e.cleaner_name for e in result.cleaner_earnings] == ["Jane", "Bob"]

    apartments[0].cleaner_payout = Decimal("10")
    repriced = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)
    assert {e.cleaner_name: e.total_earnings for e in repriced.cleaner_earnings}["Bob"] == Decimal("10")


def test_year_filter_spans_every_month(sessions, apartments, cleaners):
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(year="2025"), TODAY)

    assert result.summary.total_cleanings == 3
    counts = {e.apartment_number: e.cleaning_count for e in result.cleanings_by_apartment}
    assert counts == {"A101": 2, "B202": 1, "C303": 0}
    assert result.date_range.year == "2025"
    assert result.date_range.total_sessions == 4


def test_trends_cover_six_months_ignoring_the_filter(sessions, apartments, cleaners):
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(month="2024-07"), TODAY)
    trends = result.monthly_trends

    assert [t.month_key for t in trends] == [
        "2024-10", "2024-11", "2024-12", "2025-01", "2025-02", "2025-03",
    ]
    assert trends[0].month == "Oct 2024"
    assert trends[-1].month == "Mar 2025"
    assert trends[-1].cleaning_count == 2
    assert trends[-1].unique_apartments == 1
    assert trends[-1].unique_cleaners == 2
    assert trends[-2].cleaning_count == 1


def test_trend_window_crosses_year_boundary():
    keys = [key for _, key in trend_months(date(2025, 2, 28))]
    assert keys == ["2024-09", "2024-10", "2024-11", "2024-12", "2025-01", "2025-02"]


def test_orphan_sessions_pay_nothing_and_are_not_broken_down(apartments, cleaners):
    sessions = [
        visit("s1", "A101", "Jane", date(2025, 3, 1), price=Decimal("100")),
        visit("s2", "Z999", "Jane", date(2025, 3, 2), price=Decimal("100")),
    ]
    result = aggregate(sessions, apartments, cleaners, AnalyticsFilters(), TODAY)

    assert result.summary.total_cleanings == 2
    assert result.summary.total_cleaner_payouts == Decimal("200")
    assert "Z999" not in {e.apartment_number for e in result.cleanings_by_apartment}
    assert result.summary.total_revenue == Decimal("100")


def test_apartment_invoice_matches_invoicing_entry(sessions, apartments, cleaners):
    criteria = AnalyticsFilters(year="2025")
    result = aggregate(sessions, apartments, cleaners, criteria, TODAY)
    invoice = build_apartment_invoice(sessions, apartments[0], criteria)

    entry = next(e for e in result.invoicing_data if e.apartment_number == "A101")
    assert invoice.total_amount == entry.total_amount
    assert invoice.cleaning_count == 2
    assert [line.session_id for line in invoice.lines] == ["s1", "s2"]
    assert invoice.welcome_packs_used == 1
    assert invoice.welcome_pack_total == Decimal("50")


def test_dashboard_stats_counts_month_and_upcoming_week():
    sessions = [
        visit("s1", "A101", "Jane", date(2025, 3, 1)),
        visit("s2", "A101", "Jane", date(2025, 3, 15)),
        visit("s3", "A101", "Jane", date(2025, 3, 22)),
        visit("s4", "A101", "Jane", date(2025, 3, 23)),
    ]
    stats = dashboard_stats(2, 3, sessions, TODAY)

    assert stats.total_apartments == 2
    assert stats.total_cleaners == 3
    assert stats.total_sessions == 4
    assert stats.sessions_this_month == 4
    assert stats.upcoming_sessions == 2
