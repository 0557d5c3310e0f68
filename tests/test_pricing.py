from decimal import Decimal
from types import SimpleNamespace

import pytest

from cleantrack.domain.billing.pricing import (
    cleaner_payout,
    compute_price,
    effective_price,
    to_decimal,
    welcome_pack_marker,
)


@pytest.mark.parametrize(
    "base, include, fee, expected",
    [
        (180, True, 50, Decimal("230")),
        (None, True, 50, Decimal("50")),
        (180, False, 50, Decimal("180")),
        (None, False, 50, None),
        ("99.90", True, "0.10", Decimal("100.00")),
    ],
)
def test_compute_price(base, include, fee, expected):
    assert compute_price(base, include, fee) == expected


def test_welcome_pack_marker_only_when_included():
    assert welcome_pack_marker(True, 50) == Decimal("50")
    assert welcome_pack_marker(False, 50) is None


def test_effective_price_substitutes_default_for_unset():
    assert effective_price(None) == Decimal("150")
    assert effective_price(Decimal("0")) == Decimal("0")
    assert effective_price(230) == Decimal("230")


def test_cleaner_payout_defaults_to_zero():
    assert cleaner_payout(None) == Decimal("0")
    assert cleaner_payout(SimpleNamespace(cleaner_payout=None)) == Decimal("0")
    assert cleaner_payout(SimpleNamespace(cleaner_payout=Decimal("200.00"))) == Decimal("200")


def test_to_decimal_avoids_float_noise():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(None) is None
