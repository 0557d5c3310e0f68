"""
Pricing calculator.

Session prices are stored as given (plus the welcome pack fee when one is
applied). Defaults for missing values are substituted only when reading:

- a session without a price is billed at DEFAULT_SESSION_PRICE
- an apartment without a cleaner_payout pays the cleaner 0
"""

from decimal import Decimal
from typing import Any, Optional, Union

from ...config import DEFAULT_SESSION_PRICE

Amount = Union[Decimal, int, float, str]

ZERO = Decimal("0")
# Largest value a Numeric(10, 2) column holds
MAX_AMOUNT = Decimal("99999999.99")


def to_decimal(value: Optional[Amount]) -> Optional[Decimal]:
    """Convert a numeric value to Decimal, keeping None as None"""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    # str() first so floats like 0.1 don't drag binary noise along
    return Decimal(str(value))


def compute_price(
    base_price: Optional[Amount],
    include_welcome_pack: bool,
    welcome_pack_fee: Amount,
) -> Optional[Decimal]:
    """
    Price to store on a session.

    With the welcome pack the fee is added to the base price (a missing
    base counts as 0). Without it the base price is returned untouched,
    which may be None ("unset").
    """
    if include_welcome_pack:
        return (to_decimal(base_price) or ZERO) + to_decimal(welcome_pack_fee)
    return to_decimal(base_price)


def welcome_pack_marker(include_welcome_pack: bool, welcome_pack_fee: Amount) -> Optional[Decimal]:
    """Fee recorded on the session for later welcome pack reporting"""
    if include_welcome_pack:
        return to_decimal(welcome_pack_fee)
    return None


def effective_price(price: Optional[Amount]) -> Decimal:
    """Billable amount for a session, substituting the default for an unset price"""
    if price is None:
        return DEFAULT_SESSION_PRICE
    return to_decimal(price)


def cleaner_payout(apartment: Optional[Any]) -> Decimal:
    """Current payout configured on the apartment (0 when missing or unset)"""
    if apartment is None or getattr(apartment, "cleaner_payout", None) is None:
        return ZERO
    return to_decimal(apartment.cleaner_payout)
