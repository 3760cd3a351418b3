"""
Price tier and quantity primitives.

Both functions are pure and work on Decimal values only, so comparisons of
monetary amounts and quantities never suffer from float rounding.
"""

from collections.abc import Iterable
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import Any

from shopbasket.core.domain import to_decimal

from ..exceptions import InvalidQuantity, NoPriceAvailable
from ..value_objects import Price

QUANTITY_TOLERANCE = Decimal("0.0005")
QUANTITY_PRECISION = Decimal("0.0001")


def to_quantity(value: Any) -> Decimal:
    """
    Convert a customer supplied quantity.

    Raises:
        InvalidQuantity: If the value is not a positive number
    """
    try:
        qty = to_decimal(value)
    except ValueError as e:
        raise InvalidQuantity(value) from e

    if not qty.is_finite() or qty <= 0:
        raise InvalidQuantity(value)
    return qty


def get_lowest_price(
    prices: Iterable[Price],
    quantity: Any,
    currency: str | None = None,
    site_id: str | None = None,
    reference: str = "price list",
) -> Price:
    """
    Return the price valid for at least the given quantity.

    Among the tiers of the requested currency, the one with the highest
    breakpoint not above `quantity` wins; equal breakpoints are decided by
    the lower value. If the quantity is below every breakpoint, the tier
    with the smallest breakpoint is used. Tiers of `site_id` take precedence
    over tiers of other sites when there are any.

    Args:
        prices: Price tiers of a product, attribute or service
        quantity: Requested quantity
        currency: Currency the price must be in, any if None
        site_id: Preferred site of the price
        reference: Name of the priced item used in the error message

    Raises:
        NoPriceAvailable: If no tier exists for the currency
    """
    candidates = [p for p in prices if currency is None or p.currency == currency]

    if site_id:
        own = [p for p in candidates if p.site_id == site_id]
        candidates = own or candidates

    if not candidates:
        raise NoPriceAvailable(reference, currency)

    qty = to_decimal(quantity)
    eligible = [p for p in candidates if p.quantity <= qty]

    if eligible:
        return min(eligible, key=lambda p: (-p.quantity, p.value))

    return min(candidates, key=lambda p: (p.quantity, p.value))


def check_quantity(quantity: Any, scale: Any) -> Decimal:
    """
    Round a quantity up to the next multiple of the sale unit scale.

    Quantities that are already a multiple (within a tolerance of 0.0005)
    are returned unchanged, so applying the function twice gives the same
    result as applying it once.
    """
    qty = to_decimal(quantity)
    step = to_decimal(scale)

    if step <= 0:
        return qty

    if qty % step >= QUANTITY_TOLERANCE:
        units = (qty / step).to_integral_value(rounding=ROUND_CEILING)
        return (units * step).quantize(QUANTITY_PRECISION)

    return qty


def floor_quantity(quantity: Any, scale: Any) -> Decimal:
    """Round a quantity down to the previous multiple of the sale unit scale."""
    qty = to_decimal(quantity)
    step = to_decimal(scale)

    if step <= 0 or qty % step < QUANTITY_TOLERANCE:
        return qty

    units = (qty / step).to_integral_value(rounding=ROUND_FLOOR)
    return (units * step).quantize(QUANTITY_PRECISION)
