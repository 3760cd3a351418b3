"""
Price Value Object for the Basket Domain

A price tier entry: monetary value, delivery costs and rebate in one
currency, valid from a minimum quantity on.
"""

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from shopbasket.core.domain import ValueObject, to_decimal

CENT = Decimal("0.01")


def _money(value: Any) -> Decimal:
    return to_decimal(value).quantize(CENT, ROUND_HALF_UP)


@dataclass(frozen=True)
class Price(ValueObject):
    """
    Price value object for products, attributes and services.

    `quantity` is the tier breakpoint: the price applies when at least that
    many units are bought. Prices are composed with `add_item`, which is how
    attribute surcharges end up in a line item price.

    Example:
        ```python
        base = Price(value=Decimal("10.00"), currency="EUR")
        engraving = Price(value=Decimal("2.50"), currency="EUR")
        total = base.add_item(engraving, quantity=2)  # 15.00
        ```
    """

    value: Decimal = Decimal("0.00")
    costs: Decimal = Decimal("0.00")
    rebate: Decimal = Decimal("0.00")
    currency: str = "EUR"
    quantity: Decimal = Decimal("1")
    tax_rate: Decimal = Decimal("0.00")
    site_id: str = ""

    def _validate(self) -> None:
        """Normalize amounts to exact cents and check the currency code."""
        object.__setattr__(self, "value", _money(self.value))
        object.__setattr__(self, "costs", _money(self.costs))
        object.__setattr__(self, "rebate", _money(self.rebate))
        object.__setattr__(self, "tax_rate", to_decimal(self.tax_rate))
        object.__setattr__(self, "quantity", to_decimal(self.quantity))

        if not self.currency or len(self.currency) != 3:
            raise ValueError("Currency must be a 3-letter ISO code")
        if self.quantity <= 0:
            raise ValueError("Price tier quantity must be positive")

    def add_item(self, item: "Price", quantity: Any = 1) -> "Price":
        """
        Add another price `quantity` times (value, costs and rebate).

        Raises:
            ValueError: If the currencies differ
        """
        if item.currency != self.currency:
            raise ValueError(f"Cannot add {item.currency} price to {self.currency} price")

        qty = to_decimal(quantity)
        return replace(
            self,
            value=self.value + item.value * qty,
            costs=self.costs + item.costs * qty,
            rebate=self.rebate + item.rebate * qty,
        )

    def with_value(self, value: Any) -> "Price":
        return replace(self, value=value)

    def with_rebate(self, rebate: Any) -> "Price":
        return replace(self, rebate=rebate)

    def multiply(self, quantity: Any) -> "Price":
        """Value, costs and rebate for `quantity` units."""
        qty = to_decimal(quantity)
        return replace(
            self,
            value=self.value * qty,
            costs=self.costs * qty,
            rebate=self.rebate * qty,
        )

    def is_free(self) -> bool:
        return self.value == Decimal("0") and self.costs == Decimal("0")

    def __str__(self) -> str:
        return f"{self.value:,.2f} {self.currency}"

    @classmethod
    def zero(cls, currency: str = "EUR") -> "Price":
        """Create a zero price."""
        return cls(currency=currency)
