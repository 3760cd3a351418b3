"""
Price Calculator for the Basket Domain

Computes the unit price of a line item from the product's price tiers, the
customer's own price offer and the surcharges of the chosen attributes.
"""

import re
from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from ..entities import CatalogAttribute, LineItem
from ..exceptions import InvalidPriceValue
from ..value_objects import AttributeType, Price
from .pricing import get_lowest_price

CUSTOM_PRICE_CODE = "price"
CUSTOM_PRICE_PATTERN = re.compile(r"^[0-9]*(\.[0-9]+)?$")


class PriceCalculator:
    """
    Domain service calculating line item prices.

    The calculation has no side effects: neither the line item nor the
    attribute snapshots are changed, the new price is returned.

    Example:
        ```python
        calculator = PriceCalculator()
        item.price = calculator.calc_price(item, product.prices, item.quantity, attributes, "EUR")
        ```
    """

    def __init__(self, min_custom_price: Decimal = Decimal("0.01")):
        self.min_custom_price = min_custom_price

    def calc_price(
        self,
        item: LineItem,
        prices: Iterable[Price],
        quantity: Any,
        attributes: Mapping[str, CatalogAttribute] | None = None,
        currency: str | None = None,
    ) -> Price:
        """
        Return the unit price of the line item for the given quantity.

        Args:
            item: Line item including its attribute snapshots
            prices: Price tiers of the product
            quantity: Quantity the tier is chosen for
            attributes: Catalog attributes referenced by the snapshots, by ID
            currency: Currency of the active locale

        Raises:
            InvalidPriceValue: If the customer's own price offer is malformed or too low
            NoPriceAvailable: If the product or a priced attribute has no tier in the currency
        """
        price = get_lowest_price(prices, quantity, currency, item.site_id, reference=item.product_code)

        # customers can pay what they would like to pay
        custom = item.get_attribute_item(CUSTOM_PRICE_CODE, AttributeType.CUSTOM)
        if custom is not None:
            price = price.with_value(self._custom_amount(custom.value))

        attributes = attributes or {}
        for snapshot in item.attributes:
            attr_item = attributes.get(snapshot.attribute_id) if snapshot.attribute_id else None
            if attr_item is None or not attr_item.prices:
                continue

            attr_price = get_lowest_price(
                attr_item.prices, snapshot.quantity, currency, item.site_id, reference=attr_item.code
            )
            price = price.add_item(attr_price, snapshot.quantity)

        # rebates granted in the catalog are replaced by the ones of the order
        return price.with_rebate(Decimal("0"))

    def _custom_amount(self, value: Any) -> Decimal:
        amount = str(value)

        if CUSTOM_PRICE_PATTERN.match(amount) is None:
            raise InvalidPriceValue(value)

        try:
            result = Decimal(amount)
        except InvalidOperation as e:
            raise InvalidPriceValue(value) from e

        if result < self.min_custom_price:
            raise InvalidPriceValue(value)

        return result
