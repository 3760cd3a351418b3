"""
Limits product quantities to what is in stock.
"""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from shopbasket.core.domain import to_decimal
from shopbasket.domains.basket.domain.entities import CatalogProduct
from shopbasket.domains.basket.domain.exceptions import InsufficientStock
from shopbasket.domains.basket.domain.services import check_quantity, floor_quantity, to_quantity
from shopbasket.domains.basket.domain.value_objects import ProductType

from .base import BasketDecorator
from .select import find_article


class StockDecorator(BasketDecorator):
    """
    Clamps quantities to the available stock level.

    Quantities are rounded up to the sale unit first. If less is in stock,
    the available quantity rounded down to the sale unit is added (or set)
    and InsufficientStock is raised afterwards, so the customer gets what
    is there and is told about the rest. Stock levels of None stand for
    unlimited stock.
    """

    @property
    def enabled(self) -> bool:
        return self.context.settings.BASKET_CHECK_STOCK

    def add_product(
        self,
        product: CatalogProduct,
        quantity: Any = 1,
        variant: Sequence[str] = (),
        config: Mapping[str, Any] | None = None,
        custom: Mapping[str, Any] | None = None,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> "StockDecorator":
        if not self.enabled:
            return super().add_product(product, quantity, variant, config, custom, stock_type, site_id)

        target = product
        if product.type == ProductType.SELECT:
            target = find_article(product, variant, self.context.settings.BASKET_REQUIRE_VARIANT)

        requested = check_quantity(to_quantity(quantity), target.scale)
        qty = self._clamp(target.id, stock_type, requested, target.scale)

        if qty > 0:
            super().add_product(product, qty, variant, config, custom, stock_type, site_id)

        if qty < requested:
            raise InsufficientStock(target.id, target.label, requested, qty)

        return self

    def update_product(self, position: int, quantity: Any) -> "StockDecorator":
        if not self.enabled:
            return super().update_product(position, quantity)

        item = self.get().get_product(position)
        requested = check_quantity(to_quantity(quantity), item.scale)
        qty = self._clamp(item.product_id, item.stock_type, requested, item.scale)

        if qty > 0:
            super().update_product(position, qty)

        if qty < requested:
            raise InsufficientStock(item.product_id, item.name, requested, qty)

        return self

    def _clamp(self, product_id: str, stock_type: str, quantity: Decimal, scale: Decimal) -> Decimal:
        level = self.context.stock.get_stock_level(product_id, stock_type)
        if level is None or to_decimal(level) >= quantity:
            return quantity
        return max(floor_quantity(level, scale), Decimal(0))
