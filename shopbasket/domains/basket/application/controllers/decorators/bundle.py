"""
Bundle products: one line item per bundle with the bundled products as
nested line items.
"""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from shopbasket.domains.basket.domain.entities import CatalogProduct, LineItem
from shopbasket.domains.basket.domain.value_objects import AttributeType, ProductType

from .base import BasketDecorator


class BundleDecorator(BasketDecorator):
    """
    Adds bundle products as a whole.

    The bundle line and its contents are immutable: customers can only
    remove the bundle from the basket as a unit by clearing it.
    """

    def add_product(
        self,
        product: CatalogProduct,
        quantity: Any = 1,
        variant: Sequence[str] = (),
        config: Mapping[str, Any] | None = None,
        custom: Mapping[str, Any] | None = None,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> "BundleDecorator":
        if product.type != ProductType.BUNDLE:
            return super().add_product(product, quantity, variant, config, custom, stock_type, site_id)

        config = config or {}
        custom = custom or {}

        qty = self.pipeline.check_quantity(product, quantity)
        self.pipeline.check_attributes([product], AttributeType.CUSTOM, custom.keys())
        self.pipeline.check_attributes([product], AttributeType.CONFIG, config.keys())

        hidden = product.get_attribute_ids(AttributeType.HIDDEN)

        item = LineItem.from_product(product, qty, stock_type, self.pipeline.get_site_id(product, site_id))
        item.attributes = self.pipeline.get_line_attributes(config, custom, hidden)
        item.products = self._bundle_items(product, qty, stock_type)
        item.set_immutable()
        item.price = self.pipeline.calc_price(item, product.prices, qty)

        self.get().add_product(item)
        return self.save()

    def _bundle_items(self, product: CatalogProduct, quantity: Decimal, stock_type: str) -> list[LineItem]:
        items = []

        for sub in product.products:
            item = LineItem.from_product(sub, quantity, stock_type, self.pipeline.get_site_id(sub))
            item.parent_product_id = product.id
            item.set_immutable()
            item.price = self.pipeline.calc_price(item, sub.prices, quantity)
            items.append(item)

        return items
