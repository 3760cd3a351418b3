"""
Only products shown in the catalog, directly or as part of another
product, can be added.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from shopbasket.domains.basket.domain.entities import CatalogProduct
from shopbasket.domains.basket.domain.exceptions import ProductNotAllowed

from .base import BasketDecorator


class CategoryDecorator(BasketDecorator):
    def add_product(
        self,
        product: CatalogProduct,
        quantity: Any = 1,
        variant: Sequence[str] = (),
        config: Mapping[str, Any] | None = None,
        custom: Mapping[str, Any] | None = None,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> "CategoryDecorator":
        if not product.category_ids:
            parents = self.context.catalog.find_parents(product.id)

            if not parents or not self.context.catalog.has_category([p.id for p in parents]):
                raise ProductNotAllowed(product.id)

        return super().add_product(product, quantity, variant, config, custom, stock_type, site_id)
