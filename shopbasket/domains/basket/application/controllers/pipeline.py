"""
Product Addition Pipeline

The checks and transformations run when a product goes into the basket,
shared by the standard controller and the product type decorators.
"""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from typing import Any

from shopbasket.core.shared import sanitize_scalars
from shopbasket.domains.basket.domain.entities import AttributeSnapshot, CatalogProduct, LineItem
from shopbasket.domains.basket.domain.services import AttributeResolver, PriceCalculator, check_quantity, to_quantity
from shopbasket.domains.basket.domain.value_objects import AttributeType, Price

from ..context import BasketContext


class ProductAdditionPipeline:
    """
    Builds priced line items for catalog products.

    The steps run in a fixed order: quantity normalization, attribute
    authorization, attribute resolution, line item construction and price
    calculation. Nothing is written to the basket here, committing the line
    item is left to the caller.

    Example:
        ```python
        pipeline = ProductAdditionPipeline(context)
        item = pipeline.create_line_item(product, 2, config={"attr-1": 1})
        basket.add_product(item)
        ```
    """

    def __init__(
        self,
        context: BasketContext,
        calculator: PriceCalculator | None = None,
        resolver: AttributeResolver | None = None,
    ):
        self.context = context
        self.calculator = calculator or PriceCalculator()
        self.resolver = resolver or AttributeResolver(context.attributes)

    @property
    def currency(self) -> str:
        return self.context.locale.currency

    def check_quantity(self, product: CatalogProduct, quantity: Any) -> Decimal:
        """
        Validate the quantity and round it up to the product's sale unit.

        Raises:
            InvalidQuantity: If the quantity is not a positive number
        """
        return check_quantity(to_quantity(quantity), product.scale)

    def check_attributes(self, products: Iterable[CatalogProduct], list_type: str, ids: Iterable[str]) -> None:
        self.resolver.check_attributes(products, list_type, ids)

    def get_order_product_attributes(
        self,
        type: AttributeType | str,
        ids: Sequence[str],
        values: Mapping[str, Any] | None = None,
        quantities: Mapping[str, Any] | None = None,
    ) -> list[AttributeSnapshot]:
        return self.resolver.get_order_product_attributes(type, ids, values, quantities, self.currency)

    def get_line_attributes(
        self,
        config: Mapping[str, Any],
        custom: Mapping[str, Any],
        hidden: Sequence[str],
    ) -> list[AttributeSnapshot]:
        """
        Snapshots of the custom, config and hidden attributes, in this order.

        Custom values are free text entered by the customer and stored
        without markup.
        """
        custom = sanitize_scalars(custom)
        return (
            self.get_order_product_attributes(AttributeType.CUSTOM, list(custom), values=custom)
            + self.get_order_product_attributes(AttributeType.CONFIG, list(config), quantities=config)
            + self.get_order_product_attributes(AttributeType.HIDDEN, list(hidden))
        )

    def calc_price(self, item: LineItem, prices: Iterable[Price], quantity: Any) -> Price:
        attributes = self.resolver.get_attribute_items(item.attributes)
        return self.calculator.calc_price(item, prices, quantity, attributes, self.currency)

    def get_site_id(self, product: CatalogProduct, site_id: str | None = None) -> str:
        """
        Site the product is sold from.

        Products inherited from a parent site are sold by the current site.
        """
        if site_id:
            return site_id

        site_path = self.context.locales.get_site_path(self.context.locale.site)
        if product.site_id in site_path:
            return site_path[-1]
        return product.site_id

    def get_product(self, product_id: str) -> CatalogProduct:
        """Current catalog product with the catalog pricing rules applied."""
        product = self.context.catalog.get(product_id)
        return self.context.rules.apply(product, "catalog")

    def create_line_item(
        self,
        product: CatalogProduct,
        quantity: Any = 1,
        config: Mapping[str, Any] | None = None,
        custom: Mapping[str, Any] | None = None,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> LineItem:
        """Run all steps for a product sold as it is."""
        config = config or {}
        custom = custom or {}

        qty = self.check_quantity(product, quantity)
        self.check_attributes([product], AttributeType.CUSTOM, custom.keys())
        self.check_attributes([product], AttributeType.CONFIG, config.keys())

        attributes = self.get_line_attributes(config, custom, product.get_attribute_ids(AttributeType.HIDDEN))

        item = LineItem.from_product(product, qty, stock_type, self.get_site_id(product, site_id))
        item.attributes = attributes
        item.price = self.calc_price(item, product.prices, qty)

        return item
