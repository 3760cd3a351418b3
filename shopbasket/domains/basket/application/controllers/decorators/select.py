"""
Selection products: the article matching the chosen variant attributes is
put into the basket instead of the selection itself.
"""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from shopbasket.domains.basket.domain.entities import CatalogProduct, LineItem
from shopbasket.domains.basket.domain.exceptions import ImmutableLineItem, NoArticleFound, NoUniqueArticle
from shopbasket.domains.basket.domain.value_objects import AttributeType, ProductType

from .base import BasketDecorator


def find_article(product: CatalogProduct, variant: Sequence[str], require_variant: bool = True) -> CatalogProduct:
    """
    Return the article of a selection referencing all variant attributes.

    Raises:
        NoUniqueArticle: If more than one article matches
        NoArticleFound: If no article matches and a variant is required
    """
    wanted = set(variant)
    items = [
        item for item in product.products if wanted.issubset(item.get_attribute_ids(AttributeType.VARIANT))
    ]

    if len(items) > 1:
        raise NoUniqueArticle(product.id)

    if not items:
        if require_variant:
            raise NoArticleFound(product.id)
        return product

    return items[0]


class SelectDecorator(BasketDecorator):
    """
    Adds articles of selection products.

    The line item keeps the type and ID of the selection as parent and
    takes code, name, scale and preview image from the article. Prices of
    the article are used if it has any, otherwise the selection's prices.
    """

    @property
    def require_variant(self) -> bool:
        return self.context.settings.BASKET_REQUIRE_VARIANT

    def add_product(
        self,
        product: CatalogProduct,
        quantity: Any = 1,
        variant: Sequence[str] = (),
        config: Mapping[str, Any] | None = None,
        custom: Mapping[str, Any] | None = None,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> "SelectDecorator":
        if product.type != ProductType.SELECT:
            return super().add_product(product, quantity, variant, config, custom, stock_type, site_id)

        config = config or {}
        custom = custom or {}

        article = find_article(product, variant, self.require_variant)
        qty = self.pipeline.check_quantity(article, quantity)

        products = [product] if article is product else [product, article]
        self.pipeline.check_attributes(products, AttributeType.CUSTOM, custom.keys())
        self.pipeline.check_attributes(products, AttributeType.CONFIG, config.keys())

        hidden = list(
            dict.fromkeys(
                product.get_attribute_ids(AttributeType.HIDDEN) + article.get_attribute_ids(AttributeType.HIDDEN)
            )
        )
        variants = article.get_attribute_ids(AttributeType.VARIANT) if article is not product else []

        item = LineItem.from_product(product, qty, stock_type, self.pipeline.get_site_id(article, site_id))
        item.product_id = article.id
        item.parent_product_id = product.id
        item.product_code = article.code
        item.name = article.label or product.label
        item.scale = article.scale
        item.media_url = article.media_url or product.media_url
        item.attributes = self.pipeline.get_order_product_attributes(
            AttributeType.VARIANT, variants
        ) + self.pipeline.get_line_attributes(config, custom, hidden)
        item.price = self.pipeline.calc_price(item, article.prices or product.prices, qty)

        self.get().add_product(item)
        return self.save()

    def update_product(self, position: int, quantity: Any) -> "SelectDecorator":
        item = self.get().get_product(position)

        if item.type != ProductType.SELECT:
            return super().update_product(position, quantity)

        if item.is_immutable():
            raise ImmutableLineItem(position)

        article = self.pipeline.get_product(item.product_id)
        qty = self.pipeline.check_quantity(article, quantity)

        prices = article.prices
        if not prices and item.parent_product_id:
            prices = self.pipeline.get_product(item.parent_product_id).prices

        price = self.pipeline.calc_price(item, prices, qty)

        self.get().add_product(replace(item, quantity=qty, price=price), position)
        return self.save()
