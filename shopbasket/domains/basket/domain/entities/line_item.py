"""
Line Item Entity for the Basket Domain

A line item is the snapshot of a catalog product taken when it was put into
the basket, including the chosen attributes and the computed unit price.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from shopbasket.core.domain import ValueObject, to_decimal

from ..value_objects import AttributeType, LineItemFlag, Price, ProductType
from .catalog import CatalogProduct


@dataclass(frozen=True)
class AttributeSnapshot(ValueObject):
    """
    Attribute chosen for an ordered product.

    `code` is the attribute type in the catalog (e.g. "color"), `value` the
    captured value: the attribute code for variant/config/hidden attributes
    and the raw customer input for custom ones. `price` is the surcharge
    captured for the whole attribute quantity, if the attribute is priced.
    """

    type: AttributeType
    code: str
    value: Any
    attribute_id: str | None = None
    quantity: Decimal = Decimal("1")
    price: Decimal | None = None
    name: str = ""

    def _validate(self) -> None:
        object.__setattr__(self, "quantity", to_decimal(self.quantity))
        if self.quantity <= 0:
            raise ValueError("Attribute quantity must be positive")


@dataclass
class LineItem:
    """
    Ordered product.

    `price` is the unit price for the current quantity. Bundle contents are
    kept in `products`; `parent_product_id` points to the selection or
    bundle product the item was derived from.

    Example:
        ```python
        item = LineItem.from_product(product, quantity=Decimal("2"))
        item.price = calculator.calc_price(item, product.prices, item.quantity)
        ```
    """

    product_id: str
    product_code: str
    name: str = ""
    type: ProductType = ProductType.DEFAULT
    quantity: Decimal = Decimal("1")
    price: Price = field(default_factory=Price.zero)
    stock_type: str = "default"
    site_id: str = ""
    parent_product_id: str | None = None
    scale: Decimal = Decimal("1")
    media_url: str | None = None
    attributes: list[AttributeSnapshot] = field(default_factory=list)
    products: list["LineItem"] = field(default_factory=list)
    flags: int = 0

    @classmethod
    def from_product(
        cls,
        product: CatalogProduct,
        quantity: Any = 1,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> "LineItem":
        """Copy the catalog fields of a product into a new line item."""
        return cls(
            product_id=product.id,
            product_code=product.code,
            name=product.label,
            type=product.type,
            quantity=to_decimal(quantity),
            stock_type=stock_type,
            site_id=site_id or product.site_id,
            scale=product.scale,
            media_url=product.media_url,
        )

    def get_attribute_item(self, code: str, type: AttributeType | str) -> AttributeSnapshot | None:
        for attr in self.attributes:
            if attr.code == code and attr.type == type:
                return attr
        return None

    def get_attribute(self, code: str, type: AttributeType | str) -> Any:
        attr = self.get_attribute_item(code, type)
        return attr.value if attr is not None else None

    def get_attributes(self, type: AttributeType | str | None = None) -> list[AttributeSnapshot]:
        if type is None:
            return list(self.attributes)
        return [attr for attr in self.attributes if attr.type == type]

    def is_immutable(self) -> bool:
        return bool(self.flags & LineItemFlag.IMMUTABLE)

    def set_immutable(self) -> None:
        self.flags = int(self.flags | LineItemFlag.IMMUTABLE)

    def total(self) -> Price:
        """Price for the whole quantity."""
        return self.price.multiply(self.quantity)
