"""
Basket Entity

The order in progress of one session and basket type.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from shopbasket.core.domain import Entity

from ..exceptions import BasketIncomplete, LineItemNotFound
from ..value_objects import LocaleKey, OrderStatus, Price
from .address import OrderAddress
from .line_item import LineItem
from .service import OrderService


@dataclass(eq=False)
class Basket(Entity):
    """
    Basket aggregate.

    Products are addressed by their list position, addresses and services by
    type and position within that type. Coupons map a code to the line items
    the coupon added (e.g. a rebate or a free product). Every mutation marks
    the basket as modified, which is what `save()` of the controller looks
    at.

    Example:
        ```python
        basket = Basket(locale=LocaleKey("default", "en", "EUR"))
        pos = basket.add_product(item)
        basket.delete_product(pos)
        basket.is_modified()  # True
        ```
    """

    customer_id: str = ""
    customer_reference: str = ""
    comment: str = ""
    locale: LocaleKey | None = None
    status: OrderStatus = OrderStatus.UNFINISHED
    products: list[LineItem] = field(default_factory=list)
    addresses: dict[str, list[OrderAddress]] = field(default_factory=dict)
    services: dict[str, list[OrderService]] = field(default_factory=dict)
    coupons: dict[str, list[LineItem]] = field(default_factory=dict)
    finished_at: datetime | None = None
    modified: bool = False

    # ==================== PRODUCTS ====================

    def add_product(self, item: LineItem, position: int | None = None) -> int:
        """
        Append a line item or replace the one at `position`.

        Returns:
            Position of the line item
        """
        if position is None:
            self.products.append(item)
            position = len(self.products) - 1
        else:
            self.get_product(position)
            self.products[position] = item

        self._changed()
        return position

    def get_product(self, position: int) -> LineItem:
        if position < 0 or position >= len(self.products):
            raise LineItemNotFound(position)
        return self.products[position]

    def delete_product(self, position: int) -> LineItem:
        item = self.get_product(position)
        del self.products[position]
        self._changed()
        return item

    # ==================== ADDRESSES ====================

    def add_address(self, address: OrderAddress, type: str, position: int | None = None) -> None:
        items = self.addresses.setdefault(type, [])

        if position is None or position >= len(items):
            items.append(address)
        else:
            items[position] = address

        self._changed()

    def get_address(self, type: str, position: int | None = None) -> list[OrderAddress]:
        items = self.addresses.get(type, [])
        if position is None:
            return list(items)
        return items[position : position + 1]

    def delete_address(self, type: str, position: int | None = None) -> None:
        """Delete one address of the type or all of them if no position is given."""
        if type not in self.addresses:
            return

        if position is None:
            del self.addresses[type]
        elif 0 <= position < len(self.addresses[type]):
            del self.addresses[type][position]
            if not self.addresses[type]:
                del self.addresses[type]

        self._changed()

    # ==================== SERVICES ====================

    def add_service(self, service: OrderService, type: str, position: int | None = None) -> None:
        items = self.services.setdefault(type, [])

        if position is None or position >= len(items):
            items.append(service)
        else:
            items[position] = service

        self._changed()

    def get_service(self, type: str, position: int | None = None) -> list[OrderService]:
        items = self.services.get(type, [])
        if position is None:
            return list(items)
        return items[position : position + 1]

    def delete_service(self, type: str, position: int | None = None) -> None:
        """Delete one service of the type or all of them if no position is given."""
        if type not in self.services:
            return

        if position is None:
            del self.services[type]
        elif 0 <= position < len(self.services[type]):
            del self.services[type][position]
            if not self.services[type]:
                del self.services[type]

        self._changed()

    # ==================== COUPONS ====================

    def add_coupon(self, code: str, items: list[LineItem] | None = None) -> None:
        self.coupons[code] = list(items or [])
        self._changed()

    def delete_coupon(self, code: str) -> None:
        if self.coupons.pop(code, None) is not None:
            self._changed()

    def get_coupon_codes(self) -> list[str]:
        return list(self.coupons)

    # ==================== LIFECYCLE ====================

    def update_values(self, **values: str) -> None:
        """Set basket level values like comment or customer reference."""
        for key, value in values.items():
            setattr(self, key, value)
        self._changed()

    def set_locale(self, locale: LocaleKey) -> None:
        self.locale = locale
        self._changed()

    def finish(self) -> None:
        self.status = OrderStatus.PENDING
        self.finished_at = datetime.now(UTC)
        self._changed()

    def check(self) -> None:
        """
        Verify that the basket can be turned into an order.

        Raises:
            BasketIncomplete: If the basket contains no products
        """
        if not self.products:
            raise BasketIncomplete("product")

    def get_price(self) -> Price:
        """Sum of all products, services and coupon effects."""
        currency = self.locale.currency if self.locale else "EUR"
        total = Price.zero(currency)

        for item in self.products:
            total = total.add_item(item.price, item.quantity)
        for items in self.services.values():
            for service in items:
                total = total.add_item(service.price)
        for items in self.coupons.values():
            for item in items:
                total = total.add_item(item.price, item.quantity)

        return total

    def is_empty(self) -> bool:
        return not (self.products or self.addresses or self.services or self.coupons)

    def is_modified(self) -> bool:
        return self.modified

    def set_modified(self, modified: bool = True) -> None:
        self.modified = modified

    def _changed(self) -> None:
        self.modified = True
        self.touch()
