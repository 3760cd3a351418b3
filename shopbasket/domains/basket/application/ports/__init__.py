"""
Basket Application Ports

Interface definitions (ports) for the collaborators the basket depends on.
Uses Protocol for structural typing.
"""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from shopbasket.domains.basket.domain.entities import (
    Basket,
    CatalogProduct,
    CatalogService,
    LineItem,
    OrderService,
)
from shopbasket.domains.basket.domain.services import AttributeSource
from shopbasket.domains.basket.domain.value_objects import LocaleKey, Price


@runtime_checkable
class ICatalogManager(Protocol):
    """
    Interface for catalog product lookups.

    Products are returned with prices, attributes and sub-products of the
    active locale.
    """

    def get(self, product_id: str) -> CatalogProduct:
        """Get product by ID, raises ProductNotFound"""
        ...

    def find_parents(self, product_id: str) -> list[CatalogProduct]:
        """Get products referencing the product in their "default" product list"""
        ...

    def has_category(self, product_ids: Sequence[str]) -> bool:
        """Check if one of the products is linked to a visible category"""
        ...


@runtime_checkable
class IAttributeManager(AttributeSource, Protocol):
    """
    Interface for attribute lookups.

    `get_many` returns only enabled attributes, so the result can be shorter
    than the list of IDs.
    """


@runtime_checkable
class IRuleManager(Protocol):
    """Interface for catalog pricing rules."""

    def apply(self, product: CatalogProduct, type: str = "catalog") -> CatalogProduct:
        """Return the product with the rules of the type applied to its prices"""
        ...


@runtime_checkable
class IServiceProvider(Protocol):
    """Interface for a delivery or payment provider."""

    def check_config_fe(self, config: dict[str, Any]) -> dict[str, str | None]:
        """Validate customer input, one entry per known key, None if valid"""
        ...

    def calc_price(self, basket: Basket, config: dict[str, Any]) -> Price:
        """Price of the service for the basket"""
        ...

    def set_config_fe(self, service: OrderService, config: dict[str, Any]) -> OrderService:
        """Store the accepted configuration in the order service"""
        ...


@runtime_checkable
class IServiceManager(Protocol):
    """Interface for delivery and payment options."""

    def get(self, service_id: str) -> CatalogService:
        """Get service by ID, raises ServiceNotFound"""
        ...

    def get_provider(self, service: CatalogService, type: str) -> IServiceProvider:
        """Get the provider implementing the service"""
        ...


@runtime_checkable
class ICouponProvider(Protocol):
    """Interface for the logic behind a coupon code."""

    def is_available(self, basket: Basket) -> bool:
        """Check if the basket meets the requirements of the coupon"""
        ...

    def calc_items(self, basket: Basket) -> list[LineItem]:
        """Line items (rebates, free products) the coupon adds"""
        ...


@runtime_checkable
class ICouponManager(Protocol):
    """Interface for coupon code lookups."""

    def find(self, code: str) -> ICouponProvider | None:
        """Get the provider of an active coupon code"""
        ...


@runtime_checkable
class IStockManager(Protocol):
    """Interface for stock levels."""

    def get_stock_level(self, product_id: str, stock_type: str) -> Decimal | None:
        """
        Get available quantity, None for unlimited.

        Raises StockNotFound if no stock record exists.
        """
        ...


@runtime_checkable
class ILocaleManager(Protocol):
    """Interface for locale resolution."""

    def bootstrap(self, site: str, language: str, currency: str) -> LocaleKey:
        """Get the locale for the given codes"""
        ...

    def get_site_path(self, site: str) -> list[str]:
        """Get the site IDs from the root site to the given one"""
        ...


@runtime_checkable
class ISessionStore(Protocol):
    """Interface for scalar session values."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get value by key"""
        ...

    def set(self, key: str, value: str | None) -> None:
        """Set or remove (None) a value"""
        ...


@runtime_checkable
class IMessageQueue(Protocol):
    """Interface for fire-and-forget messages."""

    def add(self, topic: str, message: dict[str, Any]) -> None:
        """Queue a message"""
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Defines the contract for order data access.
    """

    def save(self, basket: Basket, editor: str) -> Basket:
        """Persist a finished basket as order"""
        ...

    def get(
        self, order_id: str, customer_id: str | None = None, refs: Sequence[str] | None = None
    ) -> Basket | None:
        """Get order by ID with the referenced parts, optionally restricted to a customer"""
        ...

    def count_since(self, editor: str, since: datetime) -> int:
        """Count orders of the editor created since the given time"""
        ...


__all__ = [
    "ICatalogManager",
    "IAttributeManager",
    "IRuleManager",
    "IServiceProvider",
    "IServiceManager",
    "ICouponProvider",
    "ICouponManager",
    "IStockManager",
    "ILocaleManager",
    "ISessionStore",
    "IMessageQueue",
    "IOrderRepository",
]
