"""
Basket controller interface shared by the standard controller and all of
its decorators.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from shopbasket.domains.basket.application.dto import MigrationReport
from shopbasket.domains.basket.domain.entities import Basket, CatalogProduct, CatalogService, OrderAddress


class BasketControllerIface(ABC):
    """
    Fluent basket API.

    Mutators commit their change to the basket and return the controller,
    so calls can be chained:

        controller.add_product(product, 2).add_coupon("GHIJ").save()
    """

    @abstractmethod
    def add(self, values: Mapping[str, Any]) -> "BasketControllerIface":
        """Set basket level values (comment, customer reference)"""

    @abstractmethod
    def clear(self) -> "BasketControllerIface":
        """Empty the basket of the current type"""

    @abstractmethod
    def get(self) -> Basket:
        """Basket of the current type, migrated to the active locale if necessary"""

    @abstractmethod
    def save(self) -> "BasketControllerIface":
        """Persist the basket in the session if it was modified"""

    @abstractmethod
    def set_type(self, type: str) -> "BasketControllerIface":
        """Switch to another basket type"""

    @abstractmethod
    def store(self) -> Basket:
        """Turn the basket into an order"""

    @abstractmethod
    def load(self, order_id: str, refs: Sequence[str] | None = None, require_ownership: bool = True) -> Basket:
        """Load a stored order"""

    @abstractmethod
    def add_product(
        self,
        product: CatalogProduct,
        quantity: Any = 1,
        variant: Sequence[str] = (),
        config: Mapping[str, Any] | None = None,
        custom: Mapping[str, Any] | None = None,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> "BasketControllerIface":
        """
        Add a product to the basket.

        Args:
            product: Catalog product including prices, attributes and sub-products
            quantity: Number of items
            variant: Variant attribute IDs identifying the article of a selection
            config: Config attribute IDs with their quantities
            custom: Custom attribute IDs with the values entered by the customer
            stock_type: Stock type (warehouse) to deliver from
            site_id: Site the product is bought from, the product's site if None
        """

    @abstractmethod
    def delete_product(self, position: int) -> "BasketControllerIface":
        """Remove the line item at the position"""

    @abstractmethod
    def update_product(self, position: int, quantity: Any) -> "BasketControllerIface":
        """Change the quantity of the line item at the position"""

    @abstractmethod
    def add_coupon(self, code: str) -> "BasketControllerIface":
        """Redeem a coupon code"""

    @abstractmethod
    def delete_coupon(self, code: str) -> "BasketControllerIface":
        """Remove a coupon code and its effects"""

    @abstractmethod
    def add_address(
        self, type: str, values: OrderAddress | Mapping[str, Any], position: int | None = None
    ) -> "BasketControllerIface":
        """Add or replace an address of the type"""

    @abstractmethod
    def delete_address(self, type: str, position: int | None = None) -> "BasketControllerIface":
        """Remove one or all addresses of the type"""

    @abstractmethod
    def add_service(
        self, service: CatalogService, config: Mapping[str, Any] | None = None, position: int | None = None
    ) -> "BasketControllerIface":
        """Add or replace a delivery or payment service"""

    @abstractmethod
    def delete_service(self, type: str, position: int | None = None) -> "BasketControllerIface":
        """Remove one or all services of the type"""

    @property
    @abstractmethod
    def migration_report(self) -> MigrationReport | None:
        """Report of the last locale migration"""

    @abstractmethod
    def set_object(self, controller: "BasketControllerIface") -> "BasketControllerIface":
        """Register the outermost controller of the chain"""
