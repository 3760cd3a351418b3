"""
Base class for basket controller decorators.

Every operation is passed on to the wrapped controller unchanged. Concrete
decorators override the operations they add behaviour to and decide per
product or line item whether their rule applies.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from shopbasket.domains.basket.application.context import BasketContext
from shopbasket.domains.basket.application.dto import MigrationReport
from shopbasket.domains.basket.domain.entities import Basket, CatalogProduct, CatalogService, OrderAddress

from ..iface import BasketControllerIface
from ..pipeline import ProductAdditionPipeline


class BasketDecorator(BasketControllerIface):
    def __init__(
        self,
        controller: BasketControllerIface,
        context: BasketContext,
        pipeline: ProductAdditionPipeline,
    ):
        self.controller = controller
        self.context = context
        self.pipeline = pipeline

    def set_object(self, controller: BasketControllerIface) -> "BasketDecorator":
        self.controller.set_object(controller)
        return self

    @property
    def migration_report(self) -> MigrationReport | None:
        return self.controller.migration_report

    def add(self, values: Mapping[str, Any]) -> "BasketDecorator":
        self.controller.add(values)
        return self

    def clear(self) -> "BasketDecorator":
        self.controller.clear()
        return self

    def get(self) -> Basket:
        return self.controller.get()

    def save(self) -> "BasketDecorator":
        self.controller.save()
        return self

    def set_type(self, type: str) -> "BasketDecorator":
        self.controller.set_type(type)
        return self

    def store(self) -> Basket:
        return self.controller.store()

    def load(self, order_id: str, refs: Sequence[str] | None = None, require_ownership: bool = True) -> Basket:
        return self.controller.load(order_id, refs, require_ownership)

    def add_product(
        self,
        product: CatalogProduct,
        quantity: Any = 1,
        variant: Sequence[str] = (),
        config: Mapping[str, Any] | None = None,
        custom: Mapping[str, Any] | None = None,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> "BasketDecorator":
        self.controller.add_product(product, quantity, variant, config, custom, stock_type, site_id)
        return self

    def delete_product(self, position: int) -> "BasketDecorator":
        self.controller.delete_product(position)
        return self

    def update_product(self, position: int, quantity: Any) -> "BasketDecorator":
        self.controller.update_product(position, quantity)
        return self

    def add_coupon(self, code: str) -> "BasketDecorator":
        self.controller.add_coupon(code)
        return self

    def delete_coupon(self, code: str) -> "BasketDecorator":
        self.controller.delete_coupon(code)
        return self

    def add_address(
        self, type: str, values: OrderAddress | Mapping[str, Any], position: int | None = None
    ) -> "BasketDecorator":
        self.controller.add_address(type, values, position)
        return self

    def delete_address(self, type: str, position: int | None = None) -> "BasketDecorator":
        self.controller.delete_address(type, position)
        return self

    def add_service(
        self, service: CatalogService, config: Mapping[str, Any] | None = None, position: int | None = None
    ) -> "BasketDecorator":
        self.controller.add_service(service, config, position)
        return self

    def delete_service(self, type: str, position: int | None = None) -> "BasketDecorator":
        self.controller.delete_service(type, position)
        return self
