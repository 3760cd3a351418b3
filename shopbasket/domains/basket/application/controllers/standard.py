"""
Standard Basket Controller

Innermost link of the controller chain: owns the baskets of the session and
implements the basket operations for products sold as they are.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Any

from pydantic import ValidationError

from shopbasket.core.shared import sanitize_scalars
from shopbasket.domains.basket.domain.entities import (
    Basket,
    CatalogProduct,
    CatalogService,
    OrderAddress,
    OrderService,
)
from shopbasket.domains.basket.domain.exceptions import (
    AddressInvalid,
    BasketValuesInvalid,
    CouponLimitReached,
    CouponNotAvailable,
    CouponNotFound,
    ImmutableLineItem,
    OrderLimitReached,
    OrderNotFound,
    ServiceAttributesInvalid,
    ServiceAttributesUnknown,
)
from shopbasket.domains.basket.domain.value_objects import SUBSCRIPTION_ATTRIBUTE_TYPES
from shopbasket.domains.basket.infrastructure.session import BasketSessionManager

from ..context import BasketContext
from ..dto import AddressInput, MigrationReport
from .iface import BasketControllerIface
from .locale_migrator import LocaleMigrator
from .pipeline import ProductAdditionPipeline

logger = logging.getLogger(__name__)

BASKET_VALUES = ("comment", "customer_reference")
SUBSCRIPTION_TOPIC = "order/subscription"


@dataclass
class BasketEntry:
    """Basket of one type; `loaded` is set once the locale check ran."""

    basket: Basket
    loaded: bool = False


class StandardBasketController(BasketControllerIface):
    """
    Basket controller for the session of one customer.

    Every mutator commits its change and saves the basket to the session
    before it returns. The first access to a basket type compares the
    locale the basket was created for with the active one and migrates the
    basket if they differ.

    Example:
        ```python
        controller = StandardBasketController(context)
        controller.add_product(product, 2).add_coupon("GHIJ")
        order = controller.store()
        ```
    """

    def __init__(self, context: BasketContext, pipeline: ProductAdditionPipeline | None = None):
        self.context = context
        self.settings = context.settings
        self.pipeline = pipeline or ProductAdditionPipeline(context)
        self.sessions = BasketSessionManager(context.session)
        self.migrator = LocaleMigrator(context, self.sessions)

        self._type = self.settings.BASKET_DEFAULT_TYPE
        self._baskets: dict[str, BasketEntry] = {}
        self._object: BasketControllerIface = self
        self._migration_report: MigrationReport | None = None

    # ==================== CHAIN ====================

    def set_object(self, controller: BasketControllerIface) -> "StandardBasketController":
        self._object = controller
        return self

    @property
    def migration_report(self) -> MigrationReport | None:
        return self._migration_report

    # ==================== BASKET ====================

    def add(self, values: Mapping[str, Any]) -> "StandardBasketController":
        unknown = set(values) - set(BASKET_VALUES)
        if unknown:
            raise BasketValuesInvalid(unknown)

        self.get().update_values(**{k: v or "" for k, v in sanitize_scalars(values).items()})
        return self.save()

    def clear(self) -> "StandardBasketController":
        # a cleared basket is never migrated
        self._baskets[self._type] = BasketEntry(Basket(locale=self.context.locale), loaded=True)
        self.sessions.clear(self.context.locale, self._type)
        self.sessions.set_locale(self._type, self.context.locale)
        return self

    def get(self) -> Basket:
        entry = self._baskets.get(self._type)

        if entry is None:
            basket = self.sessions.load(self.context.locale, self._type) or Basket(locale=self.context.locale)
            entry = self._baskets[self._type] = BasketEntry(basket)

        if not entry.loaded:
            # set before the check, the migration reads the basket again
            entry.loaded = True
            report = self.migrator.check(self._object, self._type)
            if report is not None:
                self._migration_report = report

        return entry.basket

    def save(self) -> "StandardBasketController":
        entry = self._baskets.get(self._type)

        if entry is not None and entry.basket.is_modified():
            self.sessions.save(entry.basket, self.context.locale, self._type)
            entry.basket.set_modified(False)

        return self

    def set_type(self, type: str) -> "StandardBasketController":
        self._type = type
        return self

    def store(self) -> Basket:
        """
        Turn the basket into an order.

        Raises:
            OrderLimitReached: If the editor created too many orders recently
            BasketIncomplete: If the basket can't be ordered
        """
        count = self.settings.BASKET_LIMIT_COUNT
        seconds = self.settings.BASKET_LIMIT_SECONDS
        editor = self.context.editor

        since = datetime.now(UTC) - timedelta(seconds=seconds)
        actual = self.context.orders.count_since(editor, since)

        if actual >= count:
            logger.warning(f"Order limit of {count} orders in {seconds}s reached by editor {editor!r}")
            raise OrderLimitReached(count, actual, seconds)

        basket = self.get()
        basket.check()

        if self.context.user_id:
            basket.update_values(customer_id=self.context.user_id)
        basket.finish()

        order = self.context.orders.save(basket, editor)
        self.save()
        self._create_subscriptions(order)

        return order

    def load(
        self, order_id: str, refs: Sequence[str] | None = None, require_ownership: bool = True
    ) -> Basket:
        customer_id = None

        if require_ownership:
            if not self.context.user_id:
                raise OrderNotFound(order_id)
            customer_id = self.context.user_id

        order = self.context.orders.get(order_id, customer_id, refs)
        if order is None:
            raise OrderNotFound(order_id)

        return order

    # ==================== PRODUCTS ====================

    def add_product(
        self,
        product: CatalogProduct,
        quantity: Any = 1,
        variant: Sequence[str] = (),
        config: Mapping[str, Any] | None = None,
        custom: Mapping[str, Any] | None = None,
        stock_type: str = "default",
        site_id: str | None = None,
    ) -> "StandardBasketController":
        item = self.pipeline.create_line_item(product, quantity, config, custom, stock_type, site_id)

        self.get().add_product(item)
        return self.save()

    def delete_product(self, position: int) -> "StandardBasketController":
        basket = self.get()

        if basket.get_product(position).is_immutable():
            raise ImmutableLineItem(position, "deleted")

        basket.delete_product(position)
        return self.save()

    def update_product(self, position: int, quantity: Any) -> "StandardBasketController":
        basket = self.get()
        item = basket.get_product(position)

        if item.is_immutable():
            raise ImmutableLineItem(position)

        product = self.pipeline.get_product(item.product_id)
        qty = self.pipeline.check_quantity(product, quantity)
        price = self.pipeline.calc_price(item, product.prices, qty)

        basket.add_product(replace(item, quantity=qty, price=price), position)
        return self.save()

    # ==================== COUPONS ====================

    def add_coupon(self, code: str) -> "StandardBasketController":
        basket = self.get()
        allowed = self.settings.BASKET_COUPON_ALLOWED
        actual = len(basket.get_coupon_codes())

        if actual >= allowed:
            raise CouponLimitReached(allowed, actual + 1)

        provider = self.context.coupons.find(code)
        if provider is None:
            raise CouponNotFound(code)

        if not provider.is_available(basket):
            raise CouponNotAvailable(code)

        basket.add_coupon(code, provider.calc_items(basket))
        return self.save()

    def delete_coupon(self, code: str) -> "StandardBasketController":
        self.get().delete_coupon(code)
        return self.save()

    # ==================== ADDRESSES ====================

    def add_address(
        self, type: str, values: OrderAddress | Mapping[str, Any], position: int | None = None
    ) -> "StandardBasketController":
        address = values if isinstance(values, OrderAddress) else self._create_address(values)

        self.get().add_address(address, type, position)
        return self.save()

    def delete_address(self, type: str, position: int | None = None) -> "StandardBasketController":
        self.get().delete_address(type, position)
        return self.save()

    # ==================== SERVICES ====================

    def add_service(
        self, service: CatalogService, config: Mapping[str, Any] | None = None, position: int | None = None
    ) -> "StandardBasketController":
        """
        Add a delivery or payment service with the customer's configuration.

        Raises:
            ServiceAttributesUnknown: If the provider doesn't know some keys
            ServiceAttributesInvalid: If the provider rejects some values
        """
        config = dict(config or {})
        basket = self.get()
        provider = self.context.services.get_provider(service, service.type)

        errors = provider.check_config_fe(config)

        unknown = {k: v for k, v in config.items() if k not in errors}
        if unknown:
            raise ServiceAttributesUnknown(unknown)

        invalid = {k: v for k, v in errors.items() if v}
        if invalid:
            raise ServiceAttributesInvalid(invalid)

        # the same service replaces itself
        for pos, existing in enumerate(basket.get_service(service.type)):
            if existing.code == service.code:
                position = pos

        price = provider.calc_price(basket, config).with_rebate(Decimal("0"))
        order_service = provider.set_config_fe(OrderService.from_service(service, price), config)

        basket.add_service(order_service, service.type, position)
        return self.save()

    def delete_service(self, type: str, position: int | None = None) -> "StandardBasketController":
        self.get().delete_service(type, position)
        return self.save()

    # ==================== HELPERS ====================

    def _create_address(self, values: Mapping[str, Any]) -> OrderAddress:
        try:
            return AddressInput.model_validate(sanitize_scalars(values)).to_address()
        except ValidationError as e:
            errors = {".".join(str(loc) for loc in err["loc"]) or "address": err["msg"] for err in e.errors()}
            raise AddressInvalid(errors) from e

    def _create_subscriptions(self, order: Basket) -> None:
        """Queue one subscription per ordered product with an interval."""
        for pos, item in enumerate(order.products):
            for type in SUBSCRIPTION_ATTRIBUTE_TYPES:
                interval = item.get_attribute("interval", type)
                if interval is None:
                    continue

                message = {
                    "order_id": order.id,
                    "position": pos,
                    "product_id": item.product_id,
                    "interval": interval,
                }
                end = item.get_attribute("intervalend", type)
                if end is not None:
                    message["end"] = end

                try:
                    self.context.queue.add(SUBSCRIPTION_TOPIC, message)
                except Exception as e:
                    logger.error(f"Error creating subscription for order {order.id} position {pos}: {e}")
                break
