"""
Basket Context

Request scoped bundle of the active locale, the session, the settings and
all collaborators the basket controllers work with.
"""

from dataclasses import dataclass, field, replace

from shopbasket.config import Settings, get_settings
from shopbasket.domains.basket.domain.value_objects import LocaleKey

from .ports import (
    IAttributeManager,
    ICatalogManager,
    ICouponManager,
    ILocaleManager,
    IMessageQueue,
    IOrderRepository,
    IRuleManager,
    IServiceManager,
    ISessionStore,
    IStockManager,
)


@dataclass
class BasketContext:
    """
    Everything a basket controller needs for one request.

    `user_id` is the logged in customer (None for guests), `editor` the
    name used for rate limiting finished orders, usually the user ID or the
    client IP address.
    """

    locale: LocaleKey
    session: ISessionStore
    catalog: ICatalogManager
    attributes: IAttributeManager
    rules: IRuleManager
    services: IServiceManager
    coupons: ICouponManager
    stock: IStockManager
    locales: ILocaleManager
    orders: IOrderRepository
    queue: IMessageQueue
    settings: Settings = field(default_factory=get_settings)
    user_id: str | None = None
    editor: str = ""

    def with_locale(self, locale: LocaleKey) -> "BasketContext":
        """Copy of the context scoped to another locale."""
        return replace(self, locale=locale)
