"""
Shared pytest fixtures for all tests.

This module provides the basket context with in-memory collaborators,
catalog test data and settings isolated from the environment.
"""

import pytest

from shopbasket.config import Settings
from shopbasket.domains.basket.application.context import BasketContext
from shopbasket.domains.basket.application.controllers import create_basket_controller
from shopbasket.domains.basket.domain.entities import CatalogAttribute, CatalogService
from shopbasket.domains.basket.domain.value_objects import AttributeType, LocaleKey, ProductType
from shopbasket.domains.basket.infrastructure.queue import InMemoryMessageQueue
from shopbasket.domains.basket.infrastructure.session import InMemorySessionStore
from tests.utils import (
    FakeAttributeManager,
    FakeCatalogManager,
    FakeCouponManager,
    FakeCouponProvider,
    FakeLocaleManager,
    FakeOrderRepository,
    FakeRuleManager,
    FakeServiceManager,
    FakeStockManager,
    ProductBuilder,
    eur,
    price,
)

# ============================================================================
# SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings independent of environment variables and .env files."""
    return Settings(
        _env_file=None,
        BASKET_LIMIT_COUNT=3,
        BASKET_LIMIT_SECONDS=300,
        BASKET_COUPON_ALLOWED=1,
        BASKET_REQUIRE_VARIANT=True,
        BASKET_CHECK_STOCK=True,
        BASKET_DECORATORS=["select", "bundle", "stock", "category"],
        DATABASE_URL="sqlite+pysqlite:///:memory:",
        LOG_FORMAT="plain",
    )


@pytest.fixture
def locale() -> LocaleKey:
    return LocaleKey("default", "en", "EUR")


# ============================================================================
# CATALOG FIXTURES
# ============================================================================


@pytest.fixture
def attribute_items() -> list[CatalogAttribute]:
    return [
        CatalogAttribute("a-interval", "interval", "P1M", "Monthly"),
        CatalogAttribute("a-intervalend", "intervalend", "2027-01-01", "Until"),
        CatalogAttribute("a-engrave", "engraving", "gold", "Gold engraving", prices=[eur("2.50")]),
        CatalogAttribute("a-price", "price", "custom", "Your price"),
        CatalogAttribute("a-note", "note", "text", "Note"),
        CatalogAttribute("a-hidden", "weight", "heavy", "Heavy"),
        CatalogAttribute("v-red", "color", "red", "Red"),
        CatalogAttribute("v-blue", "color", "blue", "Blue"),
        CatalogAttribute("v-small", "size", "s", "Small"),
    ]


@pytest.fixture
def product():
    """Default product with price tiers in EUR and USD and all attribute list types."""
    return (
        ProductBuilder("p-1")
        .with_code("CNC")
        .with_label("Cafe Noire Cappuccino")
        .with_prices(eur("10.00"), eur("9.00", quantity=5), price("12.00", currency="USD"))
        .with_attributes(AttributeType.CONFIG, "a-interval", "a-intervalend", "a-engrave")
        .with_attributes(AttributeType.CUSTOM, "a-price", "a-note")
        .with_attributes(AttributeType.HIDDEN, "a-hidden")
        .build()
    )


@pytest.fixture
def selection():
    """Selection with a red and a blue article in the same size."""
    red = (
        ProductBuilder("art-red")
        .with_code("CNE-RED")
        .with_label("Cafe Noire Expresso red")
        .with_prices(eur("7.00"))
        .with_attributes(AttributeType.VARIANT, "v-red", "v-small")
        .build()
    )
    blue = (
        ProductBuilder("art-blue")
        .with_code("CNE-BLUE")
        .with_label("")
        .with_prices()
        .with_attributes(AttributeType.VARIANT, "v-blue", "v-small")
        .build()
    )
    return (
        ProductBuilder("sel-1")
        .with_code("CNE")
        .with_label("Cafe Noire Expresso")
        .with_type(ProductType.SELECT)
        .with_prices(eur("6.00"))
        .with_media("/img/cne.jpg")
        .with_products(red, blue)
        .build()
    )


@pytest.fixture
def bundle():
    """Bundle of two products which are not listed in any category themselves."""
    first = ProductBuilder("b-part-1").with_prices(eur("4.00")).without_category().build()
    second = ProductBuilder("b-part-2").with_prices(eur("3.00")).without_category().build()
    return (
        ProductBuilder("bundle-1")
        .with_code("U:BUNDLE")
        .with_type(ProductType.BUNDLE)
        .with_prices(eur("6.50"))
        .with_products(first, second)
        .build()
    )


@pytest.fixture
def delivery() -> CatalogService:
    return CatalogService("s-ups", "ups", "delivery", "UPS", provider="Standard")


@pytest.fixture
def catalog(product, selection, bundle) -> FakeCatalogManager:
    return FakeCatalogManager([product, selection, bundle])


@pytest.fixture
def attribute_manager(attribute_items) -> FakeAttributeManager:
    return FakeAttributeManager(attribute_items)


@pytest.fixture
def rule_manager() -> FakeRuleManager:
    return FakeRuleManager()


@pytest.fixture
def service_manager(delivery) -> FakeServiceManager:
    return FakeServiceManager([delivery])


@pytest.fixture
def coupon_manager() -> FakeCouponManager:
    return FakeCouponManager({"GHIJ": FakeCouponProvider(), "OPQR": FakeCouponProvider()})


@pytest.fixture
def stock_manager() -> FakeStockManager:
    return FakeStockManager()


@pytest.fixture
def locale_manager() -> FakeLocaleManager:
    return FakeLocaleManager()


# ============================================================================
# INFRASTRUCTURE FIXTURES
# ============================================================================


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def message_queue() -> InMemoryMessageQueue:
    return InMemoryMessageQueue()


@pytest.fixture
def order_repository() -> FakeOrderRepository:
    return FakeOrderRepository()


# ============================================================================
# CONTEXT FIXTURES
# ============================================================================


@pytest.fixture
def context(
    locale,
    session_store,
    catalog,
    attribute_manager,
    rule_manager,
    service_manager,
    coupon_manager,
    stock_manager,
    locale_manager,
    order_repository,
    message_queue,
    settings,
) -> BasketContext:
    """Context of a logged in customer."""
    return BasketContext(
        locale=locale,
        session=session_store,
        catalog=catalog,
        attributes=attribute_manager,
        rules=rule_manager,
        services=service_manager,
        coupons=coupon_manager,
        stock=stock_manager,
        locales=locale_manager,
        orders=order_repository,
        queue=message_queue,
        settings=settings,
        user_id="cust-1",
        editor="cust-1",
    )


@pytest.fixture
def controller(context):
    """Controller with the default decorator chain."""
    return create_basket_controller(context)
