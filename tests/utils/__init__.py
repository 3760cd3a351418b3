"""Test utilities and helpers."""

from tests.utils.builders import ProductBuilder, eur, price
from tests.utils.fakes import (
    FakeAttributeManager,
    FakeCatalogManager,
    FakeCouponManager,
    FakeCouponProvider,
    FakeLocaleManager,
    FakeOrderRepository,
    FakeRuleManager,
    FakeServiceManager,
    FakeServiceProvider,
    FakeStockManager,
)

__all__ = [
    # Builders
    "ProductBuilder",
    "eur",
    "price",
    # Fakes
    "FakeAttributeManager",
    "FakeCatalogManager",
    "FakeCouponManager",
    "FakeCouponProvider",
    "FakeLocaleManager",
    "FakeOrderRepository",
    "FakeRuleManager",
    "FakeServiceManager",
    "FakeServiceProvider",
    "FakeStockManager",
]
