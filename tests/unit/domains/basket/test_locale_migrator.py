"""
Unit Tests for the Locale Migration of Baskets

A basket created for one site, language or currency is moved into the basket
of the active locale on first access.
"""

import logging
from decimal import Decimal

import pytest

from shopbasket.domains.basket.application.controllers import create_basket_controller
from shopbasket.domains.basket.application.dto import MigrationStatus
from shopbasket.domains.basket.domain.entities import Basket, OrderService
from shopbasket.domains.basket.domain.value_objects import LocaleKey
from shopbasket.domains.basket.infrastructure.session import BasketSessionManager
from tests.utils import ProductBuilder, eur

USD = LocaleKey("default", "en", "USD")
GERMAN = LocaleKey("default", "de", "EUR")


@pytest.fixture
def sessions(session_store):
    return BasketSessionManager(session_store)


def controller_for(context, locale):
    return create_basket_controller(context.with_locale(locale))


class TestLocaleCheck:
    """Test cases for the locale check on first access"""

    def test_first_access_stores_locale(self, controller, sessions, locale):
        """Test that the locale of a new basket is remembered"""
        controller.get()

        assert sessions.get_locale("default") == locale
        assert controller.migration_report is None

    def test_same_locale_is_not_migrated(self, context, product):
        create_basket_controller(context).add_product(product, 1)

        controller = create_basket_controller(context)
        controller.get()

        assert controller.migration_report is None


class TestMigration:
    """Test cases for moving basket content between locales"""

    def test_migrate_currency(self, controller, context, product, delivery, sessions, locale):
        """Test that all parts are added again in the new currency"""
        # Arrange
        controller.add_product(product, 2)
        controller.add_coupon("GHIJ")
        controller.add_address("payment", {"lastname": "Doe"})
        controller.add_service(delivery, {"time": "10:00"})
        controller.add({"comment": "Ring twice"})

        # Act
        usd = controller_for(context, USD)
        basket = usd.get()

        # Assert
        item = basket.products[0]
        assert item.price.currency == "USD"
        assert item.price.value == Decimal("12.00")
        assert item.quantity == Decimal("2")
        assert basket.get_coupon_codes() == ["GHIJ"]
        assert basket.get_address("payment")[0].lastname == "Doe"
        assert basket.get_service("delivery")[0].get_config() == {"time": "10:00"}
        assert basket.comment == "Ring twice"
        assert basket.locale == USD

        report = usd.migration_report
        assert report.source == "default/en/EUR"
        assert report.target == "default/en/USD"
        assert not report.has_errors()
        assert {o.kind for o in report.by_status(MigrationStatus.MIGRATED)} == {
            "product",
            "coupon",
            "address",
            "service",
        }

        old = sessions.load(locale, "default")
        assert old.is_empty()
        assert sessions.get_locale("default") == USD

    def test_product_errors_are_collected(self, controller, context, product, catalog, sessions, locale):
        """Test that products failing in the new locale stay in the old basket"""
        euro_only = ProductBuilder("p-2").with_prices(eur("5.00")).build()
        catalog.add(euro_only)
        controller.add_product(euro_only, 1)
        controller.add_product(product, 1)

        usd = controller_for(context, USD)
        basket = usd.get()

        assert [p.product_id for p in basket.products] == ["p-1"]
        assert list(usd.migration_report.errors) == ["product"]
        assert 0 in usd.migration_report.errors["product"]
        assert [p.product_id for p in sessions.load(locale, "default").products] == ["p-2"]

    def test_migration_runs_once(self, controller, context, catalog):
        """Test that a failed migration is not attempted again"""
        euro_only = ProductBuilder("p-2").with_prices(eur("5.00")).build()
        catalog.add(euro_only)
        controller.add_product(euro_only, 1)

        first = controller_for(context, USD)
        first.get()
        second = controller_for(context, USD)
        second.get()

        assert first.migration_report.has_errors()
        assert second.migration_report is None
        assert second.get().products == []

    def test_cleared_basket_is_not_migrated(self, controller, context, product, sessions):
        """Test that clearing after a currency switch drops the old content for good"""
        controller.add_product(product, 1)

        controller_for(context, USD).clear()
        usd = controller_for(context, USD)

        assert usd.get().products == []
        assert usd.migration_report is None
        assert sessions.get_locale("default") == USD

    def test_attributes_are_applied_again(self, controller, context, product):
        """Test that config and custom attributes survive the migration"""
        controller.add_product(product, 1, config={"a-engrave": 2}, custom={"a-note": "Hi"})

        basket = controller_for(context, GERMAN).get()

        item = basket.products[0]
        assert item.get_attribute("note", "custom") == "Hi"
        assert item.get_attributes("config")[0].quantity == Decimal("2")
        assert item.price.value == Decimal("15.00")

    def test_selection_articles_are_added_through_selection(self, controller, context, selection):
        controller.add_product(selection, 1, variant=["v-red"])

        basket = controller_for(context, GERMAN).get()

        item = basket.products[0]
        assert item.product_id == "art-red"
        assert item.parent_product_id == "sel-1"

    def test_immutable_items_are_skipped(self, controller, context, bundle, sessions):
        """Test that bundles stay in the old basket"""
        controller.add_product(bundle, 1)

        german = controller_for(context, GERMAN)

        assert german.get().products == []
        skipped = german.migration_report.by_status(MigrationStatus.SKIPPED)
        assert [(o.kind, o.key) for o in skipped] == [("product", 0)]
        assert len(sessions.load(LocaleKey("default", "en", "EUR"), "default").products) == 1

    def test_available_services_are_skipped(self, controller, context, delivery, sessions):
        """Test that services already in the new basket are not added twice"""
        controller.add_service(delivery, {"time": "10:00"})
        target = Basket(locale=USD)
        target.add_service(OrderService("s-ups", "ups", "delivery"), "delivery")
        sessions.save(target, USD, "default")

        usd = controller_for(context, USD)

        assert len(usd.get().get_service("delivery")) == 1
        skipped = usd.migration_report.by_status(MigrationStatus.SKIPPED)
        assert [(o.kind, o.key) for o in skipped] == [("service", "delivery")]

    def test_unknown_locale(self, context, session_store, sessions, locale_manager, locale):
        """Test that baskets of locales which can't be bootstrapped are dropped"""
        locale_manager.unknown.add("old-site")
        sessions.set_locale("default", LocaleKey("old-site", "en", "EUR"))

        controller = create_basket_controller(context)
        basket = controller.get()

        assert basket.is_empty()
        assert controller.migration_report.errors == {"locale": {"old-site/en/EUR": 'Site "old-site" not found'}}
        assert sessions.get_locale("default") == locale

    def test_migration_is_logged(self, controller, context, product, caplog):
        controller.add_product(product, 1)

        with caplog.at_level(logging.INFO, logger="shopbasket.service.locale_migrator"):
            controller_for(context, USD).get()

        assert "Basket migrated to locale default/en/USD" in caplog.text
