"""
Locale Migrator

Moves the content of a basket created for another site, language or
currency into the basket of the active locale.
"""

from typing import TYPE_CHECKING

from shopbasket.core.shared import get_service_logger
from shopbasket.domains.basket.domain.entities import Basket, LineItem
from shopbasket.domains.basket.domain.value_objects import AttributeType, LocaleKey, ProductType
from shopbasket.domains.basket.infrastructure.session import BasketSessionManager

from ..context import BasketContext
from ..dto import MigrationReport

if TYPE_CHECKING:
    from .iface import BasketControllerIface

logger = get_service_logger("locale_migrator")


class LocaleMigrator:
    """
    Locale check run once per basket type and request.

    If the locale stored for the basket type equals the active one, nothing
    happens. Otherwise addresses, services, products and coupons of the old
    basket are added one by one to the basket of the active locale using
    the outermost controller, so prices, stock and attributes are
    determined anew. Single parts may fail without stopping the migration;
    whatever could not be moved stays in the old basket. The active locale
    is stored in any case, so the migration is attempted only once.
    """

    def __init__(self, context: BasketContext, sessions: BasketSessionManager):
        self.context = context
        self.sessions = sessions

    def check(self, target: "BasketControllerIface", type: str) -> MigrationReport | None:
        """
        Migrate the basket of the type if it belongs to another locale.

        Returns:
            Migration report or None if no migration was necessary
        """
        current = self.context.locale
        stored = self.sessions.get_locale(type)

        if stored is None or stored == current:
            self.sessions.set_locale(type, current)
            return None

        try:
            return self.migrate(target, stored, type)
        finally:
            self.sessions.set_locale(type, current)

    def migrate(self, target: "BasketControllerIface", old: LocaleKey, type: str) -> MigrationReport:
        current = self.context.locale
        report = MigrationReport(source=str(old), target=str(current))
        log = logger.with_context(source=str(old), target=str(current), basket_type=type)

        try:
            old_locale = self.context.locales.bootstrap(old.site, old.language, old.currency)
        except Exception as e:
            report.failed("locale", str(old), str(e))
            log.info(f'Error bootstrapping locale "{old}" of basket: {e}')
            return report

        old_context = self.context.with_locale(old_locale)
        basket = self.sessions.load(old_context.locale, type)

        if basket is None:
            return report

        self._copy_addresses(target, basket, report, log)
        self._copy_services(target, basket, report, log)
        self._copy_products(target, basket, report, log)
        self._copy_coupons(target, basket, report, log)

        target.get().update_values(
            customer_id=basket.customer_id,
            customer_reference=basket.customer_reference,
            comment=basket.comment,
        )
        target.get().set_locale(current)
        target.save()

        self.sessions.save(basket, old_context.locale, type)

        log.info(f"Basket migrated to locale {current}", errors=report.errors)
        return report

    def _copy_addresses(self, target, basket: Basket, report: MigrationReport, log) -> None:
        for type, items in list(basket.addresses.items()):
            for pos, address in enumerate(items):
                try:
                    target.get().add_address(address, type, pos)
                    report.migrated("address", type)
                except Exception as e:
                    report.failed("address", type, str(e))
                    log.info(f'Error migrating address with type "{type}" in basket: {e}')

            basket.delete_address(type)

    def _copy_services(self, target, basket: Basket, report: MigrationReport, log) -> None:
        for type, items in list(basket.services.items()):
            done = []

            for pos, service in enumerate(items):
                codes = [s.code for s in target.get().get_service(type)]
                if service.code in codes:
                    report.skipped("service", type, f'Service "{service.code}" already available')
                    continue

                # added again from the catalog, price and configuration may differ
                try:
                    catalog_service = self.context.services.get(service.service_id)
                    target.add_service(catalog_service, service.get_config())
                    report.migrated("service", type)
                    done.append(pos)
                except Exception as e:
                    report.skipped("service", type, str(e))
                    log.info(f'Skipped migrating service "{service.code}" of type "{type}": {e}')

            for pos in reversed(done):
                basket.delete_service(type, pos)

    def _copy_products(self, target, basket: Basket, report: MigrationReport, log) -> None:
        done = []

        for pos, item in enumerate(basket.products):
            if item.is_immutable():
                report.skipped("product", pos, "Immutable line item")
                continue

            try:
                variant, config, custom = self._split_attributes(item)
                product = self.context.catalog.get(self._catalog_id(item))
                product = self.context.rules.apply(product, "catalog")

                target.add_product(product, item.quantity, variant, config, custom, item.stock_type)
                report.migrated("product", pos)
                done.append(pos)
            except Exception as e:
                report.failed("product", pos, str(e))
                log.info(f'Error migrating product with code "{item.product_code}" in basket: {e}')

        for pos in reversed(done):
            basket.delete_product(pos)

    def _copy_coupons(self, target, basket: Basket, report: MigrationReport, log) -> None:
        for code in basket.get_coupon_codes():
            try:
                target.add_coupon(code)
                basket.delete_coupon(code)
                report.migrated("coupon", code)
            except Exception as e:
                report.failed("coupon", code, str(e))
                log.info(f'Error migrating coupon with code "{code}" in basket: {e}')

    @staticmethod
    def _catalog_id(item: LineItem) -> str:
        # articles of selections are added again through their selection product
        if item.type == ProductType.SELECT and item.parent_product_id:
            return item.parent_product_id
        return item.product_id

    @staticmethod
    def _split_attributes(item: LineItem) -> tuple[list[str], dict, dict]:
        variant: list[str] = []
        config: dict = {}
        custom: dict = {}

        for attr in item.attributes:
            if not attr.attribute_id:
                continue
            if attr.type == AttributeType.VARIANT:
                variant.append(attr.attribute_id)
            elif attr.type == AttributeType.CONFIG:
                config[attr.attribute_id] = attr.quantity
            elif attr.type == AttributeType.CUSTOM:
                custom[attr.attribute_id] = attr.value

        return variant, config, custom
