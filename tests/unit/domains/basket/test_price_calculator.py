"""
Unit Tests for PriceCalculator
"""

from decimal import Decimal

import pytest

from shopbasket.domains.basket.domain.entities import AttributeSnapshot, CatalogAttribute, LineItem
from shopbasket.domains.basket.domain.exceptions import InvalidPriceValue, NoPriceAvailable
from shopbasket.domains.basket.domain.services import PriceCalculator
from shopbasket.domains.basket.domain.value_objects import AttributeType, Price
from tests.utils import ProductBuilder, eur


@pytest.fixture
def calculator():
    return PriceCalculator()


@pytest.fixture
def item():
    product = ProductBuilder("p-1").with_code("CNC").build()
    return LineItem.from_product(product, 1)


@pytest.fixture
def engraving():
    return CatalogAttribute("a-engrave", "engraving", "gold", prices=[eur("2.50"), eur("2.00", quantity=3)])


def snapshot(type, code, value, attribute_id=None, quantity=1):
    return AttributeSnapshot(type=type, code=code, value=value, attribute_id=attribute_id, quantity=quantity)


class TestPriceCalculator:
    """Test cases for line item price calculation"""

    def test_tier_price(self, calculator, item):
        """Test that the tier for the quantity is used"""
        prices = [eur("10.00"), eur("9.00", quantity=5)]

        assert calculator.calc_price(item, prices, 1, currency="EUR").value == Decimal("10.00")
        assert calculator.calc_price(item, prices, 6, currency="EUR").value == Decimal("9.00")

    def test_rebate_is_always_reset(self, calculator, item):
        """Test that rebates of the catalog never end up in the line item"""
        prices = [Price(value=Decimal("10.00"), rebate=Decimal("2.00"))]

        result = calculator.calc_price(item, prices, 1, currency="EUR")

        assert result.rebate == Decimal("0.00")
        assert result.value == Decimal("10.00")

    def test_priced_attributes_are_added(self, calculator, item, engraving):
        """Test that attribute surcharges are added for their quantity"""
        item.attributes = [snapshot(AttributeType.CONFIG, "engraving", "gold", "a-engrave", quantity=2)]

        result = calculator.calc_price(item, [eur("10.00")], 1, {"a-engrave": engraving}, "EUR")

        assert result.value == Decimal("15.00")

    def test_attribute_tier_uses_attribute_quantity(self, calculator, item, engraving):
        """Test that the attribute tier depends on the attribute quantity"""
        item.attributes = [snapshot(AttributeType.CONFIG, "engraving", "gold", "a-engrave", quantity=3)]

        result = calculator.calc_price(item, [eur("10.00")], 1, {"a-engrave": engraving}, "EUR")

        assert result.value == Decimal("16.00")

    def test_unavailable_attributes_are_ignored(self, calculator, item):
        """Test that snapshots without catalog attribute add nothing"""
        item.attributes = [snapshot(AttributeType.CONFIG, "engraving", "gold", "a-gone", quantity=2)]

        result = calculator.calc_price(item, [eur("10.00")], 1, {}, "EUR")

        assert result.value == Decimal("10.00")

    def test_custom_price(self, calculator, item, engraving):
        """Test that the customer's own price replaces the tier value"""
        item.attributes = [
            snapshot(AttributeType.CUSTOM, "price", "25.50", "a-price"),
            snapshot(AttributeType.CONFIG, "engraving", "gold", "a-engrave"),
        ]

        result = calculator.calc_price(item, [eur("10.00")], 1, {"a-engrave": engraving}, "EUR")

        assert result.value == Decimal("28.00")

    @pytest.mark.parametrize("value", ["12,50", "abc", "-5", "", "0.001", "0"])
    def test_invalid_custom_price(self, calculator, item, value):
        """Test that malformed or too low price offers are rejected"""
        item.attributes = [snapshot(AttributeType.CUSTOM, "price", value, "a-price")]

        with pytest.raises(InvalidPriceValue):
            calculator.calc_price(item, [eur("10.00")], 1, currency="EUR")

    def test_minimum_custom_price_is_configurable(self, item):
        """Test a calculator with a higher minimum price offer"""
        calculator = PriceCalculator(min_custom_price=Decimal("5"))
        item.attributes = [snapshot(AttributeType.CUSTOM, "price", "4.99", "a-price")]

        with pytest.raises(InvalidPriceValue):
            calculator.calc_price(item, [eur("10.00")], 1, currency="EUR")

    def test_missing_currency(self, calculator, item):
        """Test error if the product has no price in the currency"""
        with pytest.raises(NoPriceAvailable):
            calculator.calc_price(item, [eur("10.00")], 1, currency="USD")

    def test_no_side_effects(self, calculator, item, engraving):
        """Test that the line item is left unchanged"""
        attrs = [snapshot(AttributeType.CONFIG, "engraving", "gold", "a-engrave", quantity=2)]
        item.attributes = list(attrs)
        before = item.price

        calculator.calc_price(item, [eur("10.00")], 1, {"a-engrave": engraving}, "EUR")

        assert item.price == before
        assert item.attributes == attrs
