"""
Unit Tests for Price Tier Selection and Quantity Rounding
"""

from decimal import Decimal

import pytest

from shopbasket.domains.basket.domain.exceptions import InvalidQuantity, NoPriceAvailable
from shopbasket.domains.basket.domain.services import check_quantity, floor_quantity, get_lowest_price, to_quantity
from tests.utils import eur, price


@pytest.fixture
def tiers():
    return [eur("10.00"), eur("9.00", quantity=5), eur("8.00", quantity=10), price("12.00", currency="USD")]


class TestGetLowestPrice:
    """Test cases for get_lowest_price"""

    @pytest.mark.parametrize(
        "quantity, expected",
        [
            (1, "10.00"),
            (4, "10.00"),
            (5, "9.00"),
            (7, "9.00"),
            (10, "8.00"),
            (100, "8.00"),
        ],
    )
    def test_highest_reached_breakpoint_wins(self, tiers, quantity, expected):
        """Test that the tier with the highest breakpoint not above the quantity is used"""
        assert get_lowest_price(tiers, quantity, "EUR").value == Decimal(expected)

    def test_quantity_below_all_breakpoints(self):
        """Test that the smallest breakpoint is used if no tier is reached"""
        prices = [eur("9.00", quantity=5), eur("8.00", quantity=10)]

        assert get_lowest_price(prices, Decimal("0.5"), "EUR").value == Decimal("9.00")

    def test_equal_breakpoints_take_lower_value(self):
        """Test that the lower value wins for the same breakpoint"""
        prices = [eur("10.00"), eur("9.50")]

        assert get_lowest_price(prices, 1, "EUR").value == Decimal("9.50")

    def test_currency_filter(self, tiers):
        """Test that only tiers of the requested currency are used"""
        result = get_lowest_price(tiers, 20, "USD")

        assert result.value == Decimal("12.00")
        assert result.currency == "USD"

    def test_no_price_in_currency(self, tiers):
        """Test error if no tier exists for the currency"""
        with pytest.raises(NoPriceAvailable, match="CNC") as exc:
            get_lowest_price(tiers, 1, "CHF", reference="CNC")

        assert exc.value.code == "NO_PRICE_AVAILABLE"

    def test_empty_price_list(self):
        """Test error for products without prices"""
        with pytest.raises(NoPriceAvailable):
            get_lowest_price([], 1)

    def test_own_site_prices_take_precedence(self):
        """Test that tiers of the site are preferred over inherited ones"""
        prices = [eur("10.00"), price("11.00", site_id="shop-b")]

        assert get_lowest_price(prices, 1, "EUR", "shop-b").value == Decimal("11.00")
        assert get_lowest_price(prices, 1, "EUR", "shop-c").value == Decimal("10.00")


class TestCheckQuantity:
    """Test cases for check_quantity"""

    @pytest.mark.parametrize(
        "quantity, scale, expected",
        [
            ("3", "1", "3"),
            ("2.5", "1", "3.0000"),
            ("1", "0.5", "1"),
            ("1.2", "0.5", "1.5000"),
            ("0.1", "0.25", "0.2500"),
            ("1.0004", "1", "1.0004"),
            ("7", "0", "7"),
        ],
    )
    def test_rounds_up_to_scale(self, quantity, scale, expected):
        """Test rounding up to the next multiple of the sale unit"""
        assert check_quantity(Decimal(quantity), Decimal(scale)) == Decimal(expected)

    @pytest.mark.parametrize("quantity", ["0.3", "1.7", "2.5", "10.01"])
    def test_idempotent(self, quantity):
        """Test that rounding a rounded quantity changes nothing"""
        once = check_quantity(Decimal(quantity), Decimal("0.25"))

        assert check_quantity(once, Decimal("0.25")) == once

    def test_accepts_plain_numbers(self):
        assert check_quantity(3, 2) == Decimal("4.0000")

    @pytest.mark.parametrize(
        "quantity, scale, expected",
        [("5", "2", "4.0000"), ("4", "2", "4"), ("1", "2", "0.0000"), ("1.3", "0.5", "1.0000"), ("3", "0", "3")],
    )
    def test_floor_quantity(self, quantity, scale, expected):
        """Test rounding down to the previous multiple of the sale unit"""
        assert floor_quantity(Decimal(quantity), Decimal(scale)) == Decimal(expected)


class TestToQuantity:
    """Test cases for to_quantity"""

    @pytest.mark.parametrize("value, expected", [("2", "2"), (1.5, "1.5"), (Decimal("0.25"), "0.25")])
    def test_valid(self, value, expected):
        assert to_quantity(value) == Decimal(expected)

    @pytest.mark.parametrize("value", ["0", -1, "abc", "inf", True, None])
    def test_invalid(self, value):
        with pytest.raises(InvalidQuantity):
            to_quantity(value)
