"""
Basket Domain Exceptions

Every error raised by the basket core derives from `BasketException`, so the
outer layer can catch the family at once, and from one of the core domain
categories (validation, authorization, capacity, immutability, not found).
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from shopbasket.core.domain import (
    AuthorizationException,
    BusinessRuleViolationException,
    CapacityException,
    DomainException,
    EntityNotFoundException,
    ImmutabilityException,
    ValidationException,
)


class BasketException(DomainException):
    """Marker base for all basket errors."""


# ==================== VALIDATION ====================


class InvalidPriceValue(BasketException, ValidationException):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f'Invalid price value "{value}"',
            field="price",
            details={"value": str(value)},
            code="INVALID_PRICE_VALUE",
        )


class InvalidQuantity(BasketException, ValidationException):
    def __init__(self, quantity: Any):
        self.quantity = quantity
        super().__init__(
            f'Invalid quantity "{quantity}", it must be a positive number',
            field="quantity",
            details={"quantity": str(quantity)},
            code="INVALID_QUANTITY",
        )


class NoPriceAvailable(BasketException, ValidationException):
    def __init__(self, reference: str, currency: str | None = None):
        self.reference = reference
        msg = f'No price available for "{reference}"'
        if currency:
            msg += f" in currency {currency}"
        super().__init__(msg, details={"reference": reference, "currency": currency}, code="NO_PRICE_AVAILABLE")


class AttributeCountMismatch(BasketException, ValidationException):
    """Fewer attribute items were found than IDs were requested."""

    def __init__(self, expected: Iterable[str], actual: Iterable[str]):
        self.expected = list(expected)
        self.actual = list(actual)
        super().__init__(
            'Available attribute IDs "{}" do not match the given attribute IDs "{}"'.format(
                ",".join(self.actual), ",".join(self.expected)
            ),
            details={"expected": self.expected, "actual": self.actual},
            code="ATTRIBUTE_COUNT_MISMATCH",
        )


class AddressInvalid(BasketException, ValidationException):
    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(
            "Invalid address properties, please check your input",
            details={"errors": errors},
            code="ADDRESS_INVALID",
        )


class BasketValuesInvalid(BasketException, ValidationException):
    def __init__(self, keys: Iterable[str]):
        self.keys = sorted(keys)
        super().__init__(
            f"Unknown basket values: {', '.join(self.keys)}",
            details={"keys": self.keys},
            code="BASKET_VALUES_INVALID",
        )


class ServiceAttributesUnknown(BasketException, ValidationException):
    def __init__(self, attributes: dict[str, Any]):
        self.attributes = attributes
        super().__init__(
            "Unknown service attributes",
            details={"attributes": attributes},
            code="SERVICE_ATTRIBUTES_UNKNOWN",
        )


class ServiceAttributesInvalid(BasketException, ValidationException):
    def __init__(self, attributes: dict[str, Any]):
        self.attributes = attributes
        super().__init__(
            "Invalid service attributes",
            details={"attributes": attributes},
            code="SERVICE_ATTRIBUTES_INVALID",
        )


class NoUniqueArticle(BasketException, ValidationException):
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(
            f'No unique article found for selected attributes and product ID "{product_id}"',
            details={"product_id": product_id},
            code="NO_UNIQUE_ARTICLE",
        )


class NoArticleFound(BasketException, ValidationException):
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(
            f'No article found for selected attributes and product ID "{product_id}"',
            details={"product_id": product_id},
            code="NO_ARTICLE_FOUND",
        )


# ==================== AUTHORIZATION ====================


class AttributeNotAssigned(BasketException, AuthorizationException):
    """Requested attributes are not referenced by the product."""

    def __init__(self, list_type: str, product_ids: Iterable[str], attribute_ids: Iterable[str]):
        self.list_type = getattr(list_type, "value", list_type)
        self.product_ids = list(product_ids)
        self.attribute_ids = sorted(attribute_ids)
        super().__init__(
            operation=f"attach {self.list_type} attributes",
            resource="product",
            message='Invalid "attribute" references for product with ID {}'.format(", ".join(self.product_ids)),
            code="ATTRIBUTE_NOT_ASSIGNED",
        )
        self.details["attribute_ids"] = self.attribute_ids


class ProductNotAllowed(BasketException, AuthorizationException):
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(
            operation="add product",
            resource="product",
            message=f'Adding product with ID "{product_id}" is not allowed',
            code="PRODUCT_NOT_ALLOWED",
        )
        self.details["product_id"] = product_id


# ==================== CAPACITY ====================


class CouponLimitReached(BasketException, CapacityException):
    def __init__(self, limit: int, actual: int):
        super().__init__("Number of coupon codes exceeds the limit", limit, actual, code="COUPON_LIMIT_REACHED")


class OrderLimitReached(BasketException, CapacityException):
    def __init__(self, limit: int, actual: int, seconds: int):
        self.seconds = seconds
        super().__init__(
            "Temporary order limit reached", limit, actual, code="ORDER_LIMIT_REACHED", seconds=seconds
        )


class InsufficientStock(BasketException, CapacityException):
    def __init__(self, product_id: str, name: str, requested: Decimal, available: Decimal):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f'There are not enough products "{name or product_id}" in stock',
            available,
            requested,
            code="INSUFFICIENT_STOCK",
            product_id=product_id,
        )


# ==================== IMMUTABILITY ====================


class ImmutableLineItem(BasketException, ImmutabilityException):
    def __init__(self, position: int, operation: str = "changed"):
        self.operation = operation
        super().__init__(
            "line item",
            position,
            message=f'Basket item at position "{position}" cannot be {operation}',
        )


# ==================== NOT FOUND ====================


class ProductNotFound(BasketException, EntityNotFoundException):
    def __init__(self, product_id: str):
        super().__init__("Product", product_id, code="PRODUCT_NOT_FOUND")


class ServiceNotFound(BasketException, EntityNotFoundException):
    def __init__(self, service_id: str):
        super().__init__("Service", service_id, code="SERVICE_NOT_FOUND")


class OrderNotFound(BasketException, EntityNotFoundException):
    def __init__(self, order_id: str):
        super().__init__("Order", order_id, code="ORDER_NOT_FOUND")


class LineItemNotFound(BasketException, EntityNotFoundException):
    def __init__(self, position: int):
        super().__init__(
            "LineItem", position, message=f'No basket item at position "{position}"', code="LINE_ITEM_NOT_FOUND"
        )


class CouponNotFound(BasketException, EntityNotFoundException):
    def __init__(self, code: str):
        super().__init__(
            "Coupon", code, message=f'Coupon code "{code}" is invalid or not available any more', code="COUPON_NOT_FOUND"
        )


class StockNotFound(BasketException, EntityNotFoundException):
    def __init__(self, product_id: str, stock_type: str):
        self.stock_type = stock_type
        super().__init__(
            "Stock",
            product_id,
            message=f'No stock for product ID "{product_id}" and stock type "{stock_type}" available',
            code="STOCK_NOT_FOUND",
        )


# ==================== BUSINESS RULES ====================


class CouponNotAvailable(BasketException, BusinessRuleViolationException):
    def __init__(self, code: str):
        self.coupon_code = code
        super().__init__(
            "COUPON_REQUIREMENTS",
            f'Requirements for coupon code "{code}" aren\'t met',
            {"coupon": code},
        )


class BasketIncomplete(BasketException, BusinessRuleViolationException):
    def __init__(self, part: str):
        self.part = part
        super().__init__("BASKET_COMPLETE", f'The basket is missing its "{part}" part', {"part": part})
