from .locale_key import LocaleKey
from .price import Price
from .types import (
    SUBSCRIPTION_ATTRIBUTE_TYPES,
    AttributeType,
    LineItemFlag,
    OrderStatus,
    ProductType,
)

__all__ = [
    "Price",
    "LocaleKey",
    "AttributeType",
    "ProductType",
    "OrderStatus",
    "LineItemFlag",
    "SUBSCRIPTION_ATTRIBUTE_TYPES",
]
