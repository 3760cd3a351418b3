"""
Enumerations shared by catalog read models, line items and orders.
"""

from enum import IntFlag

from shopbasket.core.domain import StatusEnum


class AttributeType(StatusEnum):
    """How an attribute was attached to an ordered product."""

    VARIANT = "variant"
    CONFIG = "config"
    CUSTOM = "custom"
    HIDDEN = "hidden"


class ProductType(StatusEnum):
    DEFAULT = "default"
    SELECT = "select"
    BUNDLE = "bundle"
    VOUCHER = "voucher"


class OrderStatus(StatusEnum):
    UNFINISHED = "unfinished"
    PENDING = "pending"


class LineItemFlag(IntFlag):
    NONE = 0
    IMMUTABLE = 1


# attribute types searched for subscription intervals
SUBSCRIPTION_ATTRIBUTE_TYPES = (
    AttributeType.CONFIG,
    AttributeType.CUSTOM,
    AttributeType.HIDDEN,
    AttributeType.VARIANT,
)
