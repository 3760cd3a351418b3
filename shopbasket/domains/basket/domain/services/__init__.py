from .attribute_resolver import AttributeResolver, AttributeSource, check_attributes, filter_attribute_ids
from .price_calculator import PriceCalculator
from .pricing import check_quantity, floor_quantity, get_lowest_price, to_quantity

__all__ = [
    "PriceCalculator",
    "AttributeResolver",
    "AttributeSource",
    "check_attributes",
    "filter_attribute_ids",
    "check_quantity",
    "floor_quantity",
    "get_lowest_price",
    "to_quantity",
]
