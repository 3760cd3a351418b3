from .base import BasketDecorator
from .bundle import BundleDecorator
from .category import CategoryDecorator
from .select import SelectDecorator, find_article
from .stock import StockDecorator

DECORATORS: dict[str, type[BasketDecorator]] = {
    "bundle": BundleDecorator,
    "category": CategoryDecorator,
    "select": SelectDecorator,
    "stock": StockDecorator,
}

__all__ = [
    "DECORATORS",
    "BasketDecorator",
    "BundleDecorator",
    "CategoryDecorator",
    "SelectDecorator",
    "StockDecorator",
    "find_article",
]
