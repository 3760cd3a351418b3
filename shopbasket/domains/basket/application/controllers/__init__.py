from .decorators import (
    DECORATORS,
    BasketDecorator,
    BundleDecorator,
    CategoryDecorator,
    SelectDecorator,
    StockDecorator,
)
from .factory import create_basket_controller
from .iface import BasketControllerIface
from .locale_migrator import LocaleMigrator
from .pipeline import ProductAdditionPipeline
from .standard import StandardBasketController

__all__ = [
    "BasketControllerIface",
    "StandardBasketController",
    "ProductAdditionPipeline",
    "LocaleMigrator",
    "create_basket_controller",
    "DECORATORS",
    "BasketDecorator",
    "BundleDecorator",
    "CategoryDecorator",
    "SelectDecorator",
    "StockDecorator",
]
