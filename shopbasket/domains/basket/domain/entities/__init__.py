from .address import OrderAddress
from .basket import Basket
from .catalog import CatalogAttribute, CatalogProduct, CatalogService
from .line_item import AttributeSnapshot, LineItem
from .service import OrderService, OrderServiceAttribute

__all__ = [
    "Basket",
    "LineItem",
    "AttributeSnapshot",
    "OrderAddress",
    "OrderService",
    "OrderServiceAttribute",
    "CatalogAttribute",
    "CatalogProduct",
    "CatalogService",
]
