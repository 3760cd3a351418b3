from .models import Base, OrderModel
from .order_repository import SQLAlchemyOrderRepository

__all__ = ["Base", "OrderModel", "SQLAlchemyOrderRepository"]
