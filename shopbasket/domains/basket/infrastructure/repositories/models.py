"""
Order database models
"""

from datetime import UTC, datetime

from sqlalchemy import JSON, Column, DateTime, Index, Numeric, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TimestampMixin:
    """Automatic creation and modification timestamps."""

    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class OrderModel(Base, TimestampMixin):
    """Finished baskets"""

    __tablename__ = "basket_orders"

    id = Column(String(36), primary_key=True)
    editor = Column(String(255), nullable=False, default="")
    customer_id = Column(String(64), nullable=False, default="", index=True)
    customer_reference = Column(String(255), nullable=False, default="")
    comment = Column(Text, nullable=False, default="")

    # Locale
    site = Column(String(64), nullable=False, default="")
    language = Column(String(8), nullable=False, default="")
    currency = Column(String(3), nullable=False, default="")

    status = Column(String(20), nullable=False, default="pending")
    price_value = Column(Numeric(12, 2), nullable=False, default=0)
    price_costs = Column(Numeric(12, 2), nullable=False, default=0)
    price_rebate = Column(Numeric(12, 2), nullable=False, default=0)
    finished_at = Column(DateTime(timezone=True))

    # Basket parts as JSON documents
    products = Column(JSON, nullable=False, default=list)
    addresses = Column(JSON, nullable=False, default=dict)
    services = Column(JSON, nullable=False, default=dict)
    coupons = Column(JSON, nullable=False, default=dict)

    __table_args__ = (Index("idx_basket_orders_editor_created", editor, "created_at"),)

    def __repr__(self):
        return f"<OrderModel(id='{self.id}', status='{self.status}', total={self.price_value})>"
