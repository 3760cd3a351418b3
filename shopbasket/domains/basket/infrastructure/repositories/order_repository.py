"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository. Finished baskets are stored
as one row with their products, addresses, services and coupons as JSON
documents.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from pydantic import TypeAdapter
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shopbasket.core.domain import generate_uuid_str
from shopbasket.domains.basket.domain.entities import Basket, LineItem, OrderAddress, OrderService
from shopbasket.domains.basket.domain.value_objects import LocaleKey, OrderStatus

from .models import OrderModel

logger = logging.getLogger(__name__)

ORDER_PARTS = ("product", "address", "service", "coupon")

_products_adapter = TypeAdapter(list[LineItem])
_addresses_adapter = TypeAdapter(dict[str, list[OrderAddress]])
_services_adapter = TypeAdapter(dict[str, list[OrderService]])
_coupons_adapter = TypeAdapter(dict[str, list[LineItem]])


class SQLAlchemyOrderRepository:
    """
    SQLAlchemy implementation of order repository.

    Handles all order data persistence operations.
    """

    def __init__(self, session: Session):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy session
        """
        self.session = session

    def save(self, basket: Basket, editor: str) -> Basket:
        """Persist the basket as new order and assign its ID."""
        if basket.id is None:
            basket.id = generate_uuid_str()

        try:
            self.session.add(self._to_model(basket, editor))
            self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error saving order {basket.id}: {e}")
            self.session.rollback()
            raise

        logger.info(f"Order {basket.id} stored for editor {editor}")
        return basket

    def get(
        self, order_id: str, customer_id: str | None = None, refs: Sequence[str] | None = None
    ) -> Basket | None:
        """Get order by ID, only the parts listed in refs are loaded if given."""
        stmt = select(OrderModel).where(OrderModel.id == order_id)
        if customer_id is not None:
            stmt = stmt.where(OrderModel.customer_id == customer_id)

        model = self.session.execute(stmt).scalar_one_or_none()
        return self._to_entity(model, refs) if model else None

    def count_since(self, editor: str, since: datetime) -> int:
        stmt = (
            select(func.count())
            .select_from(OrderModel)
            .where(OrderModel.editor == editor, OrderModel.created_at >= since)
        )
        return int(self.session.execute(stmt).scalar_one())

    # ==================== MAPPING ====================

    def _to_model(self, basket: Basket, editor: str) -> OrderModel:
        price = basket.get_price()
        locale = basket.locale

        return OrderModel(
            id=basket.id,
            editor=editor,
            customer_id=basket.customer_id,
            customer_reference=basket.customer_reference,
            comment=basket.comment,
            site=locale.site if locale else "",
            language=locale.language if locale else "",
            currency=locale.currency if locale else price.currency,
            status=basket.status.value,
            price_value=price.value,
            price_costs=price.costs,
            price_rebate=price.rebate,
            finished_at=basket.finished_at,
            products=_products_adapter.dump_python(basket.products, mode="json"),
            addresses=_addresses_adapter.dump_python(basket.addresses, mode="json"),
            services=_services_adapter.dump_python(basket.services, mode="json"),
            coupons=_coupons_adapter.dump_python(basket.coupons, mode="json"),
        )

    def _to_entity(self, model: OrderModel, refs: Sequence[str] | None = None) -> Basket:
        parts = set(ORDER_PARTS if refs is None else refs)
        locale = LocaleKey(model.site, model.language, model.currency) if model.site else None

        return Basket(
            id=model.id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            customer_id=model.customer_id,
            customer_reference=model.customer_reference,
            comment=model.comment,
            locale=locale,
            status=OrderStatus.from_string(model.status),
            finished_at=model.finished_at,
            products=_products_adapter.validate_python(model.products) if "product" in parts else [],
            addresses=_addresses_adapter.validate_python(model.addresses) if "address" in parts else {},
            services=_services_adapter.validate_python(model.services) if "service" in parts else {},
            coupons=_coupons_adapter.validate_python(model.coupons) if "coupon" in parts else {},
        )
