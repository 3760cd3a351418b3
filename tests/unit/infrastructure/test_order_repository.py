"""
Unit Tests for SQLAlchemyOrderRepository

Runs against an in-memory SQLite database.
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from shopbasket.core.container import BasketContainer
from shopbasket.domains.basket.domain.entities import Basket, LineItem, OrderAddress, OrderService
from shopbasket.domains.basket.domain.value_objects import OrderStatus
from shopbasket.domains.basket.infrastructure.repositories import OrderModel, SQLAlchemyOrderRepository
from tests.utils import ProductBuilder, eur


@pytest.fixture
def db_session(settings):
    """Database session on a fresh in-memory database."""
    container = BasketContainer(settings)
    container.create_tables()
    session = container.get_session_factory()()
    yield session
    session.close()
    container.get_engine().dispose()


@pytest.fixture
def repository(db_session):
    return SQLAlchemyOrderRepository(db_session)


@pytest.fixture
def order(locale):
    item = LineItem.from_product(ProductBuilder("p-1").with_code("CNC").build(), 2)
    item.price = eur("10.00")

    basket = Basket(locale=locale, customer_id="cust-1", comment="Ring twice")
    basket.add_product(item)
    basket.add_address(OrderAddress(lastname="Doe"), "payment")
    basket.add_service(OrderService("s-ups", "ups", "delivery", price=eur("4.90")), "delivery")
    basket.add_coupon("GHIJ")
    basket.finish()
    return basket


class TestSQLAlchemyOrderRepository:
    """Test cases for storing and loading orders"""

    def test_save_assigns_id(self, repository, order, db_session):
        saved = repository.save(order, "cust-1")

        assert saved.id is not None
        model = db_session.get(OrderModel, saved.id)
        assert model.editor == "cust-1"
        assert model.currency == "EUR"
        assert model.price_value == Decimal("24.90")
        assert model.status == "pending"

    def test_get(self, repository, order, locale):
        """Test that all parts are restored"""
        order_id = repository.save(order, "cust-1").id

        loaded = repository.get(order_id)

        assert loaded.id == order_id
        assert loaded.locale == locale
        assert loaded.status == OrderStatus.PENDING
        assert loaded.comment == "Ring twice"
        assert loaded.products[0].product_code == "CNC"
        assert loaded.products[0].price.value == Decimal("10.00")
        assert loaded.get_address("payment")[0].lastname == "Doe"
        assert loaded.get_service("delivery")[0].price.value == Decimal("4.90")
        assert loaded.get_coupon_codes() == ["GHIJ"]

    def test_get_referenced_parts(self, repository, order):
        order_id = repository.save(order, "cust-1").id

        loaded = repository.get(order_id, refs=["product"])

        assert len(loaded.products) == 1
        assert loaded.addresses == {}
        assert loaded.services == {}
        assert loaded.coupons == {}

    def test_get_of_customer(self, repository, order):
        order_id = repository.save(order, "cust-1").id

        assert repository.get(order_id, customer_id="cust-1") is not None
        assert repository.get(order_id, customer_id="cust-2") is None
        assert repository.get("missing") is None

    def test_count_since(self, repository, locale):
        for editor in ("cust-1", "cust-1", "10.0.0.1"):
            repository.save(Basket(locale=locale), editor)

        since = datetime.now(UTC) - timedelta(minutes=5)
        assert repository.count_since("cust-1", since) == 2
        assert repository.count_since("10.0.0.1", since) == 1
        assert repository.count_since("cust-1", datetime.now(UTC) + timedelta(minutes=5)) == 0

    def test_save_error_rolls_back(self, order):
        """Test that database errors are logged, rolled back and raised"""
        session = MagicMock()
        session.commit.side_effect = SQLAlchemyError("disk full")

        with pytest.raises(SQLAlchemyError):
            SQLAlchemyOrderRepository(session).save(order, "cust-1")

        session.rollback.assert_called_once()
