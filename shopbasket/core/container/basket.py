"""
Basket Domain Container.

Single Responsibility: Wire all basket domain dependencies.
"""

import logging
from collections.abc import Sequence

import redis
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from shopbasket.config import Settings, get_settings
from shopbasket.domains.basket.application.context import BasketContext
from shopbasket.domains.basket.application.controllers import BasketControllerIface, create_basket_controller
from shopbasket.domains.basket.application.ports import (
    IAttributeManager,
    ICatalogManager,
    ICouponManager,
    ILocaleManager,
    IMessageQueue,
    IRuleManager,
    IServiceManager,
    ISessionStore,
    IStockManager,
)
from shopbasket.domains.basket.domain.value_objects import LocaleKey
from shopbasket.domains.basket.infrastructure.queue import RedisMessageQueue
from shopbasket.domains.basket.infrastructure.repositories import Base, SQLAlchemyOrderRepository
from shopbasket.domains.basket.infrastructure.session import (
    InMemorySessionStore,
    RedisSessionStore,
    create_redis_client,
)

logger = logging.getLogger(__name__)


class BasketContainer:
    """
    Basket domain container.

    Holds the shared database engine and Redis client and creates the
    request scoped objects (session store, order repository, context and
    the decorated basket controller).
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._redis_client: redis.Redis | None = None

    # ==================== SHARED ====================

    def get_engine(self) -> Engine:
        if self._engine is None:
            url = self.settings.DATABASE_URL
            kwargs = {}
            if url.startswith("sqlite") and ":memory:" in url:
                # one shared connection, otherwise every session sees an empty database
                kwargs = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}

            self._engine = create_engine(url, echo=self.settings.DB_ECHO, **kwargs)
            logger.info(f"Order store engine created for {self._engine.url.render_as_string(hide_password=True)}")
        return self._engine

    def create_tables(self) -> None:
        Base.metadata.create_all(self.get_engine())

    def get_session_factory(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.get_engine(), expire_on_commit=False)
        return self._session_factory

    def get_redis_client(self) -> redis.Redis:
        if self._redis_client is None:
            self._redis_client = create_redis_client(self.settings)
        return self._redis_client

    # ==================== ADAPTERS ====================

    def create_session_store(self, session_id: str | None = None) -> ISessionStore:
        """Redis backed store for the session, in-memory store without session ID."""
        if session_id is None:
            return InMemorySessionStore()
        return RedisSessionStore(session_id, client=self.get_redis_client(), settings=self.settings)

    def create_message_queue(self) -> RedisMessageQueue:
        return RedisMessageQueue(client=self.get_redis_client(), settings=self.settings)

    def create_order_repository(self, db: Session) -> SQLAlchemyOrderRepository:
        """Create Order Repository."""
        return SQLAlchemyOrderRepository(session=db)

    # ==================== CONTROLLER ====================

    def create_context(
        self,
        locale: LocaleKey,
        session: ISessionStore,
        db: Session,
        *,
        catalog: ICatalogManager,
        attributes: IAttributeManager,
        rules: IRuleManager,
        services: IServiceManager,
        coupons: ICouponManager,
        stock: IStockManager,
        locales: ILocaleManager,
        queue: IMessageQueue | None = None,
        user_id: str | None = None,
        editor: str = "",
    ) -> BasketContext:
        """
        Create the basket context of one request.

        `editor` names the source of the request for order rate limiting and
        defaults to `user_id`. Guests must pass one, e.g. the client IP
        address.

        Raises:
            ValueError: If neither `editor` nor `user_id` is given
        """
        editor = editor or user_id or ""
        if not editor:
            raise ValueError("An editor (e.g. the client IP address) is required for guest baskets")

        return BasketContext(
            locale=locale,
            session=session,
            catalog=catalog,
            attributes=attributes,
            rules=rules,
            services=services,
            coupons=coupons,
            stock=stock,
            locales=locales,
            orders=self.create_order_repository(db),
            queue=queue or self.create_message_queue(),
            settings=self.settings,
            user_id=user_id,
            editor=editor,
        )

    def create_basket_controller(
        self, context: BasketContext, decorators: Sequence[str] | None = None
    ) -> BasketControllerIface:
        """Create the basket controller with the configured decorators."""
        return create_basket_controller(context, decorators)
