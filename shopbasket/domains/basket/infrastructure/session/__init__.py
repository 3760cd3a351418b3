from .basket_session import BasketSessionManager, dump_basket, load_basket
from .memory import InMemorySessionStore
from .redis_store import RedisSessionStore, create_redis_client

__all__ = [
    "BasketSessionManager",
    "dump_basket",
    "load_basket",
    "InMemorySessionStore",
    "RedisSessionStore",
    "create_redis_client",
]
