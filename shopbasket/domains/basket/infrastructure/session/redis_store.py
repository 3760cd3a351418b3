"""
Redis Session Store

Keeps the scalar session values of one customer session in Redis.
"""

import logging

import redis
from redis.exceptions import ConnectionError, TimeoutError

from shopbasket.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings | None = None) -> redis.Redis:
    """Create a Redis client from the settings."""
    settings = settings or get_settings()
    return redis.Redis(
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        db=settings.REDIS_DB,
        password=settings.REDIS_PASSWORD,
        decode_responses=True,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
    )


class RedisSessionStore:
    """
    Session store backed by Redis.

    Every value is stored under `<prefix>:session:<session_id>:<key>` and
    expires after `ttl` seconds of inactivity if a TTL is given.
    """

    def __init__(
        self,
        session_id: str,
        client: redis.Redis | None = None,
        settings: Settings | None = None,
        ttl: int | None = None,
    ):
        settings = settings or get_settings()
        self.session_id = session_id
        self.prefix = settings.SESSION_PREFIX
        self.ttl = ttl
        self.redis_client = client or create_redis_client(settings)

    def _get_key(self, key: str) -> str:
        return f"{self.prefix}:session:{self.session_id}:{key}"

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a value, unreachable Redis servers are treated as empty session"""
        try:
            value = self.redis_client.get(self._get_key(key))
        except (ConnectionError, TimeoutError) as e:
            logger.error(f"Error reading session key {key} from Redis: {e}")
            return default

        if value is None:
            return default
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str | None) -> None:
        redis_key = self._get_key(key)
        try:
            if value is None:
                self.redis_client.delete(redis_key)
            else:
                self.redis_client.set(redis_key, value, ex=self.ttl)
        except (ConnectionError, TimeoutError) as e:
            logger.error(f"Error writing session key {key} to Redis: {e}")
            raise
