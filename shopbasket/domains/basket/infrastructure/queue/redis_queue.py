"""
Redis Message Queue

Fire-and-forget messages as JSON entries of a Redis list per topic.
"""

import json
import logging
from typing import Any

import redis
from redis.exceptions import ConnectionError, TimeoutError

from shopbasket.config import Settings, get_settings

from ..session.redis_store import create_redis_client

logger = logging.getLogger(__name__)


class RedisMessageQueue:
    """
    Message queue backed by Redis lists.

    Producers append with RPUSH, consumers take the oldest message with
    LPOP, so messages of one topic are processed in order.
    """

    def __init__(self, client: redis.Redis | None = None, settings: Settings | None = None):
        settings = settings or get_settings()
        self.prefix = settings.SESSION_PREFIX
        self.redis_client = client or create_redis_client(settings)

    def _get_key(self, topic: str) -> str:
        return f"{self.prefix}:queue:{topic}"

    def add(self, topic: str, message: dict[str, Any]) -> None:
        try:
            self.redis_client.rpush(self._get_key(topic), json.dumps(message, default=str))
        except (ConnectionError, TimeoutError) as e:
            logger.error(f"Error queueing message for topic {topic}: {e}")
            raise

    def pop(self, topic: str) -> dict[str, Any] | None:
        data = self.redis_client.lpop(self._get_key(topic))
        if data is None:
            return None
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return json.loads(data)
