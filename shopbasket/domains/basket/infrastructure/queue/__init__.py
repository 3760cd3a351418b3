from .memory import InMemoryMessageQueue
from .redis_queue import RedisMessageQueue

__all__ = ["InMemoryMessageQueue", "RedisMessageQueue"]
