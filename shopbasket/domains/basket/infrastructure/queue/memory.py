"""
In-memory message queue, used for tests and single process setups.
"""

from collections import defaultdict
from typing import Any


class InMemoryMessageQueue:
    def __init__(self):
        self.messages: dict[str, list[dict[str, Any]]] = defaultdict(list)

    def add(self, topic: str, message: dict[str, Any]) -> None:
        self.messages[topic].append(message)

    def pop(self, topic: str) -> dict[str, Any] | None:
        items = self.messages.get(topic)
        return items.pop(0) if items else None
