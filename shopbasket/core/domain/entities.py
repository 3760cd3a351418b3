"""
Base Entity

Objects with identity. A basket has no ID while it lives in the session; the
order repository assigns one when the basket is stored as an order.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(eq=False)
class Entity(ABC):
    id: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def __eq__(self, other: object) -> bool:
        # unsaved entities are only equal to themselves
        if not isinstance(other, Entity) or self.id is None or other.id is None:
            return self is other
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def is_new(self) -> bool:
        return self.id is None

    def touch(self) -> None:
        self.updated_at = _now()


def generate_uuid_str() -> str:
    return str(uuid4())
