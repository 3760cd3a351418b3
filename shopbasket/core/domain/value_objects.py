"""
Base Value Object Classes

Value Objects are immutable domain primitives without identity, compared by
their values rather than by reference.
"""

from abc import ABC
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Self


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Subclasses are frozen dataclasses and put their invariants in
    `_validate`, which runs right after construction.
    """

    def __post_init__(self):
        """Override `_validate` to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


class StatusEnum(str, Enum):
    """
    Base class for string enums stored in baskets and orders.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")


def to_decimal(value: Any) -> Decimal:
    """
    Convert ints, floats and numeric strings to Decimal without float drift.

    Raises:
        ValueError: If the value is not numeric
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a numeric value: {value!r}") from e
