"""
Domain Layer - Core DDD building blocks

This module provides the shared base classes:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from shopbasket.core.domain.entities import Entity, generate_uuid_str
from shopbasket.core.domain.exceptions import (
    AuthorizationException,
    BusinessRuleViolationException,
    CapacityException,
    DomainException,
    EntityNotFoundException,
    ImmutabilityException,
    ValidationException,
)
from shopbasket.core.domain.value_objects import StatusEnum, ValueObject, to_decimal

__all__ = [
    # Entities
    "Entity",
    "generate_uuid_str",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    "to_decimal",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "BusinessRuleViolationException",
    "AuthorizationException",
    "CapacityException",
    "ImmutabilityException",
]
