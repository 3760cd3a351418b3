"""
Domain Exceptions

Business rule violations and domain-specific errors. They are meant to be
caught at the outer (HTTP/CLI) layer and translated into 4xx responses.
"""

from typing import Any


class DomainException(Exception):
    """
    Root of every basket error.

    Args:
        message: Text shown to the customer after translation
        code: Stable error code, defaults to the upper-cased class name
        details: Structured values for re-displaying forms (keys, limits, positions)
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when input validation fails before anything is mutated.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
        code: str | None = None,
    ):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, code or "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """Raised when a referenced catalog item, order or line item does not exist."""

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
        code: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            code or "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class BusinessRuleViolationException(DomainException):
    """Raised when the basket is not in a state that allows the operation."""

    def __init__(self, rule: str, message: str | None = None, details: dict[str, Any] | None = None):
        self.rule = rule
        msg = message or f"Business rule violated: {rule}"
        details = details or {}
        details["rule"] = rule
        super().__init__(msg, "BUSINESS_RULE_VIOLATION", details)


class AuthorizationException(DomainException):
    """Raised when the caller may not reference or use a resource."""

    def __init__(
        self,
        operation: str,
        resource: str | None = None,
        message: str | None = None,
        code: str | None = None,
    ):
        self.operation = operation
        self.resource = resource
        msg = message or f"Not authorized to perform '{operation}'"
        if resource and not message:
            msg += f" on '{resource}'"
        super().__init__(
            msg,
            code or "AUTHORIZATION_ERROR",
            {
                "operation": operation,
                "resource": resource,
            },
        )


class CapacityException(DomainException):
    """
    Raised when a configured or physical limit is reached.

    Carries the limit and the actual value so callers can explain the refusal.
    """

    def __init__(self, message: str, limit: Any, actual: Any, code: str | None = None, **extra: Any):
        self.limit = limit
        self.actual = actual
        super().__init__(
            message,
            code or "CAPACITY_EXCEEDED",
            {"limit": str(limit), "actual": str(actual), **extra},
        )


class ImmutabilityException(DomainException):
    """Raised when an item flagged as immutable would be changed."""

    def __init__(self, resource: str, position: Any, message: str | None = None):
        self.resource = resource
        self.position = position
        msg = message or f"{resource} at position {position} cannot be changed"
        super().__init__(msg, "IMMUTABLE", {"resource": resource, "position": position})
