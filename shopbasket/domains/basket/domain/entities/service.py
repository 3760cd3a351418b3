"""
Order Service Entity

Delivery or payment option attached to a basket, priced for the basket it
belongs to.
"""

from dataclasses import dataclass, field
from typing import Any

from shopbasket.core.domain import ValueObject

from ..value_objects import Price
from .catalog import CatalogService


@dataclass(frozen=True)
class OrderServiceAttribute(ValueObject):
    """Configuration value captured for an order service."""

    code: str
    value: Any
    type: str = "config"
    name: str = ""

    def _validate(self) -> None:
        if not self.code:
            raise ValueError("Service attribute code is required")


@dataclass
class OrderService:
    service_id: str
    code: str
    type: str
    name: str = ""
    provider: str = ""
    price: Price = field(default_factory=Price.zero)
    attributes: list[OrderServiceAttribute] = field(default_factory=list)

    @classmethod
    def from_service(cls, service: CatalogService, price: Price) -> "OrderService":
        return cls(
            service_id=service.id,
            code=service.code,
            type=service.type,
            name=service.label,
            provider=service.provider,
            price=price,
        )

    def get_attribute(self, code: str, type: str = "config") -> Any:
        for attr in self.attributes:
            if attr.code == code and attr.type == type:
                return attr.value
        return None

    def set_attributes(self, values: dict[str, Any], type: str = "config") -> None:
        """Replace all attributes of the given type by the values."""
        kept = [attr for attr in self.attributes if attr.type != type]
        self.attributes = kept + [OrderServiceAttribute(code=k, value=v, type=type) for k, v in values.items()]

    def get_config(self) -> dict[str, Any]:
        """Configuration values as entered by the customer."""
        return {attr.code: attr.value for attr in self.attributes if attr.type == "config"}
