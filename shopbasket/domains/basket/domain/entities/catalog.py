"""
Catalog Read Models

Plain snapshots of catalog data as the basket sees it. The catalog itself is
owned by an external collaborator, so these entities carry no behaviour
beyond lookups over their references.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from ..value_objects import Price, ProductType


@dataclass
class CatalogAttribute:
    """Attribute item, e.g. type "color" with code "red"."""

    id: str
    type: str
    code: str
    label: str = ""
    domain: str = "product"
    prices: list[Price] = field(default_factory=list)


@dataclass
class CatalogProduct:
    """
    Catalog product with its referenced items.

    `attributes` maps a list type ("variant", "config", "custom", "hidden")
    to the IDs of the attributes referenced through it. `products` holds
    the articles of a selection or the contents of a bundle.
    """

    id: str
    code: str
    type: ProductType = ProductType.DEFAULT
    label: str = ""
    scale: Decimal = Decimal("1")
    site_id: str = ""
    prices: list[Price] = field(default_factory=list)
    attributes: dict[str, list[str]] = field(default_factory=dict)
    products: list["CatalogProduct"] = field(default_factory=list)
    category_ids: list[str] = field(default_factory=list)
    media_url: str | None = None

    def get_attribute_ids(self, list_type: str) -> list[str]:
        return list(self.attributes.get(list_type, []))

    def has_attribute(self, list_type: str, attribute_id: str) -> bool:
        return attribute_id in self.attributes.get(list_type, [])


@dataclass
class CatalogService:
    """Delivery or payment option offered by a service provider."""

    id: str
    code: str
    type: str
    label: str = ""
    provider: str = ""
    config: dict[str, Any] = field(default_factory=dict)
    prices: list[Price] = field(default_factory=list)
