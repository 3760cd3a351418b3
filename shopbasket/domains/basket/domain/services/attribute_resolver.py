"""
Attribute Resolver for the Basket Domain

Checks attribute IDs sent by customers against the attributes a product
really references and turns them into attribute snapshots for line items.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol

from ..entities import AttributeSnapshot, CatalogAttribute, CatalogProduct
from ..exceptions import AttributeCountMismatch, AttributeNotAssigned
from ..value_objects import AttributeType
from .pricing import get_lowest_price, to_quantity


class AttributeSource(Protocol):
    """Batch lookup of catalog attributes."""

    def get_many(self, ids: Sequence[str]) -> list[CatalogAttribute]: ...


def _referenced_ids(products: Iterable[CatalogProduct], list_type: str) -> set[str]:
    ids: set[str] = set()
    for product in products:
        ids.update(product.get_attribute_ids(list_type))
    return ids


def check_attributes(products: Iterable[CatalogProduct], list_type: str, ids: Iterable[str]) -> None:
    """
    Make sure all IDs are referenced by one of the products.

    Raises:
        AttributeNotAssigned: If at least one ID is not referenced
    """
    products = list(products)
    unknown = set(ids) - _referenced_ids(products, list_type)

    if unknown:
        raise AttributeNotAssigned(list_type, [p.id for p in products], unknown)


def filter_attribute_ids(products: Iterable[CatalogProduct], list_type: str, ids: Iterable[str]) -> list[str]:
    """
    Return the IDs referenced by the products, keeping their order.

    Lenient counterpart of `check_attributes` for callers that drop stray
    IDs from request parameters (e.g. catalog filters or stale links)
    instead of rejecting the request. The basket operations themselves
    always use the strict check.
    """
    known = _referenced_ids(products, list_type)
    return [id for id in ids if id in known]


class AttributeResolver:
    """
    Resolves attribute IDs to catalog attributes and attribute snapshots.

    Example:
        ```python
        resolver = AttributeResolver(attribute_manager)
        resolver.check_attributes([product], "config", config.keys())
        snapshots = resolver.get_order_product_attributes("config", list(config), quantities=config)
        ```
    """

    def __init__(self, attribute_manager: AttributeSource):
        self.attribute_manager = attribute_manager

    check_attributes = staticmethod(check_attributes)
    filter_attribute_ids = staticmethod(filter_attribute_ids)

    def get_attributes(self, ids: Sequence[str]) -> dict[str, CatalogAttribute]:
        """
        Fetch the attributes for all IDs.

        Raises:
            AttributeCountMismatch: If not every ID could be found
        """
        if not ids:
            return {}

        items = {item.id: item for item in self.attribute_manager.get_many(list(ids))}

        if any(id not in items for id in ids):
            raise AttributeCountMismatch(ids, items.keys())

        return {id: items[id] for id in dict.fromkeys(ids)}

    def get_attribute_items(self, snapshots: Iterable[AttributeSnapshot]) -> dict[str, CatalogAttribute]:
        """Catalog attributes still available for the snapshots, by ID."""
        ids = list(dict.fromkeys(s.attribute_id for s in snapshots if s.attribute_id))
        if not ids:
            return {}
        return {item.id: item for item in self.attribute_manager.get_many(ids)}

    def get_order_product_attributes(
        self,
        type: AttributeType | str,
        ids: Sequence[str],
        values: Mapping[str, Any] | None = None,
        quantities: Mapping[str, Any] | None = None,
        currency: str | None = None,
    ) -> list[AttributeSnapshot]:
        """
        Build attribute snapshots of the given type.

        Values default to the attribute code and quantities to 1. Priced
        attributes capture the surcharge for their whole quantity.

        Raises:
            AttributeCountMismatch: If not every ID could be found
            InvalidQuantity: If an attribute quantity is not a positive number
        """
        values = values or {}
        quantities = quantities or {}
        result = []

        for id, attr_item in self.get_attributes(ids).items():
            qty = to_quantity(quantities.get(id, 1))
            price = None

            if attr_item.prices:
                unit = get_lowest_price(attr_item.prices, qty, currency, reference=attr_item.code)
                price = unit.multiply(qty).value

            result.append(
                AttributeSnapshot(
                    type=AttributeType(type),
                    code=attr_item.type,
                    value=values.get(id, attr_item.code),
                    attribute_id=id,
                    quantity=qty,
                    price=price,
                    name=attr_item.label,
                )
            )

        return result
