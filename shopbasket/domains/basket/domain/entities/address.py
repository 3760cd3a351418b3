"""
Order Address Entity
"""

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass
class OrderAddress:
    """
    Payment or delivery address of a basket.

    Values are copied from the customer profile or from form input that has
    already been sanitized. `nostore` marks addresses the customer does not
    want to keep in the profile.
    """

    salutation: str = ""
    company: str = ""
    vat_id: str = ""
    title: str = ""
    firstname: str = ""
    lastname: str = ""
    address1: str = ""
    address2: str = ""
    address3: str = ""
    postal: str = ""
    city: str = ""
    state: str = ""
    country_id: str | None = None
    language_id: str | None = None
    telephone: str = ""
    email: str = ""
    website: str = ""
    customer_address_id: str | None = None
    nostore: bool = False

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderAddress":
        """Build an address, ignoring keys that are not address fields."""
        names = cls.field_names()
        return cls(**{k: v for k, v in data.items() if k in names})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
