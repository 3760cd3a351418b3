"""
Locale Key Value Object

Identifies the catalog and pricing context a basket belongs to.
"""

import json
from dataclasses import dataclass

from shopbasket.core.domain import ValueObject


@dataclass(frozen=True)
class LocaleKey(ValueObject):
    """(site, language, currency) triple compared field by field."""

    site: str
    language: str
    currency: str

    def _validate(self) -> None:
        if not self.site:
            raise ValueError("Locale site code is required")

    def dumps(self) -> str:
        """Serialize for a scalar session slot."""
        return json.dumps([self.site, self.language, self.currency])

    @classmethod
    def loads(cls, raw: str | None) -> "LocaleKey | None":
        """
        Restore a key written by `dumps`.

        Unreadable values are treated as missing.
        """
        if not raw:
            return None
        try:
            site, language, currency = json.loads(raw)
        except (TypeError, ValueError):
            return None
        return cls(site=str(site), language=str(language), currency=str(currency))

    def __str__(self) -> str:
        return f"{self.site}/{self.language}/{self.currency}"
