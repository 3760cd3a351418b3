"""
Basket Session Manager

Serializes baskets to JSON and keeps them in the session, one slot per
locale and basket type, together with the locale each basket type was last
used with.
"""

import logging

from pydantic import TypeAdapter, ValidationError

from shopbasket.domains.basket.application.ports import ISessionStore
from shopbasket.domains.basket.domain.entities import Basket
from shopbasket.domains.basket.domain.value_objects import LocaleKey

logger = logging.getLogger(__name__)

_basket_adapter = TypeAdapter(Basket)


def dump_basket(basket: Basket) -> str:
    return _basket_adapter.dump_json(basket).decode("utf-8")


def load_basket(raw: str) -> Basket:
    """
    Restore a basket written by `dump_basket`.

    Raises:
        pydantic.ValidationError: If the data doesn't describe a basket
    """
    basket = _basket_adapter.validate_json(raw)
    basket.set_modified(False)
    return basket


class BasketSessionManager:
    """Session slots of the baskets of one customer session."""

    CONTENT_KEY = "basket/content-{site}-{language}-{currency}-{type}"
    LOCALE_KEY = "basket/locale-{type}"

    def __init__(self, store: ISessionStore):
        self.store = store

    def content_key(self, locale: LocaleKey, type: str) -> str:
        return self.CONTENT_KEY.format(
            site=locale.site, language=locale.language, currency=locale.currency, type=type
        )

    def load(self, locale: LocaleKey, type: str) -> Basket | None:
        """Get the stored basket, None if there is none or it can't be read"""
        raw = self.store.get(self.content_key(locale, type))
        if not raw:
            return None

        try:
            return load_basket(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable basket of type {type} for locale {locale}: {e}")
            return None

    def save(self, basket: Basket, locale: LocaleKey, type: str) -> None:
        self.store.set(self.content_key(locale, type), dump_basket(basket))

    def clear(self, locale: LocaleKey, type: str) -> None:
        self.store.set(self.content_key(locale, type), None)

    def get_locale(self, type: str) -> LocaleKey | None:
        return LocaleKey.loads(self.store.get(self.LOCALE_KEY.format(type=type)))

    def set_locale(self, type: str, locale: LocaleKey) -> None:
        self.store.set(self.LOCALE_KEY.format(type=type), locale.dumps())
