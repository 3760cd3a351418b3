"""
In-memory session store, used for tests and single process setups.
"""


class InMemorySessionStore:
    """Session store keeping scalar values in a dict."""

    def __init__(self, values: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set(self, key: str, value: str | None) -> None:
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value

    def keys(self) -> list[str]:
        return list(self._values)
