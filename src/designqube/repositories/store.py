from __future__ import annotations

from typing import Optional, Protocol


PRODUCTS_KEY = "products"
SALES_KEY = "sales"


class PersistentStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, blob: str) -> None: ...


class MemoryStore:
    """Process-local store, mostly for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, blob: str) -> None:
        self._data[key] = str(blob)
