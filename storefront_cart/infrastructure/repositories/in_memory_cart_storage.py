"""
In-memory cart storage

Dict-backed storage for single-process sessions and tests.
"""

import logging
from typing import Dict, Optional

from storefront_cart.domain.repositories.cart_storage import CartStorage


class InMemoryCartStorage(CartStorage):
    """Keeps payloads in a plain dict"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._logger = logging.getLogger(self.__class__.__name__)

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value
        self._logger.debug("💾 SAVED: %s (%d bytes)", key, len(value))

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)
