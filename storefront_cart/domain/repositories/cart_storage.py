"""
Cart storage interface

Defines the contract for persisting the serialized cart payload.
"""

from abc import ABC, abstractmethod
from typing import Optional


class CartStorage(ABC):
    """Synchronous key/value storage for cart payloads"""

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the stored payload, or None when the key is missing"""

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Store the payload under the key, replacing any previous value"""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Drop the key; missing keys are ignored"""
