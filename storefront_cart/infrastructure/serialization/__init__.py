"""
Serialization

Stored cart document schema.
"""

from .cart_serializer import CartSerializer, PersistedCart, PersistedLineItem

__all__ = ["CartSerializer", "PersistedCart", "PersistedLineItem"]
