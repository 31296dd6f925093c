"""
Domain entities package

Contains the core cart entities and the rules that govern them.
"""

from .cart_entity import Cart, CartOutcome, CartState, CartTransition
from .line_item_entity import (
    CartLineItem,
    DesignDetails,
    ItemDetails,
    ItemDraft,
    ItemKind,
    ProductDetails,
)

__all__ = [
    "Cart",
    "CartLineItem",
    "CartOutcome",
    "CartState",
    "CartTransition",
    "DesignDetails",
    "ItemDetails",
    "ItemDraft",
    "ItemKind",
    "ProductDetails",
]
