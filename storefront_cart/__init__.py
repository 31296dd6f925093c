"""
Storefront cart

Cart pricing and state management for the storefront: line-item identity,
percentage discounts, stock limits, persistence and totals.
"""

from storefront_cart.application.use_cases.cart_store import CartStore, cart_storage_key_for
from storefront_cart.application.use_cases.checkout_summary_use_case import (
    CheckoutSummaryUseCase,
)
from storefront_cart.domain.entities import (
    Cart,
    CartLineItem,
    CartOutcome,
    CartState,
    DesignDetails,
    ItemDraft,
    ItemKind,
    ProductDetails,
)
from storefront_cart.domain.value_objects import (
    CartEvent,
    CartEventKind,
    DiscountPercent,
    Money,
    ReferenceId,
)

__version__ = "1.0.0"

__all__ = [
    "Cart",
    "CartEvent",
    "CartEventKind",
    "CartLineItem",
    "CartOutcome",
    "CartState",
    "CartStore",
    "CheckoutSummaryUseCase",
    "DesignDetails",
    "DiscountPercent",
    "ItemDraft",
    "ItemKind",
    "Money",
    "ProductDetails",
    "ReferenceId",
    "cart_storage_key_for",
]
