"""
Application use cases
"""

from .cart_store import CartStore, cart_storage_key_for
from .checkout_summary_use_case import CheckoutSummaryUseCase

__all__ = ["CartStore", "CheckoutSummaryUseCase", "cart_storage_key_for"]
