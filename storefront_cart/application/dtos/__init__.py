"""
Application DTOs
"""

from .cart_dtos import CartItemInfo, CartOperationResponse, CartSummary
from .checkout_dtos import CheckoutLine, CheckoutSummary

__all__ = [
    "CartItemInfo",
    "CartOperationResponse",
    "CartSummary",
    "CheckoutLine",
    "CheckoutSummary",
]
